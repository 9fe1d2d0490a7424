from .client import ContentApiClient, ContentApiError
from .display import load_public_content, visible_items
from .drafts import AboutUsDraft, CarouselDraft, WhyChooseUsDraft
from .editor import Acknowledgement, ContentEditor, EditorBusyError, EditorState


__all__ = [
    "AboutUsDraft",
    "Acknowledgement",
    "CarouselDraft",
    "ContentApiClient",
    "ContentApiError",
    "ContentEditor",
    "EditorBusyError",
    "EditorState",
    "WhyChooseUsDraft",
    "load_public_content",
    "visible_items",
]
