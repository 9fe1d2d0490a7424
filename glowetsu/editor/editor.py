import enum
from typing import Generic, Optional, Set, Type, TypeVar
from pydantic import BaseModel, Field, ValidationError


from glowetsu.editor.client import ContentApiClient, ContentApiError
from glowetsu.editor.drafts import ContentDraft
from glowetsu.utils.logger_utils import get_logger


logger = get_logger(__name__)


DraftT = TypeVar("DraftT", bound=ContentDraft)


class EditorState(str, enum.Enum):
    """
    Lifecycle of an editor session.
    """

    LOADING = "LOADING"
    READY = "READY"


class EditorBusyError(Exception):
    """
    Raised when an action is started while it is still running, or before the draft is loaded.
    """


class Acknowledgement(BaseModel):
    """
    Outcome of a save or upload, shown to the admin before continuing.
    """

    success: bool = Field(..., description="Whether the action succeeded")
    message: str = Field(..., description="Message shown to the admin")
    image_url: Optional[str] = Field(None, description="Uploaded image URL, if any")


class ContentEditor(Generic[DraftT]):
    """
    Admin editing session for one content section.

    `saving` blocks a second save, and each image slot blocks a second
    upload to the same slot. Uploads to different slots may run together.
    """

    def __init__(self, client: ContentApiClient, draft_cls: Type[DraftT]):
        self.client = client
        self.draft_cls = draft_cls
        self.draft: DraftT = draft_cls.empty()
        self.state = EditorState.LOADING
        self.saving = False
        self.uploading: Set[str] = set()

    async def load(self) -> DraftT:
        """
        Hydrate the draft from the API. A failed fetch keeps the empty draft.

        Args:
            None

        Returns:
            The loaded draft
        """
        content_type = self.draft_cls.content_type
        try:
            data = await self.client.fetch(content_type)
            self.draft = self.draft_cls.from_document(data)
        except (ContentApiError, ValidationError) as e:
            logger.error(f"Error fetching '{content_type.value}' content: {e}")
        finally:
            self.state = EditorState.READY
        return self.draft

    def _ensure_ready(self) -> None:
        if self.state is not EditorState.READY:
            raise EditorBusyError("Content is still loading")

    async def save(self) -> Acknowledgement:
        """
        Send the whole draft to the API. The draft is kept as is afterwards.

        Args:
            None

        Returns:
            Acknowledgement for the admin
        """
        self._ensure_ready()
        if self.saving:
            raise EditorBusyError("Save already in progress")

        self.saving = True
        try:
            await self.client.save(self.draft_cls.content_type, self.draft.to_payload())
            return Acknowledgement(success=True, message=self.draft_cls.saved_message)
        except ContentApiError as e:
            logger.error(f"Error saving '{self.draft_cls.content_type.value}' content: {e}")
            return Acknowledgement(
                success=False, message=self.draft_cls.save_failed_message
            )
        finally:
            self.saving = False

    async def upload_image(
        self, slot: str, filename: str, data: bytes, mime_type: str
    ) -> Acknowledgement:
        """
        Upload an image and attach its URL to a slot of the draft.

        The slot is resolved again when the upload returns; if the item was
        removed meanwhile, the URL is dropped instead of landing elsewhere.

        Args:
            slot: Image slot key, a fixed slot name or a list item id
            filename: File name sent with the upload
            data: Raw image bytes
            mime_type: Declared MIME type

        Returns:
            Acknowledgement carrying the uploaded URL on success
        """
        self._ensure_ready()
        if slot in self.uploading:
            raise EditorBusyError(f"Upload already in progress for '{slot}'")
        if slot not in self.draft.image_slots():
            raise KeyError(slot)

        self.uploading.add(slot)
        try:
            image_url = await self.client.upload_image(
                self.draft_cls.content_type, filename, data, mime_type
            )
        except ContentApiError as e:
            logger.error(f"Error uploading image for '{slot}': {e}")
            return Acknowledgement(success=False, message="Failed to upload image")
        finally:
            self.uploading.discard(slot)

        if not self.draft.attach_image(slot, image_url):
            logger.warning(f"Slot '{slot}' was removed during upload, image {image_url} left unused")
            return Acknowledgement(
                success=False,
                message="Item was removed before the upload finished",
                image_url=image_url,
            )

        return Acknowledgement(success=True, message="Image uploaded", image_url=image_url)
