from typing import Iterable, List, TypeVar
from pydantic import ValidationError


from glowetsu.collections.content_models import (
    CONTENT_MODELS,
    BaseContentDocument,
    ContentItem,
)
from glowetsu.collections.enums import ContentType
from glowetsu.editor.client import ContentApiClient, ContentApiError
from glowetsu.utils.logger_utils import get_logger
from glowetsu.utils.seed_data.content_data import get_default_content


logger = get_logger(__name__)


ItemT = TypeVar("ItemT", bound=ContentItem)


async def load_public_content(
    client: ContentApiClient, content_type: ContentType
) -> BaseContentDocument:
    """
    Load content for a public page, falling back to the default content.

    Args:
        client: Content API client
        content_type: Content section to display

    Returns:
        Fetched content, or the defaults when the fetch fails or returns nothing
    """
    model = CONTENT_MODELS[content_type]
    try:
        data = await client.fetch(content_type)
        if data:
            return model.model_validate(data)
    except (ContentApiError, ValidationError) as e:
        logger.warning(f"Falling back to default '{content_type.value}' content: {e}")

    return model.model_validate(get_default_content(content_type))


def visible_items(items: Iterable[ItemT]) -> List[ItemT]:
    """
    Return the active items in display order.

    Args:
        items: Slides, features or team members

    Returns:
        Active items sorted by `order`
    """
    return sorted((item for item in items if item.is_active), key=lambda item: item.order)
