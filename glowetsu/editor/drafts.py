"""
Editable in-memory copies of content documents for the admin editor.

Every list entry carries a stable identifier, so edits and image uploads
address items by id and stay correct while the list is reordered or shrunk.
"""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, Iterator, List, Optional, Type, TypeVar
from pydantic import BaseModel, Field


from glowetsu.collections.content_models import (
    AboutUsContent,
    BaseContentDocument,
    CarouselContent,
    CarouselSlide,
    Feature,
    TeamMember,
    WhyChooseUsContent,
    generate_item_id,
)
from glowetsu.collections.enums import ContentType, FeatureIcon


ItemT = TypeVar("ItemT", bound=BaseModel)

STORY_IMAGE_SLOT = "storyImage"
SECTION_IMAGE_SLOT = "image"


class Paragraph(BaseModel):
    """
    Story paragraph with a draft-local identifier.
    """

    id: str = Field(default_factory=generate_item_id)
    text: str = ""


class DraftItems(Generic[ItemT]):
    """
    Ordered list of draft items addressed by their `id`.
    """

    def __init__(self, items: Optional[List[ItemT]] = None):
        self._items: List[ItemT] = list(items or [])

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def ids(self) -> List[str]:
        return [item.id for item in self._items]

    def get(self, item_id: str) -> Optional[ItemT]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def add(self, item: ItemT) -> ItemT:
        self._items.append(item)
        return item

    def remove(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        return len(self._items) != before

    def update(self, item_id: str, **fields: Any) -> ItemT:
        """
        Replace an item with a validated copy carrying the given fields.

        Args:
            item_id: Identifier of the item to change
            **fields: Attribute values to set

        Returns:
            The updated item
        """
        for index, item in enumerate(self._items):
            if item.id == item_id:
                updated = type(item).model_validate({**item.model_dump(), **fields})
                self._items[index] = updated
                return updated
        raise KeyError(item_id)

    def to_list(self) -> List[ItemT]:
        return list(self._items)


class ContentDraft(ABC):
    """
    Base class for editor drafts.
    """

    content_type: ClassVar[ContentType]
    model: ClassVar[Type[BaseContentDocument]]
    saved_message: ClassVar[str] = "Content updated successfully!"
    save_failed_message: ClassVar[str] = "Failed to save content"

    def __init__(self, content: BaseContentDocument):
        self.content = content

    @classmethod
    @abstractmethod
    def empty(cls) -> "ContentDraft":
        ...

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "ContentDraft":
        return cls(cls.model.model_validate(data))

    def update(self, **fields: Any) -> None:
        """
        Set top-level scalar fields of the draft.

        Args:
            **fields: Attribute values to set

        Returns:
            None
        """
        self.content = self.model.model_validate(
            {**self.content.model_dump(), **fields}
        )

    @abstractmethod
    def image_slots(self) -> List[str]:
        ...

    @abstractmethod
    def attach_image(self, slot: str, url: str) -> bool:
        """
        Store an uploaded image URL in a slot.

        Args:
            slot: Image slot key
            url: Uploaded image URL

        Returns:
            False if the slot no longer exists
        """

    @abstractmethod
    def to_payload(self) -> Dict[str, Any]:
        ...


class AboutUsDraft(ContentDraft):
    """
    Draft of the About-Us page.
    """

    content_type = ContentType.ABOUT_US
    model = AboutUsContent

    def __init__(self, content: AboutUsContent):
        super().__init__(content)
        self.paragraphs: DraftItems[Paragraph] = DraftItems(
            [Paragraph(text=text) for text in content.story_paragraphs]
        )
        self.team_members: DraftItems[TeamMember] = DraftItems(content.team_members)

    @classmethod
    def empty(cls) -> "AboutUsDraft":
        return cls(
            AboutUsContent(
                hero_title="", hero_subtitle="", story_title="", story_image=""
            )
        )

    def add_paragraph(self, text: str = "") -> Paragraph:
        return self.paragraphs.add(Paragraph(text=text))

    def update_paragraph(self, paragraph_id: str, text: str) -> Paragraph:
        return self.paragraphs.update(paragraph_id, text=text)

    def remove_paragraph(self, paragraph_id: str) -> bool:
        return self.paragraphs.remove(paragraph_id)

    def add_team_member(self, **fields: Any) -> TeamMember:
        member = TeamMember.model_validate(
            {
                "name": "",
                "role": "",
                "image": "",
                "description": "",
                "order": len(self.team_members),
                "is_active": True,
                **fields,
            }
        )
        return self.team_members.add(member)

    def update_team_member(self, member_id: str, **fields: Any) -> TeamMember:
        return self.team_members.update(member_id, **fields)

    def remove_team_member(self, member_id: str) -> bool:
        return self.team_members.remove(member_id)

    def image_slots(self) -> List[str]:
        return [STORY_IMAGE_SLOT, *self.team_members.ids()]

    def attach_image(self, slot: str, url: str) -> bool:
        if slot == STORY_IMAGE_SLOT:
            self.update(story_image=url)
            return True
        if self.team_members.get(slot) is None:
            return False
        self.team_members.update(slot, image=url)
        return True

    def to_payload(self) -> Dict[str, Any]:
        content = self.content.model_copy(
            update={
                "story_paragraphs": [paragraph.text for paragraph in self.paragraphs],
                "team_members": self.team_members.to_list(),
            }
        )
        return content.to_document()


class CarouselDraft(ContentDraft):
    """
    Draft of the homepage carousel.
    """

    content_type = ContentType.CAROUSEL
    model = CarouselContent
    saved_message = "Carousel updated successfully!"
    save_failed_message = "Failed to save carousel"

    def __init__(self, content: CarouselContent):
        super().__init__(content)
        self.slides: DraftItems[CarouselSlide] = DraftItems(content.slides)

    @classmethod
    def empty(cls) -> "CarouselDraft":
        return cls(CarouselContent())

    def add_slide(self, **fields: Any) -> CarouselSlide:
        slide = CarouselSlide.model_validate(
            {
                "image": "",
                "title": "",
                "subtitle": "",
                "order": len(self.slides),
                **fields,
            }
        )
        return self.slides.add(slide)

    def update_slide(self, slide_id: str, **fields: Any) -> CarouselSlide:
        return self.slides.update(slide_id, **fields)

    def remove_slide(self, slide_id: str) -> bool:
        return self.slides.remove(slide_id)

    def image_slots(self) -> List[str]:
        return self.slides.ids()

    def attach_image(self, slot: str, url: str) -> bool:
        if self.slides.get(slot) is None:
            return False
        self.slides.update(slot, image=url)
        return True

    def to_payload(self) -> Dict[str, Any]:
        content = self.content.model_copy(update={"slides": self.slides.to_list()})
        return content.to_document()


class WhyChooseUsDraft(ContentDraft):
    """
    Draft of the Why-Choose-Us section.
    """

    content_type = ContentType.WHY_CHOOSE_US
    model = WhyChooseUsContent

    def __init__(self, content: WhyChooseUsContent):
        super().__init__(content)
        self.features: DraftItems[Feature] = DraftItems(content.features)

    @classmethod
    def empty(cls) -> "WhyChooseUsDraft":
        return cls(WhyChooseUsContent(main_title="", main_description="", image=""))

    def add_feature(self, **fields: Any) -> Feature:
        feature = Feature.model_validate(
            {
                "icon": FeatureIcon.STAR.value,
                "title": "",
                "description": "",
                "order": len(self.features),
                **fields,
            }
        )
        return self.features.add(feature)

    def update_feature(self, feature_id: str, **fields: Any) -> Feature:
        return self.features.update(feature_id, **fields)

    def remove_feature(self, feature_id: str) -> bool:
        return self.features.remove(feature_id)

    def image_slots(self) -> List[str]:
        return [SECTION_IMAGE_SLOT]

    def attach_image(self, slot: str, url: str) -> bool:
        if slot != SECTION_IMAGE_SLOT:
            return False
        self.update(image=url)
        return True

    def to_payload(self) -> Dict[str, Any]:
        content = self.content.model_copy(update={"features": self.features.to_list()})
        return content.to_document()
