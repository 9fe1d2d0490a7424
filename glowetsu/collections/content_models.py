import uuid
from datetime import datetime
from typing import ClassVar, Dict, List, Optional, Type
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


from glowetsu.collections.enums import ContentType, PresencePolicy


def generate_item_id() -> str:
    """
    Generate a stable identifier for a list item.

    Args:
        None

    Returns:
        str: Random hex identifier.
    """
    return uuid.uuid4().hex


class CamelModel(BaseModel):
    """
    Base model that reads and writes camelCase field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentItem(CamelModel):
    """
    Base for ordered list entries inside a content document.
    """

    id: str = Field(default_factory=generate_item_id, description="Stable item identifier")
    order: int = Field(..., description="Display position")
    is_active: bool = Field(True, description="Whether the item is shown publicly")


class TeamMember(ContentItem):
    """
    Team member shown on the About-Us page.
    """

    name: str
    role: str
    image: str = Field(..., description="Portrait image URL")
    description: str


class CarouselSlide(ContentItem):
    """
    Slide of the homepage header carousel.
    """

    image: str = Field(..., description="Background image URL")
    title: str
    subtitle: str
    button_text: str = "Explore Now"
    button_link: str = "/tours"


class Feature(ContentItem):
    """
    Selling point shown in the Why-Choose-Us section.
    """

    icon: str = Field(..., description="Icon name, see FeatureIcon")
    title: str
    description: str


class BaseContentDocument(CamelModel):
    """
    Base model for singleton content documents stored in MongoDB.
    """

    collection_name: ClassVar[str]
    content_type: ClassVar[ContentType]
    presence_policy: ClassVar[PresencePolicy] = PresencePolicy.PROVIDED

    id: Optional[str] = Field(None, alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_document(self) -> Dict:
        """
        Serialize the editable fields in their stored camelCase layout.

        Args:
            None

        Returns:
            Dict: Document body without key and timestamps
        """
        return self.model_dump(
            by_alias=True, exclude={"id", "created_at", "updated_at"}
        )


class AboutUsContent(BaseContentDocument):
    """
    About-Us page content.
    """

    collection_name: ClassVar[str] = "about_us"
    content_type: ClassVar[ContentType] = ContentType.ABOUT_US

    hero_title: str = "About glowetsu"
    hero_subtitle: str = (
        "Creating unforgettable memories through authentic travel experiences since 2008"
    )
    story_title: str = "Our Story"
    story_paragraphs: List[str] = Field(default_factory=list)
    story_image: str
    team_members: List[TeamMember] = Field(default_factory=list)


class CarouselContent(BaseContentDocument):
    """
    Homepage header carousel.
    """

    collection_name: ClassVar[str] = "carousels"
    content_type: ClassVar[ContentType] = ContentType.CAROUSEL

    slides: List[CarouselSlide] = Field(default_factory=list)


class WhyChooseUsContent(BaseContentDocument):
    """
    Why-Choose-Us section content.
    """

    collection_name: ClassVar[str] = "why_choose_us"
    content_type: ClassVar[ContentType] = ContentType.WHY_CHOOSE_US
    presence_policy: ClassVar[PresencePolicy] = PresencePolicy.TRUTHY

    main_title: str
    main_description: str
    image: str
    features: List[Feature] = Field(default_factory=list)


CONTENT_MODELS: Dict[ContentType, Type[BaseContentDocument]] = {
    ContentType.ABOUT_US: AboutUsContent,
    ContentType.CAROUSEL: CarouselContent,
    ContentType.WHY_CHOOSE_US: WhyChooseUsContent,
}
