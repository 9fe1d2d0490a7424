from typing import List, Optional
from pydantic import Field


from glowetsu.collections.content_models import (
    AboutUsContent,
    CamelModel,
    CarouselContent,
    CarouselSlide,
    Feature,
    TeamMember,
    WhyChooseUsContent,
)


class AboutUsUpdate(CamelModel):
    """
    Schema for updating About-Us content. Omitted fields keep their stored value.
    """
    hero_title: Optional[str] = Field(None, description="Hero section title")
    hero_subtitle: Optional[str] = Field(None, description="Hero section subtitle")
    story_title: Optional[str] = Field(None, description="Story section title")
    story_paragraphs: Optional[List[str]] = Field(
        None, description="Story paragraphs, replaces the whole list"
    )
    story_image: Optional[str] = Field(None, description="Story image URL")
    team_members: Optional[List[TeamMember]] = Field(
        None, description="Team members, replaces the whole list"
    )


class CarouselUpdate(CamelModel):
    """
    Schema for replacing the carousel slide list.
    """
    slides: List[CarouselSlide] = Field(..., description="Complete list of slides")


class WhyChooseUsUpdate(CamelModel):
    """
    Schema for updating Why-Choose-Us content. Omitted or empty fields keep their stored value.
    """
    main_title: Optional[str] = Field(None, description="Section title")
    main_description: Optional[str] = Field(None, description="Section description")
    image: Optional[str] = Field(None, description="Section image URL")
    features: Optional[List[Feature]] = Field(
        None, description="Features, replaces the whole list"
    )


class AboutUsUpdateResponse(CamelModel):
    """
    Schema for the About-Us update acknowledgement.
    """
    message: str = Field(..., description="Response message content")
    about_us: AboutUsContent


class CarouselUpdateResponse(CamelModel):
    """
    Schema for the carousel update acknowledgement.
    """
    message: str = Field(..., description="Response message content")
    carousel: CarouselContent


class WhyChooseUsUpdateResponse(CamelModel):
    """
    Schema for the Why-Choose-Us update acknowledgement.
    """
    message: str = Field(..., description="Response message content")
    why_choose: WhyChooseUsContent


class ImageUploadResponse(CamelModel):
    """
    Schema for an uploaded image location.
    """
    image_url: str = Field(..., description="Public URL of the uploaded image")
