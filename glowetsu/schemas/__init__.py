from .content_schemas import (
    AboutUsUpdate,
    AboutUsUpdateResponse,
    CarouselUpdate,
    CarouselUpdateResponse,
    ImageUploadResponse,
    WhyChooseUsUpdate,
    WhyChooseUsUpdateResponse,
)


__all__ = [
    "AboutUsUpdate",
    "AboutUsUpdateResponse",
    "CarouselUpdate",
    "CarouselUpdateResponse",
    "ImageUploadResponse",
    "WhyChooseUsUpdate",
    "WhyChooseUsUpdateResponse",
]
