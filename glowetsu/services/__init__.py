from .content_services import content_service
from .image_services import image_service


__all__ = [
    "content_service",
    "image_service",
]
