from .content_crud import content_crud


__all__ = [
    "content_crud",
]
