import os
import uuid
from typing import Optional
from azure.storage.blob import ContentSettings


from glowetsu.core.config import settings
from glowetsu.database.blob_storage import get_blob_service_client
from glowetsu.utils.exception_utils import (
    PayloadTooLargeException,
    UnsupportedMediaTypeException,
)
from glowetsu.utils.logger_utils import get_logger


logger = get_logger(__name__)


class ImageService:
    """
    Uploads content images to Azure Blob Storage.
    """

    CONTENT_TYPES = {
        "image/jpeg": ".jpg",
        "image/jpg": ".jpg",
        "image/png": ".png",
        "image/webp": ".webp",
        "image/gif": ".gif",
    }
    EXTENSIONS = {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".webp": "image/webp",
        ".gif": "image/gif",
    }

    def _resolve_format(
        self, filename: Optional[str], content_type: Optional[str]
    ) -> tuple[str, str]:
        """
        Determine blob extension and MIME type from the declared type or file name.

        Args:
            filename: Original client file name
            content_type: Declared MIME type

        Returns:
            Tuple of (extension, MIME type)
        """
        content_type = (content_type or "").lower()
        if content_type in self.CONTENT_TYPES:
            extension = self.CONTENT_TYPES[content_type]
            return extension, self.EXTENSIONS[extension]

        extension = os.path.splitext((filename or "").lower())[1]
        if extension in self.EXTENSIONS:
            return extension, self.EXTENSIONS[extension]

        raise UnsupportedMediaTypeException(
            "Only JPG, PNG, WEBP and GIF images are accepted"
        )


    async def upload(
        self, data: bytes, filename: Optional[str], content_type: Optional[str]
    ) -> str:
        """
        Uploads an image to the content container under a generated name.

        Args:
            data: Raw image bytes
            filename: Original client file name
            content_type: Declared MIME type

        Returns:
            Public URL of the uploaded image
        """
        if len(data) > settings.IMAGE_MAX_SIZE_BYTES:
            raise PayloadTooLargeException(
                f"Image file size must be less than {settings.IMAGE_MAX_SIZE_MB} MB"
            )

        extension, mime_type = self._resolve_format(filename, content_type)
        blob_name = f"content/{uuid.uuid4().hex}{extension}"

        container_client = get_blob_service_client().get_container_client(
            settings.CONTENT_CONTAINER_NAME
        )
        blob_client = container_client.get_blob_client(blob_name)
        await blob_client.upload_blob(
            data,
            overwrite=False,
            content_settings=ContentSettings(content_type=mime_type),
        )

        logger.info(f"Uploaded content image '{blob_name}' ({len(data)} bytes)")
        return blob_client.url


image_service = ImageService()
