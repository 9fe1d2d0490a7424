from typing import Any, Dict, Type, TypeVar, Union
from fastapi import UploadFile
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel, ValidationError


from glowetsu import schemas
from glowetsu.collections.content_models import (
    AboutUsContent,
    BaseContentDocument,
    CarouselContent,
    WhyChooseUsContent,
)
from glowetsu.collections.enums import PresencePolicy
from glowetsu.core.config import settings
from glowetsu.crud import content_crud
from glowetsu.services.image_services import ImageService
from glowetsu.utils.exception_utils import (
    BadRequestException,
    DetailedHTTPException,
    PayloadTooLargeException,
    ServerErrorException,
)
from glowetsu.utils.logger_utils import get_logger
from glowetsu.utils.seed_data.content_data import get_default_content


logger = get_logger(__name__)


DocumentT = TypeVar("DocumentT", bound=BaseContentDocument)


def is_truthy(value: Any) -> bool:
    """
    Truthiness used by the TRUTHY presence policy: lists always count as set.

    Args:
        value: Field value from an update body

    Returns:
        True if the value should be applied
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class ContentService:
    """
    Service layer for the singleton site content sections: About-Us, Carousel and Why-Choose-Us.
    """
    async def _get_or_seed(
        self, db: AsyncIOMotorDatabase, model: Type[DocumentT]
    ) -> DocumentT:
        """
        Fetch a content document, creating it from the default content if absent.

        Args:
            db: MongoDB database instance
            model: Content document model

        Returns:
            Stored content document
        """
        key = model.content_type.value
        document = await content_crud.get(db, model.collection_name, key)
        if document is None:
            logger.info(f"No '{key}' content found, seeding defaults")
            seed = model.model_validate(get_default_content(model.content_type))
            document = await content_crud.create(
                db, model.collection_name, key, seed.to_document()
            )
        return model.model_validate(document)


    def _select_fields(
        self, update: BaseModel, policy: PresencePolicy
    ) -> Dict[str, Any]:
        """
        Pick the update fields to apply under a presence policy.

        Args:
            update: Validated update schema
            policy: Presence policy of the content type

        Returns:
            Mapping of attribute name to new value
        """
        fields = {}
        for name in update.model_fields_set:
            value = getattr(update, name)
            if value is None:
                continue
            if policy is PresencePolicy.TRUTHY and not is_truthy(value):
                continue
            fields[name] = value
        return fields


    def _parse_update(
        self, payload: Dict[str, Any], schema: Type[BaseModel]
    ) -> BaseModel:
        """
        Validate a raw update body against its schema.

        Args:
            payload: Decoded JSON body
            schema: Update schema

        Returns:
            Validated update schema instance
        """
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Rejected {schema.__name__} body: {e.error_count()} errors")
            raise BadRequestException("Invalid request body")


    async def _update(
        self,
        db: AsyncIOMotorDatabase,
        model: Type[DocumentT],
        update: BaseModel,
    ) -> DocumentT:
        """
        Apply an update to a content document and persist it.

        Args:
            db: MongoDB database instance
            model: Content document model
            update: Validated update schema

        Returns:
            Stored content document
        """
        fields = self._select_fields(update, model.presence_policy)
        key = model.content_type.value

        stored = await content_crud.get(db, model.collection_name, key)
        if stored is None:
            current = model.model_validate(get_default_content(model.content_type))
        else:
            current = model.model_validate(stored)

        updated = current.model_copy(update=fields)
        document = await content_crud.save(
            db, model.collection_name, key, updated.to_document()
        )
        logger.info(f"Updated '{key}' content fields: {sorted(fields)}")
        return model.model_validate(document)


    async def _fetch(
        self, db: AsyncIOMotorDatabase, model: Type[DocumentT], error: str
    ) -> DocumentT:
        try:
            return await self._get_or_seed(db, model)
        except DetailedHTTPException:
            raise
        except Exception as e:
            logger.error(
                f"Error fetching '{model.content_type.value}' content: {e}", exc_info=True
            )
            raise ServerErrorException(error)


    async def _store(
        self,
        db: AsyncIOMotorDatabase,
        model: Type[DocumentT],
        update: BaseModel,
        error: str,
    ) -> DocumentT:
        try:
            return await self._update(db, model, update)
        except DetailedHTTPException:
            raise
        except Exception as e:
            logger.error(
                f"Error updating '{model.content_type.value}' content: {e}", exc_info=True
            )
            raise ServerErrorException(error)


    async def get_about_us(self, db: AsyncIOMotorDatabase) -> AboutUsContent:
        """
        Retrieve About-Us content, seeding the defaults on first access.

        Args:
            db: MongoDB database instance

        Returns:
            About-Us content document
        """
        return await self._fetch(db, AboutUsContent, "Failed to fetch content")


    async def update_about_us(
        self, db: AsyncIOMotorDatabase, payload: Dict[str, Any]
    ) -> schemas.AboutUsUpdateResponse:
        """
        Update About-Us content. Fields present with a non-null value are applied.

        Args:
            db: MongoDB database instance
            payload: Decoded JSON body

        Returns:
            Acknowledgement with the stored document
        """
        update = self._parse_update(payload, schemas.AboutUsUpdate)
        about_us = await self._store(
            db, AboutUsContent, update, "Failed to update content"
        )
        return schemas.AboutUsUpdateResponse(
            message="Content updated successfully", about_us=about_us
        )


    async def get_carousel(self, db: AsyncIOMotorDatabase) -> CarouselContent:
        """
        Retrieve the header carousel, seeding the default slide on first access.

        Args:
            db: MongoDB database instance

        Returns:
            Carousel content document
        """
        return await self._fetch(db, CarouselContent, "Failed to fetch carousel")


    async def update_carousel(
        self, db: AsyncIOMotorDatabase, payload: Dict[str, Any]
    ) -> schemas.CarouselUpdateResponse:
        """
        Replace the carousel slide list.

        Args:
            db: MongoDB database instance
            payload: Decoded JSON body, must carry a `slides` array

        Returns:
            Acknowledgement with the stored document
        """
        if not isinstance(payload.get("slides"), list):
            raise BadRequestException("Slides array is required")

        update = self._parse_update(payload, schemas.CarouselUpdate)
        carousel = await self._store(
            db, CarouselContent, update, "Failed to update carousel"
        )
        return schemas.CarouselUpdateResponse(
            message="Carousel updated successfully", carousel=carousel
        )


    async def get_why_choose_us(self, db: AsyncIOMotorDatabase) -> WhyChooseUsContent:
        """
        Retrieve Why-Choose-Us content, seeding the defaults on first access.

        Args:
            db: MongoDB database instance

        Returns:
            Why-Choose-Us content document
        """
        return await self._fetch(db, WhyChooseUsContent, "Failed to fetch content")


    async def update_why_choose_us(
        self, db: AsyncIOMotorDatabase, payload: Dict[str, Any]
    ) -> schemas.WhyChooseUsUpdateResponse:
        """
        Update Why-Choose-Us content. Empty strings and nulls are ignored.

        Args:
            db: MongoDB database instance
            payload: Decoded JSON body

        Returns:
            Acknowledgement with the stored document
        """
        update = self._parse_update(payload, schemas.WhyChooseUsUpdate)
        why_choose = await self._store(
            db, WhyChooseUsContent, update, "Failed to update content"
        )
        return schemas.WhyChooseUsUpdateResponse(
            message="Content updated successfully", why_choose=why_choose
        )


    async def upload_image(
        self, uploader: ImageService, image: Union[UploadFile, str, None]
    ) -> schemas.ImageUploadResponse:
        """
        Upload a content image. The URL is not linked to any document until a later update stores it.

        Args:
            uploader: Object storage uploader
            image: Multipart `image` field

        Returns:
            Location of the uploaded image
        """
        if image is None or isinstance(image, str):
            raise BadRequestException("Image file is required")

        if image.size is not None and image.size > settings.IMAGE_MAX_SIZE_BYTES:
            raise PayloadTooLargeException(
                f"Image file size must be less than {settings.IMAGE_MAX_SIZE_MB} MB"
            )

        data = await image.read()
        if not data:
            raise BadRequestException("Image file is required")

        try:
            image_url = await uploader.upload(data, image.filename, image.content_type)
        except DetailedHTTPException:
            raise
        except Exception as e:
            logger.error(f"Error uploading image '{image.filename}': {e}", exc_info=True)
            raise ServerErrorException("Failed to upload image")

        return schemas.ImageUploadResponse(image_url=image_url)


content_service = ContentService()
