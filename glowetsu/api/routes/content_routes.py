from typing import Any, Dict, Union
from fastapi import APIRouter, Body, Depends, File, UploadFile
from motor.motor_asyncio import AsyncIOMotorDatabase


from glowetsu import schemas
from glowetsu.collections.content_models import (
    AboutUsContent,
    CarouselContent,
    WhyChooseUsContent,
)
from glowetsu.core.dependencies import get_image_uploader, get_mongo_db
from glowetsu.services import content_service
from glowetsu.services.image_services import ImageService


router = APIRouter()


@router.get("/about-us", response_model=AboutUsContent)
async def get_about_us(db: AsyncIOMotorDatabase = Depends(get_mongo_db)):
    """
    Retrieve About-Us content.
    Public endpoint - seeds the default content on first access.

    Args:
        db: MongoDB database dependency

    Returns:
        About-Us content document
    """
    return await content_service.get_about_us(db)


@router.put("/about-us", response_model=schemas.AboutUsUpdateResponse)
async def update_about_us(
    payload: Dict[str, Any] = Body(...),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
):
    """
    Update About-Us content.

    Args:
        payload: Fields to overwrite, omitted fields are kept
        db: MongoDB database dependency

    Returns:
        Confirmation message with the stored document
    """
    return await content_service.update_about_us(db, payload)


@router.post("/about-us", response_model=schemas.ImageUploadResponse)
async def upload_about_us_image(
    image: Union[UploadFile, str, None] = File(default=None),
    uploader: ImageService = Depends(get_image_uploader),
):
    """
    Upload an image for the About-Us page.

    Args:
        image: Image file
        uploader: Object storage uploader dependency

    Returns:
        URL of the uploaded image
    """
    return await content_service.upload_image(uploader, image)


@router.get("/carousel", response_model=CarouselContent)
async def get_carousel(db: AsyncIOMotorDatabase = Depends(get_mongo_db)):
    """
    Retrieve the homepage header carousel.
    Public endpoint - seeds the default slide on first access.

    Args:
        db: MongoDB database dependency

    Returns:
        Carousel content document
    """
    return await content_service.get_carousel(db)


@router.put("/carousel", response_model=schemas.CarouselUpdateResponse)
async def update_carousel(
    payload: Dict[str, Any] = Body(...),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
):
    """
    Replace the carousel slides.

    Args:
        payload: Body with the complete `slides` array
        db: MongoDB database dependency

    Returns:
        Confirmation message with the stored document
    """
    return await content_service.update_carousel(db, payload)


@router.post("/carousel", response_model=schemas.ImageUploadResponse)
async def upload_carousel_image(
    image: Union[UploadFile, str, None] = File(default=None),
    uploader: ImageService = Depends(get_image_uploader),
):
    """
    Upload a carousel slide image.

    Args:
        image: Image file
        uploader: Object storage uploader dependency

    Returns:
        URL of the uploaded image
    """
    return await content_service.upload_image(uploader, image)


@router.get("/why-choose-us", response_model=WhyChooseUsContent)
async def get_why_choose_us(db: AsyncIOMotorDatabase = Depends(get_mongo_db)):
    """
    Retrieve Why-Choose-Us content.
    Public endpoint - seeds the default content on first access.

    Args:
        db: MongoDB database dependency

    Returns:
        Why-Choose-Us content document
    """
    return await content_service.get_why_choose_us(db)


@router.put("/why-choose-us", response_model=schemas.WhyChooseUsUpdateResponse)
async def update_why_choose_us(
    payload: Dict[str, Any] = Body(...),
    db: AsyncIOMotorDatabase = Depends(get_mongo_db),
):
    """
    Update Why-Choose-Us content. Empty values leave the stored field unchanged.

    Args:
        payload: Fields to overwrite
        db: MongoDB database dependency

    Returns:
        Confirmation message with the stored document
    """
    return await content_service.update_why_choose_us(db, payload)


@router.post("/why-choose-us", response_model=schemas.ImageUploadResponse)
async def upload_why_choose_us_image(
    image: Union[UploadFile, str, None] = File(default=None),
    uploader: ImageService = Depends(get_image_uploader),
):
    """
    Upload the Why-Choose-Us section image.

    Args:
        image: Image file
        uploader: Object storage uploader dependency

    Returns:
        URL of the uploaded image
    """
    return await content_service.upload_image(uploader, image)
