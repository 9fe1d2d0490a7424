from fastapi import APIRouter
from glowetsu.api.routes import content_routes

# Master router that bundles all service routers
router = APIRouter()

router.include_router(
    content_routes.router, prefix="/content", tags=["Content Management"]
)
