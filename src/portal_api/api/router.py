"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from portal_api.api.middleware import SecurityHeadersMiddleware, setup_cors
from portal_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all procedure routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from portal_api.api.v1.contacts import contacts_router
    from portal_api.api.v1.gallery import gallery_router
    from portal_api.api.v1.health import health_router
    from portal_api.api.v1.information_pages import information_pages_router
    from portal_api.api.v1.news import news_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(health_router)
    root_router.include_router(news_router)
    root_router.include_router(gallery_router)
    root_router.include_router(information_pages_router)
    root_router.include_router(contacts_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
