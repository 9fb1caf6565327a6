"""Gallery procedures: createGalleryItem, getGalleryItems."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.dependencies import get_async_session
from portal_api.schemas.gallery_item import GalleryItemCreateRequest, GalleryItemResponse
from portal_api.services.gallery_item_service import create_item, list_items

gallery_router = APIRouter(tags=["gallery"])


@gallery_router.post(
    "/createGalleryItem",
    operation_id="createGalleryItem",
    status_code=status.HTTP_201_CREATED,
)
async def create_gallery_item(
    body: GalleryItemCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> GalleryItemResponse:
    """Add a photo to the gallery."""
    try:
        item = await create_item(session, body)
    except Exception as e:
        logger.error(f"Unexpected error creating gallery item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating gallery item.",
        ) from e
    return GalleryItemResponse.model_validate(item)


@gallery_router.get(
    "/getGalleryItems",
    operation_id="getGalleryItems",
)
async def get_gallery_items(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> list[GalleryItemResponse]:
    """List every gallery item, most recently added first."""
    try:
        items = await list_items(session)
    except Exception as e:
        logger.error(f"Unexpected error listing gallery items: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing gallery items.",
        ) from e
    return [GalleryItemResponse.model_validate(i) for i in items]
