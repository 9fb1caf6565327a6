"""Gallery item service. Items are immutable after creation."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.storage import insert_row, select_rows
from portal_api.models.gallery_item import GalleryItem
from portal_api.schemas.gallery_item import GalleryItemCreateRequest


async def list_items(session: AsyncSession) -> list[GalleryItem]:
    """Return all gallery items, most recently added first."""
    items = await select_rows(session, GalleryItem, order_by=[GalleryItem.created_at.desc()])
    logger.info(f"Listed {len(items)} gallery items")
    return items


async def create_item(session: AsyncSession, request: GalleryItemCreateRequest) -> GalleryItem:
    """Create a gallery item.

    Args:
        session: Database session.
        request: Validated create payload. URLs are stored as given.

    Returns:
        The created GalleryItem.
    """
    item = GalleryItem(
        title=request.title,
        description=request.description,
        image_url=request.image_url,
        thumbnail_url=request.thumbnail_url,
        category=request.category,
        taken_at=request.taken_at,
    )
    item = await insert_row(session, item)
    logger.info(f"Created gallery item {item.id}")
    return item
