"""Information page service. Slugs are unique; reads only see published pages."""

import uuid

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.exceptions import ConflictError, NotFoundError
from portal_api.core.storage import insert_row, select_one, select_rows, update_row
from portal_api.models.base import utcnow
from portal_api.models.information_page import InformationPage
from portal_api.schemas.information_page import InformationPageCreateRequest

# Fields that may be set via updateInformationPage.
_UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "slug",
        "content",
        "page_type",
        "is_published",
        "meta_description",
    }
)


def _slug_conflict_message(slug: str) -> str:
    return f"Information page with slug '{slug}' already exists"


# ---------------------------------------------------------------------------
# Read operations
# ---------------------------------------------------------------------------


async def list_published_pages(session: AsyncSession) -> list[InformationPage]:
    """Return every published page ordered by title ascending.

    Titles compare under the column's default database collation.

    Args:
        session: Database session.

    Returns:
        Published pages in title order.
    """
    pages = await select_rows(
        session,
        InformationPage,
        where=[InformationPage.is_published.is_(True)],
        order_by=[InformationPage.title.asc()],
    )
    logger.info(f"Listed {len(pages)} published information pages")
    return pages


async def get_published_page_by_slug(session: AsyncSession, slug: str) -> InformationPage | None:
    """Look up a published page by slug.

    An unpublished page with the slug is reported the same way as a slug
    that was never used.

    Args:
        session: Database session.
        slug: The page slug.

    Returns:
        The InformationPage, or None when no published page has this slug.
    """
    page = await select_one(
        session,
        InformationPage,
        InformationPage.slug == slug,
        InformationPage.is_published.is_(True),
    )
    if page is None:
        logger.debug(f"No published information page for slug '{slug}'")
    return page


async def get_page(session: AsyncSession, page_id: uuid.UUID) -> InformationPage | None:
    """Get a page by ID regardless of publication state, or None."""
    return await select_one(session, InformationPage, InformationPage.id == page_id)


async def slug_exists(
    session: AsyncSession,
    slug: str,
    *,
    exclude_id: uuid.UUID | None = None,
) -> bool:
    """Check whether any page other than ``exclude_id`` already uses ``slug``.

    Args:
        session: Database session.
        slug: Slug to look for.
        exclude_id: Page ID to ignore, used when a page keeps its own slug.

    Returns:
        True if another page owns the slug.
    """
    where = [InformationPage.slug == slug]
    if exclude_id is not None:
        where.append(InformationPage.id != exclude_id)
    return await select_one(session, InformationPage, *where) is not None


# ---------------------------------------------------------------------------
# Write operations
# ---------------------------------------------------------------------------


async def create_page(session: AsyncSession, request: InformationPageCreateRequest) -> InformationPage:
    """Create an information page with a unique slug.

    The slug pre-check only gives an early error; the unique index on the
    column decides concurrent inserts, and a violation there is reported
    the same way.

    Args:
        session: Database session.
        request: Validated create payload.

    Returns:
        The created InformationPage.

    Raises:
        ConflictError: If another page already uses the slug.
    """
    if await slug_exists(session, request.slug):
        raise ConflictError(_slug_conflict_message(request.slug))

    now = utcnow()
    page = InformationPage(
        title=request.title,
        slug=request.slug,
        content=request.content,
        page_type=request.page_type,
        is_published=request.is_published,
        meta_description=request.meta_description,
        created_at=now,
        updated_at=now,
    )
    page = await insert_row(session, page, conflict_message=_slug_conflict_message(request.slug))
    logger.info(f"Created information page {page.id} (slug={page.slug})")
    return page


async def update_page(
    session: AsyncSession,
    page_id: uuid.UUID,
    *,
    data: dict,
) -> InformationPage:
    """Apply a partial update to an information page.

    Keeping the page's own slug is always allowed; moving to a slug owned
    by a different page is refused.

    Args:
        session: Database session.
        page_id: The page UUID.
        data: Dict of field_name -> new value containing only the fields the
            caller supplied. Only allowlisted fields are applied.

    Returns:
        The updated InformationPage with ``updated_at`` refreshed.

    Raises:
        NotFoundError: If no page has the given ID.
        ConflictError: If the new slug belongs to another page.
    """
    page = await get_page(session, page_id)
    if page is None:
        msg = f"Information page {page_id} not found"
        raise NotFoundError(msg)

    new_slug = data.get("slug")
    conflict_message = None
    if new_slug is not None:
        conflict_message = _slug_conflict_message(new_slug)
        if await slug_exists(session, new_slug, exclude_id=page_id):
            raise ConflictError(conflict_message)

    page.updated_at = utcnow()
    page = await update_row(
        session,
        page,
        data,
        allowed=_UPDATABLE_FIELDS,
        conflict_message=conflict_message,
    )
    logger.info(f"Updated information page {page.id} (fields={sorted(data)})")
    return page
