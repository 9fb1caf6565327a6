"""Information page procedures.

createInformationPage, getInformationPages, getInformationPageBySlug,
updateInformationPage.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.dependencies import get_async_session
from portal_api.core.exceptions import ConflictError, NotFoundError
from portal_api.schemas.information_page import (
    InformationPageCreateRequest,
    InformationPageResponse,
    InformationPageUpdateRequest,
)
from portal_api.services.information_page_service import (
    create_page,
    get_published_page_by_slug,
    list_published_pages,
    update_page,
)

information_pages_router = APIRouter(tags=["information-pages"])


@information_pages_router.post(
    "/createInformationPage",
    operation_id="createInformationPage",
    status_code=status.HTTP_201_CREATED,
)
async def create_information_page(
    body: InformationPageCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> InformationPageResponse:
    """Create an information page. The slug must not be in use."""
    try:
        page = await create_page(session, body)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error creating information page: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating information page.",
        ) from e
    return InformationPageResponse.model_validate(page)


@information_pages_router.get(
    "/getInformationPages",
    operation_id="getInformationPages",
)
async def get_information_pages(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> list[InformationPageResponse]:
    """List published pages ordered by title."""
    try:
        pages = await list_published_pages(session)
    except Exception as e:
        logger.error(f"Unexpected error listing information pages: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing information pages.",
        ) from e
    return [InformationPageResponse.model_validate(p) for p in pages]


@information_pages_router.get(
    "/getInformationPageBySlug",
    operation_id="getInformationPageBySlug",
)
async def get_information_page_by_slug(
    slug: Annotated[str, Query(min_length=1, description="Page slug")],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> InformationPageResponse | None:
    """Fetch a published page by slug.

    Returns ``null`` rather than an error when no published page has the
    slug, including when the page exists but is unpublished.
    """
    try:
        page = await get_published_page_by_slug(session, slug)
    except Exception as e:
        logger.error(f"Unexpected error fetching information page '{slug}': {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error fetching information page.",
        ) from e
    if page is None:
        return None
    return InformationPageResponse.model_validate(page)


@information_pages_router.post(
    "/updateInformationPage",
    operation_id="updateInformationPage",
)
async def update_information_page(
    body: InformationPageUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> InformationPageResponse:
    """Partially update an information page. Omitted fields keep their stored values."""
    try:
        page = await update_page(session, body.id, data=body.changes())
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error updating information page {body.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error updating information page.",
        ) from e
    return InformationPageResponse.model_validate(page)
