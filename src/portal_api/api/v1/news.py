"""News article procedures: createNewsArticle, getNewsArticles, getFeaturedNews, updateNewsArticle."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.config import Settings, get_settings
from portal_api.core.dependencies import get_async_session
from portal_api.core.exceptions import NotFoundError
from portal_api.models.news_article import NewsCategory
from portal_api.schemas.news_article import (
    NewsArticleCreateRequest,
    NewsArticleResponse,
    NewsArticleUpdateRequest,
)
from portal_api.services.news_article_service import (
    create_article,
    list_articles,
    list_featured_articles,
    update_article,
)

news_router = APIRouter(tags=["news"])


@news_router.post(
    "/createNewsArticle",
    operation_id="createNewsArticle",
    status_code=status.HTTP_201_CREATED,
)
async def create_news_article(
    body: NewsArticleCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> NewsArticleResponse:
    """Create a news article. ``published_at`` defaults to now."""
    try:
        article = await create_article(session, body)
    except Exception as e:
        logger.error(f"Unexpected error creating news article: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating news article.",
        ) from e
    return NewsArticleResponse.model_validate(article)


@news_router.get(
    "/getNewsArticles",
    operation_id="getNewsArticles",
)
async def get_news_articles(
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    category: Annotated[NewsCategory | None, Query(description="Restrict to one category")] = None,
    limit: Annotated[int | None, Query(gt=0, description="Maximum number of articles")] = None,
    offset: Annotated[int, Query(ge=0, description="Number of articles to skip")] = 0,
) -> list[NewsArticleResponse]:
    """List news articles, newest publication first, with offset/limit paging.

    A ``limit`` above the configured maximum is reduced to that maximum.
    """
    page_size = min(
        limit if limit is not None else settings.news_default_page_size,
        settings.news_max_page_size,
    )
    try:
        articles = await list_articles(session, category=category, limit=page_size, offset=offset)
    except Exception as e:
        logger.error(f"Unexpected error listing news articles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing news articles.",
        ) from e
    return [NewsArticleResponse.model_validate(a) for a in articles]


@news_router.get(
    "/getFeaturedNews",
    operation_id="getFeaturedNews",
)
async def get_featured_news(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> list[NewsArticleResponse]:
    """List all featured articles, newest publication first."""
    try:
        articles = await list_featured_articles(session)
    except Exception as e:
        logger.error(f"Unexpected error listing featured news: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing featured news.",
        ) from e
    return [NewsArticleResponse.model_validate(a) for a in articles]


@news_router.post(
    "/updateNewsArticle",
    operation_id="updateNewsArticle",
)
async def update_news_article(
    body: NewsArticleUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> NewsArticleResponse:
    """Partially update a news article. Omitted fields keep their stored values."""
    try:
        article = await update_article(session, body.id, data=body.changes())
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.error(f"Unexpected error updating news article {body.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error updating news article.",
        ) from e
    return NewsArticleResponse.model_validate(article)
