"""News article service: create, list, featured list, and partial update."""

import uuid

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.exceptions import NotFoundError
from portal_api.core.storage import insert_row, select_one, select_rows, update_row
from portal_api.models.base import utcnow
from portal_api.models.news_article import NewsArticle, NewsCategory
from portal_api.schemas.news_article import NewsArticleCreateRequest

# Fields that may be set via updateNewsArticle.  Anything outside this set
# is ignored, so ``id`` and the timestamps cannot be overwritten by callers.
_UPDATABLE_FIELDS: frozenset[str] = frozenset(
    {
        "title",
        "content",
        "summary",
        "published_at",
        "is_featured",
        "category",
    }
)


# ---------------------------------------------------------------------------
# Read operations
# ---------------------------------------------------------------------------


async def list_articles(
    session: AsyncSession,
    *,
    category: NewsCategory | None = None,
    limit: int = 10,
    offset: int = 0,
) -> list[NewsArticle]:
    """List news articles, newest publication first.

    Args:
        session: Database session.
        category: Restrict to a single category; all categories when None.
        limit: Maximum number of articles to return.
        offset: Number of articles to skip.

    Returns:
        Articles ordered by ``published_at`` descending.
    """
    where = [NewsArticle.category == category] if category is not None else []
    articles = await select_rows(
        session,
        NewsArticle,
        where=where,
        order_by=[NewsArticle.published_at.desc()],
        limit=limit,
        offset=offset,
    )
    logger.info(f"Listed {len(articles)} news articles (category={category}, limit={limit}, offset={offset})")
    return articles


async def list_featured_articles(session: AsyncSession) -> list[NewsArticle]:
    """Return every featured article, newest publication first."""
    articles = await select_rows(
        session,
        NewsArticle,
        where=[NewsArticle.is_featured.is_(True)],
        order_by=[NewsArticle.published_at.desc()],
    )
    logger.info(f"Listed {len(articles)} featured news articles")
    return articles


async def get_article(session: AsyncSession, article_id: uuid.UUID) -> NewsArticle | None:
    """Get a single news article by ID, or None."""
    return await select_one(session, NewsArticle, NewsArticle.id == article_id)


# ---------------------------------------------------------------------------
# Write operations
# ---------------------------------------------------------------------------


async def create_article(session: AsyncSession, request: NewsArticleCreateRequest) -> NewsArticle:
    """Create a news article.

    When the request omits ``published_at`` the article is stamped with the
    current time, computed here rather than by a column default so it
    matches the moment of insertion.

    Args:
        session: Database session.
        request: Validated create payload.

    Returns:
        The created NewsArticle.
    """
    now = utcnow()
    article = NewsArticle(
        title=request.title,
        content=request.content,
        summary=request.summary,
        published_at=request.published_at if request.published_at is not None else now,
        is_featured=request.is_featured,
        category=request.category,
        created_at=now,
        updated_at=now,
    )
    article = await insert_row(session, article)
    logger.info(f"Created news article {article.id} ({article.category})")
    return article


async def update_article(
    session: AsyncSession,
    article_id: uuid.UUID,
    *,
    data: dict,
) -> NewsArticle:
    """Apply a partial update to a news article.

    Args:
        session: Database session.
        article_id: The article UUID.
        data: Dict of field_name -> new value containing only the fields the
            caller supplied. Only allowlisted fields are applied.

    Returns:
        The updated NewsArticle with ``updated_at`` refreshed.

    Raises:
        NotFoundError: If no article has the given ID.
    """
    article = await get_article(session, article_id)
    if article is None:
        msg = f"News article {article_id} not found"
        raise NotFoundError(msg)

    article.updated_at = utcnow()
    article = await update_row(session, article, data, allowed=_UPDATABLE_FIELDS)
    logger.info(f"Updated news article {article.id} (fields={sorted(data)})")
    return article
