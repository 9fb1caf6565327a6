"""NewsArticle model: a dated news item shown on the portal front page and news feed."""

import enum
from datetime import datetime

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal_api.models.base import Base, TimestampMixin, UTCDateTime, UUIDMixin


class NewsCategory(enum.StrEnum):
    """News article classification."""

    NEWS = "news"
    ANNOUNCEMENT = "announcement"
    REGULATION = "regulation"
    SERVICE_UPDATE = "service_update"


class NewsArticle(Base, UUIDMixin, TimestampMixin):
    """A news article.

    Attributes:
        title: Headline.
        content: Full article body.
        summary: Optional teaser text.
        published_at: Publication instant; listings sort on this, newest first.
        is_featured: Flag for prominent display, independent of category.
        category: One of :class:`NewsCategory`.
    """

    __tablename__ = "news_articles"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    published_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
    category: Mapped[str] = mapped_column(String(20), nullable=False)

    __table_args__ = (
        Index("ix_news_articles_category_published_at", "category", "published_at"),
        Index("ix_news_articles_featured_published_at", "is_featured", "published_at"),
    )
