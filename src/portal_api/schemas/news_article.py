"""Pydantic v2 schemas for news article operations."""

import uuid
from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field

from portal_api.models.news_article import NewsCategory
from portal_api.schemas.common import PartialUpdateRequest


class NewsArticleResponse(BaseModel):
    """A stored news article."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    title: str
    content: str
    summary: str | None = None
    published_at: datetime
    is_featured: bool
    category: NewsCategory
    created_at: datetime
    updated_at: datetime


class NewsArticleCreateRequest(BaseModel):
    """Request body for createNewsArticle.

    ``published_at`` may be omitted, in which case the article is stamped
    with the time of insertion.
    """

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    summary: str | None = None
    published_at: datetime | None = None
    is_featured: bool = False
    category: NewsCategory


class NewsArticleUpdateRequest(PartialUpdateRequest):
    """Request body for updateNewsArticle. Only supplied fields are changed."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"title", "content", "published_at", "is_featured", "category"}
    )

    id: uuid.UUID
    title: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    summary: str | None = None
    published_at: datetime | None = None
    is_featured: bool | None = None
    category: NewsCategory | None = None
