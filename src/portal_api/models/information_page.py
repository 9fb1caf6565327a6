"""InformationPage model: a static content page addressed by a unique slug."""

import enum

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal_api.models.base import Base, TimestampMixin, UUIDMixin


class PageType(enum.StrEnum):
    """Information page classification."""

    SERVICE = "service"
    REGULATION = "regulation"
    ABOUT = "about"
    GENERAL = "general"


class InformationPage(Base, UUIDMixin, TimestampMixin):
    """An informational page.

    The unique index on ``slug`` is the source of truth for slug uniqueness;
    the service layer's pre-check only gives an earlier, friendlier error.

    Attributes:
        title: Page title; published pages list in title order.
        slug: URL-safe identifier, unique across all pages.
        content: Page body.
        page_type: One of :class:`PageType`.
        is_published: Unpublished pages are hidden from every read.
        meta_description: Optional SEO description.
    """

    __tablename__ = "information_pages"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    page_type: Mapped[str] = mapped_column(String(20), nullable=False)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default="true")
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("uq_information_pages_slug", "slug", unique=True),
        Index("ix_information_pages_published_title", "is_published", "title"),
    )
