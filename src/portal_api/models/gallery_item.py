"""GalleryItem model: a photo in the public gallery. Immutable once created."""

from datetime import datetime

from sqlalchemy import Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal_api.models.base import Base, CreatedAtMixin, UTCDateTime, UUIDMixin


class GalleryItem(Base, UUIDMixin, CreatedAtMixin):
    """A gallery photo.

    Image and thumbnail URLs are opaque strings supplied by the caller; the
    portal does not store image bytes.

    Attributes:
        title: Caption title.
        description: Optional longer caption.
        image_url: Full-size image URL.
        thumbnail_url: Optional thumbnail URL.
        category: Optional free-text album name.
        taken_at: When the photo was taken, if known.
    """

    __tablename__ = "gallery_items"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, nullable=True)
    taken_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)

    __table_args__ = (Index("ix_gallery_items_created_at", "created_at"),)
