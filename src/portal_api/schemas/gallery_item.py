"""Pydantic v2 schemas for gallery item operations."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from portal_api.schemas.common import WebUrl


class GalleryItemResponse(BaseModel):
    """A stored gallery item."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    title: str
    description: str | None = None
    image_url: str
    thumbnail_url: str | None = None
    category: str | None = None
    taken_at: datetime | None = None
    created_at: datetime


class GalleryItemCreateRequest(BaseModel):
    """Request body for createGalleryItem."""

    title: str = Field(min_length=1)
    description: str | None = None
    image_url: WebUrl
    thumbnail_url: WebUrl | None = None
    category: str | None = None
    taken_at: datetime | None = None
