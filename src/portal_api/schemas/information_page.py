"""Pydantic v2 schemas for information page operations."""

import uuid
from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field

from portal_api.models.information_page import PageType
from portal_api.schemas.common import PartialUpdateRequest


class InformationPageResponse(BaseModel):
    """A stored information page."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    title: str
    slug: str
    content: str
    page_type: PageType
    is_published: bool
    meta_description: str | None = None
    created_at: datetime
    updated_at: datetime


class InformationPageCreateRequest(BaseModel):
    """Request body for createInformationPage."""

    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    content: str = Field(min_length=1)
    page_type: PageType
    is_published: bool = True
    meta_description: str | None = None


class InformationPageUpdateRequest(PartialUpdateRequest):
    """Request body for updateInformationPage. Only supplied fields are changed."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"title", "slug", "content", "page_type", "is_published"}
    )

    id: uuid.UUID
    title: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, min_length=1)
    content: str | None = Field(default=None, min_length=1)
    page_type: PageType | None = None
    is_published: bool | None = None
    meta_description: str | None = None
