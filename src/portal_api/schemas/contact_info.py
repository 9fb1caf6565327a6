"""Pydantic v2 schemas for contact directory operations."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from portal_api.models.contact_info import ContactType


class ContactInfoResponse(BaseModel):
    """A stored contact entry."""

    model_config = {"from_attributes": True}

    id: uuid.UUID
    department: str
    contact_type: ContactType
    label: str
    value: str
    is_primary: bool
    display_order: int
    created_at: datetime


class ContactInfoCreateRequest(BaseModel):
    """Request body for createContactInfo."""

    department: str = Field(min_length=1)
    contact_type: ContactType
    label: str = Field(min_length=1)
    value: str = Field(min_length=1)
    is_primary: bool = False
    display_order: int = Field(default=0, ge=0)
