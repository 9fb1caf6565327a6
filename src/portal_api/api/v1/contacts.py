"""Contact directory procedures: createContactInfo, getContactInfo."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.dependencies import get_async_session
from portal_api.schemas.contact_info import ContactInfoCreateRequest, ContactInfoResponse
from portal_api.services.contact_info_service import create_contact, list_contacts

contacts_router = APIRouter(tags=["contacts"])


@contacts_router.post(
    "/createContactInfo",
    operation_id="createContactInfo",
    status_code=status.HTTP_201_CREATED,
)
async def create_contact_info(
    body: ContactInfoCreateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> ContactInfoResponse:
    """Add a contact entry to a department."""
    try:
        contact = await create_contact(session, body)
    except Exception as e:
        logger.error(f"Unexpected error creating contact entry: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error creating contact entry.",
        ) from e
    return ContactInfoResponse.model_validate(contact)


@contacts_router.get(
    "/getContactInfo",
    operation_id="getContactInfo",
)
async def get_contact_info(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> list[ContactInfoResponse]:
    """List the contact directory ordered by department, display order, then primary first.

    The flat list is returned as stored; grouping by department is left to
    the client.
    """
    try:
        contacts = await list_contacts(session)
    except Exception as e:
        logger.error(f"Unexpected error listing contact entries: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error listing contact entries.",
        ) from e
    return [ContactInfoResponse.model_validate(c) for c in contacts]
