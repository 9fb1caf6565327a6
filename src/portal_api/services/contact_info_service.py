"""Contact directory service: create and ordered list."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.storage import count_rows, insert_row, select_rows
from portal_api.models.contact_info import ContactInfo
from portal_api.schemas.contact_info import ContactInfoCreateRequest


async def list_contacts(session: AsyncSession) -> list[ContactInfo]:
    """Return the full contact directory in display order.

    Rows sort by department, then ``display_order``; ``is_primary`` only
    breaks ties between rows with the same department and display order.

    Args:
        session: Database session.

    Returns:
        All contact entries in directory order.
    """
    contacts = await select_rows(
        session,
        ContactInfo,
        order_by=[
            ContactInfo.department.asc(),
            ContactInfo.display_order.asc(),
            ContactInfo.is_primary.desc(),
        ],
    )
    logger.info(f"Listed {len(contacts)} contact entries")
    return contacts


async def count_contacts(session: AsyncSession) -> int:
    """Return the number of stored contact entries."""
    return await count_rows(session, ContactInfo)


async def create_contact(session: AsyncSession, request: ContactInfoCreateRequest) -> ContactInfo:
    """Create a contact entry.

    Args:
        session: Database session.
        request: Validated create payload.

    Returns:
        The created ContactInfo.
    """
    contact = ContactInfo(
        department=request.department,
        contact_type=request.contact_type,
        label=request.label,
        value=request.value,
        is_primary=request.is_primary,
        display_order=request.display_order,
    )
    contact = await insert_row(session, contact)
    logger.info(f"Created contact entry {contact.id} ({contact.department}, {contact.contact_type})")
    return contact
