"""CLI commands for portal content.

Provides the ``seed`` command that populates a starter contact directory
and an "About" page for a fresh installation.
"""

import asyncio

import typer
from loguru import logger

content_app = typer.Typer()

DEFAULT_CONTACTS = [
    ("Administration", "phone", "Main Office", "(555) 010-1000", True, 0),
    ("Administration", "email", "General Inquiries", "info@example.gov", False, 1),
    ("Administration", "address", "Town Hall", "100 Main Street", False, 2),
    ("Administration", "hours", "Office Hours", "Mon-Fri 8:00-17:00", False, 3),
    ("Fire Department", "phone", "Emergency", "911", True, 0),
    ("Fire Department", "phone", "Non-Emergency", "(555) 010-2000", False, 1),
    ("Utilities", "phone", "Customer Service", "(555) 010-3000", True, 0),
    ("Utilities", "email", "Billing", "billing@example.gov", False, 1),
]

DEFAULT_PAGES = [
    (
        "About Us",
        "about",
        "Welcome to the official information portal.",
        "about",
        "General information about the portal and its services",
    ),
]


@content_app.command("seed")
def seed() -> None:
    """Seed a default contact directory and About page (idempotent)."""
    asyncio.run(_seed_impl())


async def _seed_impl() -> None:
    """Async implementation of the seed command."""
    from portal_api.core.config import get_settings
    from portal_api.core.database import dispose_engine, init_engine, session_scope
    from portal_api.core.exceptions import ConflictError
    from portal_api.schemas.contact_info import ContactInfoCreateRequest
    from portal_api.schemas.information_page import InformationPageCreateRequest
    from portal_api.services.contact_info_service import count_contacts, create_contact
    from portal_api.services.information_page_service import create_page

    settings = get_settings()
    init_engine(settings.database_url, echo=False, schema=settings.database_schema)

    try:
        created = 0
        skipped = 0

        async with session_scope() as session:
            if await count_contacts(session) > 0:
                skipped += len(DEFAULT_CONTACTS)
                logger.debug("Contact directory already populated, skipping contacts")
            else:
                for department, contact_type, label, value, is_primary, display_order in DEFAULT_CONTACTS:
                    await create_contact(
                        session,
                        ContactInfoCreateRequest(
                            department=department,
                            contact_type=contact_type,
                            label=label,
                            value=value,
                            is_primary=is_primary,
                            display_order=display_order,
                        ),
                    )
                    created += 1
                    typer.echo(f"  Created contact: {department} / {label}")

            for title, slug, content, page_type, meta_description in DEFAULT_PAGES:
                try:
                    await create_page(
                        session,
                        InformationPageCreateRequest(
                            title=title,
                            slug=slug,
                            content=content,
                            page_type=page_type,
                            meta_description=meta_description,
                        ),
                    )
                    created += 1
                    typer.echo(f"  Created page: {slug}")
                except ConflictError:
                    skipped += 1
                    logger.debug(f"Skipped existing page: {slug}")

        typer.echo(f"\nSeed complete: {created} created, {skipped} skipped")
    finally:
        await dispose_engine()
