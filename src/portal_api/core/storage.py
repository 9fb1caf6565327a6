"""Generic table accessor shared by every content service.

Wraps the SQLAlchemy session calls the services need (insert, filtered and
ordered select with limit/offset, single-row select, partial update) so
that commit/rollback handling and unique-constraint translation live in
one place.  Rows are returned detached from any cache: each call runs
inside the caller's request-scoped session.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portal_api.core.exceptions import ConflictError
from portal_api.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


async def insert_row(
    session: AsyncSession,
    row: ModelT,
    *,
    conflict_message: str | None = None,
) -> ModelT:
    """Insert a single row, commit, and return it refreshed.

    Args:
        session: Database session.
        row: Transient ORM instance to persist.
        conflict_message: When given, an ``IntegrityError`` raised by the
            commit is reported as a ``ConflictError`` with this message.

    Returns:
        The persisted row with server-assigned values loaded.

    Raises:
        ConflictError: If the insert violates a unique constraint and a
            ``conflict_message`` was supplied.
        IntegrityError: If the insert violates a constraint and no
            ``conflict_message`` was supplied.
    """
    session.add(row)
    await _commit(session, conflict_message)
    await session.refresh(row)
    return row


async def select_rows(
    session: AsyncSession,
    model: type[ModelT],
    *,
    where: Sequence[ColumnElement[bool]] = (),
    order_by: Sequence[ColumnElement[Any]] = (),
    limit: int | None = None,
    offset: int | None = None,
) -> list[ModelT]:
    """Select rows matching every ``where`` clause, in a deterministic order.

    ``id`` ascending is always appended as the last sort key so rows that
    tie on every requested key still come back in a stable order.

    Args:
        session: Database session.
        model: ORM class to query.
        where: Filter expressions, combined with AND.
        order_by: Sort expressions, highest precedence first.
        limit: Maximum number of rows to return.
        offset: Number of leading rows to skip.

    Returns:
        List of matching rows.
    """
    query = select(model).where(*where).order_by(*order_by, model.id.asc())
    if offset is not None:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    result = await session.execute(query)
    return list(result.scalars().all())


async def select_one(
    session: AsyncSession,
    model: type[ModelT],
    *where: ColumnElement[bool],
) -> ModelT | None:
    """Return the single row matching ``where``, or None."""
    result = await session.execute(select(model).where(*where).limit(1))
    return result.scalar_one_or_none()


async def update_row(
    session: AsyncSession,
    row: ModelT,
    values: Mapping[str, Any],
    *,
    allowed: Iterable[str],
    conflict_message: str | None = None,
) -> ModelT:
    """Apply ``values`` to ``row``, commit, and return it refreshed.

    Keys outside ``allowed`` are ignored so request payloads cannot
    overwrite internal columns such as ``id`` or ``created_at``.

    Args:
        session: Database session.
        row: Persistent ORM instance to modify.
        values: Mapping of column name to new value.
        allowed: Column names that may be written.
        conflict_message: Message for the ``ConflictError`` raised when the
            commit violates a unique constraint.

    Returns:
        The updated row.
    """
    allowed_fields = frozenset(allowed)
    for field_name, value in values.items():
        if field_name in allowed_fields:
            setattr(row, field_name, value)
    await _commit(session, conflict_message)
    await session.refresh(row)
    return row


async def count_rows(session: AsyncSession, model: type[ModelT], *where: ColumnElement[bool]) -> int:
    """Return the number of rows matching ``where``."""
    result = await session.execute(select(func.count()).select_from(model).where(*where))
    return result.scalar_one()


async def _commit(session: AsyncSession, conflict_message: str | None) -> None:
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        if conflict_message is None:
            raise
        logger.warning(f"Write rejected by unique constraint: {conflict_message}")
        raise ConflictError(conflict_message) from None
