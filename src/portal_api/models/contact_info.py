"""ContactInfo model: one contact entry (phone, email, address, hours) for a department."""

import enum

from sqlalchemy import Boolean, CheckConstraint, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portal_api.models.base import Base, CreatedAtMixin, UUIDMixin


class ContactType(enum.StrEnum):
    """Kind of contact value."""

    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    HOURS = "hours"


class ContactInfo(Base, UUIDMixin, CreatedAtMixin):
    """A department contact entry. Immutable once created.

    Attributes:
        department: Department name; clients group entries on this.
        contact_type: One of :class:`ContactType`.
        label: Display label (e.g., "Main Office").
        value: Phone number, email address, or free text depending on type.
        is_primary: Primary entries sort first among equal display orders.
        display_order: Position within the department, lowest first.
    """

    __tablename__ = "contact_info"

    department: Mapped[str] = mapped_column(Text, nullable=False)
    contact_type: Mapped[str] = mapped_column(String(20), nullable=False)
    label: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    __table_args__ = (
        CheckConstraint("display_order >= 0", name="ck_contact_info_display_order_non_negative"),
        Index("ix_contact_info_department_order", "department", "display_order"),
    )
