"""Unit tests for contact directory Pydantic schemas."""

import pytest
from pydantic import ValidationError

from portal_api.models.contact_info import ContactType
from portal_api.schemas.contact_info import ContactInfoCreateRequest


class TestContactInfoCreateRequest:
    """Tests for ContactInfoCreateRequest schema."""

    def test_defaults(self) -> None:
        req = ContactInfoCreateRequest(department="Utilities", contact_type="hours", label="Office", value="9-5")
        assert req.contact_type is ContactType.HOURS
        assert req.is_primary is False
        assert req.display_order == 0

    def test_negative_display_order_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContactInfoCreateRequest(
                department="Utilities",
                contact_type="phone",
                label="Office",
                value="555",
                display_order=-1,
            )

    def test_non_integer_display_order_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContactInfoCreateRequest(
                department="Utilities",
                contact_type="phone",
                label="Office",
                value="555",
                display_order=1.5,
            )

    @pytest.mark.parametrize("field", ["department", "label", "value"])
    def test_empty_text_rejected(self, field: str) -> None:
        data = {"department": "D", "contact_type": "email", "label": "L", "value": "v@example.gov", field: ""}
        with pytest.raises(ValidationError):
            ContactInfoCreateRequest(**data)

    def test_unknown_contact_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ContactInfoCreateRequest(department="D", contact_type="fax", label="L", value="v")
