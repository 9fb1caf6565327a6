"""Common Pydantic v2 schemas shared across the API."""

from datetime import datetime
from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter, model_validator

_http_url_adapter: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)


def _check_web_url(value: str) -> str:
    """Reject strings that are not absolute http(s) URLs, keeping the caller's text."""
    _http_url_adapter.validate_python(value)
    return value


# Validated like HttpUrl, but the value stays the exact string the caller sent.
WebUrl = Annotated[str, AfterValidator(_check_web_url)]


class HealthResponse(BaseModel):
    """Liveness check payload."""

    status: str = Field(description="Always 'ok' when the process is serving requests")
    environment: str = Field(description="Deployment environment name from settings")
    timestamp: datetime


class PartialUpdateRequest(BaseModel):
    """Base for update payloads where only explicitly supplied fields are applied.

    Subclasses list the columns that may not be cleared in
    ``non_nullable_fields``; sending ``null`` for one of them is rejected,
    while omitting it leaves the stored value untouched.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> "PartialUpdateRequest":
        nulled = sorted(
            name for name in self.model_fields_set & self.non_nullable_fields if getattr(self, name) is None
        )
        if nulled:
            msg = f"Fields cannot be null: {', '.join(nulled)}"
            raise ValueError(msg)
        return self

    def changes(self) -> dict:
        """Return only the fields present in the request, excluding ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})
