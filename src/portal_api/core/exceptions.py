"""Domain errors raised by the service layer.

Both subclass ``ValueError`` so callers that only care about "the request
could not be applied" can catch a single type, while routers map each one
to its own HTTP status.
"""


class NotFoundError(ValueError):
    """Raised when an operation targets a row that does not exist."""


class ConflictError(ValueError):
    """Raised when a write would violate a uniqueness rule."""
