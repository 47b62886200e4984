"""Domain errors surfaced to adapters.

The aggregation services never raise these; they are reserved for write
validation and lookups so callers can tell failures apart from valid empty
data.
"""


class PathTwoError(Exception):
    """Base class for dashboard domain errors."""


class ValidationError(PathTwoError, ValueError):
    """Raised when a write payload is rejected.

    Attributes:
        field: Name of the offending field, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class EntityNotFoundError(PathTwoError, LookupError):
    """Raised when an update or delete targets a missing record."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateSubscriptionError(PathTwoError):
    """Raised when an email is already subscribed to the newsletter."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already subscribed: {email}")
        self.email = email


class AdminAuthenticationError(PathTwoError):
    """Raised when an admin action runs without a valid session."""


__all__ = [
    "PathTwoError",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateSubscriptionError",
    "AdminAuthenticationError",
]
