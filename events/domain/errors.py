"""Domain error codes for the events module."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_SLUG = "INVALID_SLUG"
    INVALID_SLUG_CHARACTERS = "INVALID_SLUG_CHARACTERS"
    INVALID_REQUEST_PARAMETERS = "INVALID_REQUEST_PARAMETERS"
    DATABASE_CONFIGURATION = "DATABASE_CONFIGURATION"
    INVALID_EVENT_DATA = "INVALID_EVENT_DATA"
    SLUG_CONFLICT = "SLUG_CONFLICT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when no event matches a slug."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class InvalidSlugError(DomainError):
    """Raised when a slug is missing, not a string, or blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLUG,
            message="Invalid slug parameter",
        )


class SlugCharactersError(DomainError):
    """Raised when a slug contains characters outside [a-z0-9-]."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLUG_CHARACTERS,
            message="Slug contains invalid characters",
        )


class StorageValidationError(DomainError):
    """Raised when the storage layer rejects the shape of a query."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REQUEST_PARAMETERS,
            message="Invalid request parameters",
        )


class DatabaseConfigurationError(DomainError):
    """Raised when the database connection settings are missing or unusable."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DATABASE_CONFIGURATION,
            message="Database configuration error",
        )


class SlugConflictError(DomainError):
    """Raised when a write would produce a slug owned by another event."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.SLUG_CONFLICT,
            message="An event with this slug already exists",
        )
        object.__setattr__(self, "slug", slug)


class EventValidationError(DomainError):
    """Raised when event data fails normalization.

    ``field_errors`` maps each offending field to a user-safe message.
    """

    def __init__(self, field_errors: Mapping[str, str]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_DATA,
            message="Invalid event data",
        )
        object.__setattr__(self, "field_errors", dict(field_errors))

    def __str__(self) -> str:
        details = "; ".join(f"{name}: {msg}" for name, msg in self.field_errors.items())
        return f"{self.code.value}: {details}"
