"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Self

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")

# Accepted in addition to ISO 8601 dates and datetimes.
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m",
    "%Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def slugify_title(title: str) -> str:
    """Derive a URL-safe slug from an event title.

    Lowercases, drops everything except ASCII letters, digits, whitespace
    and hyphens, turns whitespace runs into hyphens, collapses repeated
    hyphens and trims them from both ends. May return an empty string.
    """
    slug = title.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


@dataclass(frozen=True)
class Slug:
    """Natural lookup key for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not SLUG_PATTERN.fullmatch(self.value):
            raise ValueError("Slug must match [a-z0-9-]+")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Canonicalize a raw identifier (trim + lowercase) and validate it."""
        return cls(value=value.strip().lower())

    @classmethod
    def from_title(cls, title: str) -> Self:
        return cls(value=slugify_title(title))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EventDate:
    """Calendar date stored as ISO ``YYYY-MM-DD``."""

    value: date

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse a date or datetime string, keeping only its calendar date.

        Raises:
            ValueError: If ``raw`` is not a recognizable calendar date.
        """
        text = raw.strip() if isinstance(raw, str) else ""
        if not text:
            raise ValueError("Invalid date format")

        try:
            return cls(value=date.fromisoformat(text))
        except ValueError:
            pass
        try:
            return cls(value=datetime.fromisoformat(text).date())
        except ValueError:
            pass
        for fmt in DATE_FORMATS:
            try:
                return cls(value=datetime.strptime(text, fmt).date())
            except ValueError:
                continue
        # RFC 2822, e.g. "Fri, 14 Mar 2025 10:00:00 GMT".
        try:
            return cls(value=parsedate_to_datetime(text).date())
        except (TypeError, ValueError):
            pass
        raise ValueError("Invalid date format")

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class EventTime:
    """24-hour ``HH:MM`` time, kept exactly as supplied."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not TIME_PATTERN.fullmatch(self.value):
            raise ValueError("Time must be in HH:MM format")

    def __str__(self) -> str:
        return self.value


class EventMode(Enum):
    """How an event is attended."""

    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, raw: str) -> "EventMode":
        if not isinstance(raw, str):
            raise ValueError("Mode must be a string")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Mode must be one of: {allowed}") from None
