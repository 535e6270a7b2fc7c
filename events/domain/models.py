"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventDate, EventMode, EventTime, Slug


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    slug: Slug
    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: EventDate
    time: EventTime
    mode: EventMode
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime
