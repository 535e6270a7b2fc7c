"""Pytest configuration and shared fixtures."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventDate, EventMode, EventTime, Slug
from events.domain.errors import EventNotFoundError
from events.stores.connection import connection_state
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed store for service tests."""

    def __init__(self) -> None:
        self.events: dict[str, Event] = {}

    def get_event_by_slug(self, slug: Slug) -> Event | None:
        return self.events.get(slug.value)

    def slug_exists(self, slug: Slug, exclude: Slug | None = None) -> bool:
        if exclude is not None and slug == exclude:
            return False
        return slug.value in self.events

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        now = datetime.now(timezone.utc)
        event = self._build(fields, created_at=now, updated_at=now)
        self.events[event.slug.value] = event
        return event

    def update_event(self, slug: Slug, fields: Mapping[str, Any]) -> Event:
        current = self.events.pop(slug.value, None)
        if current is None:
            raise EventNotFoundError()
        merged = {
            "slug": current.slug.value,
            "title": current.title,
            "description": current.description,
            "overview": current.overview,
            "image": current.image,
            "venue": current.venue,
            "location": current.location,
            "date": str(current.date),
            "time": str(current.time),
            "mode": current.mode.value,
            "audience": current.audience,
            "agenda": list(current.agenda),
            "organizer": current.organizer,
            "tags": list(current.tags),
        }
        merged.update(fields)
        event = self._build(merged, created_at=current.created_at, updated_at=datetime.now(timezone.utc))
        self.events[event.slug.value] = event
        return event

    @staticmethod
    def _build(fields: Mapping[str, Any], created_at: datetime, updated_at: datetime) -> Event:
        return Event(
            slug=Slug(fields["slug"]),
            title=fields["title"],
            description=fields["description"],
            overview=fields["overview"],
            image=fields["image"],
            venue=fields["venue"],
            location=fields["location"],
            date=EventDate.parse(fields["date"]),
            time=EventTime(fields["time"]),
            mode=EventMode(fields["mode"]),
            audience=fields["audience"],
            agenda=tuple(fields["agenda"]),
            organizer=fields["organizer"],
            tags=tuple(fields["tags"]),
            created_at=created_at,
            updated_at=updated_at,
        )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def reset_connection_state():
    connection_state.reset()
    yield
    connection_state.reset()


@pytest.fixture
def memory_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def event_payload() -> dict[str, Any]:
    return {
        "title": "  My Event 2025 ",
        "description": "A day of talks.",
        "overview": "Talks, workshops and networking.",
        "image": "/images/my-event.png",
        "venue": "Main Hall",
        "location": "Oslo, Norway",
        "date": "2025-03-14T18:00:00Z",
        "time": "09:30",
        "mode": "Hybrid",
        "audience": "Developers",
        "agenda": ["Opening", " Keynote "],
        "organizer": "Event Team",
        "tags": ["python", "web"],
    }
