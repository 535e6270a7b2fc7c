"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from events.domain import Event, Slug


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event_by_slug(self, slug: Slug) -> Event | None:
        """Return the event with exactly this slug, or None if not found."""
        ...

    @abstractmethod
    def slug_exists(self, slug: Slug, exclude: Slug | None = None) -> bool:
        """Check if an event other than ``exclude`` owns ``slug``."""
        ...

    @abstractmethod
    def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Persist a new event from normalized fields."""
        ...

    @abstractmethod
    def update_event(self, slug: Slug, fields: Mapping[str, Any]) -> Event:
        """Apply normalized field changes to the event owning ``slug``."""
        ...
