"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain import EVENT_FIELDS, Slug, normalize_event_fields
from events.domain.errors import (
    EventNotFoundError,
    EventValidationError,
    InvalidSlugError,
    SlugCharactersError,
    SlugConflictError,
)
from events.domain.models import Event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event lookup and write operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    @staticmethod
    def parse_slug(raw: object) -> Slug:
        """Validate and canonicalize a slug taken from a request.

        Raises:
            InvalidSlugError: If the slug is missing, not a string, or blank.
            SlugCharactersError: If the trimmed, lowercased slug contains
                anything other than a-z, 0-9 and hyphens.
        """
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidSlugError()
        try:
            return Slug.from_string(raw)
        except ValueError:
            raise SlugCharactersError() from None

    def get_event(self, slug: object) -> Event:
        """Return an event by slug.

        Raises:
            InvalidSlugError: If the slug is missing or blank.
            SlugCharactersError: If the slug has disallowed characters.
            EventNotFoundError: If the event does not exist.
        """
        event_slug = self.parse_slug(slug)
        event = self._store.get_event_by_slug(event_slug)
        if event is None:
            raise EventNotFoundError()
        return event

    def create_event(self, payload: Mapping[str, Any]) -> Event:
        """Normalize and persist a new event.

        Raises:
            EventValidationError: If any field is missing or invalid.
            SlugConflictError: If another event already owns the derived slug.
        """
        self._reject_unknown_fields(payload)
        fields = normalize_event_fields(payload, EVENT_FIELDS)
        slug = Slug(fields["slug"])
        if self._store.slug_exists(slug):
            raise SlugConflictError(slug.value)
        event = self._store.create_event(fields)
        logger.info("Created event %s", event.slug)
        return event

    def update_event(self, slug: object, changes: Mapping[str, Any]) -> Event:
        """Apply ``changes`` to an existing event.

        Only the fields present in ``changes`` are normalized; a new title
        regenerates the slug.

        Raises:
            EventNotFoundError: If no event owns ``slug``.
            EventValidationError: If a changed field is invalid.
            SlugConflictError: If the regenerated slug belongs to another event.
        """
        current = self.get_event(slug)
        self._reject_unknown_fields(changes)
        fields = normalize_event_fields(changes, changes.keys())
        if "slug" in fields:
            new_slug = Slug(fields["slug"])
            if self._store.slug_exists(new_slug, exclude=current.slug):
                raise SlugConflictError(new_slug.value)
        event = self._store.update_event(current.slug, fields)
        logger.info("Updated event %s (%s)", event.slug, ", ".join(sorted(changes)))
        return event

    @staticmethod
    def _reject_unknown_fields(payload: Mapping[str, Any]) -> None:
        unknown = sorted(set(payload) - set(EVENT_FIELDS))
        if unknown:
            raise EventValidationError({name: "Unknown field" for name in unknown})
