"""Django ORM implementation of the EventStore."""

import logging
from collections.abc import Mapping
from typing import Any

from django.core.exceptions import ValidationError
from django.db import DataError, IntegrityError, transaction

from events import models
from events.domain import Event, EventDate, EventMode, EventTime, Slug
from events.domain.errors import EventNotFoundError, SlugConflictError, StorageValidationError
from events.stores.connection import ensure_connection
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def to_domain(row: models.Event) -> Event:
    """Convert an ORM row into a domain Event."""
    return Event(
        slug=Slug(row.slug),
        title=row.title,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=EventDate.parse(row.date),
        time=EventTime(row.time),
        mode=EventMode(row.mode),
        audience=row.audience,
        agenda=tuple(row.agenda),
        organizer=row.organizer,
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using the Django ORM."""

    def get_event_by_slug(self, slug: Slug) -> Event | None:
        ensure_connection()
        try:
            row = models.Event.objects.filter(slug=slug.value).first()
        except (ValidationError, DataError) as exc:
            logger.warning("Storage rejected lookup for slug %r: %s", slug.value, exc)
            raise StorageValidationError() from exc
        if row is None:
            return None
        return to_domain(row)

    def slug_exists(self, slug: Slug, exclude: Slug | None = None) -> bool:
        ensure_connection()
        queryset = models.Event.objects.filter(slug=slug.value)
        if exclude is not None:
            queryset = queryset.exclude(slug=exclude.value)
        return queryset.exists()

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        ensure_connection()
        row = models.Event(**fields)
        try:
            with transaction.atomic():
                row.save()
        except IntegrityError as exc:
            raise SlugConflictError(row.slug) from exc
        return to_domain(row)

    def update_event(self, slug: Slug, fields: Mapping[str, Any]) -> Event:
        ensure_connection()
        try:
            row = models.Event.objects.get(slug=slug.value)
        except models.Event.DoesNotExist as exc:
            raise EventNotFoundError() from exc
        for name, value in fields.items():
            setattr(row, name, value)
        try:
            with transaction.atomic():
                row.save()
        except IntegrityError as exc:
            raise SlugConflictError(row.slug) from exc
        return to_domain(row)
