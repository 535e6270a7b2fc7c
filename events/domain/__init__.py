from events.domain.models import Event
from events.domain.normalization import EVENT_FIELDS, normalize_event_fields
from events.domain.value_objects import EventDate, EventMode, EventTime, Slug, slugify_title

__all__ = [
    "Event",
    "Slug",
    "EventDate",
    "EventTime",
    "EventMode",
    "EVENT_FIELDS",
    "normalize_event_fields",
    "slugify_title",
]
