"""Write-time validation and normalization of event fields.

Callers pass the candidate values together with the names of the fields
that changed. Only changed fields are checked and rewritten:

- title: trimmed, and the slug is re-derived from it
- date: parsed and rewritten as ``YYYY-MM-DD``
- time: checked against 24-hour ``HH:MM`` and stored verbatim
- mode: lowercased and restricted to the EventMode values
- agenda/tags: non-empty lists of non-blank strings
- other text fields: trimmed and non-empty
"""

from collections.abc import Iterable, Mapping
from typing import Any

from events.domain.errors import EventValidationError
from events.domain.value_objects import EventDate, EventMode, EventTime, slugify_title

TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "audience",
    "organizer",
)
LIST_FIELDS = ("agenda", "tags")
EVENT_FIELDS = TEXT_FIELDS + ("date", "time", "mode") + LIST_FIELDS


def _required_message(name: str) -> str:
    verb = "are" if name == "tags" else "is"
    return f"{name.capitalize()} {verb} required"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _clean_text(name: str, value: Any) -> str:
    if _is_missing(value):
        raise ValueError(_required_message(name))
    if not isinstance(value, str):
        raise ValueError(f"{name.capitalize()} must be a string")
    return value.strip()


def _clean_list(name: str, value: Any) -> list[str]:
    if value is None:
        raise ValueError(_required_message(name))
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{name.capitalize()} must be a list of strings")
    items = list(value)
    if not items:
        raise ValueError(f"{name.capitalize()} must contain at least one item")
    if not all(isinstance(item, str) and item.strip() for item in items):
        raise ValueError(f"{name.capitalize()} items must be non-empty strings")
    return [item.strip() for item in items]


def normalize_event_fields(values: Mapping[str, Any], changed: Iterable[str]) -> dict[str, Any]:
    """Return a normalized copy of ``values``.

    Fields not named in ``changed`` are copied through untouched. A changed
    title also sets ``slug``.

    Raises:
        EventValidationError: If any changed field is invalid. All field
            problems are reported together.
    """
    changed = set(changed)
    result = dict(values)
    errors: dict[str, str] = {}

    for name in TEXT_FIELDS:
        if name not in changed:
            continue
        try:
            result[name] = _clean_text(name, values.get(name))
        except ValueError as exc:
            errors[name] = str(exc)

    if "title" in changed and "title" not in errors:
        slug = slugify_title(result["title"])
        if slug:
            result["slug"] = slug
        else:
            errors["title"] = "Title must contain at least one letter or digit"

    if "date" in changed:
        raw = values.get("date")
        if _is_missing(raw):
            errors["date"] = _required_message("date")
        else:
            try:
                result["date"] = str(EventDate.parse(raw))
            except ValueError as exc:
                errors["date"] = str(exc)

    if "time" in changed:
        raw = values.get("time")
        if _is_missing(raw):
            errors["time"] = _required_message("time")
        else:
            try:
                result["time"] = str(EventTime(raw))
            except ValueError as exc:
                errors["time"] = str(exc)

    if "mode" in changed:
        raw = values.get("mode")
        if _is_missing(raw):
            errors["mode"] = _required_message("mode")
        else:
            try:
                result["mode"] = EventMode.parse(raw).value
            except ValueError as exc:
                errors["mode"] = str(exc)

    for name in LIST_FIELDS:
        if name not in changed:
            continue
        try:
            result[name] = _clean_list(name, values.get(name))
        except ValueError as exc:
            errors[name] = str(exc)

    if errors:
        raise EventValidationError(errors)
    return result
