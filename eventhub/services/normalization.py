"""Normalization and validation of event and booking fields.

Everything here is pure: the service layer calls these functions before it
hands a row to the database, so they can be tested without storage.
"""

import re
from datetime import datetime, timezone
from typing import Any, Iterable

from dateutil import parser as date_parser

from eventhub.services.errors import BookingValidationError, EventValidationError

EVENT_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
EVENT_LIST_FIELDS = ("agenda", "tags")
EVENT_FIELDS = EVENT_STRING_FIELDS + EVENT_LIST_FIELDS

EVENT_MODES = ("online", "offline", "hybrid")

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_24H = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_TIME_12H = re.compile(r"^(\d{1,2}):([0-5]\d)\s*(AM|PM)$", re.IGNORECASE)
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Pairs of defaults for dateutil. Fields missing from the input are filled
# from the default, so they come out different in the two parses.
_DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))
_TIME_DEFAULTS = (datetime(1970, 1, 1, 0, 0), datetime(1971, 2, 2, 1, 0))


def _parse_twice(s: str, defaults: tuple[datetime, datetime], field: str, message: str):
    try:
        return tuple(date_parser.parse(s, default=default) for default in defaults)
    except (ValueError, OverflowError) as exc:
        raise EventValidationError(field, message) from exc


def slugify(title: str) -> str:
    slug = title.lower().strip()
    slug = re.sub(r"[\"'`]", "", slug)
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """Return ``value`` as a ``YYYY-MM-DD`` calendar date.

    ISO dates pass through untouched. Anything else goes through dateutil and
    the UTC calendar fields of the result are used; naive values count as UTC.
    """
    s = value.strip()
    if _ISO_DATE.match(s):
        return s
    parsed, check = _parse_twice(s, _DATE_DEFAULTS, "date", "Invalid date")
    if parsed.date() != check.date():
        raise EventValidationError("date", "Date must include year, month and day")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d}"


def normalize_time(value: str) -> str:
    """Return ``value`` as a 24-hour ``HH:mm`` time."""
    s = value.strip()

    m24 = _TIME_24H.match(s)
    if m24:
        return f"{int(m24.group(1)):02d}:{m24.group(2)}"

    m12 = _TIME_12H.match(s)
    if m12:
        hour = int(m12.group(1))
        if hour < 1 or hour > 12:
            raise EventValidationError("time", "Invalid time")
        hour = hour % 12
        if m12.group(3).upper() == "PM":
            hour += 12
        return f"{hour:02d}:{m12.group(2)}"

    # Last resort parse: a time of day and nothing else
    parsed, check = _parse_twice(s, _TIME_DEFAULTS, "time", "Invalid time")
    if parsed.date() != _TIME_DEFAULTS[0].date() or check.date() != _TIME_DEFAULTS[1].date():
        raise EventValidationError("time", "Invalid time")
    if parsed.hour != check.hour:
        raise EventValidationError("time", "Invalid time")
    return f"{parsed.hour:02d}:{parsed.minute:02d}"


def clean_list(values: Iterable[Any]) -> list[str]:
    return [s for s in (str(v).strip() for v in values) if s]


def _require_string(fields: dict[str, Any], name: str) -> None:
    value = fields.get(name)
    if not isinstance(value, str) or not value.strip():
        raise EventValidationError(name, f"{name} is required")


def normalize_event(fields: dict[str, Any], changed: Iterable[str] | None = None) -> dict[str, Any]:
    """Return a normalized copy of a full event field mapping.

    ``changed`` names the fields that differ from what is stored; ``None``
    means a new event, where every field counts as changed. Only changed
    fields are re-normalized, so a stored slug survives until the title
    itself changes.

    Raises:
        EventValidationError: naming the first field that fails.
    """
    changed = set(EVENT_FIELDS if changed is None else changed)
    doc = dict(fields)

    for name in EVENT_STRING_FIELDS:
        if isinstance(doc.get(name), str):
            doc[name] = doc[name].strip()

    if "title" in changed:
        if not doc.get("title"):
            raise EventValidationError("title", "title is required")
        doc["slug"] = slugify(doc["title"])
        if not doc["slug"]:
            raise EventValidationError("title", "title must contain letters or digits")

    if "date" in changed and doc.get("date"):
        doc["date"] = normalize_date(doc["date"])
    if "time" in changed and doc.get("time"):
        doc["time"] = normalize_time(doc["time"])

    for name in EVENT_LIST_FIELDS:
        if name in changed and isinstance(doc.get(name), (list, tuple)):
            doc[name] = clean_list(doc[name])

    if "mode" in changed and doc.get("mode"):
        doc["mode"] = doc["mode"].lower()
        if doc["mode"] not in EVENT_MODES:
            raise EventValidationError("mode", f"mode must be one of {', '.join(EVENT_MODES)}")

    for name in EVENT_STRING_FIELDS:
        _require_string(doc, name)
    if not isinstance(doc.get("agenda"), list) or not doc["agenda"]:
        raise EventValidationError("agenda", "agenda is required")
    if not isinstance(doc.get("tags"), list) or not doc["tags"]:
        raise EventValidationError("tags", "tags are required")

    return doc


def validate_email(value: str) -> str:
    email = value.strip().lower()
    if not _EMAIL.match(email):
        raise BookingValidationError("email", "Invalid email format")
    return email
