import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventhub.database.db import Database
from eventhub.models.events import Event
from eventhub.services.errors import DuplicateSlugError, EventNotFoundError
from eventhub.services.normalization import EVENT_FIELDS, normalize_event

logger = logging.getLogger(__name__)


def _newest_first(stmt):
    return stmt.order_by(Event.created_at.desc(), Event.id.desc())


def _get_by_slug(db: Session, slug: str) -> Event:
    event = db.scalar(select(Event).where(Event.slug == slug))
    if event is None:
        raise EventNotFoundError(slug)
    return event


def _commit(db: Session, event: Event) -> Event:
    slug = event.slug
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateSlugError(slug) from exc
    db.refresh(event)
    return event


def list_events(database: Database) -> list[Event]:
    """Return all events, newest first. Storage failures yield an empty list."""
    try:
        with database.session() as db:
            return list(db.scalars(_newest_first(select(Event))).all())
    except Exception:
        logger.exception("Listing events failed; returning an empty list")
        return []


def find_similar_events(database: Database, slug: str) -> list[Event]:
    """Return the other events that share at least one tag with the event at ``slug``.

    An unknown slug or a storage failure yields an empty list.
    """
    try:
        with database.session() as db:
            event = _get_by_slug(db, slug)
            tags = set(event.tags)
            candidates = db.scalars(_newest_first(select(Event).where(Event.id != event.id))).all()
            return [c for c in candidates if tags.intersection(c.tags)]
    except Exception:
        logger.exception("Finding events similar to %r failed; returning an empty list", slug)
        return []


def get_event(database: Database, slug: str) -> Event:
    with database.session() as db:
        return _get_by_slug(db, slug)


def create_event(database: Database, data: dict[str, Any]) -> Event:
    doc = normalize_event({name: data.get(name) for name in EVENT_FIELDS})
    with database.session() as db:
        event = Event(**doc)
        db.add(event)
        event = _commit(db, event)
    logger.info("Created event %s (id=%s)", event.slug, event.id)
    return event


def update_event(database: Database, slug: str, changes: dict[str, Any]) -> Event:
    """Apply ``changes`` to the event at ``slug``, re-normalizing only what differs."""
    with database.session() as db:
        event = _get_by_slug(db, slug)
        current = {name: getattr(event, name) for name in EVENT_FIELDS}
        current["slug"] = event.slug
        changed = {
            name
            for name, value in changes.items()
            if name in EVENT_FIELDS and value != current[name]
        }
        if not changed:
            return event

        merged = {**current, **{name: changes[name] for name in changed}}
        doc = normalize_event(merged, changed)
        for name, value in doc.items():
            if getattr(event, name) != value:
                setattr(event, name, value)
        event = _commit(db, event)
    logger.info("Updated event %s (fields: %s)", event.slug, ", ".join(sorted(changed)))
    return event
