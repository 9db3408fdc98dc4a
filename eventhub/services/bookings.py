import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from eventhub.database.db import Database
from eventhub.models.bookings import Booking
from eventhub.models.events import Event
from eventhub.services.errors import EventNotFoundError, ReferencedEventMissingError
from eventhub.services.normalization import validate_email

logger = logging.getLogger(__name__)


def create_booking(database: Database, *, event_id: int, email: str) -> Booking:
    """
    Register ``email`` for the event ``event_id``.
    The existence check and the insert run in one transaction, so a rejected
    booking never leaves a row behind.
    """
    email = validate_email(email)

    with database.session() as db:
        with db.begin():
            booking = _create_booking_in_transaction(db, event_id, email)
        db.refresh(booking)

    logger.info("Booked event %s for booking id=%s", event_id, booking.id)
    return booking


def _create_booking_in_transaction(db: Session, event_id: int, email: str) -> Booking:
    """Internal function to create booking within a transaction."""
    exists = db.scalar(select(Event.id).where(Event.id == event_id))
    if exists is None:
        raise ReferencedEventMissingError(event_id)

    booking = Booking(event_id=event_id, email=email)
    db.add(booking)
    db.flush()  # gets booking.id
    return booking


def list_bookings_for_event(database: Database, slug: str) -> list[Booking]:
    with database.session() as db:
        event_id = db.scalar(select(Event.id).where(Event.slug == slug))
        if event_id is None:
            raise EventNotFoundError(slug)
        stmt = (
            select(Booking)
            .where(Booking.event_id == event_id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        return list(db.scalars(stmt).all())
