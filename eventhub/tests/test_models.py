"""
Test database models (Event and Booking).
"""
import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from eventhub.database.db import Database
from eventhub.models.bookings import Booking
from eventhub.models.events import Event
from eventhub.services.normalization import normalize_event


def make_event(make_event_data, **overrides) -> Event:
    return Event(**normalize_event(make_event_data(**overrides)))


class TestEventModel:
    """Test the Event model."""

    def test_create_event(self, db_session: Session, make_event_data):
        """Test creating an event."""
        event = make_event(make_event_data, title="Test Event")
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)

        assert event.id is not None
        assert event.slug == "test-event"
        assert event.agenda == ["Welcome", "Talks", "Networking"]
        assert event.tags == ["python", "community"]
        assert event.created_at is not None
        assert event.updated_at is not None

    def test_slug_is_unique(self, db_session: Session, make_event_data):
        """Test the unique index on slug."""
        db_session.add(make_event(make_event_data, title="Same Title"))
        db_session.commit()

        db_session.add(make_event(make_event_data, title="Same  Title!"))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_updated_at_moves_on_update(self, db_session: Session, make_event_data):
        """Test updated_at is refreshed when a row changes."""
        event = make_event(make_event_data)
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        first_update = event.updated_at

        event.venue = "Annex"
        db_session.commit()
        db_session.refresh(event)

        assert event.updated_at >= first_update
        assert event.created_at <= event.updated_at


class TestBookingModel:
    """Test the Booking model."""

    def test_create_booking(self, db_session: Session, make_event_data):
        """Test creating a booking."""
        event = make_event(make_event_data, title="Festival")
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)

        booking = Booking(event_id=event.id, email="guest@example.com")
        db_session.add(booking)
        db_session.commit()
        db_session.refresh(booking)

        assert booking.id is not None
        assert booking.event_id == event.id
        assert booking.created_at is not None

    def test_booking_relationship_with_event(self, db_session: Session, make_event_data):
        """Test the relationship from Booking to Event."""
        event = make_event(make_event_data, title="Conference")
        db_session.add(event)
        db_session.commit()

        booking = Booking(event_id=event.id, email="guest@example.com")
        db_session.add(booking)
        db_session.commit()
        db_session.refresh(booking)

        assert booking.event.title == "Conference"


class TestSchema:
    """Test the indexes created for the tables."""

    def test_indexes(self, database: Database):
        inspector = inspect(database.connect())

        event_indexes = {tuple(ix["column_names"]): ix for ix in inspector.get_indexes("events")}
        assert event_indexes[("slug",)]["unique"]
        assert ("created_at",) in event_indexes

        booking_indexes = {tuple(ix["column_names"]) for ix in inspector.get_indexes("bookings")}
        assert ("event_id",) in booking_indexes
