from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool

from eventhub.database.db import Database
from eventhub.main import create_app

# Import models so that they register with Base.metadata
from eventhub.models import bookings, events  # noqa: F401

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite://"


def make_database(url: str = SQLALCHEMY_DATABASE_URL) -> Database:
    return Database(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def database():
    """A fresh in-memory database per test; StaticPool keeps it on one connection."""
    db = make_database()
    db.connect()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database: Database):
    with database.session() as session:
        yield session


@pytest.fixture
def client(database: Database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def make_event_data():
    def _make(**overrides: Any) -> dict[str, Any]:
        data = {
            "title": "PyCon Community Meetup",
            "description": "An evening of lightning talks.",
            "overview": "Talks, snacks and networking.",
            "image": "/images/event1.png",
            "venue": "Main Hall",
            "location": "Berlin, Germany",
            "date": "2025-06-13",
            "time": "18:30",
            "mode": "offline",
            "audience": "Python developers",
            "agenda": ["Welcome", "Talks", "Networking"],
            "organizer": "Python Berlin",
            "tags": ["python", "community"],
        }
        data.update(overrides)
        return data

    return _make
