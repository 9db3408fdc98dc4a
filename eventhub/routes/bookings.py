from fastapi import APIRouter, Depends, HTTPException

from eventhub.database.db import Database, get_database
from eventhub.routes.events import validation_error
from eventhub.schemas.bookings import BookingOut, BookRequest
from eventhub.services.bookings import create_booking
from eventhub.services.errors import (
    DatabaseConnectionError,
    FieldValidationError,
    ReferencedEventMissingError,
)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingOut)
def book_event(payload: BookRequest, database: Database = Depends(get_database)):
    try:
        return create_booking(database, event_id=payload.event_id, email=payload.email)
    except FieldValidationError as e:
        raise validation_error(e)
    except ReferencedEventMissingError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DatabaseConnectionError as e:
        raise HTTPException(status_code=503, detail=str(e))
