from fastapi import APIRouter, Depends, HTTPException

from eventhub.database.db import Database, get_database
from eventhub.schemas.bookings import BookingOut
from eventhub.schemas.events import EventCreate, EventOut, EventUpdate
from eventhub.services.bookings import list_bookings_for_event
from eventhub.services.errors import (
    DatabaseConnectionError,
    DuplicateSlugError,
    EventNotFoundError,
    FieldValidationError,
)
from eventhub.services.events import (
    create_event,
    find_similar_events,
    get_event,
    list_events,
    update_event,
)

router = APIRouter(prefix="/events", tags=["events"])


def validation_error(e: FieldValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"field": e.field, "message": e.message})


@router.get("", response_model=list[EventOut])
def all_events(database: Database = Depends(get_database)):
    return list_events(database)


@router.post("", response_model=EventOut)
def submit_event(payload: EventCreate, database: Database = Depends(get_database)):
    try:
        return create_event(database, payload.model_dump())
    except FieldValidationError as e:
        raise validation_error(e)
    except DuplicateSlugError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except DatabaseConnectionError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/{slug}", response_model=EventOut)
def event_detail(slug: str, database: Database = Depends(get_database)):
    try:
        return get_event(database, slug)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except DatabaseConnectionError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.patch("/{slug}", response_model=EventOut)
def edit_event(slug: str, payload: EventUpdate, database: Database = Depends(get_database)):
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    try:
        return update_event(database, slug, changes)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except FieldValidationError as e:
        raise validation_error(e)
    except DuplicateSlugError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except DatabaseConnectionError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/{slug}/similar", response_model=list[EventOut])
def similar_events(slug: str, database: Database = Depends(get_database)):
    return find_similar_events(database, slug)


@router.get("/{slug}/bookings", response_model=list[BookingOut])
def event_bookings(slug: str, database: Database = Depends(get_database)):
    try:
        return list_bookings_for_event(database, slug)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except DatabaseConnectionError as e:
        raise HTTPException(status_code=503, detail=str(e))
