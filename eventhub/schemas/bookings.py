from datetime import datetime

from pydantic import BaseModel, Field


class BookRequest(BaseModel):
    event_id: int = Field(ge=1)
    email: str = Field(max_length=320)


class BookingOut(BaseModel):
    id: int
    event_id: int
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
