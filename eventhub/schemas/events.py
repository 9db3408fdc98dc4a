from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


# ---------- Event ----------
class EventCreate(BaseModel):
    title: str = Field(max_length=200)
    description: str
    overview: str
    image: str = Field(max_length=500)
    venue: str = Field(max_length=200)
    location: str = Field(max_length=200)
    date: str = Field(description="Any common date format; stored as YYYY-MM-DD")
    time: str = Field(description="24-hour or 12-hour time; stored as HH:mm")
    mode: str = Field(description="online, offline or hybrid")
    audience: str = Field(max_length=200)
    agenda: list[str]
    organizer: str = Field(max_length=200)
    tags: list[str]


class EventUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    overview: Optional[str] = None
    image: Optional[str] = Field(default=None, max_length=500)
    venue: Optional[str] = Field(default=None, max_length=200)
    location: Optional[str] = Field(default=None, max_length=200)
    date: Optional[str] = None
    time: Optional[str] = None
    mode: Optional[str] = None
    audience: Optional[str] = Field(default=None, max_length=200)
    agenda: Optional[list[str]] = None
    organizer: Optional[str] = Field(default=None, max_length=200)
    tags: Optional[list[str]] = None


class EventOut(BaseModel):
    id: int
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ---------- Featured (static demo list) ----------
class FeaturedEvent(BaseModel):
    id: str
    title: str
    description: str
    date: str
    time: str
    location: str
    image: str
    category: Literal["conference", "hackathon", "meetup"]
    registration_link: str
