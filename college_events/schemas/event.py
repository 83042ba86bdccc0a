# college_events/schemas/event.py
from datetime import datetime
from typing import Optional

from college_events.schemas.base import CamelModel, CommandModel


class EventCreate(CommandModel):
    event_name: Optional[str] = None
    date: Optional[str] = None
    venue: Optional[str] = None
    description: Optional[str] = None
    max_capacity: Optional[str] = None


class EventUpdate(CommandModel):
    event_name: Optional[str] = None
    date: Optional[str] = None
    venue: Optional[str] = None
    description: Optional[str] = None
    max_capacity: Optional[str] = None


class EventRead(CamelModel):
    id: int
    event_name: str
    date: str
    venue: str
    description: Optional[str] = ""
    max_capacity: int
    registration_count: int = 0
    created_at: datetime

    @classmethod
    def from_row(cls, event, registration_count: int) -> "EventRead":
        return cls.model_validate(event).model_copy(update={"registration_count": registration_count})
