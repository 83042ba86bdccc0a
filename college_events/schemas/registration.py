# college_events/schemas/registration.py
from datetime import datetime
from typing import Optional

from college_events.schemas.base import CamelModel, CommandModel


class RegistrationCreate(CommandModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    contact_number: Optional[str] = None
    college_name: Optional[str] = None
    age: Optional[str] = None
    gender: Optional[str] = None
    university_roll_number: Optional[str] = None
    batch: Optional[str] = None
    event_id: Optional[str] = None


class RegistrationConfirmation(CamelModel):
    id: int
    full_name: str
    email: str
    event_name: str


class StudentRead(CamelModel):
    id: int
    full_name: str
    email: str
    contact_number: str
    college_name: str
    age: int
    gender: str
    university_roll_number: str
    batch: str
    event_id: int
    event_name: Optional[str] = None
    event_date: Optional[str] = None
    venue: Optional[str] = None
    registered_at: datetime
