# college_events/schemas/admin.py
from datetime import datetime
from typing import List, Optional

from college_events.schemas.base import CamelModel, CommandModel


class LoginRequest(CommandModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminStatus(CamelModel):
    is_logged_in: bool
    username: Optional[str] = None


class EventStat(CamelModel):
    id: int
    event_name: str
    max_capacity: int
    registration_count: int


class RecentRegistration(CamelModel):
    id: int
    full_name: str
    email: str
    college_name: str
    event_name: str
    registered_at: datetime


class DashboardStats(CamelModel):
    total_events: int
    upcoming_events: int
    total_students: int
    today_registrations: int
    per_event_counts: List[EventStat] = []
    recent_registrations: List[RecentRegistration] = []
