# -*- coding: utf-8 -*-
"""
Dashboard aggregates and CSV export of registrations.
"""

import csv
import io
import logging
import re
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from college_events.errors import NoDataError
from college_events.models.event import Event
from college_events.models.registration import Registration
from college_events.schemas.admin import DashboardStats, EventStat, RecentRegistration

RECENT_LIMIT = 5

EXPORT_HEADERS = [
    "Full Name", "Email", "Contact Number", "College Name", "Age", "Gender",
    "University Roll Number", "Batch", "Event", "Event Date", "Venue", "Registered At",
]


def dashboard_stats(db: Session, today: Optional[date] = None) -> DashboardStats:
    """
    Totals for the admin dashboard.

    "Upcoming" events are dated today or later; "today's registrations" were
    registered between midnight and midnight of the current local day.
    """
    today = today or date.today()
    day_start = datetime.combine(today, time.min)
    day_end = day_start + timedelta(days=1)

    total_events = db.query(func.count(Event.id)).scalar()
    upcoming_events = db.query(func.count(Event.id)).filter(Event.date >= today.isoformat()).scalar()
    total_students = db.query(func.count(Registration.id)).scalar()
    today_registrations = db.query(func.count(Registration.id)).filter(
        Registration.registered_at >= day_start,
        Registration.registered_at < day_end,
    ).scalar()

    registration_count = func.count(Registration.id).label("registration_count")
    per_event = (
        db.query(Event.id, Event.event_name, Event.max_capacity, registration_count)
        .outerjoin(Registration, Registration.event_id == Event.id)
        .group_by(Event.id, Event.event_name, Event.max_capacity)
        .order_by(registration_count.desc(), Event.id.asc())
        .all()
    )

    recent = (
        db.query(Registration, Event.event_name)
        .join(Event, Registration.event_id == Event.id)
        .order_by(Registration.registered_at.desc(), Registration.id.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    return DashboardStats(
        total_events=total_events,
        upcoming_events=upcoming_events,
        total_students=total_students,
        today_registrations=today_registrations,
        per_event_counts=[
            EventStat(id=row.id, event_name=row.event_name, max_capacity=row.max_capacity,
                      registration_count=row.registration_count)
            for row in per_event
        ],
        recent_registrations=[
            RecentRegistration(
                id=registration.id,
                full_name=registration.full_name,
                email=registration.email,
                college_name=registration.college_name,
                event_name=event_name,
                registered_at=registration.registered_at,
            )
            for registration, event_name in recent
        ],
    )


def _export_to_csv(headers: List[str], rows: List[List[object]]) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(headers)
    writer.writerows(rows)
    # utf-8-sig prepends the BOM spreadsheet programs look for
    return output.getvalue().encode("utf-8-sig")


def export_filename(event_name: Optional[str] = None, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    filename = "student_registrations"
    if event_name:
        filename += "_" + re.sub(r"[^a-zA-Z0-9]", "_", event_name)
    return filename + "_" + now.strftime("%Y-%m-%d_%H-%M-%S") + ".csv"


def export_registrations(
    db: Session,
    event_id: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Tuple[str, bytes]:
    """
    Build the CSV export, newest registration first.

    Returns (filename, content). Raises NoDataError instead of producing a
    file with only a header row.
    """
    query = db.query(Registration, Event).join(Event, Registration.event_id == Event.id)
    if event_id:
        query = query.filter(Registration.event_id == event_id)
    results = query.order_by(Registration.registered_at.desc(), Registration.id.desc()).all()

    if not results:
        raise NoDataError()

    rows = [
        [
            registration.full_name,
            registration.email,
            registration.contact_number,
            registration.college_name,
            registration.age,
            registration.gender,
            registration.university_roll_number,
            registration.batch,
            event.event_name,
            event.date,
            event.venue,
            registration.registered_at.strftime("%Y-%m-%d %H:%M:%S"),
        ]
        for registration, event in results
    ]

    event_name = results[0][1].event_name if event_id else None
    filename = export_filename(event_name, now)
    logging.info(f"Exported {len(rows)} registrations to {filename}")
    return filename, _export_to_csv(EXPORT_HEADERS, rows)
