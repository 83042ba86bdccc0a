# -*- coding: utf-8 -*-
"""
Event management: listing with occupancy, create, partial update and
cascading delete.
"""

import logging
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from college_events.errors import (
    EventNotFoundError,
    InvalidDateError,
    InvalidFieldError,
    MissingFieldsError,
    NoFieldsProvidedError,
)
from college_events.models.event import Event
from college_events.models.registration import Registration
from college_events.schemas.event import EventCreate, EventUpdate
from college_events.validators import is_valid_date, parse_int, sanitize_text, validate_required

DEFAULT_CAPACITY = 100
REQUIRED_FIELDS = ("eventName", "date", "venue")


def _parse_capacity(value) -> int:
    capacity = parse_int(value)
    if capacity is None or capacity < 0:
        raise InvalidFieldError("maxCapacity", "maxCapacity must be a non-negative integer")
    return capacity


def _with_counts(db: Session):
    return (
        db.query(Event, func.count(Registration.id))
        .outerjoin(Registration, Registration.event_id == Event.id)
        .group_by(Event.id)
    )


def list_events(db: Session) -> List[Tuple[Event, int]]:
    """Every event with its registration count, soonest date first."""
    return _with_counts(db).order_by(Event.date.asc(), Event.id.asc()).all()


def get_event(db: Session, event_id: int) -> Tuple[Event, int]:
    row = _with_counts(db).filter(Event.id == event_id).first()
    if row is None:
        raise EventNotFoundError(event_id)
    return row


def create_event(db: Session, payload: EventCreate) -> Event:
    missing = validate_required(payload.model_dump(by_alias=True), REQUIRED_FIELDS)
    if missing:
        raise MissingFieldsError(missing)

    date = sanitize_text(payload.date)
    if not is_valid_date(date):
        raise InvalidDateError()

    max_capacity = DEFAULT_CAPACITY
    if payload.max_capacity is not None:
        max_capacity = _parse_capacity(payload.max_capacity)

    db_event = Event(
        event_name=sanitize_text(payload.event_name),
        date=date,
        venue=sanitize_text(payload.venue),
        description=sanitize_text(payload.description) if payload.description is not None else "",
        max_capacity=max_capacity,
    )
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    logging.info(f"Event {db_event.id} '{db_event.event_name}' created")
    return db_event


def update_event(db: Session, event_id: int, payload: EventUpdate) -> Event:
    """
    Apply only the fields present in the payload.

    Raises EventNotFoundError, InvalidDateError when a supplied date is
    malformed, or NoFieldsProvidedError when nothing would change.
    """
    db_event = db.query(Event).filter(Event.id == event_id).first()
    if db_event is None:
        raise EventNotFoundError(event_id)

    supplied = {key: value for key, value in payload.model_dump(exclude_unset=True).items() if value is not None}

    updates = {}
    if "event_name" in supplied:
        updates["event_name"] = sanitize_text(supplied["event_name"])
    if "date" in supplied:
        date = sanitize_text(supplied["date"])
        if not is_valid_date(date):
            raise InvalidDateError()
        updates["date"] = date
    if "venue" in supplied:
        updates["venue"] = sanitize_text(supplied["venue"])
    if "description" in supplied:
        updates["description"] = sanitize_text(supplied["description"])
    if "max_capacity" in supplied:
        updates["max_capacity"] = _parse_capacity(supplied["max_capacity"])

    if not updates:
        raise NoFieldsProvidedError()

    for key, value in updates.items():
        setattr(db_event, key, value)
    db.commit()
    db.refresh(db_event)
    return db_event


def delete_event(db: Session, event_id: int) -> None:
    """Delete an event together with every registration for it."""
    db_event = db.query(Event).filter(Event.id == event_id).first()
    if db_event is None:
        raise EventNotFoundError(event_id)
    db.delete(db_event)
    db.commit()
    logging.info(f"Event {event_id} and its registrations deleted")
