# -*- coding: utf-8 -*-
"""
Student registration: admission against capacity and duplicate rules, plus
the lookups and deletion used by the admin screens.
"""

import logging
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from college_events.errors import (
    CapacityExceededError,
    DomainError,
    DuplicateRegistrationError,
    EventNotFoundError,
    InvalidFieldError,
    MissingFieldsError,
    StudentNotFoundError,
)
from college_events.models.event import Event
from college_events.models.registration import Registration
from college_events.schemas.registration import RegistrationCreate
from college_events.validators import (
    is_valid_age,
    is_valid_email,
    is_valid_gender,
    parse_int,
    sanitize_text,
    validate_required,
)

REQUIRED_FIELDS = (
    "fullName", "email", "contactNumber", "collegeName",
    "age", "gender", "universityRollNumber", "batch", "eventId",
)


@dataclass(frozen=True)
class RegistrationData:
    """A registration that passed field validation and is ready for admission."""

    full_name: str
    email: str
    contact_number: str
    college_name: str
    age: int
    gender: str
    university_roll_number: str
    batch: str
    event_id: Optional[int]


def validate_registration(payload: RegistrationCreate) -> RegistrationData:
    """
    Check presence and format of every field and return the cleaned values.

    Raises MissingFieldsError listing all blank fields, otherwise
    InvalidFieldError for the first failing check (email, age, gender).
    """
    missing = validate_required(payload.model_dump(by_alias=True), REQUIRED_FIELDS)
    if missing:
        raise MissingFieldsError(missing)

    email = payload.email.strip().lower()
    age = parse_int(payload.age)
    gender = sanitize_text(payload.gender)

    if not is_valid_email(email):
        raise InvalidFieldError("email", "Invalid email format")
    if not is_valid_age(age):
        raise InvalidFieldError("age", "Age must be between 16 and 30")
    if not is_valid_gender(gender):
        raise InvalidFieldError("gender", "Invalid gender value")

    return RegistrationData(
        full_name=sanitize_text(payload.full_name),
        email=email,
        contact_number=sanitize_text(payload.contact_number),
        college_name=sanitize_text(payload.college_name),
        age=age,
        gender=gender,
        university_roll_number=sanitize_text(payload.university_roll_number),
        batch=sanitize_text(payload.batch),
        # A non-numeric id can never match an event
        event_id=parse_int(payload.event_id),
    )


def register_student(db: Session, payload: RegistrationCreate) -> Tuple[Registration, str]:
    """
    Admit a student to an event.

    The event row is locked for the duration of the checks so that two
    requests cannot both take the last seat; the unique constraints on
    (event_id, email) and (event_id, university_roll_number) back up the
    duplicate check. Returns the new registration and the event name.
    """
    data = validate_registration(payload)

    try:
        event = None
        if data.event_id is not None:
            event = db.query(Event).filter(Event.id == data.event_id).with_for_update().first()
        if event is None:
            raise EventNotFoundError(data.event_id)

        occupancy = db.query(func.count(Registration.id)).filter(Registration.event_id == event.id).scalar()
        if occupancy >= event.max_capacity:
            raise CapacityExceededError()

        duplicate = db.query(Registration.id).filter(
            Registration.event_id == event.id,
            or_(
                Registration.email == data.email,
                Registration.university_roll_number == data.university_roll_number,
            ),
        ).first()
        if duplicate is not None:
            raise DuplicateRegistrationError()

        event_name = event.event_name
        registration = Registration(**asdict(data))
        db.add(registration)
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent identical submission
        db.rollback()
        logging.info(f"Duplicate registration rejected by constraint for event {data.event_id}")
        raise DuplicateRegistrationError()
    except DomainError as e:
        db.rollback()
        logging.info(f"Registration rejected for event {data.event_id}: {e}")
        raise

    db.refresh(registration)
    logging.info(f"Registration {registration.id} admitted to event {registration.event_id}")
    return registration, event_name


def list_students(db: Session, event_id: Optional[int] = None, search: Optional[str] = None) -> List[Registration]:
    """Registrations with their event, newest first, optionally filtered by event and search text."""
    query = db.query(Registration).options(joinedload(Registration.event))
    if event_id:
        query = query.filter(Registration.event_id == event_id)
    if search:
        term = f"%{sanitize_text(search)}%"
        query = query.filter(or_(
            Registration.full_name.ilike(term),
            Registration.email.ilike(term),
            Registration.university_roll_number.ilike(term),
        ))
    return query.order_by(Registration.registered_at.desc(), Registration.id.desc()).all()


def get_student(db: Session, student_id: int) -> Registration:
    registration = (
        db.query(Registration)
        .options(joinedload(Registration.event))
        .filter(Registration.id == student_id)
        .first()
    )
    if registration is None:
        raise StudentNotFoundError(student_id)
    return registration


def delete_student(db: Session, student_id: int) -> None:
    registration = db.query(Registration).filter(Registration.id == student_id).first()
    if registration is None:
        raise StudentNotFoundError(student_id)
    db.delete(registration)
    db.commit()
    logging.info(f"Registration {student_id} deleted")
