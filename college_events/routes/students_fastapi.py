# -*- coding: utf-8 -*-
"""
FastAPI routes for student registrations.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from college_events.auth import get_current_admin
from college_events.database import get_db
from college_events.schemas.registration import RegistrationConfirmation, RegistrationCreate, StudentRead
from college_events.services import registrations as registration_service

router = APIRouter(
    tags=["Students"],
    responses={404: {"description": "Student not found"}},
)


@router.get("")
def read_students(
    event_id: Optional[int] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Lists registrations, newest first. Filter by event and/or search by
    name, email or roll number.
    """
    students = [
        StudentRead.model_validate(student)
        for student in registration_service.list_students(db, event_id=event_id, search=search)
    ]
    return {"success": True, "data": students, "count": len(students)}


@router.get("/{student_id}")
def read_student(student_id: int, db: Session = Depends(get_db)):
    student = registration_service.get_student(db, student_id)
    return {"success": True, "data": StudentRead.model_validate(student)}


@router.post("", status_code=status.HTTP_201_CREATED)
def register_student(registration: RegistrationCreate, db: Session = Depends(get_db)):
    """
    Registers a student for an event, subject to capacity and duplicate checks.
    """
    db_registration, event_name = registration_service.register_student(db, registration)
    return {
        "success": True,
        "message": f"Registration successful! Welcome to {event_name}",
        "data": RegistrationConfirmation(
            id=db_registration.id,
            full_name=db_registration.full_name,
            email=db_registration.email,
            event_name=event_name,
        ),
    }


@router.delete("/{student_id}", dependencies=[Depends(get_current_admin)])
def delete_student(student_id: int, db: Session = Depends(get_db)):
    registration_service.delete_student(db, student_id)
    return {"success": True, "message": "Registration deleted successfully"}
