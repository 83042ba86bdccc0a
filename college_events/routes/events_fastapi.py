# -*- coding: utf-8 -*-
"""
FastAPI routes for events. Reads are public, changes need an admin session.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from college_events.auth import get_current_admin
from college_events.database import get_db
from college_events.schemas.event import EventCreate, EventRead, EventUpdate
from college_events.services import events as event_service

router = APIRouter(
    tags=["Events"],
    responses={404: {"description": "Event not found"}},
)

# --- CRUD Endpoints ---

@router.get("")
def read_events(db: Session = Depends(get_db)):
    """
    Lists every event with its registration count, soonest first.
    """
    events = [EventRead.from_row(event, count) for event, count in event_service.list_events(db)]
    return {"success": True, "data": events, "count": len(events)}


@router.get("/{event_id}")
def read_event(event_id: int, db: Session = Depends(get_db)):
    event, count = event_service.get_event(db, event_id)
    return {"success": True, "data": EventRead.from_row(event, count)}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(get_current_admin)])
def create_event(event: EventCreate, db: Session = Depends(get_db)):
    db_event = event_service.create_event(db, event)
    return {
        "success": True,
        "message": "Event created successfully",
        "data": EventRead.from_row(db_event, 0),
    }


@router.put("/{event_id}", dependencies=[Depends(get_current_admin)])
def update_event(event_id: int, event: EventUpdate, db: Session = Depends(get_db)):
    """
    Updates only the fields sent in the body.
    """
    event_service.update_event(db, event_id, event)
    return {"success": True, "message": "Event updated successfully"}


@router.delete("/{event_id}", dependencies=[Depends(get_current_admin)])
def delete_event(event_id: int, db: Session = Depends(get_db)):
    """
    Deletes the event and, with it, every registration for it.
    """
    event_service.delete_event(db, event_id)
    return {"success": True, "message": "Event and all related registrations deleted successfully"}
