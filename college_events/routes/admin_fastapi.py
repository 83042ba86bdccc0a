# -*- coding: utf-8 -*-
"""
Admin session routes and the dashboard.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from college_events import auth
from college_events.database import get_db
from college_events.schemas.admin import AdminStatus, LoginRequest
from college_events.services import reports

router = APIRouter(
    tags=["Admin"],
)


@router.post("/login")
def login(
    credentials: LoginRequest,
    session: auth.AdminSession = Depends(auth.get_admin_session),
    db: Session = Depends(get_db)
):
    username = auth.login(db, session, credentials.username, credentials.password)
    return {"success": True, "message": "Login successful", "data": {"username": username}}


@router.post("/logout")
def logout(
    session: auth.AdminSession = Depends(auth.get_admin_session),
    db: Session = Depends(get_db)
):
    auth.logout(db, session)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/check")
def check(session: auth.AdminSession = Depends(auth.get_admin_session)):
    status = AdminStatus(**auth.check_status(session))
    return {"success": True, **status.model_dump(by_alias=True)}


@router.get("/stats", dependencies=[Depends(auth.get_current_admin)])
def stats(db: Session = Depends(get_db)):
    """
    Totals, per-event registration counts and the five latest registrations.
    """
    return {"success": True, "data": reports.dashboard_stats(db)}
