# -*- coding: utf-8 -*-
"""
Admin authentication with server-side sessions.

The signed session cookie carries only an opaque token. The login state
itself lives in the admin_sessions table, so logout revokes the token for
every copy of the cookie. The session is never a module-level global: every
request resolves its own AdminSession, and the service functions receive it
explicitly.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import MutableMapping, Optional

from fastapi import Depends, Request
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from college_events import config
from college_events.database import get_db
from college_events.errors import AuthorizationError, ErrorCode, InvalidCredentialsError, ValidationError
from college_events.models.admin import Admin, AdminSessionRecord
from college_events.validators import validate_required

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


class AdminSession:
    """Admin login state for one client, keyed by the token in its session cookie."""

    TOKEN = "admin_session_token"

    def __init__(self, state: MutableMapping, db: Session) -> None:
        self._state = state
        self._db = db

    def _record(self) -> Optional[AdminSessionRecord]:
        token = self._state.get(self.TOKEN)
        if not isinstance(token, str) or not token:
            return None
        record = self._db.query(AdminSessionRecord).filter(AdminSessionRecord.token == token).first()
        if record is None or record.expires_at <= datetime.now():
            return None
        return record

    @property
    def is_authenticated(self) -> bool:
        return self._record() is not None

    @property
    def admin_id(self) -> Optional[int]:
        record = self._record()
        return record.admin_id if record else None

    @property
    def username(self) -> Optional[str]:
        record = self._record()
        return record.admin.username if record else None

    def establish(self, admin: Admin) -> None:
        """Issue a fresh token for the admin. The caller commits."""
        self.clear()
        now = datetime.now()
        token = secrets.token_urlsafe(32)
        self._db.add(AdminSessionRecord(
            token=token,
            admin_id=admin.id,
            created_at=now,
            expires_at=now + timedelta(seconds=config.SESSION_MAX_AGE),
        ))
        self._state[self.TOKEN] = token

    def clear(self) -> None:
        """Revoke the token server-side and empty the cookie. The caller commits."""
        token = self._state.get(self.TOKEN)
        if isinstance(token, str) and token:
            self._db.query(AdminSessionRecord).filter(AdminSessionRecord.token == token).delete()
        # An emptied session makes SessionMiddleware expire the cookie
        self._state.clear()


# --- Operations ---

def get_admin(db: Session, username: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.username == username).first()


def purge_expired_sessions(db: Session) -> int:
    return db.query(AdminSessionRecord).filter(AdminSessionRecord.expires_at <= datetime.now()).delete()


def login(db: Session, session: AdminSession, username: Optional[str], password: Optional[str]) -> str:
    """
    Check the credential pair and mark the session as authenticated.

    Unknown usernames and wrong passwords raise the same InvalidCredentialsError.
    Returns the admin username.
    """
    if validate_required({"username": username, "password": password}, ("username", "password")):
        raise ValidationError(ErrorCode.MISSING_FIELDS, "Username and password are required")

    # Looked up as stored; the password is verified exactly as typed
    username = username.strip()
    admin = get_admin(db, username)
    if admin is None or not verify_password(password, admin.hashed_password):
        logging.warning(f"Failed login attempt for username: {username}")
        raise InvalidCredentialsError()

    admin.last_login_at = datetime.now()
    purge_expired_sessions(db)
    session.establish(admin)
    db.commit()

    logging.info(f"Admin '{admin.username}' logged in")
    return admin.username


def logout(db: Session, session: AdminSession) -> None:
    """Revoke the admin session. Safe to call on an anonymous session."""
    username = session.username
    session.clear()
    db.commit()
    if username:
        logging.info(f"Admin '{username}' logged out")


def check_status(session: AdminSession) -> dict:
    return {"is_logged_in": session.is_authenticated, "username": session.username}


def require_authenticated(session: AdminSession) -> None:
    if not session.is_authenticated:
        raise AuthorizationError()


# --- FastAPI dependencies ---

def get_admin_session(request: Request, db: Session = Depends(get_db)) -> AdminSession:
    return AdminSession(request.session, db)


def get_current_admin(session: AdminSession = Depends(get_admin_session)) -> AdminSession:
    """
    Guard for admin-only routes. Aborts the request with 401 before the route
    runs when the cookie carries no live session token.
    """
    require_authenticated(session)
    return session
