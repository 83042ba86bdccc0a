# college_events/models/admin.py
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from college_events.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    sessions = relationship("AdminSessionRecord", back_populates="admin", cascade="all, delete-orphan")


class AdminSessionRecord(Base):
    """Server-side half of an admin login; the cookie only carries the token."""
    __tablename__ = "admin_sessions"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(String(64), unique=True, index=True, nullable=False)
    admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    expires_at = Column(DateTime, nullable=False)

    admin = relationship("Admin", back_populates="sessions")
