# college_events/models/event.py
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from college_events.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    event_name = Column(String(200), nullable=False)
    # Kept as the submitted YYYY-MM-DD text; ISO text sorts like a date
    date = Column(String(10), nullable=False, index=True)
    venue = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    max_capacity = Column(Integer, nullable=False, default=100)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    registrations = relationship(
        "Registration",
        back_populates="event",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("max_capacity >= 0", name="check_event_capacity_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.event_name!r}, date={self.date})>"
