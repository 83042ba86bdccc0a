# college_events/models/registration.py
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from college_events.database import Base


class Registration(Base):
    """A student's signup for one event."""

    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(100), nullable=False, index=True)
    email = Column(String(150), nullable=False, index=True)
    contact_number = Column(String(20), nullable=False)
    college_name = Column(String(200), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String(10), nullable=False)
    university_roll_number = Column(String(50), nullable=False, index=True)
    batch = Column(String(50), nullable=False)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    registered_at = Column(DateTime, nullable=False, default=datetime.now, index=True)

    event = relationship("Event", back_populates="registrations")

    __table_args__ = (
        # One registration per email and per roll number within an event
        UniqueConstraint("event_id", "email", name="uq_registration_event_email"),
        UniqueConstraint("event_id", "university_roll_number", name="uq_registration_event_roll"),
        CheckConstraint("age BETWEEN 16 AND 30", name="check_registration_age_range"),
        CheckConstraint("gender IN ('male', 'female', 'other')", name="check_registration_gender"),
    )

    # Read-only views of the joined event, used by the response schemas
    @property
    def event_name(self):
        return self.event.event_name if self.event else None

    @property
    def event_date(self):
        return self.event.date if self.event else None

    @property
    def venue(self):
        return self.event.venue if self.event else None

    def __repr__(self) -> str:
        return f"<Registration(id={self.id}, event={self.event_id}, email={self.email!r})>"
