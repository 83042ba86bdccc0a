"""Unit tests for the event management service."""

import pytest

from conftest import candidate
from college_events.errors import (
    EventNotFoundError,
    InvalidDateError,
    InvalidFieldError,
    MissingFieldsError,
    NoFieldsProvidedError,
)
from college_events.models.registration import Registration
from college_events.schemas.event import EventCreate, EventUpdate
from college_events.services import events as service
from college_events.services import registrations


class TestCreateEvent:

    def test_round_trip(self, db):
        """A created event reads back with the same fields and no registrations."""
        created = service.create_event(db, EventCreate(
            eventName="Tech Fest", date="2025-06-01", venue="Hall A",
            description="Annual fest", maxCapacity=2,
        ))

        event, count = service.get_event(db, created.id)
        assert (event.event_name, event.date, event.venue, event.description, event.max_capacity) == (
            "Tech Fest", "2025-06-01", "Hall A", "Annual fest", 2,
        )
        assert event.created_at is not None
        assert count == 0

    def test_defaults(self, db):
        event = service.create_event(db, EventCreate(eventName="Expo", date="2025-07-01", venue="Ground"))
        assert event.description == ""
        assert event.max_capacity == 100

    def test_text_is_sanitized(self, db):
        event = service.create_event(db, EventCreate(eventName=" Rock & Roll ", date="2025-07-01", venue="<Hall>"))
        assert event.event_name == "Rock &amp; Roll"
        assert event.venue == "&lt;Hall&gt;"

    def test_missing_fields(self, db):
        with pytest.raises(MissingFieldsError) as exc_info:
            service.create_event(db, EventCreate(eventName="Expo", venue=" "))
        assert exc_info.value.fields == ["date", "venue"]

    def test_invalid_date(self, db):
        with pytest.raises(InvalidDateError):
            service.create_event(db, EventCreate(eventName="Expo", date="01/07/2025", venue="Ground"))

    def test_lax_date_format_is_accepted(self, db):
        event = service.create_event(db, EventCreate(eventName="Expo", date="2024-13-40", venue="Ground"))
        assert event.date == "2024-13-40"

    def test_negative_capacity_rejected(self, db):
        with pytest.raises(InvalidFieldError):
            service.create_event(db, EventCreate(eventName="Expo", date="2025-07-01", venue="Ground", maxCapacity=-1))


class TestListAndGet:

    def test_list_orders_by_date_with_counts(self, db, make_event):
        later = make_event(event_name="Later", date="2025-09-01")
        sooner = make_event(event_name="Sooner", date="2025-03-01")
        registrations.register_student(db, candidate(later.id))

        rows = service.list_events(db)
        assert [(event.event_name, count) for event, count in rows] == [("Sooner", 0), ("Later", 1)]
        assert rows[0][0].id == sooner.id

    def test_get_unknown_event(self, db):
        with pytest.raises(EventNotFoundError):
            service.get_event(db, 12345)


class TestUpdateEvent:

    def test_partial_update_keeps_other_fields(self, db, make_event):
        event = make_event(event_name="Tech Fest", venue="Hall A", max_capacity=50)
        service.update_event(db, event.id, EventUpdate(venue="Hall B"))

        updated, _ = service.get_event(db, event.id)
        assert updated.venue == "Hall B"
        assert updated.event_name == "Tech Fest"
        assert updated.max_capacity == 50

    def test_update_capacity_and_date(self, db, make_event):
        event = make_event()
        updated = service.update_event(db, event.id, EventUpdate(maxCapacity="75", date="2026-01-15"))
        assert updated.max_capacity == 75
        assert updated.date == "2026-01-15"

    def test_empty_update_rejected(self, db, make_event):
        event = make_event()
        with pytest.raises(NoFieldsProvidedError):
            service.update_event(db, event.id, EventUpdate())

    def test_invalid_date_rejected(self, db, make_event):
        event = make_event(date="2025-06-01")
        with pytest.raises(InvalidDateError):
            service.update_event(db, event.id, EventUpdate(date="June 1st"))
        assert service.get_event(db, event.id)[0].date == "2025-06-01"

    def test_unknown_event(self, db):
        with pytest.raises(EventNotFoundError):
            service.update_event(db, 999, EventUpdate(venue="Hall B"))


class TestDeleteEvent:

    def test_delete_cascades_to_registrations(self, db, make_event):
        event = make_event()
        other = make_event(event_name="Other")
        registrations.register_student(db, candidate(event.id, email="a@x.com", universityRollNumber="R1"))
        registrations.register_student(db, candidate(event.id, email="b@x.com", universityRollNumber="R2"))
        registrations.register_student(db, candidate(other.id, email="a@x.com", universityRollNumber="R1"))

        event_id = event.id
        service.delete_event(db, event_id)

        assert registrations.list_students(db, event_id=event_id) == []
        assert db.query(Registration).count() == 1
        with pytest.raises(EventNotFoundError):
            service.get_event(db, event_id)

    def test_unknown_event(self, db):
        with pytest.raises(EventNotFoundError):
            service.delete_event(db, 404)
