# -*- coding: utf-8 -*-
"""
Domain errors for event management and student registration.

Every error carries a code, a message that is safe to show to the user and
the HTTP status the API layer answers with.
"""

from enum import Enum
from typing import List


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_DATE = "INVALID_DATE"
    NO_FIELDS_PROVIDED = "NO_FIELDS_PROVIDED"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    NO_DATA = "NO_DATA"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    STORE_ERROR = "STORE_ERROR"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    status_code = 400

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


# --- Validation (400) ---

class ValidationError(DomainError):
    """Missing or malformed input; the client can fix it and retry."""

    status_code = 400


class MissingFieldsError(ValidationError):
    def __init__(self, fields: List[str]) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELDS,
            message="Missing required fields: " + ", ".join(fields),
        )
        self.fields = list(fields)


class InvalidFieldError(ValidationError):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(code=ErrorCode.INVALID_FIELD, message=reason)
        self.field = field


class InvalidDateError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format. Use YYYY-MM-DD",
        )


class NoFieldsProvidedError(ValidationError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.NO_FIELDS_PROVIDED, message="No fields to update")


# --- Authorization (401) ---

class AuthorizationError(DomainError):
    """The caller has no authenticated admin session."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized. Admin login required.") -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)


class InvalidCredentialsError(AuthorizationError):
    """Unknown username or wrong password; both read the same to the caller."""

    def __init__(self) -> None:
        DomainError.__init__(
            self,
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Invalid username or password",
        )


# --- Not found (404) ---

class NotFoundError(DomainError):
    status_code = 404


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id=None) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")
        self.event_id = event_id


class StudentNotFoundError(NotFoundError):
    def __init__(self, student_id=None) -> None:
        super().__init__(code=ErrorCode.STUDENT_NOT_FOUND, message="Student not found")
        self.student_id = student_id


class NoDataError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.NO_DATA, message="No data to export")


# --- Conflict (409) ---

class ConflictError(DomainError):
    status_code = 409


class DuplicateRegistrationError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message="You have already registered for this event with the same email or roll number",
        )


# --- Capacity (400) ---

class CapacityError(DomainError):
    status_code = 400


class CapacityExceededError(CapacityError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.CAPACITY_EXCEEDED, message="Event registration is full")


# --- Store (500) ---

class StoreError(DomainError):
    """Data access failure. The message stays generic; details go to the log."""

    status_code = 500

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.STORE_ERROR, message="Server error occurred")
