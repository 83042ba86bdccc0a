# -*- coding: utf-8 -*-
"""
Input validation and sanitization helpers.

All functions are pure: they never touch the database and never raise for
bad input, they only report on it.
"""

import html
import re
from typing import Any, Iterable, List, Mapping, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email

MIN_AGE = 16
MAX_AGE = 30
GENDERS = ("male", "female", "other")

# Shape only: 2024-13-40 passes, calendar validity is not checked
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Addresses are checked for shape only. Reserved domains such as .test and
# .local are well-formed, so none are refused by name.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def validate_required(fields: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """Return every required key that is absent, None or blank after trimming."""
    missing = []
    for name in required:
        value = fields.get(name)
        if value is None or str(value).strip() == "":
            missing.append(name)
    return missing


def sanitize_text(value: Any) -> str:
    """Trim and escape markup characters (< > & " ') so stored text renders inert."""
    return html.escape(str(value).strip(), quote=True)


def is_valid_date(value: Any) -> bool:
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_age(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_AGE <= value <= MAX_AGE


def is_valid_gender(value: Any) -> bool:
    return value in GENDERS


def parse_int(value: Any) -> Optional[int]:
    """Parse an integer from a JSON number or a numeric string; None when it isn't one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None
