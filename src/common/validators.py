"""
Input validation and conversion of host parameter types.

Validates action inputs before any request is sent to Brevo: emails,
numeric IDs, number arrays, optional booleans and dates.
"""

import re
import logging
from datetime import date, datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from common.exceptions import ValidationException

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 254

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

VALID_SORT_ORDERS = ("asc", "desc")


def sanitize_string(value: Any, max_length: int = None, field_name: str = "field") -> str:
    """
    Sanitize a string value for safe use in API payloads.

    Strips surrounding whitespace, truncates to ``max_length`` and drops
    control characters other than newline, carriage return and tab.
    """
    if value is None:
        return ""

    str_value = str(value).strip()

    if max_length and len(str_value) > max_length:
        logger.warning(
            f"{field_name} exceeds maximum length {max_length}, truncating from {len(str_value)} chars"
        )
        str_value = str_value[:max_length]

    allowed_control_chars = {'\n', '\r', '\t'}
    return ''.join(
        char for char in str_value
        if ord(char) >= 32 or char in allowed_control_chars
    )


def require_string(value: Any, field_name: str, max_length: int = MAX_NAME_LENGTH) -> str:
    """Sanitize a mandatory string, raising when it ends up empty."""
    cleaned = sanitize_string(value, max_length, field_name)
    if not cleaned:
        raise ValidationException(f"{field_name} is required")
    return cleaned


def validate_email(email: Any, field_name: str = "email") -> str:
    """
    Validate an email address.

    Returns:
        The trimmed address, case preserved

    Raises:
        ValidationException: missing or malformed address
    """
    if not email:
        raise ValidationException(f"{field_name} is required")

    email = sanitize_string(email, MAX_EMAIL_LENGTH, field_name)
    if not EMAIL_PATTERN.match(email):
        raise ValidationException(f"Invalid {field_name} format: {email[:50]}")
    return email


def validate_id(value: Any, field_name: str = "id") -> int:
    """
    Validate a Brevo numeric ID (host numbers may arrive as floats or strings).
    """
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationException(f"{field_name} is required")

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationException(f"{field_name} must be numeric, got {value!r}")

    if not number.is_integer() or number <= 0:
        raise ValidationException(f"{field_name} must be a positive integer, got {value!r}")
    return int(number)


def validate_id_list(values: Any, field_name: str = "ids") -> list[int]:
    """Validate a host number array. A single number is accepted as a one-item list."""
    if values is None or values == "":
        raise ValidationException(f"{field_name} is required")
    if not isinstance(values, (list, tuple)):
        values = [values]
    if not values:
        raise ValidationException(f"{field_name} must not be empty")
    return [validate_id(v, field_name) for v in values]


def validate_optional_int(value: Any, field_name: str, minimum: int = 0) -> Optional[int]:
    """Validate an optional integer such as an offset."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationException(f"{field_name} must be an integer, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationException(f"{field_name} must be an integer, got {value!r}")
    if not number.is_integer() or number < minimum:
        raise ValidationException(f"{field_name} must be an integer >= {minimum}, got {value!r}")
    return int(number)


def validate_optional_bool(value: Any, field_name: str) -> Optional[bool]:
    """Accept booleans and their usual string spellings; None stays None."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValidationException(f"{field_name} must be true or false, got {value!r}")


def validate_sort(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    sort = str(value).strip().lower()
    if sort not in VALID_SORT_ORDERS:
        raise ValidationException(f"sort must be one of {', '.join(VALID_SORT_ORDERS)}, got {value!r}")
    return sort


def resolve_timezone(name: Optional[str]):
    """IANA timezone for naive dates; UTC when unset."""
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValidationException(f"Unknown timezone: {name}")


def parse_datetime(value: Any, tz=timezone.utc) -> datetime:
    """
    Parse a host date value into an aware datetime.

    Accepts datetimes, dates, ISO-8601 strings and epoch seconds. Naive
    values are taken to be in ``tz``.

    Raises:
        ValidationException: the value cannot be read as a date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValidationException("Invalid date format provided")
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise ValidationException("Invalid date format provided")
    else:
        raise ValidationException("Invalid date format provided")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def to_brevo_datetime(value: datetime) -> str:
    """Format an aware datetime as UTC ISO-8601 with milliseconds, e.g. 2024-05-01T08:30:00.000Z."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
