from __future__ import annotations

import math
import re
from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def parse_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field_name} must be a number")
    return number


def require_positive_number(value: Any, field_name: str) -> float:
    number = parse_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive number")
    return number


def require_non_negative_number(value: Any, field_name: str) -> float:
    number = parse_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_positive_int(value: Any, field_name: str) -> int:
    number = parse_number(value, field_name)
    if number <= 0 or number != int(number):
        raise ValidationError(f"{field_name} must be a positive whole number")
    return int(number)


def require_iso_date(value: Any, field_name: str) -> date:
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def optional_iso_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return require_iso_date(value, field_name)


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_phone(value: str) -> str:
    """Strip everything that is not a digit."""
    return re.sub(r"\D", "", value or "")


def matches_search(term: Optional[str], *fields: Any) -> bool:
    """Case-insensitive substring match of `term` against any field."""
    if not term:
        return True
    needle = term.strip().lower()
    return any(needle in str(f).lower() for f in fields if f is not None)
