"""
Shared helpers for reading raw records.
Raw records may use camelCase (legacy web client) or snake_case keys and
carry dates as ISO strings.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from billtrack.domain.models.base import ValidationError


_MISSING = object()


def pick(raw: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in the record."""
    for key in keys:
        value = raw.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return default


def has_any(raw: Dict[str, Any], *keys: str) -> bool:
    return any(key in raw for key in keys)


def parse_datetime(value: Any, field: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"Invalid datetime value: {value!r}", field)
    raise ValidationError(f"Invalid datetime value: {value!r}", field)


def parse_date(value: Any, field: str) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and len(value.strip()) == 10:
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(f"Invalid date value: {value!r}", field)
    parsed = parse_datetime(value, field)
    return parsed.date() if parsed else None


def parse_number(value: Any, field: str) -> float:
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise ValidationError(f"Invalid numeric value: {value!r}", field)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid numeric value: {value!r}", field)
