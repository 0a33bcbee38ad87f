"""Timestamp encoding utilities.

Optional instants are stored and sent as ISO-8601 text with an explicit
UTC offset, e.g. ``2024-01-15T10:30:00+01:00``. Absent values stay ``None``
in both directions.
"""

from datetime import datetime, timezone
from typing import Optional

from dateutil.parser import isoparse

from supplyledger.domain.errors import ValidationError, invalid_instant


def decode_optional_instant(text: Optional[str]) -> Optional[datetime]:
    """Parse canonical timestamp text into a timezone-aware datetime.

    Args:
        text: ISO-8601 timestamp, or None

    Returns:
        Datetime carrying a fixed ``timezone`` equal to the parsed offset,
        or None if ``text`` is None

    Raises:
        ValidationError: If text is malformed or has no UTC offset
    """
    if text is None:
        return None

    if text != text.strip():
        raise ValidationError(invalid_instant(text))

    try:
        parsed = isoparse(text)
    except (ValueError, OverflowError) as e:
        raise ValidationError(invalid_instant(text)) from e

    offset = parsed.utcoffset()
    if offset is None:
        raise ValidationError(invalid_instant(text))

    # Normalize dateutil's tzutc/tzoffset to the stdlib fixed-offset type
    return parsed.replace(tzinfo=timezone(offset))


def encode_optional_instant(instant: Optional[datetime]) -> Optional[str]:
    """Render a timezone-aware datetime as canonical timestamp text.

    Raises:
        ValidationError: If the datetime is naive
    """
    if instant is None:
        return None
    if instant.utcoffset() is None:
        raise ValidationError(f"Timestamp {instant.isoformat()} has no UTC offset")
    return instant.isoformat()
