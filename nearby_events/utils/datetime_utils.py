"""Utility functions for working with dates and times."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

__all__ = [
    "get_current_timestamp",
    "to_iso_string",
]

logger = logging.getLogger(__name__)


def get_current_timestamp() -> datetime:
    """Return the current UTC datetime with micro-second precision.

    This object can be passed directly into a MongoDB filter where it will be
    compared as a BSON Date.
    """
    return datetime.now(tz=timezone.utc)


def _coerce_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    return None


def to_iso_string(value: Any) -> str | None:
    """Format *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Accepts a :class:`datetime` (naive values are treated as UTC, which is
    how pymongo decodes BSON dates), an ISO-8601 string or epoch milliseconds.
    Empty or unparseable input yields ``None``.
    """
    if not value:
        return None

    try:
        parsed = _coerce_datetime(value)
    except (ValueError, OverflowError, OSError):
        logger.debug("Could not parse date value %r", value)
        return None
    if parsed is None:
        logger.debug("Unsupported date value type: %s", type(value).__name__)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%Y-%m-%dT%H:%M:%S.") + f"{parsed.microsecond // 1000:03d}Z"
