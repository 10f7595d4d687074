"""Utility functions for the nearby events project.

Re-exports the datetime helpers so that imports like
`from ..utils import get_current_timestamp` work as expected.
"""

from .datetime_utils import get_current_timestamp, to_iso_string  # noqa: F401

__all__ = [
    "get_current_timestamp",
    "to_iso_string",
]
