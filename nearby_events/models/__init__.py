"""Domain models used across the project."""

from .event import EventDocument, PublicEvent  # noqa: F401

__all__ = ["PublicEvent", "EventDocument"]
