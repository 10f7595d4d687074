"""Repositories wrapping MongoDB collections."""

from .event_repository import EventRepository, get_event_repository  # noqa: F401

__all__ = ["EventRepository", "get_event_repository"]
