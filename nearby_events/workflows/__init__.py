"""Feed workflows composing repository queries with the public transformer."""

from .event_feed import near_point_feed, priority_and_nearby_feed, upcoming_feed  # noqa: F401

__all__ = ["upcoming_feed", "priority_and_nearby_feed", "near_point_feed"]
