"""Public event feeds: run a repository query, then strip internal fields."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..repositories.event_repository import EventRepository, get_event_repository
from ..services.transformer import transform_events

logger = logging.getLogger(__name__)

PublicFeed = List[Dict[str, Any]]


def upcoming_feed(repository: Optional[EventRepository] = None) -> PublicFeed:
    """Upcoming events with priority events surfaced first."""
    repository = repository or get_event_repository()
    feed = transform_events(repository.list_upcoming())
    logger.info("Serving %d upcoming events", len(feed))
    return feed


def priority_and_nearby_feed(
    origin_lon: float,
    origin_lat: float,
    repository: Optional[EventRepository] = None,
) -> PublicFeed:
    """Priority events near the origin, then everything else near it."""
    repository = repository or get_event_repository()
    feed = transform_events(
        repository.list_upcoming_high_priority_and_nearby(origin_lon, origin_lat)
    )
    logger.info("Serving %d priority/nearby events", len(feed))
    return feed


def near_point_feed(
    origin_lon: float,
    origin_lat: float,
    repository: Optional[EventRepository] = None,
) -> PublicFeed:
    """Events within the search radius of the origin, nearest first."""
    repository = repository or get_event_repository()
    feed = transform_events(repository.list_near_point(origin_lon, origin_lat))
    logger.info("Serving %d events near (%s, %s)", len(feed), origin_lon, origin_lat)
    return feed

__all__ = ["upcoming_feed", "priority_and_nearby_feed", "near_point_feed"]
