"""Read-only access to the MongoDB `events` collection.

Example document::

    {
        "location": {"type": "Point", "coordinates": [-93.8549133, 41.6157869]},
        "title": {"en-US": "Waukee Coffee Hours", "es-MX": "Waukee Coffee Hours"},
        "published": True,
        "date": datetime(2019, 4, 24, 15, 0),
        "startTime": datetime(2019, 4, 24, 15, 0),
        "endTime": datetime(2019, 4, 24, 18, 0),
        "timezone": "America/Chicago",
        "publicAddress": "1025 E Hickman Rd, Waukee IA 50263",
        "city": "Waukee",
        "state": "IA",
        "zipcode": "50263",
        "highPriority": False,
        "mobilizeId": 88773,
        "rsvpLink": "https://events.example.com/event/88773/",
        "rsvpCtaOverride": None,
    }
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Tuple

from pymongo import ASCENDING, DESCENDING, GEOSPHERE
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..clients.mongodb_client import get_database
from ..config import EVENT_LIMIT, EVENTS_COLLECTION, SEARCH_RADIUS_METERS
from ..models.event import EventDocument
from ..utils.datetime_utils import get_current_timestamp

logger = logging.getLogger(__name__)

LOCATION_FIELD: str = "location"

_INDEXES: List[List[Tuple[str, Any]]] = [
    [("startTime", ASCENDING), ("highPriority", DESCENDING)],
    [("mobilizeId", ASCENDING)],
    [(LOCATION_FIELD, GEOSPHERE), ("highPriority", DESCENDING)],
]


class EventRepository:
    """Index setup and read queries for upcoming events.

    Parameters
    ----------
    db : pymongo.database.Database
        Handle to the database holding the events collection.
    collection_name : str, default ``"events"``
    search_radius : int, default 482700
        Radius in meters used by :meth:`list_near_point`.
    event_limit : int, default 25
        Maximum number of documents returned per query.
    published_only : bool, default False
        When set, every query also requires ``published: true``.
    """

    def __init__(
        self,
        db: Database,
        *,
        collection_name: str = EVENTS_COLLECTION,
        search_radius: int = SEARCH_RADIUS_METERS,
        event_limit: int = EVENT_LIMIT,
        published_only: bool = False,
    ) -> None:
        self.collection = db[collection_name]
        self.search_radius = search_radius
        self.event_limit = event_limit
        self.published_only = published_only

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def initialize(self) -> List[str]:
        """Ensure the indexes used by the queries below exist.

        Safe to call on every process start; MongoDB treats re-creating an
        identical index as a no-op. Returns the index names.
        """
        names: List[str] = []
        try:
            for keys in _INDEXES:
                names.append(self.collection.create_index(keys))
        except PyMongoError as exc:
            logger.error("Failed to create indexes on '%s': %s", self.collection.name, exc)
            raise
        logger.info("Ensured %d indexes on '%s': %s", len(names), self.collection.name, names)
        return names

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_upcoming(self) -> List[EventDocument]:
        """Upcoming events, high-priority first, then soonest first."""
        cursor = (
            self.collection.find(self._upcoming_filter(get_current_timestamp()))
            .sort([("highPriority", DESCENDING), ("startTime", ASCENDING)])
            .limit(self.event_limit)
        )
        events = list(cursor)
        logger.info("Found %d upcoming events", len(events))
        return events

    def list_upcoming_high_priority_and_nearby(
        self, origin_lon: float, origin_lat: float
    ) -> List[EventDocument]:
        """High-priority events by proximity, followed by the rest by proximity.

        Each tier is capped at ``event_limit`` independently, so up to twice
        that many events may be returned. Distance is not capped.
        """
        now = get_current_timestamp()
        high_priority = self._find_near(now, origin_lon, origin_lat, high_priority=True)
        nearby = self._find_near(now, origin_lon, origin_lat, high_priority=False)
        logger.info(
            "Found %d high-priority and %d nearby events around (%s, %s)",
            len(high_priority),
            len(nearby),
            origin_lon,
            origin_lat,
        )
        return high_priority + nearby

    def list_near_point(self, origin_lon: float, origin_lat: float) -> List[EventDocument]:
        """Upcoming events within ``search_radius`` meters, nearest first."""
        events = self._find_near(
            get_current_timestamp(),
            origin_lon,
            origin_lat,
            max_distance=self.search_radius,
        )
        logger.info(
            "Found %d events within %dm of (%s, %s)",
            len(events),
            self.search_radius,
            origin_lon,
            origin_lat,
        )
        return events

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _upcoming_filter(self, now: datetime) -> Dict[str, Any]:
        query: Dict[str, Any] = {"startTime": {"$gte": now}}
        if self.published_only:
            query["published"] = True
        return query

    def _find_near(
        self,
        now: datetime,
        origin_lon: float,
        origin_lat: float,
        *,
        high_priority: bool | None = None,
        max_distance: int | None = None,
    ) -> List[EventDocument]:
        # $near sorts by distance itself, so no explicit sort is applied
        near: Dict[str, Any] = {
            "$geometry": {"type": "Point", "coordinates": [origin_lon, origin_lat]},
        }
        if max_distance is not None:
            near["$maxDistance"] = max_distance

        query = self._upcoming_filter(now)
        if high_priority is not None:
            query["highPriority"] = high_priority
        query[LOCATION_FIELD] = {"$near": near}

        return list(self.collection.find(query).limit(self.event_limit))


_repository: EventRepository | None = None


def get_event_repository() -> EventRepository:
    """Return a singleton :class:`EventRepository` on the configured database."""
    global _repository
    if _repository is None:
        _repository = EventRepository(get_database())
    return _repository

__all__ = ["EventRepository", "get_event_repository", "LOCATION_FIELD"]
