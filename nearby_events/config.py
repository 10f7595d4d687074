"""Centralised configuration for nearby_events.

Environment variables are loaded once; query tuning constants live here so
the repository can fall back to them when no override is passed.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Store connection (from environment)
# ---------------------------------------------------------------------------
MONGODB_URI: str | None = os.getenv("MONGODB_URI")
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "events")

# ---------------------------------------------------------------------------
# Events collection settings
# ---------------------------------------------------------------------------
EVENTS_COLLECTION: str = "events"
# 300 miles in meters
SEARCH_RADIUS_METERS: int = 300 * 1609
# Return no more than this many events per query.
EVENT_LIMIT: int = 25

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # connection
    "MONGODB_URI",
    "MONGODB_DATABASE",
    # events collection
    "EVENTS_COLLECTION",
    "SEARCH_RADIUS_METERS",
    "EVENT_LIMIT",
]
