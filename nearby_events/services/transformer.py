"""Strip internal fields from event documents before they leave the service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..models.event import EventDocument, PublicEvent

logger = logging.getLogger(__name__)


def transform_events(events: Optional[Iterable[EventDocument]]) -> List[Dict[str, Any]]:
    """Map raw *events* to public records, keeping only allow-listed fields.

    ``None`` or an empty sequence yields ``[]``. Missing optional fields come
    back as ``None`` rather than raising.
    """
    if not events:
        return []

    public = [PublicEvent.from_document(event).to_dict() for event in events]
    logger.debug("Transformed %d events for public output", len(public))
    return public

__all__ = ["transform_events"]
