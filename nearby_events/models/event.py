"""Definition of the public-facing `PublicEvent` dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..utils.datetime_utils import to_iso_string

# Raw event documents as returned by pymongo
EventDocument = Dict[str, Any]


def _coordinates(location: Any) -> Tuple[Optional[float], Optional[float]]:
    """Return ``(longitude, latitude)`` from a GeoJSON point, or ``(None, None)``."""
    if not isinstance(location, dict):
        return None, None
    coordinates = location.get("coordinates")
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
        return None, None
    return coordinates[0], coordinates[1]


@dataclass(slots=True)
class PublicEvent:
    """The subset of an event document that is safe to return to clients."""

    title: Any = None
    date: Optional[str] = None
    start_time: Any = None
    end_time: Any = None
    timezone: Optional[str] = None
    public_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    rsvp_link: Optional[str] = None
    rsvp_cta_override: Optional[str] = None

    @classmethod
    def from_document(cls, document: EventDocument) -> "PublicEvent":
        """Build a public record from a raw event *document*."""
        longitude, latitude = _coordinates(document.get("location"))
        return cls(
            title=document.get("title"),
            date=to_iso_string(document.get("date")),
            start_time=document.get("startTime"),
            end_time=document.get("endTime"),
            timezone=document.get("timezone"),
            public_address=document.get("publicAddress"),
            city=document.get("city"),
            state=document.get("state"),
            zipcode=document.get("zipcode"),
            latitude=latitude,
            longitude=longitude,
            rsvp_link=document.get("rsvpLink"),
            rsvp_cta_override=document.get("rsvpCtaOverride"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the record keyed the way API clients expect (camelCase)."""
        return {
            "title": self.title,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "timezone": self.timezone,
            "publicAddress": self.public_address,
            "city": self.city,
            "state": self.state,
            "zipcode": self.zipcode,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "rsvpLink": self.rsvp_link,
            "rsvpCtaOverride": self.rsvp_cta_override,
        }

__all__ = ["PublicEvent", "EventDocument"]
