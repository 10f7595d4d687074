"""Top-level package for the nearby-events project.

Exposes the repository and transformer so callers can do
`from nearby_events import EventRepository, transform_events`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("nearby-events")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .repositories import EventRepository, get_event_repository  # convenience re-export
from .services import transform_events  # convenience re-export

__all__ = ["EventRepository", "get_event_repository", "transform_events", "__version__"]
