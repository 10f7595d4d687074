"""Convenience re-exports for singleton SDK accessors."""

from .mongodb_client import get_mongo_client  # noqa: F401
from .mongodb_client import get_database  # noqa: F401

__all__ = [
    "get_mongo_client",
    "get_database",
]
