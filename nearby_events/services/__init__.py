"""Service layer modules grouping business logic by concern."""

from .transformer import transform_events  # noqa: F401

__all__ = ["transform_events"]
