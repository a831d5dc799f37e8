# autotagger/domain/errors.py
from __future__ import annotations

from typing import Optional


class AutoTagError(RuntimeError):
    """Base class for failures surfaced by the auto-tag pipeline."""


class QueryError(AutoTagError):
    """The media repository lookup failed; nothing was updated."""


class UpdateError(AutoTagError):
    """A single item's partial update failed; later items were not attempted."""

    def __init__(self, message: str, *, item_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.item_id = item_id


class AutoTagCancelled(AutoTagError):
    """Cancellation was requested; updates applied before it still stand."""


class EntityNotFound(AutoTagError, LookupError):
    """No performer/tag/studio with the requested ID."""
