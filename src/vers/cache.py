"""Bounded memoization cache for parsed versions."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Generic, Optional, TypeVar

from .constants import Constants

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BoundedCache(Generic[T]):
    """Fixed-capacity key/value cache that wipes itself when full.

    Reads go straight to the underlying dict; writes are serialized by a lock.
    Eviction is deliberately crude: once ``max_entries`` keys are stored the
    next write clears everything and starts over.
    """

    def __init__(self, max_entries: int = Constants.VERSION_CACHE_MAX_ENTRIES):
        """Initialize the cache.

        Args:
            max_entries: Number of entries stored before the cache is wiped.
        """
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._cache: Dict[str, T] = {}
        self._lock = threading.Lock()
        self._wipes = 0

    def get(self, key: str) -> Optional[T]:
        """Return the cached value or None."""
        return self._cache.get(key)

    def set(self, key: str, value: T) -> None:
        """Store a value, wiping the cache first if it is at capacity."""
        with self._lock:
            if len(self._cache) >= self._max_entries and key not in self._cache:
                logger.debug(
                    "Version cache reached capacity (%s); clearing", self._max_entries
                )
                self._cache = {}
                self._wipes += 1
            self._cache[key] = value

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self._cache = {}

    def __len__(self) -> int:
        return len(self._cache)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "total_entries": len(self._cache),
            "max_entries": self._max_entries,
            "wipes": self._wipes,
        }
