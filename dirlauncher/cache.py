#===============================================================================
#  DirLauncher | cache.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Small in-memory TTL cache used to memoize platform probes (binary lookups,
#  WSL queries, per-launcher verdicts) so repeated launches stay cheap.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional

from .constants import CACHE_TTL_SECONDS

logger = logging.getLogger("dirlauncher.Cache")

_MISSING = object()


@dataclass
class CacheEntry:
    value: Any
    timestamp: float


class TTLCache:
    """Key/value store whose entries expire after ``ttl`` seconds.

    Producers run outside the lock, so two threads missing the same key may
    both compute it; the last write wins.
    """

    def __init__(self, ttl: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._store: Dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def _lookup(self, key: Hashable, ttl: float) -> Any:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self.misses += 1
                return _MISSING
            if self._clock() - entry.timestamp > ttl:
                del self._store[key]
                self.misses += 1
                logger.debug("Cache expired for key: %s", key)
                return _MISSING
            self.hits += 1
            return entry.value

    def peek(self, key: Hashable, default: Any = None) -> Any:
        value = self._lookup(key, self.ttl)
        return default if value is _MISSING else value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._store[key] = CacheEntry(value=value, timestamp=self._clock())
        logger.debug("Cached result for key: %s", key)

    def get(self, key: Hashable, producer: Callable[[], Any], ttl: Optional[float] = None) -> Any:
        """Return the cached value for key, computing it with producer on a miss."""
        value = self._lookup(key, self.ttl if ttl is None else ttl)
        if value is not _MISSING:
            logger.debug("Using cached result for key: %s", key)
            return value
        value = producer()
        self.set(key, value)
        return value

    def invalidate(self, key: Optional[Hashable] = None) -> None:
        """Drop one key, or everything when key is None."""
        with self._lock:
            if key is None:
                self._store.clear()
            else:
                self._store.pop(key, None)
        logger.debug("Cache invalidated: %s", "all" if key is None else key)

    def invalidate_prefix(self, prefix: str) -> None:
        with self._lock:
            for k in [k for k in self._store if isinstance(k, str) and k.startswith(prefix)]:
                del self._store[k]
        logger.debug("Cache invalidated for prefix: %s", prefix)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._store),
                "hits": self.hits,
                "misses": self.misses,
                "ttlSeconds": self.ttl,
                "keys": sorted(str(k) for k in self._store),
            }
