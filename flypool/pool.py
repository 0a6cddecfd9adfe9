"""
Flyweight Pool
==============

This module provides FlyweightPool, a lookup-or-create pool that hands out one
shared instance per key instead of building a new object for every request.

Objects with the same intrinsic state are replaced by a single shared object
created by the pool's factory. Callers keep the extrinsic state themselves and
pass it in when they use the flyweight.

Usage:
    pool = FlyweightPool(CoffeeFlavor)

    a = pool.get("Cappuccino")
    b = pool.get("Cappuccino")
    assert a is b
    assert pool.count() == 1

The pool is unbounded: entries are created lazily and live as long as the pool
itself. There is no eviction and no expiry.
"""

import contextlib
import logging
import math
import threading
from typing import Any, Callable, Dict, Generic, Hashable, List, TypeVar

from cachetools import Cache

from .errors import InvalidKeyError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class FlyweightPool(Generic[K, V]):
    """
    Pool of shared flyweight instances keyed by their intrinsic state.

    Features:
    - O(1) lookup-or-create
    - Identical (`is`) instance for every request with the same key
    - Count of distinct instances created, independent of request count
    - Thread-safe first access: at most one instance per key under races

    Only requests that return a flyweight are counted in the stats, so
    `requests == hits + created` always holds.

    Args:
        factory: Builds a flyweight from its key. Called once per distinct key.
        validate_keys: Reject None and empty-string keys with InvalidKeyError
        thread_safe: Guard lookup-or-create with a re-entrant lock
    """

    # Sentinel object for "key not pooled"
    _MISSING = object()

    def __init__(
        self,
        factory: Callable[[K], V],
        validate_keys: bool = False,
        thread_safe: bool = True,
    ):
        self._factory = factory
        self._validate_keys = validate_keys

        # Unbounded: Cache never evicts while maxsize is infinite
        self._flyweights: Cache = Cache(maxsize=math.inf)

        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()

        self._created = 0
        self._stats = {
            "requests": 0,
            "hits": 0,
        }

    def _check_key(self, key: Any) -> None:
        if key is None or key == "":
            raise InvalidKeyError(key)

    def get(self, key: K) -> V:
        """
        Return the flyweight for `key`, creating it on first request.

        Args:
            key: Identifies the intrinsic state

        Returns:
            The pooled instance for `key`

        Raises:
            InvalidKeyError: If key validation is enabled and `key` is invalid
        """
        if self._validate_keys:
            self._check_key(key)

        with self._lock:
            flyweight = self._flyweights.get(key, self._MISSING)
            if flyweight is not self._MISSING:
                self._stats["requests"] += 1
                self._stats["hits"] += 1
                return flyweight

            # Factory errors propagate before anything is stored
            flyweight = self._factory(key)
            self._flyweights[key] = flyweight
            self._created += 1
            self._stats["requests"] += 1

            logger.debug("Created flyweight for %r (%d in pool)", key, self._created)
            return flyweight

    def count(self) -> int:
        """Return the number of distinct flyweights created."""
        with self._lock:
            return self._created

    def keys(self) -> List[K]:
        """Return the keys currently pooled."""
        with self._lock:
            return list(self._flyweights.keys())

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about pool requests."""
        with self._lock:
            stats = self._stats.copy()
            stats["created"] = self._created
            stats["hit_rate"] = (
                stats["hits"] / stats["requests"] if stats["requests"] > 0 else 0
            )
            return stats

    def __len__(self) -> int:
        """Return number of pooled flyweights."""
        return self.count()

    def __contains__(self, key: Any) -> bool:
        """Check if a flyweight exists for key without creating one."""
        with self._lock:
            return key in self._flyweights

    def __repr__(self) -> str:
        return f"FlyweightPool(count={self._created})"


def create_pool(
    factory: Callable[[K], V],
    validate_keys: bool = False,
    thread_safe: bool = True,
) -> FlyweightPool[K, V]:
    """
    Create a flyweight pool with specified settings.

    Args:
        factory: Builds a flyweight from its key
        validate_keys: Whether to reject None and empty-string keys
        thread_safe: Whether to guard lookup-or-create with a lock

    Returns:
        Configured FlyweightPool instance
    """
    return FlyweightPool(
        factory,
        validate_keys=validate_keys,
        thread_safe=thread_safe,
    )
