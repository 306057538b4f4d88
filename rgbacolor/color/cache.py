"""Bounded memoization of parsed color strings.

``ColorCache`` maps an input string verbatim to the tuple ``parse`` produced
for it.  Tuples are immutable, so one entry can be handed to every caller
that asks for the same string.

Size is capped at ``max_size``.  The default ``ApproxQuarter`` policy keeps
no per-entry access information: when a miss arrives on a full cache it
walks the entries in insertion order and drops every fourth one (positions
0, 4, 8, ...), roughly 25% of the contents.  The dropped quarter is *not*
the least recently used quarter; it is an arbitrary slice of what is left.
``StrictLRU`` is available for callers that want textbook behavior and
evicts a single least recently used entry per miss.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import Lock

from rgbacolor.configurations.configuration_constants import (
    CacheDefaults,
    EvictionPolicy,
    validate_eviction_policy,
    validate_max_size,
)

from .named import NamedColorResolver
from .parser import parse
from .types import ColorTuple

logger = logging.getLogger(__name__)


class ColorCache:
    """Memoizing front end for ``parse``.

    :param max_size: Maximum number of entries held after any lookup.
    :param eviction_policy: One of ``EvictionPolicy.ApproxQuarter`` or
        ``EvictionPolicy.StrictLRU``.
    :param resolver: Named color resolver forwarded to ``parse``.
    :raises ValueError: If *max_size* is below 1 or the policy is unknown.
    """

    def __init__(
        self,
        max_size: int = CacheDefaults.MaxSize,
        eviction_policy: str = CacheDefaults.Policy,
        resolver: NamedColorResolver | None = None,
    ) -> None:
        self._max_size = validate_max_size(max_size)
        self._eviction_policy = validate_eviction_policy(eviction_policy)
        self._resolver = resolver
        self._entries: OrderedDict[str, ColorTuple] = OrderedDict()
        self.lock = Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def eviction_policy(self) -> str:
        return self._eviction_policy

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, s: object) -> bool:
        return s in self._entries

    def lookup(self, s: str) -> ColorTuple:
        """Return the parsed tuple for *s*, parsing and storing it on a miss.

        The returned tuple is shared with other callers.  Parse failures
        propagate and are not stored, so a later lookup parses again.

        :raises InvalidColorFormat: If *s* is not a valid color.
        """
        with self.lock:
            color = self._entries.get(s)
            if color is not None:
                if self._eviction_policy == EvictionPolicy.StrictLRU:
                    self._entries.move_to_end(s)
                return color
            # A miss on a full cache evicts before parsing, whether or not
            # the parse succeeds.
            if len(self._entries) >= self._max_size:
                self._evict()

        # Parse outside the lock; a concurrent miss on the same string
        # may parse twice, the second insert simply overwrites.
        color = parse(s, self._resolver)
        logger.debug(f"Color cache miss for {s!r} -> {color}")

        with self.lock:
            # Other misses may have filled the freed slots meanwhile.
            if s not in self._entries and len(self._entries) >= self._max_size:
                self._evict()
            self._entries[s] = color
        return color

    def _evict(self) -> None:
        """Make room for one entry.  Caller must hold ``self.lock``."""
        if self._eviction_policy == EvictionPolicy.StrictLRU:
            key, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted least recently used color {key!r}")
            return

        doomed = [key for i, key in enumerate(self._entries) if i & 3 == 0]
        for key in doomed:
            del self._entries[key]
        logger.debug(
            f"Evicted {len(doomed)} color cache entries, {len(self._entries)} remain"
        )
