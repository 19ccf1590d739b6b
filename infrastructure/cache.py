"""In-process LRU caching."""
from __future__ import annotations
from typing import Any, Hashable, Optional
from collections import OrderedDict
from utils.exceptions import ConfigurationError


class LRUCache:
    """Simple LRU (Least Recently Used) cache implementation."""
    def __init__(self, capacity: int = 1000):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(
                f"Cache capacity must be a positive integer, got {capacity!r}",
                details={'capacity': capacity}
            )
        self.capacity = capacity
        self.cache: OrderedDict = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __contains__(self, key: Hashable) -> bool:
        return key in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value from cache."""
        if key in self.cache:
            self.hits += 1
            # Move to end (most recently used)
            self.cache.move_to_end(key)
            return self.cache[key]
        else:
            self.misses += 1
            return None

    def set(self, key: Hashable, value: Any):
        """Set value in cache."""
        if key in self.cache:
            self.cache.move_to_end(key)
        elif len(self.cache) >= self.capacity:
            # Remove least recently used item
            self.cache.popitem(last=False)
            self.evictions += 1

        self.cache[key] = value

    def delete(self, key: Hashable):
        """Delete key from cache."""
        if key in self.cache:
            del self.cache[key]

    def clear(self):
        """Clear all cache."""
        self.cache.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def stats(self) -> dict:
        """Get cache statistics."""
        total = self.hits + self.misses
        hit_rate = self.hits / total if total > 0 else 0.0
        return {
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
            'hit_rate': hit_rate,
            'size': len(self.cache),
            'capacity': self.capacity
        }
