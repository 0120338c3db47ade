"""In-memory response cache with per-entry expiry."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float  # epoch seconds


class TtlCache:
    """URL-keyed cache. Expiry is checked lazily on lookup."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str, now: float) -> CacheEntry | None:
        """Return the live entry for key, or None when missing or expired."""
        entry = self._entries.get(key)
        if entry is not None and entry.expires_at > now:
            return entry
        return None

    def set(self, key: str, value: Any, expires_at: float) -> None:
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def entry(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def purge_expired(self, now: float) -> int:
        """Drop expired entries. Returns the number removed."""
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
