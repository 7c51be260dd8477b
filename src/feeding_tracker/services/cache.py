"""Time-bounded cache for catalog snapshots."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for catalog snapshots."""

    def get(self, key: str) -> object | None:
        """Return a cached snapshot if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a snapshot for ``ttl_seconds``."""


@dataclass
class _Snapshot:
    value: object
    expires_at: datetime


class InMemoryCache(Cache):
    """Per-process snapshot cache."""

    def __init__(self) -> None:
        self._snapshots: dict[str, _Snapshot] = {}

    def get(self, key: str) -> object | None:
        snapshot = self._snapshots.get(key)
        if snapshot is None:
            return None
        if datetime.now(tz=UTC) >= snapshot.expires_at:
            del self._snapshots[key]
            return None
        return snapshot.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl_seconds)
        self._snapshots[key] = _Snapshot(value=value, expires_at=expires_at)

