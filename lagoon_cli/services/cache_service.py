"""
Response Cache Service

Time-expiring key/value cache for tokens and API responses.
"""

import hashlib
import json
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Callable, Dict, Optional

from lagoon_cli.logger import CommandLogger, NullLogger
from lagoon_cli.models.cache import CacheEntry


class ResponseCache:
    """
    Expiring cache of opaque string payloads.

    Responsibilities:
    - Expiry evaluated at read time (no eviction)
    - Global bypass flag that turns every read into a miss
    - Atomic replacement of entries in memory and on disk
    """

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        bypass: bool = False,
        clock: Callable[[], float] = time.time,
        logger: Optional[CommandLogger] = None,
    ):
        """
        Initialize cache.

        Args:
            cache_dir: Directory for persisted entries (None keeps them in memory)
            bypass: Report every lookup as a miss
            clock: Source of the current time in seconds
            logger: Logger for cache diagnostics
        """
        self.cache_dir = Path(cache_dir).expanduser() if cache_dir else None
        self.bypass = bypass
        self.clock = clock
        self.logger = logger or NullLogger()
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[CacheEntry]:
        """
        Get a valid entry.

        Args:
            key: Cache identifier

        Returns:
            CacheEntry, or None on miss, expiry or bypass
        """
        if self.bypass:
            return None

        with self._lock:
            entry = self._entries.get(key)

        if entry is None:
            entry = self._read_entry(key)
            if entry is not None:
                with self._lock:
                    self._entries.setdefault(key, entry)

        if entry is None or not entry.is_valid(self.clock()):
            return None
        return entry

    def get_payload(self, key: str) -> Optional[str]:
        """Get the payload of a valid entry."""
        entry = self.get(key)
        return entry.payload if entry else None

    def set(self, key: str, payload: str, ttl_seconds: int) -> CacheEntry:
        """
        Store a payload.

        Args:
            key: Cache identifier
            payload: Opaque string payload
            ttl_seconds: Lifetime; zero or negative is stored but never hit

        Returns:
            The stored entry
        """
        entry = CacheEntry(
            key=key,
            payload=payload,
            expires_at=self.clock() + ttl_seconds,
            ttl_seconds=ttl_seconds,
        )

        with self._lock:
            self._entries[key] = entry
            self._write_entry(entry)

        return entry

    def delete(self, key: str) -> None:
        """Remove an entry if present."""
        with self._lock:
            self._entries.pop(key, None)
            path = self._entry_path(key)
            if path is not None and path.exists():
                path.unlink()

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()
            if self.cache_dir is not None and self.cache_dir.exists():
                for path in self.cache_dir.glob("*.json"):
                    path.unlink()

    def _entry_path(self, key: str) -> Optional[Path]:
        if self.cache_dir is None:
            return None
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{digest}.json"

    def _read_entry(self, key: str) -> Optional[CacheEntry]:
        """Read a persisted entry; unreadable files count as a miss."""
        path = self._entry_path(key)
        if path is None or not path.exists():
            return None

        try:
            with open(path) as f:
                entry = CacheEntry.from_dict(json.load(f))
        except (OSError, ValueError, KeyError, TypeError):
            return None

        return entry if entry.key == key else None

    def _write_entry(self, entry: CacheEntry) -> None:
        """Persist an entry; on failure it stays in memory only."""
        path = self._entry_path(entry.key)
        if path is None:
            return

        try:
            self._replace_file(path, entry)
        except OSError as e:
            self.logger.debug(f"Could not persist cache entry '{entry.key}': {e}")

    @staticmethod
    def _replace_file(path: Path, entry: CacheEntry) -> None:
        """Write an entry via temp file + rename."""
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(entry.to_dict(), f)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def __repr__(self) -> str:
        return f"ResponseCache(dir={self.cache_dir}, bypass={self.bypass})"


# Tokens and API responses share one cache implementation
TokenCache = ResponseCache
