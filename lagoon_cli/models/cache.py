"""
Cache Models

Entries stored by the response cache.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """A cached payload with its expiry timestamp."""

    key: str
    payload: str
    expires_at: float
    ttl_seconds: int

    def is_valid(self, now: float) -> bool:
        """Entries with a non-positive TTL never count as a hit."""
        return self.ttl_seconds > 0 and now < self.expires_at

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "key": self.key,
            "payload": self.payload,
            "expires_at": self.expires_at,
            "ttl_seconds": self.ttl_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CacheEntry":
        """Create from dictionary."""
        return cls(
            key=str(data["key"]),
            payload=str(data["payload"]),
            expires_at=float(data["expires_at"]),
            ttl_seconds=int(data["ttl_seconds"]),
        )

    def __repr__(self) -> str:
        return f"CacheEntry(key={self.key}, expires_at={self.expires_at:.0f})"
