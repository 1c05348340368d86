"""Configuration for reading repository state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RepoVersionConfig:
    """Tunables for parsing refs.

    Attributes:
        short_hash_length: Number of leading hash characters kept in ``short_hash``.
        hash_lengths: Accepted full hash lengths (40 for SHA-1, 64 for SHA-256 repos).
    """

    short_hash_length: int = 7
    hash_lengths: tuple[int, ...] = (40, 64)

    def __post_init__(self) -> None:
        if not 4 <= self.short_hash_length <= 40:
            raise ValueError(
                f"short_hash_length must be in [4, 40], got {self.short_hash_length}"
            )
        if not self.hash_lengths:
            raise ValueError("hash_lengths must not be empty")
        if any(length < self.short_hash_length for length in self.hash_lengths):
            raise ValueError(
                f"hash_lengths {self.hash_lengths} must all be >= "
                f"short_hash_length ({self.short_hash_length})"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "short_hash_length": self.short_hash_length,
            "hash_lengths": list(self.hash_lengths),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RepoVersionConfig:
        try:
            return cls(
                short_hash_length=int(data.get("short_hash_length", 7)),
                hash_lengths=tuple(int(n) for n in data.get("hash_lengths", (40, 64))),
            )
        except (ValueError, TypeError):
            return cls()  # Fall back to safe defaults


DEFAULT_CONFIG = RepoVersionConfig()
