"""Immutable snapshots of repository state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SHORT_HASH_LENGTH = 7


@dataclass(frozen=True)
class RepoInfo:
    """Version metadata for the checked-out HEAD of a repository.

    Attributes:
        branch: Current branch name, e.g. "main". None on a detached HEAD.
        branch_ref: Path of the branch file inside the metadata directory,
            e.g. "refs/heads/main". None on a detached HEAD.
        hash: Full commit hash. None when the branch has no commits yet.
        short_hash: Abbreviated commit hash (leading characters of ``hash``).
        commits: Number of distinct commits reachable from ``hash``.
    """

    branch: str | None
    branch_ref: str | None
    hash: str | None
    short_hash: str | None
    commits: int = 0

    def __post_init__(self) -> None:
        if (self.branch is None) != (self.branch_ref is None):
            raise ValueError("branch and branch_ref must both be set or both be None")
        if (self.hash is None) != (self.short_hash is None):
            raise ValueError("hash and short_hash must both be set or both be None")
        if self.hash is not None and self.short_hash is not None:
            if not self.short_hash or not self.hash.startswith(self.short_hash):
                raise ValueError(
                    f"short_hash {self.short_hash!r} is not a prefix of hash {self.hash!r}"
                )
        if self.commits < 0:
            raise ValueError(f"commits must be >= 0, got {self.commits}")
        if self.hash is None and self.commits != 0:
            raise ValueError(f"commits must be 0 without a hash, got {self.commits}")

    @property
    def is_detached(self) -> bool:
        return self.branch is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "branch": self.branch,
            "branch_ref": self.branch_ref,
            "hash": self.hash,
            "short_hash": self.short_hash,
            "commits": self.commits,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RepoInfo:
        return cls(
            branch=data.get("branch"),
            branch_ref=data.get("branch_ref"),
            hash=data.get("hash"),
            short_hash=data.get("short_hash"),
            commits=int(data.get("commits", 0)),
        )


@dataclass(frozen=True)
class HeadFileInfo:
    """Everything the HEAD file tells us.

    A symbolic HEAD carries ``branch``/``branch_ref`` and no hash; a
    detached HEAD carries ``hash``/``short_hash`` and no branch.
    """

    branch: str | None = None
    branch_ref: str | None = None
    hash: str | None = None
    short_hash: str | None = None

    @property
    def is_detached(self) -> bool:
        return self.branch_ref is None


@dataclass(frozen=True)
class BranchFileInfo:
    """Commit hash read from a branch ref file (e.g. ``refs/heads/main``)."""

    hash: str | None = None
    short_hash: str | None = None

    @classmethod
    def empty(cls) -> BranchFileInfo:
        return cls(hash=None, short_hash=None)
