"""Shared fixtures: synthetic Git repositories built from loose objects.

``FakeRepo`` writes real, zlib-compressed commit objects with correct
SHA-1 names, so the readers under test see exactly what ``git`` would
have produced, without needing the ``git`` executable.
"""

from __future__ import annotations

import hashlib
import zlib
from pathlib import Path

import pytest

EMPTY_TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


class FakeRepo:
    """Minimal writable Git repository for tests."""

    def __init__(self, root: Path, branch: str = "main") -> None:
        self.root = root
        self.git_dir = root / ".git"
        self._counter = 0
        (self.git_dir / "objects").mkdir(parents=True)
        (self.git_dir / "refs" / "heads").mkdir(parents=True)
        self.checkout(branch)

    def write_object(self, kind: str, body: bytes) -> str:
        data = f"{kind} {len(body)}".encode() + b"\x00" + body
        sha = hashlib.sha1(data).hexdigest()
        path = self.git_dir / "objects" / sha[:2] / sha[2:]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(data))
        return sha

    def make_commit(self, parents: list[str], message: str | None = None) -> str:
        """Write a commit object without moving any ref."""
        self._counter += 1
        lines = [f"tree {EMPTY_TREE}"]
        lines += [f"parent {p}" for p in parents]
        lines += [
            f"author Test <test@example.com> {1700000000 + self._counter} +0000",
            f"committer Test <test@example.com> {1700000000 + self._counter} +0000",
            "",
            message or f"commit {self._counter}",
            "",
        ]
        return self.write_object("commit", "\n".join(lines).encode())

    def commit(self, message: str | None = None, parents: list[str] | None = None) -> str:
        """Commit on the current branch and advance it."""
        if parents is None:
            head = self.branch_hash()
            parents = [head] if head else []
        sha = self.make_commit(parents, message)
        self.set_branch(self.branch, sha)
        return sha

    def checkout(self, branch: str) -> None:
        self.branch = branch
        (self.git_dir / "HEAD").write_text(f"ref: refs/heads/{branch}\n")

    def detach(self, sha: str) -> None:
        (self.git_dir / "HEAD").write_text(f"{sha}\n")

    def set_branch(self, branch: str, sha: str) -> None:
        ref = self.git_dir / "refs" / "heads" / branch
        ref.parent.mkdir(parents=True, exist_ok=True)
        ref.write_text(f"{sha}\n")

    def branch_hash(self, branch: str | None = None) -> str | None:
        ref = self.git_dir / "refs" / "heads" / (branch or self.branch)
        if not ref.exists():
            return None
        return ref.read_text().strip()

    def delete_object(self, sha: str) -> None:
        (self.git_dir / "objects" / sha[:2] / sha[2:]).unlink()


@pytest.fixture
def fake_repo(tmp_path: Path) -> FakeRepo:
    """Empty repository on branch ``main``."""
    return FakeRepo(tmp_path / "repo")
