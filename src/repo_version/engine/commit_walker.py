"""Commit graph traversal.

Walks the parent edges of the commit DAG with an explicit stack and a
visited set. Merge histories reconverge on shared ancestors; the visited
set makes sure each of them is counted once. No recursion, so history
depth is not limited by the interpreter's call stack.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from pathlib import Path

from repo_version.git.object_store import read_object
from repo_version.git.refs import parse_commit_parents

logger = logging.getLogger(__name__)


class CommitWalker:
    """Iterates over every commit reachable from a starting commit.

    Each commit costs one loose-object read and decompression, which makes
    this the most expensive step of building a snapshot.
    """

    def __init__(self, git_dir: Path) -> None:
        self._git_dir = git_dir

    async def walk(self, start_hash: str) -> AsyncIterator[str]:
        """Yield each distinct reachable commit hash once.

        Order is depth-first but otherwise unspecified.

        Raises:
            ObjectReadError: A reachable commit is missing or corrupt.
        """
        visited: set[str] = set()
        stack = [start_hash]

        while stack:
            commit = stack.pop()
            if commit in visited:
                continue
            visited.add(commit)
            yield commit

            content = await read_object(self._git_dir, commit)
            stack.extend(parse_commit_parents(content))

    async def count(self, start_hash: str | None) -> int:
        """Count commits reachable from ``start_hash`` (0 if None)."""
        if start_hash is None:
            return 0

        count = 0
        async for _ in self.walk(start_hash):
            count += 1

        logger.debug("Counted %d commits from %s in %s", count, start_hash, self._git_dir)
        return count


async def count_commits(git_dir: Path, start_hash: str | None) -> int:
    """Count distinct commits reachable from ``start_hash``.

    Returns 0 when ``start_hash`` is None (no commits yet). Any missing or
    corrupt object aborts the whole count; partial counts are never returned.

    Raises:
        ObjectReadError: A reachable commit cannot be read.
    """
    return await CommitWalker(git_dir).count(start_hash)
