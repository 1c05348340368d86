"""Time-bounded memoization of repository snapshots.

Counting commits decompresses every reachable commit object, so callers
that ask repeatedly (e.g. once per build step) should go through a
``SnapshotCache``. The cache holds a single entry.

There is no locking: concurrent misses may each compute a snapshot and
overwrite one another. The last write wins, which is harmless because
every computation of an unchanged repository yields an equal snapshot.
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Awaitable, Callable
from pathlib import Path

from repo_version.config import DEFAULT_CONFIG, RepoVersionConfig
from repo_version.core.repo_info import RepoInfo
from repo_version.engine.assembler import get_repo_info
from repo_version.utils.timeutils import Clock, monotonic_ms

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_MS = 60_000

RepoInfoLoader = Callable[[str | os.PathLike[str]], Awaitable[RepoInfo | None]]
CacheKey = tuple[str, RepoVersionConfig]


def _cache_key(
    repo_path: str | os.PathLike[str], config: RepoVersionConfig | None = None
) -> CacheKey:
    return os.path.normpath(Path(repo_path).absolute()), config or DEFAULT_CONFIG


class SnapshotCache:
    """Holds the most recent RepoInfo and when it was stored.

    Args:
        clock: Returns the current time in milliseconds. Injectable for tests.
    """

    def __init__(self, clock: Clock = monotonic_ms) -> None:
        self._clock = clock
        self._info: RepoInfo | None = None
        self._key: CacheKey | None = None
        self._stored_at = 0.0

    @property
    def info(self) -> RepoInfo | None:
        """The stored snapshot regardless of age."""
        return self._info

    def is_fresh(
        self,
        max_age: float | None = DEFAULT_MAX_AGE_MS,
        repo_path: str | os.PathLike[str] | None = None,
        config: RepoVersionConfig | None = None,
    ) -> bool:
        """True if a snapshot is stored and younger than ``max_age`` ms.

        A ``max_age`` of None means "never cache" and always returns False.
        When ``repo_path`` is given the snapshot must also have been computed
        for that repository with the same ``config``.
        """
        if max_age is None or self._info is None:
            return False
        if repo_path is not None and self._key != _cache_key(repo_path, config):
            return False
        return self._clock() - self._stored_at < max_age

    def get(
        self,
        max_age: float | None = DEFAULT_MAX_AGE_MS,
        repo_path: str | os.PathLike[str] | None = None,
        config: RepoVersionConfig | None = None,
    ) -> RepoInfo | None:
        """Return the stored snapshot if it is fresh, else None."""
        if self.is_fresh(max_age, repo_path, config):
            return self._info
        return None

    def put(
        self,
        info: RepoInfo | None,
        repo_path: str | os.PathLike[str] | None = None,
        config: RepoVersionConfig | None = None,
    ) -> None:
        """Store a snapshot and reset its age. Storing None is a no-op."""
        if info is None:
            return
        self._info = info
        self._key = None if repo_path is None else _cache_key(repo_path, config)
        self._stored_at = self._clock()

    def clear(self) -> None:
        self._info = None
        self._key = None
        self._stored_at = 0.0

    async def get_or_compute(
        self,
        repo_path: str | os.PathLike[str],
        max_age: float | None = DEFAULT_MAX_AGE_MS,
        compute: RepoInfoLoader | None = None,
        config: RepoVersionConfig | None = None,
    ) -> RepoInfo | None:
        """Return a fresh cached snapshot or compute, store and return a new one.

        ``compute`` defaults to ``get_repo_info`` with ``config``. Snapshots are
        keyed by repo path and ``config``, so a different config is a miss.
        """
        cached = self.get(max_age, repo_path, config)
        if cached is not None:
            return cached

        logger.debug("Snapshot cache miss for %s", repo_path)
        if compute is None:
            compute = functools.partial(get_repo_info, config=config)
        info = await compute(repo_path)
        self.put(info, repo_path, config)
        return info


default_cache = SnapshotCache()


async def get_repo_info_cached(
    repo_path: str | os.PathLike[str],
    max_age: float | None = DEFAULT_MAX_AGE_MS,
    cache: SnapshotCache | None = None,
    config: RepoVersionConfig | None = None,
) -> RepoInfo | None:
    """Cached variant of ``get_repo_info``.

    Args:
        repo_path: Repository to inspect.
        max_age: Freshness window in milliseconds; None always recomputes.
        cache: Cache instance to use. Defaults to the process-wide ``default_cache``.
        config: Parsing configuration passed to the assembler; part of the cache key.
    """
    target = cache if cache is not None else default_cache
    return await target.get_or_compute(repo_path, max_age, config=config)
