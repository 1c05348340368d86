"""repo-version - branch, commit hash and commit count read from .git on disk.

Usage:
    info = await get_repo_info(".")
    if info is not None:
        print(f"{info.branch}-{info.commits}-{info.short_hash}")
"""

from repo_version.cache import (
    DEFAULT_MAX_AGE_MS,
    SnapshotCache,
    default_cache,
    get_repo_info_cached,
)
from repo_version.config import RepoVersionConfig
from repo_version.core.errors import (
    MalformedRefError,
    ObjectReadError,
    RepoInfoFailure,
    RepoVersionError,
)
from repo_version.core.repo_info import BranchFileInfo, HeadFileInfo, RepoInfo
from repo_version.engine.assembler import (
    RepoInfoResult,
    get_repo_info,
    get_repo_info_sync,
    resolve_repo_info,
)
from repo_version.engine.commit_walker import CommitWalker, count_commits

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_AGE_MS",
    "BranchFileInfo",
    "CommitWalker",
    "HeadFileInfo",
    "MalformedRefError",
    "ObjectReadError",
    "RepoInfo",
    "RepoInfoFailure",
    "RepoInfoResult",
    "RepoVersionConfig",
    "RepoVersionError",
    "SnapshotCache",
    "__version__",
    "count_commits",
    "default_cache",
    "get_repo_info",
    "get_repo_info_cached",
    "get_repo_info_sync",
    "resolve_repo_info",
]
