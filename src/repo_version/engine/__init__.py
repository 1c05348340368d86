"""Commit graph walking and snapshot assembly."""

from repo_version.engine.assembler import (
    RepoInfoResult,
    get_repo_info,
    get_repo_info_sync,
    resolve_repo_info,
)
from repo_version.engine.commit_walker import CommitWalker, count_commits

__all__ = [
    "CommitWalker",
    "RepoInfoResult",
    "count_commits",
    "get_repo_info",
    "get_repo_info_sync",
    "resolve_repo_info",
]
