"""Core data structures for repo_version."""

from repo_version.core.errors import (
    MalformedRefError,
    ObjectReadError,
    RepoInfoFailure,
    RepoVersionError,
)
from repo_version.core.repo_info import (
    SHORT_HASH_LENGTH,
    BranchFileInfo,
    HeadFileInfo,
    RepoInfo,
)

__all__ = [
    "SHORT_HASH_LENGTH",
    "BranchFileInfo",
    "HeadFileInfo",
    "MalformedRefError",
    "ObjectReadError",
    "RepoInfo",
    "RepoInfoFailure",
    "RepoVersionError",
]
