"""On-disk Git format readers: metadata directory, loose objects, refs."""

from repo_version.git.object_store import locate_git_dir, object_path, read_object
from repo_version.git.refs import (
    normalize_hash,
    parse_branch_file,
    parse_commit_parents,
    parse_head_file,
)

__all__ = [
    "locate_git_dir",
    "normalize_hash",
    "object_path",
    "parse_branch_file",
    "parse_commit_parents",
    "parse_head_file",
    "read_object",
]
