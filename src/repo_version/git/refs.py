"""Parsers for HEAD, branch ref files and commit object headers."""

from __future__ import annotations

import re
from collections.abc import Iterable

from repo_version.core.errors import MalformedRefError
from repo_version.core.repo_info import SHORT_HASH_LENGTH, BranchFileInfo, HeadFileInfo

DEFAULT_HASH_LENGTHS: tuple[int, ...] = (40, 64)

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")

SYMREF_PREFIX = "ref:"
PARENT_PREFIX = "parent "


def normalize_hash(value: str, hash_lengths: Iterable[int] = DEFAULT_HASH_LENGTHS) -> str:
    """Validate a hex object name and return it lowercased.

    Raises:
        MalformedRefError: Not hex, or not one of the accepted lengths.
    """
    if not _HEX_PATTERN.match(value) or len(value) not in tuple(hash_lengths):
        raise MalformedRefError(f"Not a valid object name: {value!r}")
    return value.lower()


def parse_head_file(
    content: str,
    short_length: int = SHORT_HASH_LENGTH,
    hash_lengths: Iterable[int] = DEFAULT_HASH_LENGTHS,
) -> HeadFileInfo:
    """Parse the HEAD file.

    This is typically ``ref: refs/heads/<branch>``. Anything else is a
    detached HEAD and the file holds the commit hash itself.
    """
    if content.startswith(SYMREF_PREFIX):
        tokens = content.split()
        if len(tokens) < 2:
            # "ref:refs/heads/main" without the space still names a ref
            ref = content[len(SYMREF_PREFIX) :].strip()
        else:
            ref = tokens[1].strip()
        if not ref:
            raise MalformedRefError(f"Symbolic HEAD without a ref: {content!r}")
        return HeadFileInfo(
            branch=ref.split("/")[-1],
            branch_ref=ref,
            hash=None,
            short_hash=None,
        )

    commit = normalize_hash(content.strip(), hash_lengths)
    return HeadFileInfo(
        branch=None,
        branch_ref=None,
        hash=commit,
        short_hash=commit[:short_length],
    )


def parse_branch_file(
    content: str,
    short_length: int = SHORT_HASH_LENGTH,
    hash_lengths: Iterable[int] = DEFAULT_HASH_LENGTHS,
) -> BranchFileInfo:
    """Parse a branch ref file such as ``refs/heads/main``."""
    commit = normalize_hash(content.strip(), hash_lengths)
    return BranchFileInfo(hash=commit, short_hash=commit[:short_length])


def parse_commit_parents(object_text: str) -> list[str]:
    """Return the parent hashes listed in a decompressed commit object.

    Only header lines are considered; the header ends at the first blank
    line, after which the commit message starts.
    """
    parents: list[str] = []
    for line in object_text.split("\n"):
        if not line:
            break
        if line.startswith(PARENT_PREFIX):
            tokens = line[len(PARENT_PREFIX) :].split()
            if tokens:
                parents.append(tokens[0].strip())
    return parents
