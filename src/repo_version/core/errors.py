"""Exceptions and failure tags for repository inspection.

Lower layers raise; the assembler catches everything at its boundary and
turns it into a ``RepoInfoFailure`` tag.
"""

from __future__ import annotations

from enum import StrEnum


class RepoInfoFailure(StrEnum):
    """Why a repository snapshot could not be (fully) determined."""

    NOT_A_REPO = "not_a_repo"
    MALFORMED_REF = "malformed_ref"
    MISSING_OBJECT = "missing_object"
    NO_COMMITS = "no_commits"


class RepoVersionError(Exception):
    """Base class for repo_version errors."""


class MalformedRefError(RepoVersionError):
    """HEAD or a branch ref file does not match the expected grammar."""


class ObjectReadError(RepoVersionError):
    """A loose object is missing or cannot be decompressed."""

    def __init__(self, hash: str, message: str) -> None:
        super().__init__(f"Cannot read object {hash}: {message}")
        self.hash = hash
