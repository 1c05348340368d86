"""Tests for the RepoInfo snapshot and ref parse results."""

from __future__ import annotations

import pytest

from repo_version.core.repo_info import BranchFileInfo, HeadFileInfo, RepoInfo

SHA = "89abcdef0123456789abcdef0123456789abcdef"


class TestRepoInfo:
    def test_valid_snapshot(self) -> None:
        info = RepoInfo(
            branch="main", branch_ref="refs/heads/main", hash=SHA, short_hash=SHA[:7], commits=4
        )
        assert info.short_hash == "89abcde"
        assert info.is_detached is False

    def test_no_commits_snapshot(self) -> None:
        info = RepoInfo(branch="main", branch_ref="refs/heads/main", hash=None, short_hash=None)
        assert info.commits == 0

    def test_frozen(self) -> None:
        info = RepoInfo(branch=None, branch_ref=None, hash=SHA, short_hash=SHA[:7], commits=1)
        with pytest.raises(AttributeError):
            info.commits = 2  # type: ignore[misc]

    def test_branch_without_ref_rejected(self) -> None:
        with pytest.raises(ValueError, match="branch_ref"):
            RepoInfo(branch="main", branch_ref=None, hash=None, short_hash=None)

    def test_hash_without_short_hash_rejected(self) -> None:
        with pytest.raises(ValueError, match="short_hash"):
            RepoInfo(branch=None, branch_ref=None, hash=SHA, short_hash=None, commits=1)

    def test_short_hash_must_be_prefix(self) -> None:
        with pytest.raises(ValueError, match="prefix"):
            RepoInfo(branch=None, branch_ref=None, hash=SHA, short_hash="fffffff", commits=1)

    def test_negative_commits_rejected(self) -> None:
        with pytest.raises(ValueError, match="commits"):
            RepoInfo(branch=None, branch_ref=None, hash=SHA, short_hash=SHA[:7], commits=-1)

    def test_commits_without_hash_rejected(self) -> None:
        with pytest.raises(ValueError, match="without a hash"):
            RepoInfo(branch="main", branch_ref="refs/heads/main", hash=None, short_hash=None, commits=2)

    def test_to_dict_roundtrip(self) -> None:
        info = RepoInfo(
            branch="dev", branch_ref="refs/heads/dev", hash=SHA, short_hash=SHA[:7], commits=12
        )
        data = info.to_dict()
        assert data == {
            "branch": "dev",
            "branch_ref": "refs/heads/dev",
            "hash": SHA,
            "short_hash": SHA[:7],
            "commits": 12,
        }
        assert RepoInfo.from_dict(data) == info


class TestParseResults:
    def test_head_detached_flag(self) -> None:
        assert HeadFileInfo(hash=SHA, short_hash=SHA[:7]).is_detached is True
        assert HeadFileInfo(branch="main", branch_ref="refs/heads/main").is_detached is False

    def test_branch_file_empty(self) -> None:
        empty = BranchFileInfo.empty()
        assert empty.hash is None
        assert empty.short_hash is None
