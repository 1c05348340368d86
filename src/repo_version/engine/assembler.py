"""Assemble a RepoInfo snapshot from the on-disk repository.

Pipeline, fail-fast:

1. Locate the metadata directory.
2. Parse HEAD.
3. If HEAD is symbolic, parse the branch file it points to. A missing
   branch file means the branch has no commits yet, which is not an error.
4. Count commits reachable from the resolved hash.
5. Package the snapshot.

Every failure is caught here and reduced to a ``RepoInfoFailure`` tag.
The public ``get_repo_info`` only reports presence or absence.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from repo_version.config import DEFAULT_CONFIG, RepoVersionConfig
from repo_version.core.errors import MalformedRefError, ObjectReadError, RepoInfoFailure
from repo_version.core.repo_info import BranchFileInfo, HeadFileInfo, RepoInfo
from repo_version.engine.commit_walker import count_commits
from repo_version.git.object_store import locate_git_dir
from repo_version.git.refs import parse_branch_file, parse_head_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoInfoResult:
    """Outcome of inspecting a repository.

    Attributes:
        info: The snapshot, or None if it could not be determined.
        failure: Tagged cause. ``NO_COMMITS`` accompanies a valid snapshot;
            every other tag means ``info`` is None.
        detail: Human-readable explanation.
    """

    info: RepoInfo | None
    failure: RepoInfoFailure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.info is not None


async def read_head_file(git_dir: Path, config: RepoVersionConfig) -> HeadFileInfo:
    content = await asyncio.to_thread((git_dir / "HEAD").read_text, encoding="utf-8")
    return parse_head_file(content, config.short_hash_length, config.hash_lengths)


async def read_branch_file(
    git_dir: Path, branch_ref: str | None, config: RepoVersionConfig
) -> BranchFileInfo:
    """Read the branch file HEAD points to.

    Returns an empty BranchFileInfo on a detached HEAD, where the hash
    already came from HEAD itself.
    """
    if branch_ref is None:
        return BranchFileInfo.empty()
    content = await asyncio.to_thread((git_dir / branch_ref).read_text, encoding="utf-8")
    return parse_branch_file(content, config.short_hash_length, config.hash_lengths)


def _failed(failure: RepoInfoFailure, detail: str) -> RepoInfoResult:
    logger.debug("Repo info unavailable (%s): %s", failure, detail)
    return RepoInfoResult(info=None, failure=failure, detail=detail)


async def resolve_repo_info(
    repo_path: str | os.PathLike[str],
    config: RepoVersionConfig | None = None,
) -> RepoInfoResult:
    """Inspect the repository at ``repo_path`` and tag the outcome.

    Never raises for repository problems; see ``RepoInfoFailure``.
    """
    cfg = config or DEFAULT_CONFIG

    git_dir = await locate_git_dir(repo_path)
    if git_dir is None:
        return _failed(RepoInfoFailure.NOT_A_REPO, f"no Git repository at {repo_path}")

    try:
        head = await read_head_file(git_dir, cfg)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        return _failed(RepoInfoFailure.NOT_A_REPO, f"cannot read HEAD: {e}")
    except MalformedRefError as e:
        return _failed(RepoInfoFailure.MALFORMED_REF, str(e))

    no_commits = False
    try:
        branch = await read_branch_file(git_dir, head.branch_ref, cfg)
    except FileNotFoundError:
        # Unborn branch: HEAD names a branch that has no commits yet
        branch = BranchFileInfo.empty()
        no_commits = True
    except (OSError, UnicodeDecodeError, ValueError) as e:
        return _failed(RepoInfoFailure.MALFORMED_REF, f"cannot read {head.branch_ref}: {e}")
    except MalformedRefError as e:
        return _failed(RepoInfoFailure.MALFORMED_REF, str(e))

    commit = branch.hash or head.hash
    short_hash = branch.short_hash or head.short_hash

    try:
        commits = await count_commits(git_dir, commit)
    except ObjectReadError as e:
        return _failed(RepoInfoFailure.MISSING_OBJECT, str(e))

    info = RepoInfo(
        branch=head.branch,
        branch_ref=head.branch_ref,
        hash=commit,
        short_hash=short_hash,
        commits=commits,
    )
    if no_commits:
        return RepoInfoResult(
            info=info,
            failure=RepoInfoFailure.NO_COMMITS,
            detail=f"{head.branch_ref} has no commits yet",
        )
    return RepoInfoResult(info=info)


async def get_repo_info(
    repo_path: str | os.PathLike[str],
    config: RepoVersionConfig | None = None,
) -> RepoInfo | None:
    """Return a fresh snapshot of the repository at ``repo_path``.

    All or nothing: either a fully populated RepoInfo, or None when the
    repository state could not be determined for any reason.
    """
    result = await resolve_repo_info(repo_path, config)
    return result.info


def get_repo_info_sync(
    repo_path: str | os.PathLike[str],
    config: RepoVersionConfig | None = None,
) -> RepoInfo | None:
    """Blocking variant of ``get_repo_info`` for synchronous build scripts.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(get_repo_info(repo_path, config))
