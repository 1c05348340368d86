"""Read-only access to a Git metadata directory and its loose objects.

Only loose objects (``objects/<2-hex>/<rest>``) are supported. Packfiles
are not read, so a garbage-collected repository whose history lives in
``objects/pack`` cannot be walked.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import stat
import zlib
from pathlib import Path

from repo_version.core.errors import ObjectReadError

logger = logging.getLogger(__name__)

GITDIR_PATTERN = re.compile(r"^gitdir:\s*(?P<path>\S.*?)\s*$")


async def locate_git_dir(repo_path: str | os.PathLike[str]) -> Path | None:
    """Resolve the metadata directory of the repository at ``repo_path``.

    ``.git`` is normally a directory. Submodules and linked worktrees use a
    ``.git`` file containing ``gitdir: <path>`` instead, where the path may
    be relative to the repository.

    Returns:
        The metadata directory, or None if ``repo_path`` is not a usable
        repository. Never raises.
    """
    repo = Path(repo_path)
    git_file = repo / ".git"

    try:
        st = await asyncio.to_thread(os.stat, git_file)
    except (OSError, ValueError):
        logger.debug("No usable .git at %s", git_file, exc_info=True)
        return None

    if stat.S_ISDIR(st.st_mode):
        return git_file
    if not stat.S_ISREG(st.st_mode):
        return None

    try:
        content = await asyncio.to_thread(git_file.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError, ValueError):
        logger.debug("Cannot read .git file %s", git_file, exc_info=True)
        return None

    first_line = content.splitlines()[0] if content else ""
    match = GITDIR_PATTERN.match(first_line)
    if match is None or "\x00" in match.group("path"):
        logger.debug("Invalid .git file %s: %r", git_file, first_line)
        return None

    return Path(os.path.normpath(repo.absolute() / match.group("path")))


def object_path(git_dir: Path, hash: str) -> Path:
    """Path of the loose object file for ``hash``."""
    return git_dir / "objects" / hash[:2] / hash[2:]


async def read_object(git_dir: Path, hash: str) -> str:
    """Read and decompress a loose object.

    Returns:
        The decompressed object (header included) decoded as UTF-8.

    Raises:
        ObjectReadError: The object file is missing, unreadable or corrupt.
    """
    path = object_path(git_dir, hash)
    try:
        compressed = await asyncio.to_thread(path.read_bytes)
    except (OSError, ValueError) as e:
        raise ObjectReadError(hash, str(e)) from e

    try:
        raw = await asyncio.to_thread(zlib.decompress, compressed)
    except zlib.error as e:
        raise ObjectReadError(hash, f"corrupt object: {e}") from e

    return raw.decode("utf-8", errors="replace")
