"""Utility modules for repo_version."""

from repo_version.utils.timeutils import Clock, monotonic_ms

__all__ = ["Clock", "monotonic_ms"]
