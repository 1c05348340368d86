"""
Build stamp example for repo-version.

This example demonstrates:
1. Reading repo state synchronously from a build script
2. Falling back to a placeholder when the state is unknown
3. Writing the snapshot as JSON next to a build artifact
"""

import json
import sys
from pathlib import Path

from repo_version import get_repo_info_sync


def main() -> int:
    repo = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")
    out = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("build-info.json")

    info = get_repo_info_sync(repo)
    if info is None:
        print(f"Could not determine repo state for {repo}, stamping as unknown")
        stamp = {"version": "unknown"}
    else:
        label = info.branch or "detached"
        stamp = {"version": f"{label}-{info.commits}-{info.short_hash or 'none'}", **info.to_dict()}

    out.write_text(json.dumps(stamp, indent=2) + "\n")
    print(f"Wrote {out}: {stamp['version']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
