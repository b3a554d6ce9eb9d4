"""Build/version metadata.

The app is usually run from source (python main.py). When packaged, git metadata
is not available, so we rely on environment variables injected at build time.
"""

from __future__ import annotations

import os


def get_build_info() -> dict[str, str]:
    """Return build metadata.

    Environment variables (set by CI/build scripts):
    - BARBUDDY_VERSION: human readable version (e.g. "2.1.0" or "0.0.0-dev")
    - BARBUDDY_GIT_SHA: short git sha
    - BARBUDDY_BUILD_DATE: ISO date (YYYY-MM-DD) or datetime
    """

    version = os.getenv("BARBUDDY_VERSION", "0.0.0-dev")
    sha = os.getenv("BARBUDDY_GIT_SHA", "dev")
    build_date = os.getenv("BARBUDDY_BUILD_DATE", "")
    return {"version": version, "git_sha": sha, "build_date": build_date}


def get_version_string() -> str:
    info = get_build_info()
    ver = info["version"].strip() or "0.0.0-dev"
    sha = info["git_sha"].strip() or "dev"
    date = info["build_date"].strip()
    if date:
        return f"v{ver} ({sha}, {date})"
    return f"v{ver} ({sha})"
