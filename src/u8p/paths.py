"""Filesystem locations used by the u8p command line tool."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "u8p"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    roaming = sys.platform in ("win32", "darwin")
    dirs = PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=roaming)
    return Path(dirs.user_config_path)


def project_config_path(root: Path | None = None) -> Path:
    return (root or Path.cwd()) / ".u8p" / "config.yaml"
