"""Startup checks for privileges and external tools."""

from __future__ import annotations

import os
import shutil

from zt_hosts.errors import DependencyMissing, PermissionDenied


def require_root() -> None:
    if os.geteuid() != 0:
        raise PermissionDenied("This command must be run as root")


def require_binaries(*names: str) -> None:
    """Raise DependencyMissing naming every tool not found on PATH."""
    missing = [n for n in names if shutil.which(n) is None]
    if missing:
        raise DependencyMissing(
            f"{', '.join(missing)} need(s) to be installed"
        )
