"""Default filesystem locations.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    ZT_HOSTS_CONFIG — config file (default: /etc/zt-update-hosts.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONFIG = Path("/etc/zt-update-hosts.yaml")

LINUX_HOSTFILE = Path("/etc/hosts")
WINDOWS_HOSTFILE = Path("/mnt/c/Windows/System32/drivers/etc/hosts")
WINDOWS_HOSTNAME_CMD = "/mnt/c/Windows/System32/HOSTNAME.EXE"
PROC_VERSION = Path("/proc/version")
SYSTEMD_UNIT_DIR = Path("/etc/systemd/system")


def config_path() -> Path:
    """Return the path to the YAML config file."""
    return Path(os.environ.get("ZT_HOSTS_CONFIG", str(_DEFAULT_CONFIG)))
