"""WSL helpers.

Under WSL2 the distro sits behind a NAT'd virtual interface whose address
changes on every boot. Each cycle announces the current address in both
the distro's and the Windows hosts file, so Windows can reach the distro
by name.
"""

from __future__ import annotations

import logging
import re
import shutil
import socket
import subprocess
from pathlib import Path

from zt_hosts import paths
from zt_hosts.config import Config
from zt_hosts.errors import DependencyMissing, InterfaceError
from zt_hosts.hostsfile import WSL_HEADER, WSL_TAG
from zt_hosts.hostsfile.render import COLUMN_SEP
from zt_hosts.hostsfile.sync import Block

logger = logging.getLogger(__name__)

_INET_RE = re.compile(r"\binet\s+(\d{1,3}(?:\.\d{1,3}){3})/")


def _run(args: list[str]) -> subprocess.CompletedProcess:
    """Run a command and return the result."""
    return subprocess.run(args, capture_output=True, text=True)


def is_wsl(proc_version: Path | str = paths.PROC_VERSION) -> bool:
    """True when the running kernel is a WSL (Microsoft) kernel."""
    try:
        return "microsoft" in Path(proc_version).read_text().lower()
    except OSError:
        return False


def short_hostname() -> str:
    return socket.gethostname().split(".")[0]


def windows_hostname(cmd: str = paths.WINDOWS_HOSTNAME_CMD) -> str | None:
    """Hostname of the Windows host, via the interop mount.

    Returns None when the command is unavailable; the caller then has no
    Windows name to exclude.
    """
    try:
        result = _run([cmd])
    except OSError as e:
        logger.warning("Cannot run %s: %s", cmd, e)
        return None
    if result.returncode != 0:
        logger.warning("%s exited with %d", cmd, result.returncode)
        return None
    return result.stdout.strip() or None


def interface_ipv4(interface: str = "eth0") -> str:
    """First IPv4 address of ``interface``.

    Raises:
        DependencyMissing: If the ``ip`` tool is not installed.
        InterfaceError: If the interface has no IPv4 address.
    """
    if shutil.which("ip") is None:
        raise DependencyMissing("ip (iproute2) needs to be installed")

    result = _run(["ip", "-4", "-o", "addr", "show", "dev", interface])
    if result.returncode != 0:
        raise InterfaceError(f"{interface}: {result.stderr.strip() or 'ip addr failed'}")

    match = _INET_RE.search(result.stdout)
    if not match:
        raise InterfaceError(f"No IPv4 address on {interface}")
    return match.group(1)


def announcement_block(config: Config, ip: str) -> Block:
    """Block announcing the distro's address, labeled by the distro name.

    It is written ahead of the membership block in both the distro's and
    the Windows hosts file, so the membership block stays last.
    """
    return Block(
        label=config.wsl_distroname,
        header=WSL_HEADER.format(distro=config.wsl_distroname),
        lines=(COLUMN_SEP.join([ip, config.wsl_distroname, f"#{WSL_TAG}"]),),
    )
