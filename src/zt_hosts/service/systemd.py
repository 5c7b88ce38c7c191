"""Install the systemd service + timer that run ``zt-hosts sync``.

The timer provides the polling interval; every activation is an
independent ``sync`` run. The config file holds the API key, so install
also restricts it to root.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

from zt_hosts.checks import require_binaries, require_root
from zt_hosts.config import Config

logger = logging.getLogger(__name__)

UNIT_NAME = "zt-update-hosts"
UNITS = (f"{UNIT_NAME}.service", f"{UNIT_NAME}.timer")

SERVICE_TEMPLATE = """\
[Unit]
Description=Update ZeroTier hosts after network established
Requires=network-online.target
After=network-online.target

[Service]
Type=simple
ExecStart="{exec_path}" --config "{config_path}" sync

[Install]
WantedBy=multi-user.target
"""

TIMER_TEMPLATE = """\
[Unit]
Description=Update ZeroTier host entries every {interval}

[Timer]
OnBootSec={interval}
OnUnitActiveSec={interval}
Persistent=true

[Install]
WantedBy=timers.target
"""


def _run(args: list[str]) -> subprocess.CompletedProcess:
    """Run a command and return the result."""
    return subprocess.run(args, capture_output=True, text=True)


def _systemctl(*args: str) -> subprocess.CompletedProcess:
    result = _run(["systemctl", *args])
    if result.returncode != 0:
        logger.warning("systemctl %s: %s", " ".join(args), result.stderr.strip())
    return result


def default_exec_path() -> str:
    """Absolute path of the installed ``zt-hosts`` entry point."""
    return shutil.which("zt-hosts") or str(Path(sys.argv[0]).resolve())


def selinux_enabled() -> bool:
    if shutil.which("sestatus") is None:
        return False
    result = _run(["sestatus"])
    first = result.stdout.splitlines()[0] if result.stdout else ""
    return "enabled" in first


def render_units(
    config_path: Path | str,
    exec_path: str,
    interval: str,
) -> dict[str, str]:
    """Unit file name → contents."""
    return {
        UNITS[0]: SERVICE_TEMPLATE.format(exec_path=exec_path, config_path=config_path),
        UNITS[1]: TIMER_TEMPLATE.format(interval=interval),
    }


def secure_config(config_path: Path | str) -> bool:
    """Make the config file owned by root and readable by root only."""
    path = Path(config_path)
    if not path.exists():
        logger.warning("Config file %s not found; nothing to secure", path)
        return False
    os.chown(path, 0, 0)
    path.chmod(0o600)
    return True


def install_service(
    config: Config,
    config_path: Path | str,
    exec_path: str | None = None,
    interval: str | None = None,
    dry_run: bool = False,
) -> dict:
    """Write, enable and start the service and timer units.

    Args:
        config: Effective configuration (supplies unit_dir and interval).
        config_path: Config file the service will read.
        exec_path: ``zt-hosts`` executable. Defaults to the one on PATH.
        interval: systemd time span. Defaults to ``config.interval``.
        dry_run: Report what would be written without touching the system.

    Returns:
        Dict with ``units`` (path → contents), ``secured`` and ``dry_run``.

    Raises:
        PermissionDenied: If not running as root.
        DependencyMissing: If systemctl is missing.
    """
    require_root()
    require_binaries("systemctl")

    unit_dir = Path(config.unit_dir)
    units = render_units(
        Path(config_path).resolve(),
        exec_path or default_exec_path(),
        interval or config.interval,
    )
    written = {str(unit_dir / name): text for name, text in units.items()}
    if dry_run:
        return {"units": written, "secured": False, "dry_run": True}

    if _systemctl("is-active", "--quiet", UNITS[0]).returncode == 0:
        _systemctl("stop", *UNITS)

    for path, text in written.items():
        Path(path).write_text(text)
        logger.info("Wrote %s", path)

    if selinux_enabled():
        _run(["restorecon", *written])

    secured = secure_config(config_path)

    _systemctl("daemon-reload")
    _systemctl("enable", *UNITS)
    _systemctl("start", *UNITS)
    return {"units": written, "secured": secured, "dry_run": False}


def uninstall_service(config: Config, dry_run: bool = False) -> dict:
    """Stop, disable and remove the units.

    Returns:
        Dict with ``removed`` (unit file paths) and ``dry_run``.
    """
    require_root()
    require_binaries("systemctl")

    unit_dir = Path(config.unit_dir)
    paths = [unit_dir / name for name in UNITS]
    removed = [str(p) for p in paths if p.exists()]
    if dry_run:
        return {"removed": removed, "dry_run": True}

    if _systemctl("is-active", "--quiet", UNITS[0]).returncode == 0:
        _systemctl("stop", *UNITS)
    if _systemctl("is-enabled", "--quiet", UNITS[0]).returncode == 0:
        _systemctl("disable", *UNITS)
    for p in paths:
        p.unlink(missing_ok=True)
    _systemctl("daemon-reload")
    return {"removed": removed, "dry_run": False}
