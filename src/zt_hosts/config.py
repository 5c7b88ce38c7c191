"""Load the zt-hosts configuration.

Values are layered: built-in defaults, then the YAML config file, then
``ZT_*`` environment variables. The result is a frozen ``Config`` that is
built once per process and passed to every component.

Example config file::

    api_key: xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx
    network: '8056c2e21c000001'   # quote it: all-digit IDs would load as numbers
    domain: zt.example.lan
    interval: 10min
    pihole_custom_list: /home/pi/docker-pihole/etc-pihole/custom.list
    wsl_distroname: ubuntu.wsl
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Mapping

import yaml

from zt_hosts import paths
from zt_hosts.errors import ConfigError

DEFAULT_API_URL = "https://my.zerotier.com/api"

# Config field → environment variable that overrides it
ENV_OVERRIDES = {
    "api_key": "ZT_API_KEY",
    "network": "ZT_NETWORK",
    "domain": "ZT_DOMAIN",
    "interval": "ZT_INTERVAL",
    "api_url": "ZT_API_URL",
    "timeout": "ZT_TIMEOUT",
    "linux_hostfile": "ZT_LINUX_HOSTFILE",
    "pihole_custom_list": "ZT_PIHOLE_CUSTOM_LIST",
    "wsl_distroname": "ZT_WSL_DISTRONAME",
    "windows_hostfile": "ZT_WINDOWS_HOSTFILE",
    "wsl_interface": "ZT_WSL_INTERFACE",
}


@dataclass(frozen=True)
class Config:
    api_key: str = ""
    network: str = ""
    domain: str = ""
    interval: str = "10min"
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    tag: str = "ZeroTier"
    linux_hostfile: str = str(paths.LINUX_HOSTFILE)
    pihole_custom_list: str = ""
    # Must differ from both the WSL and the Windows hostname
    wsl_distroname: str = "ubuntu.wsl"
    windows_hostfile: str = str(paths.WINDOWS_HOSTFILE)
    windows_hostname_cmd: str = paths.WINDOWS_HOSTNAME_CMD
    wsl_interface: str = "eth0"
    unit_dir: str = str(paths.SYSTEMD_UNIT_DIR)

    @property
    def header(self) -> str:
        return f"# {self.tag} Network"

    def require_credentials(self) -> None:
        """Raise ConfigError unless api_key and network are set."""
        missing = [k for k in ("api_key", "network") if not getattr(self, k)]
        if missing:
            raise ConfigError(f"Missing required setting(s): {', '.join(missing)}")


def _coerce(name: str, value: object) -> object:
    if name == "timeout":
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"timeout must be a number, got {value!r}")
    return str(value)


def read_config_file(path: Path | str) -> dict:
    """Read and parse a YAML config file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed mapping. An empty file yields an empty dict.

    Raises:
        ConfigError: If the YAML is malformed, not a mapping, or has
            unknown keys.
    """
    config_path = Path(path)
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"{config_path}: {e.strerror or e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: invalid YAML: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} is not a YAML mapping")

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{config_path}: unknown key(s): {', '.join(unknown)}")
    return data


def load_config(
    path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Config:
    """Build the effective Config.

    Args:
        path: YAML config file. Defaults to ``paths.config_path()``. A
            missing file is not an error; defaults and env still apply.
        env: Environment mapping. Defaults to ``os.environ``.
    """
    env = os.environ if env is None else env
    config_path = Path(path) if path else paths.config_path()

    values: dict[str, object] = {}
    if config_path.is_file():
        values.update(read_config_file(config_path))

    for name, var in ENV_OVERRIDES.items():
        if var in env:
            values[name] = env[var]

    # A key left empty in YAML keeps its default
    return replace(Config(), **{
        k: _coerce(k, v) for k, v in values.items() if v is not None
    })
