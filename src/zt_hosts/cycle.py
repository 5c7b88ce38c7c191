"""One sync cycle: [WSL address] → fetch → render → rewrite each target.

Each cycle is stateless. It always fetches fresh data and replaces the
managed blocks wholesale, so a failed or interrupted run is repaired by the
next one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import requests

from zt_hosts.config import Config
from zt_hosts.errors import FileAccessError, InterfaceError
from zt_hosts.hostsfile import UNIX_EOL, WINDOWS_EOL
from zt_hosts.hostsfile.render import render_fqdn_lines, render_host_lines
from zt_hosts.hostsfile.sync import Block, HostFileTarget, sync_target
from zt_hosts.members.client import MemberRecord, fetch_members
from zt_hosts.wsl.environment import (
    announcement_block,
    interface_ipv4,
    is_wsl,
    short_hostname,
    windows_hostname,
)

logger = logging.getLogger(__name__)


@dataclass
class CycleResult:
    """Outcome of one sync cycle."""
    members: list[MemberRecord] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    errors: list[dict] = field(default_factory=list)
    dry_run: bool = False

    def merge(self, outcome: dict) -> None:
        self.updated.extend(outcome["updated"])
        self.unchanged.extend(outcome["unchanged"])
        self.errors.extend(outcome["errors"])


def build_targets(
    config: Config,
    wsl: bool,
    local_hostname: str,
    win_hostname: str | None = None,
) -> list[HostFileTarget]:
    """Membership targets in write order.

    The local hosts file never lists this machine; the Windows hosts file
    lists neither this distro's host nor Windows itself. The Pi-hole list
    gets every member.
    """
    targets = []
    if config.pihole_custom_list:
        targets.append(HostFileTarget(config.pihole_custom_list, config.tag, fqdn=True))
    targets.append(HostFileTarget(
        config.linux_hostfile, config.tag, UNIX_EOL, exclude=(local_hostname,),
    ))
    if wsl:
        exclude = (local_hostname, win_hostname) if win_hostname else (local_hostname,)
        targets.append(HostFileTarget(
            config.windows_hostfile, config.tag, WINDOWS_EOL, exclude=exclude,
        ))
    return targets


def sync_members(
    config: Config,
    records: list[MemberRecord],
    targets: list[HostFileTarget],
    dry_run: bool = False,
    leading: Sequence[Block] = (),
) -> dict:
    """Write the membership block into every target.

    ``leading`` blocks (the WSL announcement) go ahead of the membership
    block in the hosts files, within the same single write. The Pi-hole
    list only carries membership.
    """
    updated, unchanged, errors = [], [], []
    for target in targets:
        if target.fqdn:
            lines = render_fqdn_lines(records, config.domain, config.tag, target.exclude)
        else:
            lines = render_host_lines(records, config.tag, target.exclude)
        try:
            action = sync_target(
                target, config.header, lines, dry_run,
                leading=() if target.fqdn else leading,
            )
        except FileAccessError as e:
            logger.error("Skipping %s: %s", target.path, e.reason)
            errors.append({"path": target.path, "error": e.reason})
            continue
        (updated if action == "updated" else unchanged).append(target.path)
    return {"updated": updated, "unchanged": unchanged, "errors": errors}


def run_cycle(
    config: Config,
    dry_run: bool = False,
    session: requests.Session | None = None,
    wsl: bool | None = None,
    local_hostname: str | None = None,
) -> CycleResult:
    """Run one full sync cycle.

    Args:
        config: Effective configuration.
        dry_run: Compute changes without writing any file.
        session: Optional requests session for the API call.
        wsl: Force WSL handling on/off. Detected when None.
        local_hostname: Override the local short hostname.

    Raises:
        ConfigError: If api_key or network is missing.
        FetchError: If the member API cannot be reached.
        ParseError: If the member API response is malformed.
        DependencyMissing: Under WSL, if ``ip`` is not installed.
    """
    config.require_credentials()
    if wsl is None:
        wsl = is_wsl()
    local_hostname = local_hostname or short_hostname()
    result = CycleResult(dry_run=dry_run)

    win_hostname = None
    leading: list[Block] = []
    if wsl:
        win_hostname = windows_hostname(config.windows_hostname_cmd)
        try:
            ip = interface_ipv4(config.wsl_interface)
        except InterfaceError as e:
            logger.warning("WSL address not announced: %s", e)
        else:
            leading.append(announcement_block(config, ip))

    result.members = fetch_members(
        config.api_key,
        config.network,
        api_url=config.api_url,
        timeout=config.timeout,
        session=session,
    )
    targets = build_targets(config, wsl, local_hostname, win_hostname)
    result.merge(sync_members(config, result.members, targets, dry_run, leading))
    return result
