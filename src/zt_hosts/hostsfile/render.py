"""Render member records as hosts-file lines.

Two line formats:
    bare-host   <ip>  <hostname>  #<tag>
    FQDN        <ip>  <hostname>.<domain>  <hostname>  #<tag>

Columns are separated by two spaces. Lines are sorted by their rendered
text so that repeated runs produce byte-identical output.
"""

from __future__ import annotations

from typing import Iterable

from zt_hosts.members.client import MemberRecord

COLUMN_SEP = "  "


def renderable(
    records: Iterable[MemberRecord],
    exclude: Iterable[str] = (),
) -> list[MemberRecord]:
    """Drop records without an IP or a name, and excluded hostnames.

    Hostname comparison is case-insensitive.
    """
    skip = {h.lower() for h in exclude if h}
    return [
        r for r in records
        if r.ip and r.name and r.name.lower() not in skip
    ]


def render_host_lines(
    records: Iterable[MemberRecord],
    tag: str = "ZeroTier",
    exclude: Iterable[str] = (),
) -> list[str]:
    """Bare-host lines for the local and Windows hosts files."""
    return sorted(
        COLUMN_SEP.join([r.ip, r.name, f"#{tag}"])
        for r in renderable(records, exclude)
    )


def render_fqdn_lines(
    records: Iterable[MemberRecord],
    domain: str,
    tag: str = "ZeroTier",
    exclude: Iterable[str] = (),
) -> list[str]:
    """FQDN lines for a DNS server's custom list.

    With no domain the FQDN column is left out.
    """
    domain = domain.strip(".")
    lines = []
    for r in renderable(records, exclude):
        names = [f"{r.name}.{domain}", r.name] if domain else [r.name]
        lines.append(COLUMN_SEP.join([r.ip, *names, f"#{tag}"]))
    return sorted(lines)


def format_member_table(records: Iterable[MemberRecord]) -> str:
    """Aligned ``name  id  ip`` table of every member, sorted by line.

    Members without a name or IP are listed with ``null``, so the table
    also shows what the hosts files leave out.
    """
    rows = [[r.name or "null", r.id or "null", r.ip or "null"] for r in records]
    if not rows:
        return ""
    widths = [max(len(row[i]) for row in rows) for i in range(2)]
    lines = [
        COLUMN_SEP.join([row[0].ljust(widths[0]), row[1].ljust(widths[1]), row[2]])
        for row in rows
    ]
    return "\n".join(sorted(lines))
