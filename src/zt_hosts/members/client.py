"""Fetch network members from the ZeroTier Central API.

One authenticated GET per cycle, no retries. A failed poll just means no
update this cycle; the next timer run tries again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from zt_hosts.config import DEFAULT_API_URL
from zt_hosts.errors import FetchError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberRecord:
    """One network member as reported by the API."""
    name: str | None
    id: str
    ip: str | None = None


def member_url(api_url: str, network: str) -> str:
    return f"{api_url.rstrip('/')}/network/{network}/member"


def parse_members(payload: object) -> list[MemberRecord]:
    """Project the decoded API response into MemberRecords.

    Uses ``name``, ``config.id`` and ``config.ipAssignments[0]``. A member
    with no assignments gets ``ip=None``; non-object items are skipped.

    Raises:
        ParseError: If the payload is not a JSON array.
    """
    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array of members, got {type(payload).__name__}")

    records = []
    for item in payload:
        if not isinstance(item, dict):
            logger.debug("Skipping non-object member entry: %r", item)
            continue
        config = item.get("config") or {}
        assignments = config.get("ipAssignments") or []
        name = item.get("name")
        records.append(MemberRecord(
            name=str(name) if name else None,
            id=str(config.get("id") or item.get("nodeId") or ""),
            ip=str(assignments[0]) if assignments and assignments[0] else None,
        ))
    return records


def fetch_members(
    api_key: str,
    network: str,
    *,
    api_url: str = DEFAULT_API_URL,
    timeout: float = 30.0,
    session: requests.Session | None = None,
) -> list[MemberRecord]:
    """Fetch the member list of a ZeroTier network.

    Args:
        api_key: ZeroTier Central API token.
        network: 16-hex-digit network ID.
        api_url: API base URL.
        timeout: Request timeout in seconds.
        session: Optional requests session (tests inject one).

    Returns:
        List of MemberRecord, in API order.

    Raises:
        FetchError: On transport failure or a non-2xx status.
        ParseError: If the body is not a JSON array.
    """
    url = member_url(api_url, network)
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    http = session or requests
    logger.debug("GET %s", url)
    try:
        resp = http.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = getattr(e.response, "status_code", "error")
        raise FetchError(f"{url} returned HTTP {status}") from e
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}") from e

    try:
        payload = resp.json()
    except ValueError as e:
        raise ParseError(f"Malformed JSON from {url}: {e}") from e

    records = parse_members(payload)
    logger.info("Fetched %d member(s) of network %s", len(records), network)
    return records
