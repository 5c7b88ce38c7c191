"""Member listing CLI command."""

import argparse
import logging

from zt_hosts.errors import FetchError, ParseError

logger = logging.getLogger(__name__)


def cmd_members(args: argparse.Namespace) -> int:
    from zt_hosts.config import load_config
    from zt_hosts.hostsfile.render import format_member_table
    from zt_hosts.members.client import fetch_members

    config = load_config(args.config)
    config.require_credentials()
    try:
        records = fetch_members(
            config.api_key,
            config.network,
            api_url=config.api_url,
            timeout=config.timeout,
        )
    except (FetchError, ParseError) as e:
        logger.error("%s", e)
        return 1

    if not records:
        print("No members in network.")
        return 0
    print(format_member_table(records))
    return 0
