"""Sync CLI command."""

import argparse
import logging
import sys

from zt_hosts.errors import FetchError, ParseError

logger = logging.getLogger(__name__)


def cmd_sync(args: argparse.Namespace) -> int:
    from zt_hosts.checks import require_root
    from zt_hosts.config import load_config
    from zt_hosts.cycle import run_cycle
    from zt_hosts.hostsfile.render import format_member_table

    if not args.dry_run:
        require_root()
    config = load_config(args.config)

    try:
        result = run_cycle(config, dry_run=args.dry_run)
    except (FetchError, ParseError) as e:
        logger.error("Sync cycle skipped: %s", e)
        return 1

    table = format_member_table(result.members)
    if table:
        print(table)

    for e in result.errors:
        print(f"ERROR: {e['path']}: {e['error']}", file=sys.stderr)

    if result.dry_run:
        print(f"\n[DRY RUN] Would update: {len(set(result.updated))} file(s)")
        for path in sorted(set(result.updated)):
            print(f"  - {path}")
        print("No files were modified.")
    else:
        print()
        for path in sorted(set(result.updated)):
            print(f"updated    {path}")
        for path in sorted(set(result.unchanged)):
            print(f"unchanged  {path}")

    return 1 if result.errors else 0
