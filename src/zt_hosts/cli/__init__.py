"""Command-line interface for zt-hosts.

Usage:
    zt-hosts [--config <path>] [-v] sync [--dry-run]
    zt-hosts [--config <path>] members
    zt-hosts [--config <path>] install [--interval 10min] [--exec-path <path>] [--dry-run]
    zt-hosts [--config <path>] uninstall [--dry-run]
"""

import argparse
import logging
import sys

from zt_hosts import __version__
from zt_hosts.cli.members import cmd_members
from zt_hosts.cli.service import cmd_install, cmd_uninstall
from zt_hosts.cli.sync import cmd_sync
from zt_hosts.errors import ConfigError, DependencyMissing, PermissionDenied

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zt-hosts",
        description="Sync ZeroTier network members into hosts files",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to the YAML config file (default: $ZT_HOSTS_CONFIG or /etc/zt-update-hosts.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="More logging (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    sync = sub.add_parser("sync", help="Run one sync cycle")
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    sub.add_parser("members", help="List network members")

    inst = sub.add_parser("install", help="Install the systemd service and timer")
    inst.add_argument(
        "--interval", default=None,
        help="Polling interval as a systemd time span (default: config interval)",
    )
    inst.add_argument(
        "--exec-path", default=None,
        help="zt-hosts executable for ExecStart (default: from PATH)",
    )
    inst.add_argument(
        "--dry-run", action="store_true",
        help="Print the unit files without installing",
    )

    uninst = sub.add_parser("uninstall", help="Remove the systemd service and timer")
    uninst.add_argument(
        "--dry-run", action="store_true",
        help="Report without removing",
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    dispatch = {
        "sync": cmd_sync,
        "members": cmd_members,
        "install": cmd_install,
        "uninstall": cmd_uninstall,
    }

    try:
        return dispatch[args.command](args)
    except (ConfigError, DependencyMissing, PermissionDenied) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
