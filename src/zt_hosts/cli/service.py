"""Service install/uninstall CLI commands."""

import argparse


def cmd_install(args: argparse.Namespace) -> int:
    from zt_hosts.config import load_config
    from zt_hosts.paths import config_path
    from zt_hosts.service.systemd import install_service

    path = args.config or str(config_path())
    result = install_service(
        load_config(path),
        path,
        exec_path=args.exec_path,
        interval=args.interval,
        dry_run=args.dry_run,
    )

    if result["dry_run"]:
        for unit_path, text in result["units"].items():
            print(f"── {unit_path}")
            print(text)
        print("[DRY RUN] Nothing was installed.")
        return 0

    for unit_path in result["units"]:
        print(f"  Installed {unit_path}")
    if not result["secured"]:
        print(f"  WARNING: {path} not found; create it and make it readable by root only")
    return 0


def cmd_uninstall(args: argparse.Namespace) -> int:
    from zt_hosts.config import load_config
    from zt_hosts.service.systemd import uninstall_service

    result = uninstall_service(load_config(args.config), dry_run=args.dry_run)
    prefix = "[DRY RUN] Would remove" if result["dry_run"] else "Removed"
    if not result["removed"]:
        print("  No unit files installed.")
    for unit_path in result["removed"]:
        print(f"  {prefix} {unit_path}")
    return 0
