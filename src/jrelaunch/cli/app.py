"""Top-level CLI: resolve config, build the command and launch it."""

import argparse
import logging
import sys
from pathlib import Path

from jrelaunch import __version__
from jrelaunch.cli.shared import format_result
from jrelaunch.command import build_from_config
from jrelaunch.config import load_config
from jrelaunch.detection import describe_platform, detect_os_family
from jrelaunch.errors import LauncherError
from jrelaunch.launcher import launch
from jrelaunch.models import OsFamily

log = logging.getLogger("jrelaunch")


def build_parser() -> argparse.ArgumentParser:
    """Build the launcher argument parser."""
    parser = argparse.ArgumentParser(
        prog="jrelaunch",
        description="Start a bundled Java application without a console window",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    parser.add_argument("--runtime-dir", help="JRE directory relative to the working directory")
    parser.add_argument("--lib-dir", help="Library directory relative to the working directory")
    parser.add_argument("--main-class", help="Fully qualified main class to run")
    parser.add_argument(
        "--os",
        choices=[family.value for family in OsFamily],
        help="Build the command for this OS family instead of the detected one",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the command without launching it",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Resolve config, build the command and launch it; return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(
            args.config,
            overrides={
                "runtime_dir": args.runtime_dir,
                "lib_dir": args.lib_dir,
                "main_class": args.main_class,
            },
        )
        os_family = OsFamily(args.os) if args.os else detect_os_family()
        command = build_from_config(os_family, config)
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Operating system: {os_family} [{describe_platform()}]")
    print(f"Command: {command}")
    if args.dry_run:
        log.debug("dry run, not launching")
        return 0

    print("Starting the Java application...")
    try:
        result = launch(command, os_family)
    except LauncherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in format_result(result, config, os_family):
        print(line)
    return 0 if result else 1


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
