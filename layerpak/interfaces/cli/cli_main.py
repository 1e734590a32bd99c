#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from layerpak.__version__ import __version__
from layerpak.interfaces.cli.commands.check_cli import cmd_check
from layerpak.interfaces.cli.commands.dependencies_cli import cmd_dependencies
from layerpak.interfaces.cli.commands.inspect_cli import cmd_inspect
from layerpak.services.config_svc import ConfigService


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="layerpak",
        description="layerpak - Layer contribution with metadata based cache avoidance",
        epilog="Examples:\n"
        "  layerpak inspect /layers                          # Show all layer records\n"
        "  layerpak inspect /layers --name node              # Show the node layer record\n"
        "  layerpak dependencies buildpack.toml              # List declared dependencies\n"
        "  layerpak check buildpack.toml /layers node        # Would the node layer be reused?",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'layerpak <command> --help' for command-specific help)",
    )

    # inspect: Show stored layer records
    s = sub.add_parser("inspect", help="Show stored layer records")
    s.add_argument("layers_dir", nargs="?", help="layers root directory (default: layers_dir from config)")
    s.add_argument("--name", help="layer name (default: all layers)")
    s.set_defaults(func=cmd_inspect)

    # dependencies: List dependencies from buildpack.toml
    s = sub.add_parser("dependencies", help="List dependencies declared in a buildpack.toml")
    s.add_argument("descriptor", help="path to buildpack.toml")
    s.add_argument("--stack", help="only dependencies supported on this stack")
    s.set_defaults(func=cmd_dependencies)

    # check: Would a dependency layer be reused?
    s = sub.add_parser("check", help="Report whether a dependency layer would be reused or rebuilt")
    s.add_argument("descriptor", help="path to buildpack.toml")
    s.add_argument("layers_dir", help="layers root directory")
    s.add_argument("dependency_id", help="dependency id")
    s.add_argument("--stack", help="stack the dependency must support")
    s.add_argument("--layer", help="layer name (default: the dependency id)")
    s.set_defaults(func=cmd_check)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    config = ConfigService()
    logging.basicConfig(
        level=getattr(logging, str(config.get("log_level", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
