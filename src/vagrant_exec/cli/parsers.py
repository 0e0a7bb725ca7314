#!/usr/bin/env python3
"""
Argument parsers for the vagrant-exec CLI.
"""

import argparse
import sys

from vagrant_exec import __version__
from vagrant_exec.cli.commands import (
    cmd_destroy,
    cmd_halt,
    cmd_plugin_install,
    cmd_plugins,
    cmd_ssh,
    cmd_status,
    cmd_up,
    cmd_version,
)
from vagrant_exec.cli.utils import console
from vagrant_exec.exceptions import ExitError, VagrantError
from vagrant_exec.logging import configure_logging, level_from_flags


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vagrant-exec", description="Drive the Vagrant CLI with structured output"
    )
    parser.add_argument("--version", action="version", version=f"vagrant-exec {__version__}")
    parser.add_argument("--config", "-c", help="Path to a .vagrant-exec.yaml settings file")
    parser.add_argument("--cwd", help="Directory containing the Vagrant environment")
    parser.add_argument("--executable", help="Vagrant executable (default: vagrant)")
    parser.add_argument("--debug", action="store_true", help="Log command output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    status_parser = subparsers.add_parser("status", help="Show machine status")
    status_parser.add_argument("--json", action="store_true", help="Output as JSON")
    status_parser.set_defaults(func=cmd_status)

    version_parser = subparsers.add_parser("version", help="Show the installed Vagrant version")
    version_parser.set_defaults(func=cmd_version)

    plugins_parser = subparsers.add_parser("plugins", help="List installed plugins")
    plugins_parser.add_argument("--json", action="store_true", help="Output as JSON")
    plugins_parser.set_defaults(func=cmd_plugins)

    install_parser = subparsers.add_parser("plugin-install", help="Install a plugin")
    install_parser.add_argument("name", help="Plugin name or path to a plugin gem")
    install_parser.add_argument("--plugin-version", help="Version constraint to install")
    install_parser.add_argument(
        "--local", action="store_true", help="Install into the project instead of globally"
    )
    install_parser.set_defaults(func=cmd_plugin_install)

    up_parser = subparsers.add_parser("up", help="Create and start machines")
    up_parser.set_defaults(func=cmd_up)

    halt_parser = subparsers.add_parser("halt", help="Shut machines down")
    halt_parser.set_defaults(func=cmd_halt)

    destroy_parser = subparsers.add_parser("destroy", help="Destroy machines")
    destroy_parser.set_defaults(func=cmd_destroy)

    ssh_parser = subparsers.add_parser("ssh", help="Run a command over SSH")
    ssh_parser.add_argument("remote_command", help="Command to run on the machine")
    ssh_parser.set_defaults(func=cmd_ssh)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(2)

    level = level_from_flags(args.debug, args.quiet)
    configure_logging(level=level, json_output=args.json_logs)

    try:
        args.func(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/]")
        sys.exit(1)
    except ExitError as e:
        console.print(f"[red]❌ {e}[/]")
        sys.exit(e.exit_code or 1)
    except (VagrantError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]❌ Error: {e}[/]")
        sys.exit(1)
