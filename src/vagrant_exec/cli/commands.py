#!/usr/bin/env python3
"""
Command handlers for the vagrant-exec CLI.
"""

import json

from rich.table import Table

from vagrant_exec.cli.utils import build_client, console, state_markup
from vagrant_exec.models import Plugin


def cmd_status(args):
    """Show the status of every machine in the environment."""
    statuses = sorted(build_client(args).status(), key=lambda s: s.name)

    if args.json:
        console.print_json(json.dumps([s.to_dict() for s in statuses]))
        return

    if not statuses:
        console.print("[dim]No machines found[/]")
        return

    table = Table(title="Machines")
    table.add_column("Name", style="cyan")
    table.add_column("State")
    table.add_column("Provider", style="green")

    for status in statuses:
        table.add_row(status.name, state_markup(status.state), status.provider or "-")

    console.print(table)


def cmd_version(args):
    """Print the installed Vagrant version."""
    console.print(build_client(args).version())


def cmd_plugins(args):
    """List installed Vagrant plugins."""
    plugins = build_client(args).plugin_list()

    if args.json:
        console.print_json(json.dumps([p.to_dict() for p in plugins]))
        return

    if not plugins:
        console.print("[dim]No plugins installed[/]")
        return

    table = Table(title="Plugins")
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Location", style="yellow")

    for plugin in plugins:
        table.add_row(plugin.name, plugin.version, plugin.location)

    console.print(table)


def cmd_plugin_install(args):
    """Install a plugin."""
    plugin = Plugin(
        name=args.name,
        version=args.plugin_version or "",
        location="local" if args.local else "",
    )
    build_client(args).plugin_install(plugin)
    console.print(f"[green]✅ Installed plugin {plugin.name}[/]")


def cmd_up(args):
    """Create and start the machines."""
    build_client(args).up()
    console.print("[green]✅ Machines are up[/]")


def cmd_halt(args):
    """Shut the machines down."""
    build_client(args).halt()
    console.print("[green]✅ Machines halted[/]")


def cmd_destroy(args):
    """Destroy the machines."""
    build_client(args).destroy()
    console.print("[green]✅ Machines destroyed[/]")


def cmd_ssh(args):
    """Run a command on the machine over SSH."""
    output = build_client(args).ssh(args.remote_command)
    console.print(output, end="", markup=False, highlight=False)
