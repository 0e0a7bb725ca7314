#!/usr/bin/env python3
"""
Shared utilities for the vagrant-exec CLI.
"""

from pathlib import Path

from rich.console import Console

from vagrant_exec.models import MachineState, VagrantSettings
from vagrant_exec.wrapper import Vagrant

console = Console()

STATE_STYLES = {
    MachineState.RUNNING: "green",
    MachineState.NOT_CREATED: "dim",
    MachineState.ABORTED: "red",
    MachineState.GURU_MEDITATION: "red",
    MachineState.INACCESSIBLE: "red",
    MachineState.UNKNOWN: "yellow",
}


def load_settings(args) -> VagrantSettings:
    """Build settings from ``--config`` and override them with CLI flags."""
    config = getattr(args, "config", None)
    settings = VagrantSettings.load(Path(config).expanduser()) if config else VagrantSettings()

    updates = {}
    if getattr(args, "cwd", None):
        updates["cwd"] = Path(args.cwd).expanduser().resolve()
    if getattr(args, "executable", None):
        updates["executable"] = args.executable
    if updates:
        settings = VagrantSettings.model_validate({**settings.model_dump(), **updates})
    return settings


def build_client(args) -> Vagrant:
    return Vagrant(load_settings(args))


def state_markup(state: MachineState) -> str:
    style = STATE_STYLES.get(state, "cyan")
    return f"[{style}]{state.value}[/{style}]"
