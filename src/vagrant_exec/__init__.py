"""
vagrant-exec - drive the Vagrant CLI from Python.

Runs ``vagrant`` commands and turns their ``--machine-readable`` output into
machine statuses, versions and plugin listings.
"""

__version__ = "0.1.0"
__author__ = "vagrant-exec Team"

from vagrant_exec.exceptions import (
    CommandStartError,
    CommandTimeoutError,
    EntryNotFoundError,
    ExitError,
    MalformedRecordError,
    PluginFormatError,
    VagrantError,
)
from vagrant_exec.machine_readable import Record, parse_machine_readable, pluck_entry_data
from vagrant_exec.models import MachineState, MachineStatus, Plugin, VagrantSettings
from vagrant_exec.reducers import build_statuses, extract_plugins
from vagrant_exec.wrapper import Vagrant

__all__ = [
    "Vagrant",
    "VagrantSettings",
    "MachineState",
    "MachineStatus",
    "Plugin",
    "Record",
    "parse_machine_readable",
    "pluck_entry_data",
    "build_statuses",
    "extract_plugins",
    "VagrantError",
    "ExitError",
    "CommandStartError",
    "CommandTimeoutError",
    "MalformedRecordError",
    "EntryNotFoundError",
    "PluginFormatError",
    "__version__",
]
