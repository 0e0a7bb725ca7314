"""
Vagrant CLI client.

Each method issues one blocking ``vagrant`` command through a
:class:`ProcessRunner` and, for ``--machine-readable`` commands, parses the
output into typed results.
"""

from typing import List, Optional

import structlog

from vagrant_exec.backends.subprocess_runner import SubprocessRunner
from vagrant_exec.exceptions import EntryNotFoundError
from vagrant_exec.interfaces.process import ProcessRunner
from vagrant_exec.logging import get_logger, log_command, log_operation, log_output
from vagrant_exec.machine_readable import Record, parse_machine_readable, pluck_entry_data
from vagrant_exec.models import MachineStatus, Plugin, VagrantSettings
from vagrant_exec.reducers import VERSION_INSTALLED, build_statuses, extract_plugins

MACHINE_READABLE = "--machine-readable"


class Vagrant:
    """
    Wrapper around the ``vagrant`` command line.

    Usage:
        vagrant = Vagrant(VagrantSettings(cwd=Path("~/envs/web").expanduser()))
        vagrant.up()
        for status in vagrant.status():
            print(status.name, status.state)
    """

    def __init__(
        self,
        settings: Optional[VagrantSettings] = None,
        runner: Optional[ProcessRunner] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        self.settings = settings or VagrantSettings()
        self.runner = runner or SubprocessRunner(
            cwd=self.settings.cwd,
            env=self.settings.env,
            timeout=self.settings.timeout,
        )
        self.log = (logger or get_logger(__name__)).bind(executable=self.settings.executable)

    @property
    def executable(self) -> str:
        return self.settings.executable

    def up(self) -> None:
        """Create and configure the guest machines."""
        with log_operation(self.log, "up") as log:
            log_output(log, self._exec(log, "up"))

    def halt(self) -> None:
        """Gracefully shut down the guest machines."""
        with log_operation(self.log, "halt") as log:
            log_output(log, self._exec(log, "halt"))

    def destroy(self) -> None:
        """Stop the guest machines and remove all their resources."""
        with log_operation(self.log, "destroy") as log:
            log_output(log, self._exec(log, "destroy", "--force"))

    def status(self) -> List[MachineStatus]:
        """Report the status of the machines Vagrant is managing."""
        with log_operation(self.log, "status") as log:
            return build_statuses(self._machine_readable(log, "status"))

    def version(self) -> str:
        """Return the installed Vagrant version."""
        with log_operation(self.log, "version") as log:
            data = pluck_entry_data(self._machine_readable(log, "version"), VERSION_INSTALLED)
            if not data:
                raise EntryNotFoundError(VERSION_INSTALLED)
            return data[0]

    def ssh(self, command: str) -> str:
        """Run *command* on the machine over SSH and return its output."""
        with log_operation(self.log, "ssh") as log:
            out = self._exec(log, "ssh", "--no-tty", "--command", command)
            return out.decode("utf-8", errors="replace")

    def plugin_list(self) -> List[Plugin]:
        """List installed plugins with their versions and install locations."""
        with log_operation(self.log, "plugin_list") as log:
            records = self._machine_readable(log, "plugin", "list")
            return extract_plugins(records, self.settings.comma_token, log=log)

    def plugin_install(self, plugin: Plugin) -> None:
        """Install a plugin by name, optionally pinned to a version or local."""
        if not plugin.name:
            raise ValueError("plugin must have a name")

        args = ["plugin", "install", plugin.name]
        if plugin.version:
            args.extend(["--plugin-version", plugin.version])
        if plugin.location == "local":
            args.append("--local")

        with log_operation(self.log, "plugin_install", plugin=plugin.name) as log:
            log_output(log, self._exec(log, *args))

    def _machine_readable(self, log: structlog.stdlib.BoundLogger, *args: str) -> List[Record]:
        out = self._exec(log, *args, MACHINE_READABLE)
        return parse_machine_readable(
            out,
            comma_token=self.settings.comma_token,
            newline_token=self.settings.newline_token,
        )

    def _exec(self, log: structlog.stdlib.BoundLogger, *args: str) -> bytes:
        log_command(log, self.executable, args)
        out = self.runner.execute(self.executable, *args)
        log_command(log, self.executable, args, out)
        return out
