"""Exception types raised by vagrant-exec."""

from typing import Optional


class VagrantError(Exception):
    """Base exception for vagrant-exec errors."""


class ExitError(VagrantError):
    """A command ran but exited with a non-zero status."""

    def __init__(self, command: str, exit_code: int, stderr: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        message = f"{command} exited with code {exit_code}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class CommandStartError(VagrantError):
    """A command could not be started at all (missing binary, permissions)."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"failed to start {command}: {reason}")


class CommandTimeoutError(VagrantError):
    """A command did not finish within the configured timeout."""

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command} did not finish within {timeout}s")


class MalformedRecordError(VagrantError, ValueError):
    """A machine-readable line could not be split into its fields."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"malformed machine-readable {where}: {reason}: {line!r}")


class EntryNotFoundError(VagrantError, LookupError):
    """No record of the requested type was present in the output."""

    def __init__(self, entry_type: str):
        self.entry_type = entry_type
        super().__init__(f"entry not found: {entry_type}")


class PluginFormatError(VagrantError, ValueError):
    """A plugin description did not match the expected layout."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"unrecognized plugin description: {description!r}")
