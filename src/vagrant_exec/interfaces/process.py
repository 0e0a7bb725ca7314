"""Abstract interface for process execution."""

from abc import ABC, abstractmethod


class ProcessRunner(ABC):
    """Runs an external command and returns its standard output.

    Implementations raise :class:`~vagrant_exec.exceptions.ExitError` when
    the command exits non-zero and
    :class:`~vagrant_exec.exceptions.CommandStartError` when it cannot be
    started at all.
    """

    @abstractmethod
    def execute(self, command: str, *args: str) -> bytes:
        """Run *command* with *args* and return captured stdout."""
        pass
