"""Subprocess process runner implementation."""

import os
import subprocess
from pathlib import Path
from typing import Dict, Optional

from ..exceptions import CommandStartError, CommandTimeoutError, ExitError
from ..interfaces.process import ProcessRunner


class SubprocessRunner(ProcessRunner):
    """Run processes using the subprocess module."""

    def __init__(
        self,
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        self.cwd = cwd
        self.env = env or {}
        self.timeout = timeout

    def _environ(self) -> Optional[Dict[str, str]]:
        if not self.env:
            return None
        environ = dict(os.environ)
        environ.update(self.env)
        return environ

    def execute(self, command: str, *args: str) -> bytes:
        """Run a command, raising ExitError on a non-zero exit."""
        try:
            result = subprocess.run(
                [command, *args],
                capture_output=True,
                timeout=self.timeout,
                check=False,
                cwd=str(self.cwd) if self.cwd else None,
                env=self._environ(),
            )
        except subprocess.TimeoutExpired:
            raise CommandTimeoutError(command, self.timeout)
        except OSError as e:
            raise CommandStartError(command, e.strerror or str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace") if result.stderr else ""
            raise ExitError(command, result.returncode, stderr)
        return result.stdout
