#!/usr/bin/env python3
"""
Data models for vagrant-exec: machine status, plugins and client settings.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

VAGRANT_COMMA = "%!(VAGRANT_COMMA)"
VAGRANT_NEWLINE = "\\n"
DEFAULT_CONFIG_FILE = ".vagrant-exec.yaml"


class MachineState(Enum):
    """Lifecycle state reported by ``vagrant status``."""

    RUNNING = "running"  # vagrant up
    POWEROFF = "poweroff"  # vagrant halt
    SAVED = "saved"  # vagrant suspend
    ABORTED = "aborted"
    NOT_CREATED = "not_created"  # vagrant destroy
    PAUSED = "paused"
    SAVING = "saving"
    RESTORING = "restoring"
    GURU_MEDITATION = "gurumeditation"
    INACCESSIBLE = "inaccessible"
    # libvirt
    SHUTOFF = "shutoff"
    # lxc / docker
    STOPPED = "stopped"
    FROZEN = "frozen"
    NOT_RUNNING = "not_running"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "MachineState":
        """Map a raw state string to a member, falling back to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass
class MachineStatus:
    """Status of one machine in the Vagrant environment."""

    name: str
    provider: str = ""
    state: MachineState = MachineState.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "provider": self.provider,
            "state": self.state.value,
        }


@dataclass
class Plugin:
    """Vagrant plugin metadata."""

    name: str
    version: str = ""
    location: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "version": self.version, "location": self.location}


class VagrantSettings(BaseModel):
    """Settings for the Vagrant client, loadable from YAML."""

    executable: str = Field(
        default_factory=lambda: os.getenv("VAGRANT_EXEC_BINARY", "vagrant"),
        description="Vagrant executable name or path",
    )
    cwd: Optional[Path] = Field(default=None, description="Directory holding the environment")
    env: Dict[str, str] = Field(default_factory=dict, description="Extra environment variables")
    timeout: Optional[float] = Field(default=None, description="Seconds before a command is killed")
    comma_token: str = Field(default=VAGRANT_COMMA, description="Escaped comma marker")
    newline_token: str = Field(default=VAGRANT_NEWLINE, description="Escaped newline marker")

    @field_validator("executable")
    @classmethod
    def executable_must_be_set(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("executable cannot be empty")
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("comma_token", "newline_token")
    @classmethod
    def token_must_be_set(cls, v: str) -> str:
        if not v:
            raise ValueError("escape tokens cannot be empty")
        if "," in v:
            raise ValueError("escape tokens cannot contain a literal comma")
        return v

    def save(self, path: Path) -> None:
        """Save settings to a YAML file."""
        import yaml

        data = self.model_dump(mode="json", exclude_none=True)
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    @classmethod
    def load(cls, path: Path) -> "VagrantSettings":
        """Load settings from a YAML file or a directory containing one."""
        import yaml

        path = Path(path)
        if path.is_dir():
            path = path / DEFAULT_CONFIG_FILE
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        data = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(data)
