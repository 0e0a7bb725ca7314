"""Concrete implementations of vagrant-exec interfaces."""

from .subprocess_runner import SubprocessRunner

__all__ = ["SubprocessRunner"]
