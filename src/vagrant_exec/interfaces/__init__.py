"""Abstract interfaces for vagrant-exec collaborators."""

from .process import ProcessRunner

__all__ = ["ProcessRunner"]
