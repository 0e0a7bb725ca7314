#!/usr/bin/env python3
"""
vagrant-exec CLI package.
"""

from .parsers import build_parser, main
from .utils import build_client, console, load_settings

__all__ = ["main", "build_parser", "build_client", "console", "load_settings"]
