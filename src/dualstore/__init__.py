"""Unified access to resources held in a runtime database and declarative files."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("dualstore")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"
