"""Utility helpers for the style checker."""

from .fileio import read_yaml_file, read_text_file
from .code import DiscoveryError, discover_sources

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "DiscoveryError",
    "discover_sources",
]
