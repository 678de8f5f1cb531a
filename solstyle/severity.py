"""Severity definitions for style findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels for findings."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Build a severity from a config value such as ``"Warning"``."""

        if isinstance(value, Severity):
            return value
        return cls(str(value).strip().lower())

    @property
    def blocking(self) -> bool:
        """Only errors fail a run; warnings and info are advisory."""

        return self is Severity.ERROR
