"""Rule registry for the style checker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from solstyle.config import RuleConfiguration, SeverityMap
from solstyle.result import CheckResult, Finding
from solstyle.source import SourceFile


class Rule(Protocol):
    """Protocol implemented by every rule pass."""

    name: str

    def scan(self, context: "CheckContext", result: CheckResult) -> None:
        """Analyze ``context.source`` and append findings to ``result``."""


@dataclass(frozen=True)
class CheckContext:
    """Bundle inputs shared across rule passes for one file."""

    source: SourceFile
    rules: RuleConfiguration
    severities: SeverityMap

    def finding(self, line: int, rule: str, code: str, message: str) -> Finding:
        return Finding(
            path=self.source.path,
            line=line,
            rule=rule,
            code=code,
            message=message,
            severity=self.severities.resolve(rule),
        )
