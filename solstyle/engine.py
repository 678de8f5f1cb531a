"""Run every rule pass over a sequence of source files."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import RuleConfiguration, SeverityMap
from .result import CheckResult
from .rules import CheckContext, Rule
from .rules.imports import ImportRule
from .rules.layout import LayoutRule
from .rules.naming import NamingRule
from .rules.structure import StructureRule
from .source import SourceFile

log = logging.getLogger(__name__)


def load_rules() -> List[Rule]:
    """Return the passes in the order they run for each file."""

    return [
        StructureRule(),
        ImportRule(),
        NamingRule(),
        LayoutRule(),
    ]


def check_sources(
    sources: Iterable[SourceFile],
    rules: Optional[RuleConfiguration] = None,
    severities: Optional[SeverityMap] = None,
) -> CheckResult:
    """Check ``sources`` in order and return every finding.

    Pure with respect to its inputs: the same files and configuration always
    produce the same ordered findings.
    """

    rules = rules if rules is not None else RuleConfiguration.default()
    severities = severities if severities is not None else SeverityMap()
    passes = load_rules()
    result = CheckResult()

    for source in sources:
        log.debug("Checking %s", source.path)
        result.add_file(source.path)
        context = CheckContext(source=source, rules=rules, severities=severities)
        for rule in passes:
            before = len(result.findings)
            rule.scan(context, result)
            log.debug("%s: %s pass emitted %d finding(s)", source.path, rule.name, len(result.findings) - before)
    return result
