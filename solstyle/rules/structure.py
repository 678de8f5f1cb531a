"""File structure checks: SPDX license header and pragma placement."""

from __future__ import annotations

from typing import List, Optional

from solstyle.result import CheckResult

from . import CheckContext, Rule

SPDX_MARKER = "SPDX-License-Identifier:"
PRAGMA_PREFIX = "pragma solidity"


class StructureRule:
    """Require an SPDX identifier on the first line, ahead of the pragma."""

    name = "structure"

    def scan(self, context: CheckContext, result: CheckResult) -> None:
        rules = context.rules.structure
        if rules is None:
            return
        lines = context.source.lines

        if rules.spdx_license:
            if SPDX_MARKER not in context.source.text:
                result.add_finding(
                    context.finding(1, "structure.spdxLicense", "MissingSPDX", "Missing SPDX license identifier")
                )
            elif rules.spdx_at_top and SPDX_MARKER not in lines[0].strip():
                result.add_finding(
                    context.finding(
                        1, "structure.spdxAtTop", "SPDXNotAtTop", "SPDX license should be on first line"
                    )
                )

        if rules.pragma_after_license:
            pragma_index = _first_index(lines, lambda line: line.strip().startswith(PRAGMA_PREFIX))
            spdx_index = _first_index(lines, lambda line: SPDX_MARKER in line)
            if pragma_index is not None and spdx_index is not None and pragma_index < spdx_index:
                result.add_finding(
                    context.finding(
                        pragma_index + 1,
                        "structure.pragmaAfterLicense",
                        "PragmaBeforeLicense",
                        "Pragma should come after SPDX license",
                    )
                )


def _first_index(lines: List[str], predicate) -> Optional[int]:
    for index, line in enumerate(lines):
        if predicate(line):
            return index
    return None


def get_rule() -> Rule:
    return StructureRule()
