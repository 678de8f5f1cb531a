"""Per-line layout checks: line length, tabs and trailing whitespace."""

from __future__ import annotations

import re

from solstyle.result import CheckResult

from . import CheckContext, Rule

TRAILING_WHITESPACE = re.compile(r"\s+$")


class LayoutRule:
    name = "layout"

    def scan(self, context: CheckContext, result: CheckResult) -> None:
        rules = context.rules.layout
        if rules is None:
            return

        for number, line in enumerate(context.source.lines, start=1):
            if rules.max_line_length and len(line) > rules.max_line_length:
                result.add_finding(
                    context.finding(
                        number,
                        "layout.maxLineLength",
                        "MaxLineLength",
                        f"Line length {len(line)} exceeds maximum {rules.max_line_length}",
                    )
                )
            if rules.no_tabs and "\t" in line:
                result.add_finding(
                    context.finding(number, "layout.noTabs", "NoTabs", "Use spaces instead of tabs for indentation")
                )
            if rules.no_trailing_whitespace and TRAILING_WHITESPACE.search(line):
                result.add_finding(
                    context.finding(
                        number, "layout.noTrailingWhitespace", "TrailingWhitespace", "Remove trailing whitespace"
                    )
                )


def get_rule() -> Rule:
    return LayoutRule()
