"""Import statement checks: named imports and alphabetical ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from solstyle.result import CheckResult

from . import CheckContext, Rule

NAMED_IMPORT_PATTERN = re.compile(r"""^import\s+\{[^}]+\}\s+from\s+["'][^"']+["'];?$""")
IMPORT_PATH_PATTERN = re.compile(r"""from\s+["']([^"']+)["']""")


@dataclass(frozen=True)
class ImportLine:
    text: str
    line: int

    @property
    def path(self) -> Optional[str]:
        match = IMPORT_PATH_PATTERN.search(self.text)
        return match.group(1) if match else None


class ImportRule:
    """Enforce ``import {X} from "..."`` and path ordering between neighbours."""

    name = "imports"

    def scan(self, context: CheckContext, result: CheckResult) -> None:
        rules = context.rules.imports
        if rules is None:
            return

        imports = collect_imports(context.source.lines)
        for index, current in enumerate(imports):
            if rules.named_only and not NAMED_IMPORT_PATTERN.match(current.text):
                result.add_finding(
                    context.finding(
                        current.line,
                        "imports.namedOnly",
                        "NamedImportRequired",
                        'Use named imports: import {Contract} from "./file.sol"',
                    )
                )

            if rules.alphabetical and index > 0:
                current_path = current.path
                previous_path = imports[index - 1].path
                # imports without a from-clause are left out of the comparison
                if current_path and previous_path and current_path < previous_path:
                    result.add_finding(
                        context.finding(
                            current.line,
                            "imports.alphabetical",
                            "ImportsNotAlphabetical",
                            f"Imports should be alphabetically ordered ('{current_path}' after '{previous_path}')",
                        )
                    )


def collect_imports(lines: List[str]) -> List[ImportLine]:
    """Return trimmed import statements with their 1-indexed line numbers."""

    imports: List[ImportLine] = []
    for number, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if trimmed.startswith("import "):
            imports.append(ImportLine(trimmed, number))
    return imports


def get_rule() -> Rule:
    return ImportRule()
