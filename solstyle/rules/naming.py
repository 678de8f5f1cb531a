"""Naming convention checks for contracts, functions, events and constants.

Declarations are located with regular expressions over the whole file text
rather than a Solidity parser. The line reported for a declaration is the
line its match starts on, which for contracts can be a blank line above
the declaration. Constructs the patterns do not recognise (unusual
formatting, keywords inside comments) are skipped or misreported rather
than raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

from solstyle.config import CAP_WORDS, MIXED_CASE, UNDERSCORE_MIXED_CASE, UPPER_CASE, NamingRules
from solstyle.result import CheckResult

from . import CheckContext, Rule

IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"

CONTRACT_PATTERN = re.compile(rf"^\s*contract\s+({IDENTIFIER})", re.MULTILINE)
FUNCTION_PATTERN = re.compile(
    rf"function\s+({IDENTIFIER})\s*\(\s*([^)]*)\s*\)\s*([^{{]*?)\s*{{",
    re.DOTALL,
)
VISIBILITY_PATTERN = re.compile(r"\b(public|external|internal|private)\b")
ARGUMENT_NAME_PATTERN = re.compile(rf"\s+({IDENTIFIER})(?:\s*$|\s*\[)")
EVENT_PATTERN = re.compile(rf"event\s+({IDENTIFIER})")
# captures the token ahead of "[visibility] constant"
CONSTANT_PATTERN = re.compile(rf"({IDENTIFIER})\s+(public|private|internal)?\s+constant")

CAP_WORDS_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
MIXED_CASE_RE = re.compile(r"^[a-z][A-Za-z0-9]*$")
UNDERSCORE_MIXED_CASE_RE = re.compile(r"^_[a-z][A-Za-z0-9]*$")
UPPER_CASE_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")

SPECIAL_FUNCTIONS = frozenset({"constructor", "receive", "fallback"})
DATA_LOCATIONS = frozenset({"memory", "storage", "calldata"})
DEFAULT_VISIBILITY = "internal"
PAST_TENSE_SUFFIXES = ("ed", "Updated", "Created", "Deleted", "Added", "Removed", "Set", "Changed")


def is_cap_words(name: str) -> bool:
    return bool(CAP_WORDS_RE.match(name))


def is_mixed_case(name: str) -> bool:
    return bool(MIXED_CASE_RE.match(name))


def is_underscore_mixed_case(name: str) -> bool:
    return bool(UNDERSCORE_MIXED_CASE_RE.match(name))


def is_upper_case(name: str) -> bool:
    return bool(UPPER_CASE_RE.match(name))


def is_past_tense(name: str) -> bool:
    """Suffix heuristic only; irregular verbs such as ``Sent`` fail it."""

    return name.endswith(PAST_TENSE_SUFFIXES)


@dataclass(frozen=True)
class FunctionDeclaration:
    name: str
    arguments: str
    tail: str
    line: int

    @property
    def visibility(self) -> str:
        match = VISIBILITY_PATTERN.search(self.tail)
        return match.group(1) if match else DEFAULT_VISIBILITY

    def argument_names(self) -> List[str]:
        """Return declared argument names, skipping bare data-location words."""

        names: List[str] = []
        for fragment in self.arguments.split(","):
            fragment = fragment.strip()
            if not fragment:
                continue
            match = ARGUMENT_NAME_PATTERN.search(fragment)
            if match and match.group(1) not in DATA_LOCATIONS:
                names.append(match.group(1))
        return names


class NamingRule:
    """Check declaration names against the configured casing styles."""

    name = "naming"

    def scan(self, context: CheckContext, result: CheckResult) -> None:
        rules = context.rules.naming
        if rules is None:
            return
        if rules.contracts:
            self._check_contracts(context, result)
        if rules.functions or rules.private_internal_functions or rules.function_arguments:
            self._check_functions(context, rules, result)
        if rules.events:
            self._check_events(context, rules, result)
        if rules.constants:
            self._check_constants(context, result)

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------
    def _check_contracts(self, context: CheckContext, result: CheckResult) -> None:
        for match in CONTRACT_PATTERN.finditer(context.source.text):
            name = match.group(1)
            if not is_cap_words(name):
                result.add_finding(
                    context.finding(
                        context.source.line_of(match.start()),
                        "naming.contracts",
                        "ContractNaming",
                        f"Contract name '{name}' should use {CAP_WORDS} style",
                    )
                )

    # ------------------------------------------------------------------
    # Functions and their arguments
    # ------------------------------------------------------------------
    def _check_functions(self, context: CheckContext, rules: NamingRules, result: CheckResult) -> None:
        for function in iter_functions(context):
            visibility = function.visibility
            needs_underscore = (
                visibility in ("private", "internal") and rules.private_internal_functions == UNDERSCORE_MIXED_CASE
            )

            if needs_underscore:
                if not is_underscore_mixed_case(function.name):
                    result.add_finding(
                        context.finding(
                            function.line,
                            "naming.privateInternalFunctions",
                            "PrivateInternalFunctionNaming",
                            f"{visibility} function '{function.name}' should use {UNDERSCORE_MIXED_CASE} style",
                        )
                    )
            elif rules.functions == MIXED_CASE and not is_mixed_case(function.name):
                result.add_finding(
                    context.finding(
                        function.line,
                        "naming.functions",
                        "FunctionNaming",
                        f"Function name '{function.name}' should use {MIXED_CASE} style",
                    )
                )

            if rules.function_arguments == UNDERSCORE_MIXED_CASE:
                for argument in function.argument_names():
                    if not is_underscore_mixed_case(argument):
                        # arguments may span lines; report at the declaration
                        result.add_finding(
                            context.finding(
                                function.line,
                                "naming.functionArguments",
                                "FunctionArgumentNaming",
                                f"Function argument '{argument}' should use {UNDERSCORE_MIXED_CASE} style",
                            )
                        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _check_events(self, context: CheckContext, rules: NamingRules, result: CheckResult) -> None:
        for match in EVENT_PATTERN.finditer(context.source.text):
            name = match.group(1)
            line = context.source.line_of(match.start())
            if rules.events == CAP_WORDS and not is_cap_words(name):
                result.add_finding(
                    context.finding(
                        line, "naming.events", "EventNaming", f"Event name '{name}' should use {CAP_WORDS} style"
                    )
                )
            if rules.events_past_tense and not is_past_tense(name):
                result.add_finding(
                    context.finding(
                        line,
                        "naming.eventsPastTense",
                        "EventPastTense",
                        f"Event name '{name}' should be past tense (e.g., 'OwnerUpdated' not 'OwnerUpdate')",
                    )
                )

    # ------------------------------------------------------------------
    # Constants
    # ------------------------------------------------------------------
    def _check_constants(self, context: CheckContext, result: CheckResult) -> None:
        for match in CONSTANT_PATTERN.finditer(context.source.text):
            name = match.group(1)
            if not is_upper_case(name):
                result.add_finding(
                    context.finding(
                        context.source.line_of(match.start()),
                        "naming.constants",
                        "ConstantNaming",
                        f"Constant '{name}' should use {UPPER_CASE}_WITH_UNDERSCORES style",
                    )
                )


def iter_functions(context: CheckContext) -> Iterator[FunctionDeclaration]:
    """Yield function declarations that have a body, skipping special functions."""

    text = context.source.text
    for match in FUNCTION_PATTERN.finditer(text):
        name = match.group(1)
        if name in SPECIAL_FUNCTIONS:
            continue
        yield FunctionDeclaration(
            name=name,
            arguments=match.group(2),
            tail=match.group(3),
            line=context.source.line_of(match.start()),
        )


def get_rule() -> Rule:
    return NamingRule()
