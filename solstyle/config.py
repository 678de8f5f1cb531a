"""Rule configuration and severity resolution.

Configuration is resolved once, before any file is checked, into frozen
dataclasses. Rule passes only ever read these typed values; a category set
to ``None`` disables every rule in it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .severity import Severity
from .utils import read_yaml_file

log = logging.getLogger(__name__)

CAP_WORDS = "CapWords"
MIXED_CASE = "mixedCase"
UNDERSCORE_MIXED_CASE = "_underscoreMixedCase"
UPPER_CASE = "UPPER_CASE"

DEFAULT_SOURCE_DIR = "src"
DEFAULT_CONTRACT_NAMES: Tuple[str, ...] = ("*",)

DEFAULT_SEVERITIES: Dict[str, Severity] = {
    "structure.spdxLicense": Severity.ERROR,
    "structure.spdxAtTop": Severity.WARNING,
    "structure.pragmaAfterLicense": Severity.WARNING,
    "imports.namedOnly": Severity.WARNING,
    "imports.alphabetical": Severity.WARNING,
    "naming.contracts": Severity.ERROR,
    "naming.functions": Severity.ERROR,
    "naming.privateInternalFunctions": Severity.ERROR,
    "naming.functionArguments": Severity.ERROR,
    "naming.events": Severity.ERROR,
    "naming.eventsPastTense": Severity.INFO,
    "naming.constants": Severity.ERROR,
    "layout.maxLineLength": Severity.WARNING,
    "layout.noTabs": Severity.ERROR,
    "layout.noTrailingWhitespace": Severity.WARNING,
}


class ConfigError(ValueError):
    pass


def _flag(key: str) -> Any:
    return field(default=False, metadata={"key": key, "kind": "flag"})


def _style(key: str, style: str) -> Any:
    return field(default=None, metadata={"key": key, "kind": "style", "style": style})


def _limit(key: str) -> Any:
    return field(default=None, metadata={"key": key, "kind": "limit"})


@dataclass(frozen=True)
class StructureRules:
    spdx_license: bool = _flag("spdxLicense")
    spdx_at_top: bool = _flag("spdxAtTop")
    pragma_after_license: bool = _flag("pragmaAfterLicense")


@dataclass(frozen=True)
class ImportRules:
    named_only: bool = _flag("namedOnly")
    alphabetical: bool = _flag("alphabetical")


@dataclass(frozen=True)
class NamingRules:
    contracts: Optional[str] = _style("contracts", CAP_WORDS)
    functions: Optional[str] = _style("functions", MIXED_CASE)
    private_internal_functions: Optional[str] = _style("privateInternalFunctions", UNDERSCORE_MIXED_CASE)
    function_arguments: Optional[str] = _style("functionArguments", UNDERSCORE_MIXED_CASE)
    events: Optional[str] = _style("events", CAP_WORDS)
    events_past_tense: bool = _flag("eventsPastTense")
    constants: Optional[str] = _style("constants", UPPER_CASE)


@dataclass(frozen=True)
class LayoutRules:
    max_line_length: Optional[int] = _limit("maxLineLength")
    no_tabs: bool = _flag("noTabs")
    no_trailing_whitespace: bool = _flag("noTrailingWhitespace")


CATEGORIES = {
    "structure": StructureRules,
    "imports": ImportRules,
    "naming": NamingRules,
    "layout": LayoutRules,
}


@dataclass(frozen=True)
class RuleConfiguration:
    """Category -> rule settings; ``None`` switches a whole category off."""

    structure: Optional[StructureRules] = None
    imports: Optional[ImportRules] = None
    naming: Optional[NamingRules] = None
    layout: Optional[LayoutRules] = None

    @classmethod
    def default(cls) -> "RuleConfiguration":
        return cls(
            structure=StructureRules(spdx_license=True, spdx_at_top=True, pragma_after_license=True),
            imports=ImportRules(named_only=True, alphabetical=True),
            naming=NamingRules(
                contracts=CAP_WORDS,
                functions=MIXED_CASE,
                private_internal_functions=UNDERSCORE_MIXED_CASE,
                function_arguments=UNDERSCORE_MIXED_CASE,
                events=CAP_WORDS,
                events_past_tense=True,
                constants=UPPER_CASE,
            ),
            layout=LayoutRules(max_line_length=120, no_tabs=True, no_trailing_whitespace=True),
        )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "RuleConfiguration":
        if not isinstance(raw, Mapping):
            raise ConfigError("'rules' must be a mapping of category -> rule settings")
        categories: Dict[str, Any] = {}
        for category, settings in raw.items():
            rules_cls = CATEGORIES.get(category)
            if rules_cls is None:
                log.debug("Ignoring unsupported rule category %r", category)
                continue
            if settings is None or settings is False:
                continue
            categories[category] = _build_category(rules_cls, category, settings)
        return cls(**categories)


def _build_category(rules_cls: type, category: str, settings: Any) -> Any:
    if not isinstance(settings, Mapping):
        raise ConfigError(f"Rule category '{category}' must be a mapping")

    by_key = {item.metadata["key"]: item for item in fields(rules_cls)}
    values: Dict[str, Any] = {}
    for key, value in settings.items():
        item = by_key.get(key)
        if item is None:
            log.debug("Ignoring unsupported rule %s.%s", category, key)
            continue
        values[item.name] = _coerce(f"{category}.{key}", item.metadata, value)
    return rules_cls(**values)


def _coerce(rule: str, metadata: Mapping[str, Any], value: Any) -> Any:
    kind = metadata["kind"]
    if kind == "flag":
        if value is None:
            return False
        if not isinstance(value, bool):
            raise ConfigError(f"Rule '{rule}' expects true/false, got {value!r}")
        return value
    if value is None or value is False:
        return None
    if kind == "style":
        if value != metadata["style"]:
            raise ConfigError(f"Rule '{rule}' supports only '{metadata['style']}', got {value!r}")
        return value
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"Rule '{rule}' expects a positive integer, got {value!r}")
    return value


@dataclass(frozen=True)
class SeverityMap:
    """Resolve ``category.ruleName`` identifiers to a severity."""

    overrides: Mapping[str, Severity] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "SeverityMap":
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ConfigError("'severity' must be a mapping of rule id -> severity")
        overrides: Dict[str, Severity] = {}
        for rule, value in raw.items():
            try:
                overrides[str(rule)] = Severity.parse(value)
            except ValueError:
                raise ConfigError(f"Unknown severity {value!r} for rule '{rule}'") from None
        return cls(overrides=overrides)

    def resolve(self, rule: str) -> Severity:
        if rule in self.overrides:
            return self.overrides[rule]
        return DEFAULT_SEVERITIES.get(rule, Severity.ERROR)


@dataclass(frozen=True)
class CheckerConfig:
    """Everything a run needs, loaded once before checking begins."""

    rules: RuleConfiguration = field(default_factory=RuleConfiguration.default)
    severities: SeverityMap = field(default_factory=SeverityMap)
    contract_names: Tuple[str, ...] = DEFAULT_CONTRACT_NAMES
    source_dir: str = DEFAULT_SOURCE_DIR


def load_config(path: str | Path) -> CheckerConfig:
    config_path = Path(path)
    raw = read_yaml_file(config_path)
    if raw is None:
        raise ConfigError(f"Config file not found: {config_path}")
    if not isinstance(raw, dict):
        raise ConfigError(f"Config at {config_path} is not a mapping")

    rules = RuleConfiguration.default()
    if "rules" in raw:
        rules = RuleConfiguration.from_mapping(raw["rules"] or {})

    contracts = raw.get("contracts", list(DEFAULT_CONTRACT_NAMES))
    if isinstance(contracts, str):
        contracts = [contracts]
    if not isinstance(contracts, list) or not contracts:
        raise ConfigError("'contracts' must be a non-empty list of names or ['*']")

    source_dir = raw.get("source_dir", DEFAULT_SOURCE_DIR)
    if not isinstance(source_dir, str) or not source_dir.strip():
        raise ConfigError("'source_dir' must be a non-empty string")

    log.debug("Loaded configuration from %s", config_path)
    return CheckerConfig(
        rules=rules,
        severities=SeverityMap.from_mapping(raw.get("severity")),
        contract_names=tuple(str(name) for name in contracts),
        source_dir=source_dir,
    )
