"""Command-line entry point for the Solidity style checker."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import CheckerConfig, ConfigError, load_config
from .engine import check_sources
from .result import CheckResult, format_report
from .source import SourceFile
from .utils import DiscoveryError, discover_sources

SETUP_FAILURE_EXIT_CODE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solstyle",
        description="Check Solidity sources against the project style guide.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML rule configuration (defaults to the built-in rules).",
    )
    parser.add_argument(
        "--source-dir",
        default=None,
        help="Directory holding the contracts (overrides the config's source_dir).",
    )
    parser.add_argument(
        "--contract",
        "-c",
        dest="contracts",
        action="append",
        default=[],
        help="Contract name to check, without .sol (repeatable; '*' checks everything).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Print a JSON report after the summary when no --out is given.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/style.json).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-file progress.",
    )
    return parser


def iter_sources(paths: Sequence[Path], source_dir: Path) -> Iterator[SourceFile]:
    """Read each file only when the engine reaches it."""

    for path in paths:
        yield SourceFile.load(path, path.relative_to(source_dir.parent).as_posix())


def run_check(config: CheckerConfig) -> CheckResult:
    source_dir = Path(config.source_dir)
    paths = discover_sources(source_dir, config.contract_names)
    return check_sources(iter_sources(paths, source_dir), config.rules, config.severities)


def write_output(result: CheckResult, output_path: str | None, report_format: str) -> None:
    print(format_report(result))

    payload = json.dumps(result.to_dict(), indent=2)
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nReport written to {output_path}")
    elif report_format == "json":
        print("\nJSON Report")
        print(payload)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else CheckerConfig()
        if args.source_dir or args.contracts:
            config = replace(
                config,
                contract_names=tuple(args.contracts) or config.contract_names,
                source_dir=args.source_dir or config.source_dir,
            )
        result = run_check(config)
    except (ConfigError, DiscoveryError) as exc:
        print(f"Style check failed: {exc}", file=sys.stderr)
        return SETUP_FAILURE_EXIT_CODE

    write_output(result, args.output_path, args.format)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
