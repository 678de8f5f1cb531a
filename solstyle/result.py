"""Core result data structures for the style checker."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
    Severity.INFO,
)


@dataclass(frozen=True)
class Finding:
    """Capture a single rule violation."""

    path: str
    line: int
    rule: str
    code: str
    message: str
    severity: Severity

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass(frozen=True)
class Summary:
    """Aggregate finding counts by severity."""

    files: int = 0
    error: int = 0
    warning: int = 0
    info: int = 0

    @classmethod
    def from_findings(cls, files: int, findings: Sequence[Finding]) -> "Summary":
        counts = {severity: 0 for severity in SEVERITY_ORDER}
        for finding in findings:
            counts[finding.severity] += 1
        return cls(
            files=files,
            error=counts[Severity.ERROR],
            warning=counts[Severity.WARNING],
            info=counts[Severity.INFO],
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value)) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return self.error + self.warning + self.info


@dataclass
class CheckResult:
    """Bundle the checked files and the ordered findings list."""

    files: List[str] = field(default_factory=list)
    findings: List[Finding] = field(default_factory=list)

    @property
    def summary(self) -> Summary:
        return Summary.from_findings(len(self.files), self.findings)

    @property
    def passed(self) -> bool:
        return not self.has_blocking_errors()

    def has_blocking_errors(self) -> bool:
        return any(finding.severity.blocking for finding in self.findings)

    def add_file(self, path: str) -> None:
        self.files.append(path)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def extend(self, findings: Sequence[Finding]) -> None:
        for finding in findings:
            self.add_finding(finding)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }

    def exit_code(self) -> int:
        return 1 if self.has_blocking_errors() else 0

    def group_by_file(self) -> Dict[str, List[Finding]]:
        """Group findings per file, keeping the order files were checked in."""

        grouped: Dict[str, List[Finding]] = {path: [] for path in self.files}
        for finding in self.findings:
            grouped.setdefault(finding.path, []).append(finding)
        return {path: items for path, items in grouped.items() if items}


def format_report(result: CheckResult) -> str:
    """Create a human-readable report for console output."""

    lines: List[str] = []
    lines.append("Style Check Results")
    lines.append("=" * 40)

    grouped = result.group_by_file()
    if not grouped:
        lines.append("All style checks passed!")
    for path, findings in grouped.items():
        lines.append("")
        lines.append(f"{path}:")
        for finding in findings:
            lines.append(f"  [{finding.severity.value}] Line {finding.line}: {finding.message}")
            lines.append(f"      Rule: {finding.rule} ({finding.code})")

    summary = result.summary
    lines.append("")
    lines.append("Summary")
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Files     : {summary.files}")
    lines.append(f"Status    : {status}")
    if not result.passed:
        lines.append("")
        lines.append("Fix errors before proceeding with deployment or review.")
    return "\n".join(lines)
