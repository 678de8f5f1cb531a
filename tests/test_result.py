from solstyle.result import CheckResult, Finding, Summary, format_report
from solstyle.severity import Severity


def make_finding(path, line, severity, code="ContractNaming", rule="naming.contracts"):
    return Finding(path=path, line=line, rule=rule, code=code, message=f"{code} at {line}", severity=severity)


def test_summary_is_folded_from_findings():
    result = CheckResult(files=["src/A.sol", "src/B.sol"])
    result.add_finding(make_finding("src/A.sol", 1, Severity.ERROR))
    result.add_finding(make_finding("src/A.sol", 2, Severity.WARNING))
    result.add_finding(make_finding("src/B.sol", 3, Severity.INFO))
    result.add_finding(make_finding("src/B.sol", 4, Severity.INFO))

    assert result.summary == Summary(files=2, error=1, warning=1, info=2)
    assert result.summary.total == 4


def test_warnings_and_info_never_block():
    result = CheckResult(files=["src/A.sol"])
    result.add_finding(make_finding("src/A.sol", 1, Severity.WARNING))
    result.add_finding(make_finding("src/A.sol", 2, Severity.INFO))

    assert not result.has_blocking_errors()
    assert result.passed
    assert result.exit_code() == 0


def test_to_dict_serializes_severity_values():
    result = CheckResult(files=["src/A.sol"])
    result.add_finding(make_finding("src/A.sol", 7, Severity.ERROR))

    data = result.to_dict()

    assert data["passed"] is False
    assert data["summary"] == {"files": 1, "error": 1, "warning": 0, "info": 0}
    assert data["findings"][0]["severity"] == "error"
    assert data["findings"][0]["line"] == 7


def test_report_groups_by_file_in_check_order():
    result = CheckResult(files=["src/Z.sol", "src/A.sol"])
    result.add_finding(make_finding("src/A.sol", 5, Severity.WARNING))
    result.add_finding(make_finding("src/Z.sol", 9, Severity.ERROR))

    report = format_report(result)

    assert report.index("src/Z.sol:") < report.index("src/A.sol:")
    assert "[error] Line 9: ContractNaming at 9" in report
    assert "Status    : FAIL" in report


def test_report_for_clean_run():
    report = format_report(CheckResult(files=["src/A.sol"]))

    assert "All style checks passed!" in report
    assert "Status    : PASS" in report
