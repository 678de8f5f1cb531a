from solstyle.config import NamingRules, RuleConfiguration, SeverityMap
from solstyle.result import CheckResult
from solstyle.rules import CheckContext
from solstyle.rules.naming import NamingRule, is_past_tense
from solstyle.severity import Severity
from solstyle.source import SourceFile


def run_rule(text, naming=None):
    rules = RuleConfiguration(naming=naming) if naming is not None else RuleConfiguration.default()
    context = CheckContext(
        source=SourceFile(path="src/Example.sol", text=text),
        rules=rules,
        severities=SeverityMap(),
    )
    result = CheckResult()
    NamingRule().scan(context, result)
    return result


def by_code(result, code):
    return [finding for finding in result.findings if finding.code == code]


def test_lowercase_contract_is_reported():
    result = run_rule("contract myToken { }")

    findings = by_code(result, "ContractNaming")
    assert len(findings) == 1
    assert findings[0].line == 1
    assert findings[0].severity == Severity.ERROR


def test_cap_words_contract_is_clean():
    assert run_rule("contract MyToken { }").findings == []


def test_contract_match_starts_at_leading_blank_lines():
    result = run_rule("// SPDX-License-Identifier: MIT\n\n\ncontract bad_name {\n}\n")

    assert [finding.line for finding in by_code(result, "ContractNaming")] == [2]


def test_contract_directly_after_code_reports_its_own_line():
    result = run_rule("pragma solidity ^0.8.20;\ncontract bad_name {\n}\n")

    assert [finding.line for finding in by_code(result, "ContractNaming")] == [2]


def test_private_function_uses_underscore_rule_only():
    result = run_rule("contract A {\n    function validateInput() private { }\n}\n")

    assert len(by_code(result, "PrivateInternalFunctionNaming")) == 1
    assert by_code(result, "FunctionNaming") == []
    assert by_code(result, "PrivateInternalFunctionNaming")[0].line == 2


def test_missing_visibility_defaults_to_internal():
    result = run_rule("function helper() pure returns (uint256) { return 1; }")

    findings = by_code(result, "PrivateInternalFunctionNaming")
    assert len(findings) == 1
    assert findings[0].message.startswith("internal function 'helper'")


def test_public_function_with_underscore_fails_mixed_case():
    result = run_rule("function _doThing() public { }")

    assert len(by_code(result, "FunctionNaming")) == 1
    assert by_code(result, "PrivateInternalFunctionNaming") == []


def test_private_function_falls_back_to_mixed_case_when_underscore_rule_off():
    naming = NamingRules(functions="mixedCase")

    result = run_rule("function _helper() private { }\nfunction okName() private { }", naming)

    assert [(finding.code, finding.line) for finding in result.findings] == [("FunctionNaming", 1)]


def test_special_functions_are_skipped():
    result = run_rule("function receive() external payable { }\nfunction fallback() external { }")

    assert result.findings == []


def test_arguments_are_checked_per_name_at_declaration_line():
    text = "function transfer(\n    address to,\n    uint256 _amount,\n    bytes memory data\n) external {\n}"

    result = run_rule(text)

    findings = by_code(result, "FunctionArgumentNaming")
    assert [finding.message for finding in findings] == [
        "Function argument 'to' should use _underscoreMixedCase style",
        "Function argument 'data' should use _underscoreMixedCase style",
    ]
    assert {finding.line for finding in findings} == {1}


def test_unnamed_data_location_arguments_are_skipped():
    result = run_rule("function store(uint256[] memory, string calldata) external { }")

    assert by_code(result, "FunctionArgumentNaming") == []


def test_array_argument_name_is_extracted():
    result = run_rule("function load(uint256 values[]) external { }")

    assert [finding.message for finding in by_code(result, "FunctionArgumentNaming")] == [
        "Function argument 'values' should use _underscoreMixedCase style"
    ]


def test_event_checks_run_independently():
    result = run_rule("event owner_update(address owner);")

    assert [finding.code for finding in result.findings] == ["EventNaming", "EventPastTense"]
    assert result.findings[1].severity == Severity.INFO


def test_past_tense_heuristic():
    assert is_past_tense("OwnerUpdated")
    assert is_past_tense("FeeSet")
    assert not is_past_tense("Transfer")
    # irregular verbs are not recognised
    assert not is_past_tense("MessageSent")


def test_constant_check_reads_token_before_keyword():
    text = "uint256 public constant MAX_SUPPLY = 1;\nuint256 constant maxFee = 2;\nbytes32 private constant ROLE = 0x0;"

    result = run_rule(text)

    assert [(finding.code, finding.line) for finding in result.findings] == [
        ("ConstantNaming", 1),
        ("ConstantNaming", 3),
    ]
    assert "'uint256'" in result.findings[0].message
    assert "'bytes32'" in result.findings[1].message


def test_upper_case_token_before_constant_is_clean():
    assert run_rule("MAX_SUPPLY  constant = 1;\nuint256 constant maxFee = 2;").findings == []


def test_past_tense_check_needs_event_rule():
    text = "event Transfer(address to);"

    assert run_rule(text, NamingRules(events_past_tense=True)).findings == []
    result = run_rule(text, NamingRules(events="CapWords", events_past_tense=True))
    assert [finding.code for finding in result.findings] == ["EventPastTense"]


def test_declaration_without_body_is_skipped_quietly():
    result = run_rule("interface I {\n    function Broken(uint256 x) external;\n}\n")

    assert by_code(result, "ContractNaming") == []
    assert by_code(result, "FunctionNaming") == []


def test_disabled_category_emits_nothing():
    context = CheckContext(
        source=SourceFile(path="src/Example.sol", text="contract bad { function Bad(uint x) public {} }"),
        rules=RuleConfiguration(),
        severities=SeverityMap(),
    )
    empty = CheckResult()
    NamingRule().scan(context, empty)
    assert empty.findings == []
