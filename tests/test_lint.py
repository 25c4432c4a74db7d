from dataclasses import dataclass

import pytest

from rsmlpy.diagnostics import (
    LINT_DERIVE_EXTENSION,
    LINT_EMPTY_RULE,
    LINT_UNDEFINED_VARIABLE,
    Diagnostic,
)
from rsmlpy.lint import (
    DeriveExtensionRule,
    EmptyRuleRule,
    UndefinedVariableRule,
    default_lint_rules,
    run_lint,
    validate_lint_rules,
)
from rsmlpy.parser import parse_result
from rsmlpy.pipeline import RsmlParseResult
from tests._shared_cases import PARSER_CASES, RsmlCase, case_id


def _lint_codes(source: str) -> list[str]:
    return [d.code for d in run_lint(source).diagnostics]


def test_default_rules_are_sorted_and_valid() -> None:
    rules = default_lint_rules()

    validate_lint_rules(rules)
    assert [rule.name for rule in rules] == ["deriveExtension", "undefinedVariable", "emptyRule"]


def test_undefined_variable_reference() -> None:
    source = "Frame { !Size = $missing; }"
    result = run_lint(source)

    assert [d.code for d in result.diagnostics] == [LINT_UNDEFINED_VARIABLE.code]
    diagnostic = result.diagnostics[0]
    assert source[diagnostic.range.start : diagnostic.range.end] == "$missing"
    assert "`$missing`" in diagnostic.message
    assert diagnostic.category == "lint/correctness"


def test_variables_resolve_through_enclosing_scopes() -> None:
    source = "$base = 1; Frame { $inner = 2; Label { !A = $inner; !B = $base; } }"

    assert _lint_codes(source) == []


def test_sibling_scope_variables_are_not_visible() -> None:
    source = "A { $only = 1; } B { !X = $only; }"

    assert _lint_codes(source) == [LINT_UNDEFINED_VARIABLE.code]


def test_undefined_variable_skipped_when_stylesheet_derives() -> None:
    assert _lint_codes('@derive "theme.rsml"; Frame { !A = $fromTheme; }') == []


def test_empty_rule_reports_selector_span() -> None:
    source = "Frame { Label { } !A = 1; }"
    result = run_lint(source)

    assert [d.code for d in result.diagnostics] == [LINT_EMPTY_RULE.code]
    diagnostic = result.diagnostics[0]
    assert source[diagnostic.range.start : diagnostic.range.end] == "Label { }"
    assert diagnostic.severity == "warning"


def test_rule_with_only_nested_rules_is_not_empty() -> None:
    assert _lint_codes("Frame { Label { !A = 1; } }") == []


def test_derive_extension() -> None:
    source = '@derive "theme.rsml", "fonts.txt";'
    result = run_lint(source)

    assert [d.code for d in result.diagnostics] == [LINT_DERIVE_EXTENSION.code]
    assert "fonts.txt" in result.diagnostics[0].message


def test_run_lint_with_selected_rules() -> None:
    source = 'Frame { } @derive "x.txt";'
    parsed = parse_result(source)

    result = run_lint(source, parse=parsed, rules=[EmptyRuleRule()])

    assert [d.code for d in result.diagnostics] == [LINT_EMPTY_RULE.code]


def test_lint_diagnostics_are_sorted_by_position() -> None:
    result = run_lint('A { } @derive "x.txt"; B { !C = $nope; }')

    starts = [d.range.start for d in result.diagnostics]
    assert starts == sorted(starts)
    assert len(result.diagnostics) == 2


@dataclass(frozen=True, slots=True)
class _BadCodeRule:
    code: str = "STYLE_X"
    name: str = "badCode"
    category: str = "lint/style"

    def run(self, parse: RsmlParseResult) -> list[Diagnostic]:
        return []


@dataclass(frozen=True, slots=True)
class _BadCategoryRule:
    code: str = "LINT_X"
    name: str = "badCategory"
    category: str = "style"

    def run(self, parse: RsmlParseResult) -> list[Diagnostic]:
        return []


def test_validate_lint_rules_rejects_bad_code_and_category() -> None:
    with pytest.raises(ValueError, match="expected `LINT_` prefix"):
        validate_lint_rules([_BadCodeRule()])
    with pytest.raises(ValueError, match="expected `lint/` prefix"):
        validate_lint_rules([_BadCategoryRule()])


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_rules_run_on_every_case(case: RsmlCase) -> None:
    parsed = parse_result(case.source)

    for rule in (UndefinedVariableRule(), EmptyRuleRule(), DeriveExtensionRule()):
        for diagnostic in rule.run(parsed):
            assert diagnostic.code == rule.code
            assert 0 <= diagnostic.range.start <= diagnostic.range.end <= len(case.source)
