from rsmlpy.diagnostics import LINT_EMPTY_RULE, PARSER_UNSUPPORTED_EXPRESSION
from rsmlpy.parser import ParseMode, parse_result
from rsmlpy.pipeline import run_check, run_lint


def test_run_lint_reuses_provided_parse_result() -> None:
    source = "Frame { !A = 1; }"
    parsed = parse_result(source)

    result = run_lint("ignored", parse=parsed)

    assert result.parse is parsed
    assert result.diagnostics == parsed.diagnostics


def test_run_lint_rejects_parse_with_mode_or_options() -> None:
    parsed = parse_result("Frame { }")

    try:
        run_lint("Frame { }", mode=ParseMode.STRICT, parse=parsed)
    except ValueError as exc:
        assert "either parse or options/mode" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing parse with mode")


def test_run_check_rejects_parse_with_mode_or_options() -> None:
    parsed = parse_result("Frame { }")

    try:
        run_check("Frame { }", mode=ParseMode.LENIENT, parse=parsed)
    except ValueError as exc:
        assert "either parse or options/mode" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing parse with mode")


def test_run_check_merges_parse_and_lint_diagnostics_in_source_order() -> None:
    source = "Frame { }\n$x = 1 + 2;"

    result = run_check(source)

    assert [d.code for d in result.diagnostics] == [LINT_EMPTY_RULE.code, PARSER_UNSUPPORTED_EXPRESSION.code]
    assert result.has_errors is False


def test_run_check_strict_mode_has_errors() -> None:
    result = run_check("$x = 1 + 2;", mode=ParseMode.STRICT)

    assert result.has_errors is True
    assert result.parse.options.mode == ParseMode.STRICT


def test_run_check_clean_document() -> None:
    result = run_check("$gap = 4px; Frame { !Padding = $gap; }")

    assert result.diagnostics == []
    assert result.has_errors is False
