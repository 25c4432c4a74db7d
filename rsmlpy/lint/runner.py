"""Lint runner over a shared RSML parse result."""

from __future__ import annotations

from collections.abc import Sequence

from rsmlpy.diagnostics import sort_diagnostics
from rsmlpy.lint.rules import LintRule, default_lint_rules, validate_lint_rules
from rsmlpy.parser import ParseMode, ParserOptions, parse_result
from rsmlpy.pipeline.result import RsmlParseResult
from rsmlpy.pipeline.results import LintRunResult


def run_lint(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: RsmlParseResult | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run lint diagnostics from a single parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    diagnostics = list(resolved_parse.diagnostics)
    for rule in resolved_rules:
        diagnostics.extend(rule.run(resolved_parse))

    return LintRunResult(
        parse=resolved_parse,
        diagnostics=sort_diagnostics(diagnostics),
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: RsmlParseResult | None,
) -> RsmlParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
