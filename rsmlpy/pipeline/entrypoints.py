"""Unified entrypoints that orchestrate parse and lint with one parse lifecycle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rsmlpy.diagnostics import dedupe_diagnostics, has_errors, sort_diagnostics
from rsmlpy.lint import run_lint as _run_lint
from rsmlpy.parser import ParseMode, ParserOptions, parse_result
from rsmlpy.pipeline.result import RsmlParseResult
from rsmlpy.pipeline.results import CheckRunResult, LintRunResult

if TYPE_CHECKING:
    from rsmlpy.lint.rules import LintRule


def run_lint(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: RsmlParseResult | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run linting over one RSML parse lifecycle."""
    resolved_parse = resolve_parse(text, options=options, mode=mode, parse=parse)
    return _run_lint(resolved_parse.source_text, parse=resolved_parse, rules=rules)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: RsmlParseResult | None = None,
) -> CheckRunResult:
    """Run parse + lint checks over one RSML parse lifecycle."""
    resolved_parse = resolve_parse(text, options=options, mode=mode, parse=parse)
    lint_result = _run_lint(resolved_parse.source_text, parse=resolved_parse)
    diagnostics = sort_diagnostics(dedupe_diagnostics([*resolved_parse.diagnostics, *lint_result.diagnostics]))
    return CheckRunResult(
        parse=resolved_parse,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def resolve_parse(
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
