"""Shared parse carrier and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rsmlpy.parser.options import ParseMode, ParserOptions
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
    from rsmlpy.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, options=options, mode=mode, parse=parse, rules=rules)


def run_check(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: RsmlParseResult | None = None,
) -> CheckRunResult:
    from rsmlpy.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, options=options, mode=mode, parse=parse)


__all__ = [
    "CheckRunResult",
    "LintRunResult",
    "RsmlParseResult",
    "run_check",
    "run_lint",
]
