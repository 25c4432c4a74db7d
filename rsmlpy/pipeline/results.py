"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from rsmlpy.diagnostics import Diagnostic
from rsmlpy.pipeline.result import RsmlParseResult


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules from a shared parse result."""

    parse: RsmlParseResult
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of unified parser/lint checks from a shared parse result."""

    parse: RsmlParseResult
    diagnostics: list[Diagnostic]
    has_errors: bool
