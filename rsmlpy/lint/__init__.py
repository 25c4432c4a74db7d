"""Lint rules over a parsed RSML document."""

from rsmlpy.lint.rules import (
    DeriveExtensionRule,
    EmptyRuleRule,
    LintRule,
    UndefinedVariableRule,
    default_lint_rules,
    validate_lint_rules,
)
from rsmlpy.lint.runner import run_lint

__all__ = [
    "DeriveExtensionRule",
    "EmptyRuleRule",
    "LintRule",
    "UndefinedVariableRule",
    "default_lint_rules",
    "run_lint",
    "validate_lint_rules",
]
