"""Diagnostics."""

from rsmlpy.diagnostics.codes import (
    LEXER_UNRECOGNIZED_INPUT,
    LEXER_UNTERMINATED_COMMENT,
    LINT_DERIVE_EXTENSION,
    LINT_EMPTY_RULE,
    LINT_UNDEFINED_VARIABLE,
    PARSER_BARE_PROPERTY,
    PARSER_EXPECTED_DERIVE_PATH,
    PARSER_EXPECTED_MACRO_NAME,
    PARSER_EXPECTED_SCOPE_OPEN,
    PARSER_EXPECTED_SEMICOLON,
    PARSER_EXPECTED_VALUE,
    PARSER_INVALID_COLOR,
    PARSER_INVALID_PRIORITY,
    PARSER_MACRO_DISABLED,
    PARSER_MISSING_SCOPE_CLOSE,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNMATCHED_SCOPE_CLOSE,
    PARSER_UNRECOGNIZED_TUPLE,
    PARSER_UNSUPPORTED_EXPRESSION,
    DiagnosticSpec,
)
from rsmlpy.diagnostics.diagnostic import Diagnostic, Severity
from rsmlpy.diagnostics.report import (
    collect_diagnostics,
    dedupe_diagnostics,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "LEXER_UNRECOGNIZED_INPUT",
    "LEXER_UNTERMINATED_COMMENT",
    "LINT_DERIVE_EXTENSION",
    "LINT_EMPTY_RULE",
    "LINT_UNDEFINED_VARIABLE",
    "PARSER_BARE_PROPERTY",
    "PARSER_EXPECTED_DERIVE_PATH",
    "PARSER_EXPECTED_MACRO_NAME",
    "PARSER_EXPECTED_SCOPE_OPEN",
    "PARSER_EXPECTED_SEMICOLON",
    "PARSER_EXPECTED_VALUE",
    "PARSER_INVALID_COLOR",
    "PARSER_INVALID_PRIORITY",
    "PARSER_MACRO_DISABLED",
    "PARSER_MISSING_SCOPE_CLOSE",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNMATCHED_SCOPE_CLOSE",
    "PARSER_UNRECOGNIZED_TUPLE",
    "PARSER_UNSUPPORTED_EXPRESSION",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "dedupe_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
