"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from rsmlpy.diagnostics.diagnostic import Diagnostic, Severity
from rsmlpy.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None

    def at(
        self,
        range: TextRange,
        *,
        message: str | None = None,
        severity: Severity | None = None,
    ) -> Diagnostic:
        """Build a diagnostic for this code covering `range`."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=severity if severity is not None else self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNRECOGNIZED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_INPUT",
    message="Unrecognized input skipped.",
    hint="Remove the characters or quote them as a string.",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated multi-line comment.",
    hint="Close the comment with `]]`.",
    category="lexer",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

PARSER_UNMATCHED_SCOPE_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_SCOPE_CLOSE",
    message="Closing brace has no matching opening brace.",
    category="parser",
)

PARSER_MISSING_SCOPE_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_SCOPE_CLOSE",
    message="Rule block is not closed before the end of input.",
    hint="Add the missing `}`.",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    category="parser",
)

PARSER_EXPECTED_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_SEMICOLON",
    message="Expected `;` after statement",
    category="parser",
)

PARSER_EXPECTED_SCOPE_OPEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_SCOPE_OPEN",
    message="Expected `{` after selector",
    category="parser",
)

PARSER_UNRECOGNIZED_TUPLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNRECOGNIZED_TUPLE",
    message="Tuple does not match any composite value shape.",
    hint="Use (x, y) for Vector2/UDim2, (x, y, z) for Vector3 or four edges for Rect.",
    category="parser",
)

PARSER_UNSUPPORTED_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNSUPPORTED_EXPRESSION",
    message="Arithmetic expressions are not evaluated; assignment dropped.",
    category="parser",
)

PARSER_INVALID_COLOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_COLOR",
    message="Invalid color literal.",
    hint="Hex colors use 3 or 6 hex digits, e.g. `#F00` or `#FF0000`.",
    category="parser",
)

PARSER_INVALID_PRIORITY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_PRIORITY",
    message="`@priority` expects an integer.",
    category="parser",
)

PARSER_EXPECTED_DERIVE_PATH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_DERIVE_PATH",
    message="`@derive` expects a quoted path.",
    category="parser",
)

PARSER_EXPECTED_MACRO_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_MACRO_NAME",
    message="`@macro` expects a name followed by a block.",
    category="parser",
)

PARSER_MACRO_DISABLED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MACRO_DISABLED",
    message="Macro definitions are disabled by parser options.",
    category="parser",
)

PARSER_BARE_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_BARE_PROPERTY",
    message="Bare property assignments are disabled; prefix the name with `!`.",
    category="parser",
)

LINT_UNDEFINED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_UNDEFINED_VARIABLE",
    message="Variable is not defined in this scope or any enclosing scope.",
    hint="Define the variable with `$name = value;` or derive the stylesheet that defines it.",
    category="lint/correctness",
)

LINT_EMPTY_RULE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_EMPTY_RULE",
    message="Rule block is empty.",
    category="lint/style",
)

LINT_DERIVE_EXTENSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_DERIVE_EXTENSION",
    message="Derived stylesheet path should end in `.rsml`.",
    category="lint/correctness",
)
