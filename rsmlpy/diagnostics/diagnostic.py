"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from rsmlpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, the tree builder and lint rules."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def with_severity(self, severity: Severity) -> "Diagnostic":
        return Diagnostic(
            code=self.code,
            message=self.message,
            range=self.range,
            severity=severity,
            hint=self.hint,
            category=self.category,
        )
