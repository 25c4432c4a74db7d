"""Parse carrier shared by lint, check and snapshot workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rsmlpy.diagnostics import has_errors
from rsmlpy.parser.arena import Arena
from rsmlpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from rsmlpy.diagnostics import Diagnostic
    from rsmlpy.lexer import Token


@dataclass(slots=True)
class RsmlParseResult:
    """One RSML parse lifecycle: source, tokens, tree and recovery diagnostics."""

    source_text: str
    tokens: list[Token]
    arena: Arena
    diagnostics: list[Diagnostic]
    options: ParserOptions

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
