"""Statement-level recovery."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from rsmlpy.lexer import TokenKind

if TYPE_CHECKING:
    from rsmlpy.parser.parser import Parser


class RecoveryError(StrEnum):
    EOF = "eof"
    ALREADY_RECOVERED = "already_recovered"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Recover by skipping tokens until a safe token is reached.

    A `{ ... }` block met while skipping is skipped as a whole, so a dropped
    statement never swallows half of a nested rule.
    """

    recovery_set: frozenset[TokenKind]

    def recover(self, parser: Parser) -> tuple[int, RecoveryError | None]:
        """Skip to the next recovery token; returns the number of tokens skipped."""
        if parser.at(TokenKind.EOF):
            return 0, RecoveryError.EOF

        if self.is_at_recovered(parser):
            return 0, RecoveryError.ALREADY_RECOVERED

        skipped = 0
        while not parser.at(TokenKind.EOF) and not self.is_at_recovered(parser):
            if parser.at(TokenKind.SCOPE_OPEN):
                skipped += skip_block(parser)
            else:
                parser.bump()
                skipped += 1
        return skipped, None

    def is_at_recovered(self, parser: Parser) -> bool:
        return parser.at_set(self.recovery_set)


def skip_block(parser: Parser) -> int:
    """Skip a balanced `{ ... }` block starting at the current token."""
    depth = 0
    skipped = 0
    while not parser.at(TokenKind.EOF):
        if parser.at(TokenKind.SCOPE_OPEN):
            depth += 1
        elif parser.at(TokenKind.SCOPE_CLOSE):
            depth -= 1
        parser.bump()
        skipped += 1
        if depth == 0:
            break
    return skipped


STATEMENT_RECOVERY: Final[ParseRecoveryTokenSet] = ParseRecoveryTokenSet(
    recovery_set=frozenset({TokenKind.SECTION_CLOSE, TokenKind.SCOPE_CLOSE}),
)
