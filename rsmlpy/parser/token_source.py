"""Cursor over a lexed token list."""

from collections.abc import Sequence

from rsmlpy.lexer import Token, TokenKind, eof_token
from rsmlpy.text import TextRange


class TokenSource:
    """Bridge between the token list and the parser with unbounded lookahead.

    Reading past the last token yields an `EOF` sentinel positioned at the end
    of the last token, so the parser never has to bounds-check.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._index = 0
        end = tokens[-1].range.end if tokens else 0
        self._eof = eof_token(end)

    @property
    def tokens(self) -> Sequence[Token]:
        return self._tokens

    @property
    def current(self) -> TokenKind:
        return self.current_token.kind

    @property
    def current_token(self) -> Token:
        return self.nth_token(0)

    @property
    def current_range(self) -> TextRange:
        return self.current_token.range

    @property
    def position(self) -> int:
        """Index of the current token; grows monotonically."""
        return self._index

    @property
    def previous_token(self) -> Token | None:
        if self._index == 0:
            return None
        return self._tokens[min(self._index, len(self._tokens)) - 1]

    def nth_token(self, n: int) -> Token:
        index = self._index + n
        if index >= len(self._tokens):
            return self._eof
        return self._tokens[index]

    def nth(self, n: int) -> TokenKind:
        return self.nth_token(n).kind

    def bump(self) -> None:
        if self._index < len(self._tokens):
            self._index += 1
