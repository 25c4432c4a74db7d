"""Lexer."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from rsmlpy.diagnostics import Diagnostic, Severity
from rsmlpy.diagnostics.codes import LEXER_UNRECOGNIZED_INPUT, LEXER_UNTERMINATED_COMMENT
from rsmlpy.lexer.rules import RULES, WHITESPACE, LexRule
from rsmlpy.lexer.tokens import Token
from rsmlpy.text import TextRange, slice_text_range

logger = logging.getLogger(__name__)


class Lexer:
    """Lazy, tolerant lexer that skips whitespace and comments.

    Input no rule matches is skipped one code point at a time; each skipped run
    is recorded as a single diagnostic. Lexing never raises.
    """

    def __init__(
        self,
        source: str,
        *,
        rules: Sequence[LexRule] = RULES,
        recovery_severity: Severity = "warning",
    ) -> None:
        self._source = source
        self._rules = rules
        self._position = 0
        self._skipped_start: int | None = None
        self._recovery_severity: Severity = recovery_severity
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Recovery diagnostics recorded so far."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    def lex(self) -> list[Token]:
        return list(self)

    def next_token(self) -> Token | None:
        """Scan the next token, or None once the input is exhausted."""
        while True:
            self._skip_whitespace()
            if self.is_eof:
                self._flush_skipped()
                return None

            candidate = self._best_match()
            if candidate is None:
                if self._skipped_start is None:
                    self._skipped_start = self._position
                self._position += 1
                continue

            self._flush_skipped()
            rule, length = candidate
            start = self._position
            self._position += length
            lexeme = self._source[start : self._position]

            if rule.is_comment:
                if rule.name == "multi_line_comment" and not _is_closed_comment(lexeme):
                    self._record(LEXER_UNTERMINATED_COMMENT.at(TextRange(start, self._position)))
                continue

            assert rule.kind is not None
            text, value, operator = rule.action(lexeme)
            return Token(rule.kind, TextRange(start, self._position), lexeme, text, value, operator)

    def _best_match(self) -> tuple[LexRule, int] | None:
        best: tuple[LexRule, int] | None = None
        for rule in self._rules:
            match = rule.pattern.match(self._source, self._position)
            if match is None:
                continue
            length = match.end() - self._position
            if length == 0:
                continue
            if best is None or (length, rule.priority) > (best[1], best[0].priority):
                best = (rule, length)
        return best

    def _skip_whitespace(self) -> None:
        match = WHITESPACE.match(self._source, self._position)
        if match is not None:
            self._flush_skipped()
            self._position = match.end()

    def _flush_skipped(self) -> None:
        if self._skipped_start is None:
            return
        skipped = TextRange(self._skipped_start, self._position)
        self._skipped_start = None
        logger.debug("skipped unrecognized input %r at %s", slice_text_range(self._source, skipped), skipped)
        self._record(LEXER_UNRECOGNIZED_INPUT.at(skipped))

    def _record(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic.with_severity(self._recovery_severity))


def _is_closed_comment(lexeme: str) -> bool:
    return len(lexeme) >= len("--[[]]") and lexeme.endswith("]]")


def lex(source: str) -> list[Token]:
    """Tokenize `source`, dropping whitespace, comments and unrecognized input."""
    return Lexer(source).lex()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: Sequence[Token], source: str, diagnostics: Sequence[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, payload and source text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        extra = ""
        if tok.value is not None:
            extra = f" value={tok.value!r}"
        elif tok.operator is not None:
            extra = f" operator={tok.operator.name}"
        print(f"{i:03d} {tok.kind.name:<28} range={tok.range.as_tuple()} text={tok.text!r}{extra} source={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
