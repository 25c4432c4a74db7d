"""Tree-building parser core."""

from dataclasses import dataclass

from rsmlpy.diagnostics import Diagnostic
from rsmlpy.diagnostics.codes import DiagnosticSpec
from rsmlpy.lexer import Token, TokenKind
from rsmlpy.parser.arena import Arena
from rsmlpy.parser.options import ParserOptions
from rsmlpy.parser.token_source import TokenSource
from rsmlpy.text import TextRange


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside statement loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Recursive-descent parser that writes scopes straight into an `Arena`."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._arena = Arena()
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_token(self) -> Token:
        return self._source.current_token

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def position(self) -> int:
        return self._source.position

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n)

    def bump(self) -> Token:
        """Consume the current token and return it."""
        token = self.current_token
        self._source.bump()
        return token

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def error(self, spec: DiagnosticSpec, range: TextRange | None = None, *, message: str | None = None) -> None:
        """Record a recovery diagnostic; at most one per source position."""
        diagnostic = spec.at(
            range if range is not None else self.current_range,
            message=message,
            severity=self._options.recovery_severity,
        )
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> tuple[Arena, list[Diagnostic]]:
        return self._arena, self._diagnostics
