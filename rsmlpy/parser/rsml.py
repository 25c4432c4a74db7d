"""High-level parse entrypoints for RSML source."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rsmlpy.diagnostics import Diagnostic, collect_diagnostics
from rsmlpy.lexer import Lexer, Token
from rsmlpy.parser.arena import Arena
from rsmlpy.parser.grammar import parse_document
from rsmlpy.parser.options import ParseMode, ParserOptions
from rsmlpy.parser.parser import Parser
from rsmlpy.parser.token_source import TokenSource

if TYPE_CHECKING:
    from rsmlpy.pipeline import RsmlParseResult


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def build_tree(tokens: Sequence[Token], options: ParserOptions) -> tuple[Arena, list[Diagnostic]]:
    parser = Parser(TokenSource(tokens), options=options)
    parse_document(parser)
    return parser.finish()


def parse(
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Arena:
    """Build the scope tree for a token sequence; never fails."""
    resolved_options = _resolve_options(options=options, mode=mode)
    arena, _ = build_tree(tokens, resolved_options)
    return arena


def parse_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Arena:
    resolved_options = _resolve_options(options=options, mode=mode)
    tokens = Lexer(text).lex()
    arena, _ = build_tree(tokens, resolved_options)
    return arena


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> RsmlParseResult:
    from rsmlpy.pipeline import RsmlParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    lexer = Lexer(text, recovery_severity=resolved_options.recovery_severity)
    tokens = lexer.lex()
    arena, parser_diagnostics = build_tree(tokens, resolved_options)
    return RsmlParseResult(
        source_text=text,
        tokens=tokens,
        arena=arena,
        diagnostics=collect_diagnostics(lexer.diagnostics, parser_diagnostics),
        options=resolved_options,
    )
