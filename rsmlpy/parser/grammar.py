"""RSML statement grammar routines that build scopes into the arena."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from rsmlpy.diagnostics.codes import (
    PARSER_BARE_PROPERTY,
    PARSER_EXPECTED_DERIVE_PATH,
    PARSER_EXPECTED_MACRO_NAME,
    PARSER_EXPECTED_SCOPE_OPEN,
    PARSER_EXPECTED_SEMICOLON,
    PARSER_EXPECTED_VALUE,
    PARSER_INVALID_PRIORITY,
    PARSER_MACRO_DISABLED,
    PARSER_MISSING_SCOPE_CLOSE,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNMATCHED_SCOPE_CLOSE,
)
from rsmlpy.lexer import Token, TokenKind
from rsmlpy.parser.arena import ROOT_INDEX, MacroDefinition
from rsmlpy.parser.parse_recovery import STATEMENT_RECOVERY, skip_block
from rsmlpy.parser.parser import Parser, ParserProgress
from rsmlpy.parser.values import VALUE_TERMINATORS, parse_value
from rsmlpy.text import TextRange
from rsmlpy.values import Value

logger = logging.getLogger(__name__)

ASSIGNMENT_TARGETS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.VARIABLE,
        TokenKind.PSEUDO_PROPERTY,
        TokenKind.TEXT,
    }
)


def parse_document(parser: Parser) -> None:
    parse_scope_body(parser, ROOT_INDEX, is_root=True)
    parser.arena.set_span(ROOT_INDEX, TextRange(0, parser.current_range.end))


def parse_scope_body(parser: Parser, node: int, *, is_root: bool = False) -> None:
    """Parse statements into `node` until its closing `}` (left unconsumed) or end of input."""
    progress = ParserProgress()
    while not parser.at(TokenKind.EOF):
        progress.assert_progressing(parser)

        if parser.at(TokenKind.SCOPE_CLOSE):
            if not is_root:
                return
            parser.error(PARSER_UNMATCHED_SCOPE_CLOSE)
            parser.bump()
            continue

        parse_statement(parser, node)


def parse_statement(parser: Parser, node: int) -> None:
    current = parser.current
    match current:
        case TokenKind.SECTION_CLOSE:
            parser.bump()
        case TokenKind.PRIORITY_DECLARATION:
            parse_priority(parser, node)
        case TokenKind.DERIVE_DECLARATION:
            parse_derive(parser, node)
        case TokenKind.MACRO_DECLARATION:
            parse_macro(parser, node)
        case _ if current in ASSIGNMENT_TARGETS and parser.nth(1) == TokenKind.EQUALS:
            parse_assignment(parser, node)
        case TokenKind.TEXT if parser.nth(1) == TokenKind.TUPLE_OPEN:
            parse_macro_call(parser)
        case _ if current.is_selector_part or current.is_combinator:
            parse_rule(parser, node)
        case _:
            parser.error(PARSER_UNEXPECTED_TOKEN, message=f"Unexpected token `{parser.current_token.lexeme}`")
            _recover_statement(parser)


def parse_assignment(parser: Parser, node: int) -> None:
    target = parser.bump()
    parser.bump()  # =

    if parser.at_set(VALUE_TERMINATORS):
        parser.error(PARSER_EXPECTED_VALUE)
        parser.eat(TokenKind.SECTION_CLOSE)
        return

    value = parse_value(parser)
    if value is None:
        logger.debug("dropped assignment to %r at %s", target.lexeme, target.range)
        _recover_statement(parser)
        return

    scope = parser.arena[node]
    match target.kind:
        case TokenKind.VARIABLE:
            scope.variables[target.text] = value
        case TokenKind.PSEUDO_PROPERTY:
            scope.properties[target.text] = value
        case TokenKind.TEXT:
            _assign_bare_property(parser, node, target, value)

    finish_statement(parser)


def _assign_bare_property(parser: Parser, node: int, target: Token, value: Value) -> None:
    if not parser.options.allow_bare_properties:
        parser.error(PARSER_BARE_PROPERTY, target.range)
        return
    parser.arena[node].properties[target.text] = value


def parse_priority(parser: Parser, node: int) -> None:
    keyword = parser.bump()
    token = parser.current_token
    if token.kind != TokenKind.NUMBER:
        parser.error(PARSER_INVALID_PRIORITY, keyword.range.cover(token.range))
        _recover_statement(parser)
        return

    parser.bump()
    number = float(token.value or 0.0)
    if not number.is_integer():
        parser.error(PARSER_INVALID_PRIORITY, token.range)
    else:
        parser.arena[node].priority = int(number)
    finish_declaration(parser)


def parse_derive(parser: Parser, node: int) -> None:
    keyword = parser.bump()
    paths: list[str] = []
    while True:
        if not parser.at(TokenKind.STRING):
            parser.error(PARSER_EXPECTED_DERIVE_PATH, keyword.range.cover(parser.current_range))
            _recover_statement(parser)
            break
        paths.append(parser.bump().text)
        if not parser.eat(TokenKind.LIST_DELIMITER):
            finish_declaration(parser)
            break

    parser.arena[node].derives.extend(paths)


def parse_macro(parser: Parser, node: int) -> None:
    keyword = parser.bump()
    if not parser.options.allow_macros:
        parser.error(PARSER_MACRO_DISABLED, keyword.range)
        _skip_macro(parser)
        return

    if not parser.at(TokenKind.TEXT):
        parser.error(PARSER_EXPECTED_MACRO_NAME, keyword.range.cover(parser.current_range))
        _skip_macro(parser)
        return
    name = parser.bump().text

    arguments: list[str] = []
    if parser.eat(TokenKind.TUPLE_OPEN):
        while parser.at(TokenKind.ARGUMENT):
            arguments.append(parser.bump().text)
            if not parser.eat(TokenKind.LIST_DELIMITER):
                break
        if not parser.eat(TokenKind.TUPLE_CLOSE):
            parser.error(PARSER_UNEXPECTED_TOKEN, message="Expected `)` after macro arguments.")
            _skip_macro(parser)
            return

    if not parser.at(TokenKind.SCOPE_OPEN):
        parser.error(PARSER_EXPECTED_MACRO_NAME, keyword.range.cover(parser.current_range))
        _recover_statement(parser)
        return

    body = parser.arena.push(parent=node)
    end = parse_block(parser, body)
    parser.arena.set_span(body, keyword.range.cover(end))
    parser.arena[node].macros[name] = MacroDefinition(name, tuple(arguments), body)


def parse_macro_call(parser: Parser) -> None:
    """`Name(...)` statements are macro calls; calls are not expanded."""
    name = parser.bump()
    _recover_statement(parser)
    logger.debug("skipped macro call %r at %s", name.text, name.range)


def parse_rule(parser: Parser, node: int) -> None:
    selector: list[Token] = []
    while parser.current.is_selector_part or parser.current.is_combinator:
        selector.append(parser.bump())

    if not parser.at(TokenKind.SCOPE_OPEN):
        parser.error(PARSER_EXPECTED_SCOPE_OPEN, selector[0].range.cover(selector[-1].range))
        _recover_statement(parser)
        return

    child = parser.arena.push(parent=node)
    parser.arena[node].add_rule(selector_key(selector), child)
    end = parse_block(parser, child)
    parser.arena.set_span(child, selector[0].range.cover(end))


def parse_block(parser: Parser, node: int) -> TextRange:
    """Parse `{ body }` into `node`; a missing `}` at end of input closes the scope.

    Returns the range of the closing brace, or the empty end-of-input range.
    """
    open_token = parser.bump()
    parse_scope_body(parser, node)
    if parser.at(TokenKind.SCOPE_CLOSE):
        return parser.bump().range
    parser.error(PARSER_MISSING_SCOPE_CLOSE, open_token.range.cover(parser.current_range))
    return parser.current_range


def selector_key(tokens: Sequence[Token]) -> str:
    """Key a rule by its selector.

    A lone selector token is keyed by its text without the sigil (`#myId` ->
    `myId`). Compound selectors keep their source spelling, with one space
    wherever the source had whitespace (`Frame > .tag`, `TextButton:hover`).
    """
    if len(tokens) == 1:
        return _selector_text(tokens[0])

    parts: list[str] = []
    previous: Token | None = None
    for token in tokens:
        if previous is not None and not previous.is_adjacent_to(token):
            parts.append(" ")
        parts.append(token.lexeme)
        previous = token
    return "".join(parts)


def _selector_text(token: Token) -> str:
    if token.kind == TokenKind.COLOR_HEX:
        return token.lexeme.removeprefix("#")
    return token.text


def finish_statement(parser: Parser) -> None:
    if parser.eat(TokenKind.SECTION_CLOSE):
        return
    if parser.at(TokenKind.SCOPE_CLOSE) or parser.at(TokenKind.EOF):
        return
    parser.error(PARSER_EXPECTED_SEMICOLON)


def finish_declaration(parser: Parser) -> None:
    """`@priority` and `@derive` may omit their `;`."""
    parser.eat(TokenKind.SECTION_CLOSE)


def _recover_statement(parser: Parser) -> None:
    skipped, _ = STATEMENT_RECOVERY.recover(parser)
    if skipped:
        logger.debug("skipped %d token(s) while recovering", skipped)
    parser.eat(TokenKind.SECTION_CLOSE)


def _skip_macro(parser: Parser) -> None:
    while not parser.at_set(VALUE_TERMINATORS) and not parser.at(TokenKind.SCOPE_OPEN):
        parser.bump()
    if parser.at(TokenKind.SCOPE_OPEN):
        skip_block(parser)
    else:
        parser.eat(TokenKind.SECTION_CLOSE)
