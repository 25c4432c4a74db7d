"""Value grammar: primitives, enum paths, tuples and keyword constructors.

Each routine returns the resolved `Value`, or None after recording a
diagnostic; the statement grammar then drops the assignment and recovers.
"""

from __future__ import annotations

from typing import Final

from rsmlpy.diagnostics.codes import (
    PARSER_EXPECTED_VALUE,
    PARSER_INVALID_COLOR,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNRECOGNIZED_TUPLE,
    PARSER_UNSUPPORTED_EXPRESSION,
)
from rsmlpy.lexer import Token, TokenKind
from rsmlpy.parser.parser import Parser
from rsmlpy.text import TextRange
from rsmlpy.values import (
    Element,
    Offset,
    Scale,
    Value,
    build_tuple_value,
    construct,
    element_from_group,
    is_constructor_keyword,
    resolve_color,
)
from rsmlpy.values import composite

ENUM_PARTS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.SELECTOR_TAG_OR_ENUM_PART,
        TokenKind.SELECTOR_STATE_OR_ENUM_PART,
    }
)

VALUE_TERMINATORS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.SECTION_CLOSE,
        TokenKind.SCOPE_CLOSE,
        TokenKind.EOF,
    }
)


def parse_value(parser: Parser) -> Value | None:
    """Parse the right-hand side of an assignment."""
    start = parser.current_range
    element = parse_primitive(parser, allow_tuple=True)
    if element is None:
        return None

    if parser.at(TokenKind.OPERATOR):
        _unsupported_expression(parser, start)
        return None

    return element.value


def parse_primitive(parser: Parser, *, allow_tuple: bool) -> Element | None:
    token = parser.current_token
    match token.kind:
        case TokenKind.BOOL:
            parser.bump()
            return Element(composite.BOOL, bool(token.value))
        case TokenKind.NUMBER:
            parser.bump()
            return Element(composite.NUMBER, _number(token))
        case TokenKind.NUMBER_OFFSET:
            parser.bump()
            return Element(composite.OFFSET, Offset(_number(token)))
        case TokenKind.NUMBER_SCALE:
            parser.bump()
            return Element(composite.SCALE, Scale(_number(token)))
        case TokenKind.STRING:
            parser.bump()
            return Element(composite.STRING, token.text)
        case TokenKind.ASSET_ID:
            parser.bump()
            return Element(composite.STRING, token.lexeme)
        case kind if kind.is_color:
            parser.bump()
            color = resolve_color(token.lexeme)
            if color is None:
                parser.error(PARSER_INVALID_COLOR, token.range)
                return None
            return Element(composite.COLOR, color)
        case TokenKind.VARIABLE:
            parser.bump()
            return Element(composite.REFERENCE, f"${token.text}")
        case TokenKind.ARGUMENT:
            parser.bump()
            return Element(composite.REFERENCE, f"$!{token.text}")
        case TokenKind.ENUM_KEYWORD:
            return Element(composite.ENUM, parse_enum(parser))
        case TokenKind.TEXT:
            if parser.nth(1) == TokenKind.TUPLE_OPEN and is_constructor_keyword(token.text):
                return parse_constructor(parser)
            parser.bump()
            return Element(composite.TEXT, token.text)
        case TokenKind.TUPLE_OPEN if allow_tuple:
            return parse_tuple(parser)
        case TokenKind.OPERATOR:
            _unsupported_expression(parser, token.range)
            return None
        case _:
            parser.error(PARSER_EXPECTED_VALUE, token.range)
            return None


def parse_enum(parser: Parser) -> str:
    """`Enum.Category.Item` (or with `:` separators) read as the string `"Enum.Category.Item"`."""
    parser.bump()
    parts = ["Enum"]
    while parser.at_set(ENUM_PARTS):
        parts.append(parser.bump().text)
    return ".".join(parts)


def parse_tuple(parser: Parser) -> Element | None:
    open_range = parser.current_range
    elements = _parse_tuple_elements(parser)
    if elements is None:
        return None

    value = build_tuple_value(elements)
    if value is None:
        parser.error(PARSER_UNRECOGNIZED_TUPLE, _covering(parser, open_range))
        return None
    return Element(composite.COMPOSITE, value)


def parse_constructor(parser: Parser) -> Element | None:
    name_token = parser.bump()
    elements = _parse_tuple_elements(parser)
    if elements is None:
        return None

    value = construct(name_token.text, elements)
    if value is None:
        parser.error(
            PARSER_UNRECOGNIZED_TUPLE,
            _covering(parser, name_token.range),
            message=f"Arguments do not fit `{name_token.text}(...)`.",
        )
        return None
    return Element(composite.COMPOSITE, value)


def _parse_tuple_elements(parser: Parser) -> list[Element] | None:
    """Parse `( group, group, ... )` where each group is adjacent primitives."""
    open_range = parser.current_range
    parser.bump()

    elements: list[Element] = []
    group: list[Element] = []
    while True:
        if parser.at(TokenKind.TUPLE_CLOSE) or parser.at(TokenKind.LIST_DELIMITER):
            closing = parser.at(TokenKind.TUPLE_CLOSE)
            separator = parser.bump()
            if not group and (not closing or elements):
                parser.error(
                    PARSER_UNRECOGNIZED_TUPLE,
                    open_range.cover(separator.range),
                    message="Empty tuple element.",
                )
                return None
            if group:
                element = element_from_group(group)
                if element is None:
                    parser.error(
                        PARSER_UNRECOGNIZED_TUPLE,
                        open_range.cover(separator.range),
                        message="Tuple element mixes values that do not form one axis.",
                    )
                    return None
                elements.append(element)
                group = []
            if closing:
                break
            continue

        if parser.at_set(VALUE_TERMINATORS):
            parser.error(PARSER_UNEXPECTED_TOKEN, parser.current_range, message="Expected `)` to close the tuple.")
            return None

        primitive = parse_primitive(parser, allow_tuple=False)
        if primitive is None:
            return None
        group.append(primitive)

    if not elements:
        parser.error(PARSER_UNRECOGNIZED_TUPLE, open_range, message="Empty tuple.")
        return None
    return elements


def _number(token: Token) -> float:
    return float(token.value) if token.value is not None else 0.0


def _covering(parser: Parser, start: TextRange) -> TextRange:
    previous = parser.source.previous_token
    if previous is None or previous.range.end < start.start:
        return start
    return start.cover(previous.range)


def _unsupported_expression(parser: Parser, start: TextRange) -> None:
    parser.error(PARSER_UNSUPPORTED_EXPRESSION, start.cover(parser.current_range))
