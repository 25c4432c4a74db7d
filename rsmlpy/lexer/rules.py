"""Ranked token rules.

Every rule whose pattern matches at the current position is a candidate. The
longest match wins; equal lengths go to the higher priority, then to the rule
listed first. Comment rules have no token kind and are discarded.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final, TypeAlias

from rsmlpy.lexer.tokens import Operator, TokenKind
from rsmlpy.values.palettes import BC_PALETTE, CSS_PALETTE, TW_PALETTE, TW_SHADES

TokenPayload: TypeAlias = tuple[str, float | bool | None, Operator | None]
TokenAction: TypeAlias = Callable[[str], TokenPayload]

PRIORITY_MULTI_LINE_COMMENT: Final = 99
PRIORITY_SINGLE_LINE_COMMENT: Final = 98
PRIORITY_KEYWORD: Final = 10
PRIORITY_LITERAL: Final = 5
PRIORITY_OPERATOR: Final = 3
PRIORITY_TEXT: Final = 1

WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[ \t\n\r\f]+")

_IDENT: Final = r"""[a-zA-Z0-9"'_-]+"""
_NUMBER: Final = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"


@dataclass(frozen=True, slots=True)
class LexRule:
    name: str
    pattern: re.Pattern[str]
    kind: TokenKind | None
    priority: int
    action: TokenAction

    @property
    def is_comment(self) -> bool:
        return self.kind is None


def _alternation(words: Iterable[str]) -> str:
    """Regex alternation that tries longer keywords first (`blueviolet` before `blue`)."""
    return "|".join(re.escape(word) for word in sorted(words, key=lambda word: (-len(word), word)))


def _raw(lexeme: str) -> TokenPayload:
    return (lexeme, None, None)


def _strip_sigil(width: int) -> TokenAction:
    def action(lexeme: str) -> TokenPayload:
        return (lexeme[width:], None, None)

    return action


def _unquote(lexeme: str) -> TokenPayload:
    return (lexeme[1:-1], None, None)


def _parse_float(digits: str) -> float:
    try:
        return float(digits)
    except ValueError:
        return 0.0


def _number(suffix: str = "", divisor: float = 1.0) -> TokenAction:
    def action(lexeme: str) -> TokenPayload:
        mantissa = lexeme.removesuffix(suffix) if suffix else lexeme
        return (lexeme, _parse_float(mantissa) / divisor, None)

    return action


def _bool(lexeme: str) -> TokenPayload:
    return (lexeme, lexeme == "true", None)


def _operator(operator: Operator) -> TokenAction:
    def action(lexeme: str) -> TokenPayload:
        return (lexeme, None, operator)

    return action


def _rule(
    name: str,
    pattern: str,
    kind: TokenKind | None,
    priority: int,
    action: TokenAction = _raw,
    flags: int = 0,
) -> LexRule:
    return LexRule(name, re.compile(pattern, flags), kind, priority, action)


def _token(name: str, literal: str, kind: TokenKind, priority: int = PRIORITY_KEYWORD) -> LexRule:
    return _rule(name, re.escape(literal), kind, priority)


_TW_COLOR: Final = rf"tw:(?:{_alternation(TW_PALETTE)})(?::(?:{_alternation(TW_SHADES)}))?"
_CSS_COLOR: Final = rf"css:(?:{_alternation(CSS_PALETTE)})"
_BC_COLOR: Final = rf"bc:(?:{_alternation(BC_PALETTE)})"

RULES: Final[tuple[LexRule, ...]] = (
    # comments
    _rule(
        "multi_line_comment",
        r"--\[\[(?:.*?\]\]|.*)",
        None,
        PRIORITY_MULTI_LINE_COMMENT,
        flags=re.DOTALL,
    ),
    _rule("single_line_comment", r"--(?!\[\[)[^\n\r\f]*", None, PRIORITY_SINGLE_LINE_COMMENT),
    # declarations and keywords
    _token("macro", "@macro", TokenKind.MACRO_DECLARATION),
    _token("priority", "@priority", TokenKind.PRIORITY_DECLARATION),
    _token("derive", "@derive", TokenKind.DERIVE_DECLARATION),
    _token("enum", "Enum", TokenKind.ENUM_KEYWORD),
    _rule("bool", r"true|false", TokenKind.BOOL, PRIORITY_KEYWORD, _bool),
    # punctuation
    _token("scope_open", "{", TokenKind.SCOPE_OPEN),
    _token("scope_close", "}", TokenKind.SCOPE_CLOSE),
    _token("section_close", ";", TokenKind.SECTION_CLOSE),
    _token("list_delimiter", ",", TokenKind.LIST_DELIMITER),
    _token("equals", "=", TokenKind.EQUALS),
    _token("colon", ":", TokenKind.COLON),
    _token("scope_to_descendants", ">>", TokenKind.SCOPE_TO_DESCENDANTS),
    _token("scope_to_children", ">", TokenKind.SCOPE_TO_CHILDREN),
    _token("tuple_open", "(", TokenKind.TUPLE_OPEN),
    _token("tuple_close", ")", TokenKind.TUPLE_CLOSE),
    # typed literals
    _rule("color_tw", _TW_COLOR, TokenKind.COLOR_TW, PRIORITY_LITERAL),
    _rule("color_css", _CSS_COLOR, TokenKind.COLOR_CSS, PRIORITY_LITERAL),
    _rule("color_bc", _BC_COLOR, TokenKind.COLOR_BC, PRIORITY_LITERAL),
    _rule("color_hex", r"#[0-9a-fA-F]+", TokenKind.COLOR_HEX, PRIORITY_LITERAL),
    _rule("string_double", r'"[^"\n\f\r]*"', TokenKind.STRING, PRIORITY_LITERAL, _unquote),
    _rule("string_single", r"'[^'\n\f\r]*'", TokenKind.STRING, PRIORITY_LITERAL, _unquote),
    _rule("number_offset", rf"{_NUMBER}px", TokenKind.NUMBER_OFFSET, PRIORITY_LITERAL, _number("px")),
    _rule("number_scale", rf"{_NUMBER}%", TokenKind.NUMBER_SCALE, PRIORITY_LITERAL, _number("%", 100.0)),
    _rule("number", _NUMBER, TokenKind.NUMBER, PRIORITY_LITERAL, _number()),
    _rule("asset_id", r"rbxassetid://[0-9]+", TokenKind.ASSET_ID, PRIORITY_LITERAL),
    # operators
    _rule("plus", r"\+", TokenKind.OPERATOR, PRIORITY_OPERATOR, _operator(Operator.PLUS)),
    _rule("minus", r"-", TokenKind.OPERATOR, PRIORITY_OPERATOR, _operator(Operator.MINUS)),
    _rule("multiply", r"\*", TokenKind.OPERATOR, PRIORITY_OPERATOR, _operator(Operator.MULTIPLY)),
    _rule("divide", r"/", TokenKind.OPERATOR, PRIORITY_OPERATOR, _operator(Operator.DIVIDE)),
    _rule("power", r"\^", TokenKind.OPERATOR, PRIORITY_OPERATOR, _operator(Operator.POWER)),
    _rule("modulo", r"%", TokenKind.OPERATOR, PRIORITY_OPERATOR, _operator(Operator.MODULO)),
    # sigil text
    _rule("selector_pseudo", rf"::{_IDENT}", TokenKind.SELECTOR_PSEUDO, PRIORITY_TEXT, _strip_sigil(2)),
    _rule("argument", rf"\$!{_IDENT}", TokenKind.ARGUMENT, PRIORITY_TEXT, _strip_sigil(2)),
    _rule("variable", rf"\${_IDENT}", TokenKind.VARIABLE, PRIORITY_TEXT, _strip_sigil(1)),
    _rule("selector_name", rf"#{_IDENT}", TokenKind.SELECTOR_NAME, PRIORITY_TEXT, _strip_sigil(1)),
    _rule("selector_tag", rf"\.{_IDENT}", TokenKind.SELECTOR_TAG_OR_ENUM_PART, PRIORITY_TEXT, _strip_sigil(1)),
    _rule("selector_state", rf":{_IDENT}", TokenKind.SELECTOR_STATE_OR_ENUM_PART, PRIORITY_TEXT, _strip_sigil(1)),
    _rule("pseudo_property", rf"!{_IDENT}", TokenKind.PSEUDO_PROPERTY, PRIORITY_TEXT, _strip_sigil(1)),
    # catch-all identifier
    _rule("text", _IDENT, TokenKind.TEXT, PRIORITY_TEXT),
)
