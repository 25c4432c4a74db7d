"""Lexer tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from rsmlpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1  # never emitted by the lexer; returned by the parser's token source past the end

    # -------------------------
    # Structural punctuation
    # -------------------------
    SCOPE_OPEN = 10  # {
    SCOPE_CLOSE = 11  # }
    SECTION_CLOSE = 12  # ;
    LIST_DELIMITER = 13  # ,
    EQUALS = 14  # =
    COLON = 15  # :
    SCOPE_TO_CHILDREN = 16  # >
    SCOPE_TO_DESCENDANTS = 17  # >>
    TUPLE_OPEN = 18  # (
    TUPLE_CLOSE = 19  # )

    # -------------------------
    # Declarations / keywords
    # -------------------------
    MACRO_DECLARATION = 20  # @macro
    PRIORITY_DECLARATION = 21  # @priority
    DERIVE_DECLARATION = 22  # @derive
    ENUM_KEYWORD = 23  # Enum

    # -------------------------
    # Operators (see Token.operator)
    # -------------------------
    OPERATOR = 30

    # -------------------------
    # Text (sigils stripped into Token.text)
    # -------------------------
    TEXT = 40
    SELECTOR_NAME = 41  # #name
    SELECTOR_TAG_OR_ENUM_PART = 42  # .tag
    SELECTOR_STATE_OR_ENUM_PART = 43  # :state
    SELECTOR_PSEUDO = 44  # ::pseudo
    ARGUMENT = 45  # $!name
    VARIABLE = 46  # $name
    PSEUDO_PROPERTY = 47  # !name

    # -------------------------
    # Data literals
    # -------------------------
    COLOR_HEX = 50  # #FF0000
    COLOR_TW = 51  # tw:red:500
    COLOR_CSS = 52  # css:red
    COLOR_BC = 53  # bc:white
    STRING = 54  # "text" or 'text'
    NUMBER_OFFSET = 55  # 10px
    NUMBER_SCALE = 56  # 50%
    NUMBER = 57  # 1.5
    ASSET_ID = 58  # rbxassetid://123
    BOOL = 59  # true / false

    @property
    def is_color(self) -> bool:
        return 50 <= self <= 53

    @property
    def is_selector_part(self) -> bool:
        """Text that may appear inside a selector (the hex form reads as `#name`)."""
        return self in (
            TokenKind.TEXT,
            TokenKind.SELECTOR_NAME,
            TokenKind.SELECTOR_TAG_OR_ENUM_PART,
            TokenKind.SELECTOR_STATE_OR_ENUM_PART,
            TokenKind.SELECTOR_PSEUDO,
            TokenKind.COLOR_HEX,
        )

    @property
    def is_combinator(self) -> bool:
        return self in (
            TokenKind.SCOPE_TO_CHILDREN,
            TokenKind.SCOPE_TO_DESCENDANTS,
            TokenKind.LIST_DELIMITER,
        )


class Operator(StrEnum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    MODULO = "%"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `lexeme` is the raw source slice. `text` is the payload with sigils and
    quotes stripped (colors keep the raw lexeme so the palette prefix survives).
    `value` holds the resolved number or boolean for numeric and `BOOL` tokens.
    """

    kind: TokenKind
    range: TextRange
    lexeme: str
    text: str
    value: float | bool | None = None
    operator: Operator | None = None

    def is_adjacent_to(self, other: Token) -> bool:
        """True when `other` starts exactly where this token ends."""
        return self.range.end == other.range.start


def eof_token(offset: int) -> Token:
    return Token(TokenKind.EOF, TextRange.empty(offset), "", "")
