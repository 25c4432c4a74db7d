from hypothesis import given
from hypothesis import strategies as st

from rsmlpy.lexer import Lexer, TokenKind, lex

_WHITESPACE = st.text(alphabet=" \t\n\r\f", max_size=4)
_COMMENT = st.one_of(
    st.from_regex(r"--[a-z ]{0,10}\n", fullmatch=True),
    st.from_regex(r"--\[\[[a-z \n]{0,10}\]\]", fullmatch=True),
)
_MANTISSA = st.one_of(
    st.integers(min_value=-10_000, max_value=10_000).map(str),
    st.decimals(min_value=-10_000, max_value=10_000, places=3, allow_nan=False, allow_infinity=False).map(str),
)
_LEXEMES = st.sampled_from(
    [
        "{",
        "}",
        ";",
        ",",
        "=",
        ">",
        ">>",
        "(",
        ")",
        "@macro",
        "@priority",
        "@derive",
        "Enum",
        "true",
        "false",
        "Frame",
        "TextButton",
        "#myId",
        ".tag",
        ":hover",
        "::pseudo",
        "$var",
        "$!arg",
        "!Prop",
        "#FF0000",
        "tw:red:500",
        "css:blueviolet",
        "bc:white",
        '"text"',
        "'text'",
        "10px",
        "50%",
        "1.5",
        "rbxassetid://42",
        "*",
        "/",
        "^",
    ]
)


@given(st.lists(st.one_of(_WHITESPACE, _COMMENT), max_size=8).map("\n".join))
def test_whitespace_and_comments_lex_to_nothing(source: str) -> None:
    lexer = Lexer(source)

    assert lexer.lex() == []
    assert lexer.diagnostics == []


@given(_MANTISSA)
def test_offset_keeps_mantissa(mantissa: str) -> None:
    tokens = lex(f"{mantissa}px")

    assert [token.kind for token in tokens] == [TokenKind.NUMBER_OFFSET]
    assert tokens[0].value == float(mantissa)


@given(_MANTISSA)
def test_scale_divides_mantissa_by_100(mantissa: str) -> None:
    tokens = lex(f"{mantissa}%")

    assert [token.kind for token in tokens] == [TokenKind.NUMBER_SCALE]
    assert tokens[0].value == float(mantissa) / 100.0


@given(st.lists(_LEXEMES, max_size=30))
def test_relexing_joined_lexemes_reproduces_kinds(lexemes: list[str]) -> None:
    first = lex(" ".join(lexemes))
    second = lex(" ".join(token.lexeme for token in first))

    assert [token.kind for token in second] == [token.kind for token in first]


@given(st.text(max_size=60))
def test_lexing_never_raises_and_stays_in_bounds(source: str) -> None:
    for token in lex(source):
        assert 0 <= token.range.start < token.range.end <= len(source)
