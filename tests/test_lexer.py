import pytest

from rsmlpy.diagnostics.codes import LEXER_UNRECOGNIZED_INPUT, LEXER_UNTERMINATED_COMMENT
from rsmlpy.lexer import Lexer, Operator, Token, TokenKind, lex
from tests._debug import debug_dump_diagnostics, debug_dump_tokens
from tests._shared_cases import ALL_RSML_CASES, RsmlCase, case_id


def _kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def _lex_one(source: str) -> Token:
    tokens = lex(source)
    assert len(tokens) == 1, tokens
    return tokens[0]


def test_punctuation_and_combinators() -> None:
    source = "{ } ; , = : > >> ( )"
    tokens = lex(source)
    debug_dump_tokens("punctuation", source, tokens)

    assert _kinds(tokens) == [
        TokenKind.SCOPE_OPEN,
        TokenKind.SCOPE_CLOSE,
        TokenKind.SECTION_CLOSE,
        TokenKind.LIST_DELIMITER,
        TokenKind.EQUALS,
        TokenKind.COLON,
        TokenKind.SCOPE_TO_CHILDREN,
        TokenKind.SCOPE_TO_DESCENDANTS,
        TokenKind.TUPLE_OPEN,
        TokenKind.TUPLE_CLOSE,
    ]


def test_declarations_and_keywords() -> None:
    tokens = lex("@macro @priority @derive Enum true false")

    assert _kinds(tokens) == [
        TokenKind.MACRO_DECLARATION,
        TokenKind.PRIORITY_DECLARATION,
        TokenKind.DERIVE_DECLARATION,
        TokenKind.ENUM_KEYWORD,
        TokenKind.BOOL,
        TokenKind.BOOL,
    ]
    assert tokens[4].value is True
    assert tokens[5].value is False


def test_keyword_prefix_of_longer_identifier_is_text() -> None:
    assert _lex_one("Enumeration").kind == TokenKind.TEXT
    assert _lex_one("trueish").kind == TokenKind.TEXT


def test_operators_are_tagged() -> None:
    tokens = lex("+ - * / ^ %")

    assert all(token.kind == TokenKind.OPERATOR for token in tokens)
    assert [token.operator for token in tokens] == [
        Operator.PLUS,
        Operator.MINUS,
        Operator.MULTIPLY,
        Operator.DIVIDE,
        Operator.POWER,
        Operator.MODULO,
    ]


def test_sigils_are_stripped() -> None:
    tokens = lex("#name .tag :state ::pseudo $!arg $var !prop plain")

    assert [(token.kind, token.text) for token in tokens] == [
        (TokenKind.SELECTOR_NAME, "name"),
        (TokenKind.SELECTOR_TAG_OR_ENUM_PART, "tag"),
        (TokenKind.SELECTOR_STATE_OR_ENUM_PART, "state"),
        (TokenKind.SELECTOR_PSEUDO, "pseudo"),
        (TokenKind.ARGUMENT, "arg"),
        (TokenKind.VARIABLE, "var"),
        (TokenKind.PSEUDO_PROPERTY, "prop"),
        (TokenKind.TEXT, "plain"),
    ]
    assert tokens[0].lexeme == "#name"


def test_hex_color_outranks_selector_name() -> None:
    token = _lex_one("#FF0000")

    assert token.kind == TokenKind.COLOR_HEX
    assert token.text == "#FF0000"
    assert _lex_one("#myId").kind == TokenKind.SELECTOR_NAME


def test_number_literals() -> None:
    tokens = lex("1 -2 .5 3.25 10px -4.5px 50% 100%")

    assert _kinds(tokens) == [
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.NUMBER_OFFSET,
        TokenKind.NUMBER_OFFSET,
        TokenKind.NUMBER_SCALE,
        TokenKind.NUMBER_SCALE,
    ]
    assert [token.value for token in tokens] == [1.0, -2.0, 0.5, 3.25, 10.0, -4.5, 0.5, 1.0]


def test_strings_drop_quotes_without_escape_processing() -> None:
    double = _lex_one('"hello world"')
    single = _lex_one(r"'a\n'")

    assert double.kind == TokenKind.STRING
    assert double.text == "hello world"
    assert single.kind == TokenKind.STRING
    assert single.text == r"a\n"


def test_asset_id_is_one_token() -> None:
    token = _lex_one("rbxassetid://1234567")

    assert token.kind == TokenKind.ASSET_ID
    assert token.text == "rbxassetid://1234567"


@pytest.mark.parametrize(
    ("source", "kind"),
    [
        ("tw:red", TokenKind.COLOR_TW),
        ("tw:slate:950", TokenKind.COLOR_TW),
        ("css:blueviolet", TokenKind.COLOR_CSS),
        ("css:blue", TokenKind.COLOR_CSS),
        ("bc:reallyred", TokenKind.COLOR_BC),
    ],
)
def test_palette_keywords_keep_raw_lexeme(source: str, kind: TokenKind) -> None:
    token = _lex_one(source)

    assert token.kind == kind
    assert token.text == source


def test_palette_keywords_are_case_sensitive() -> None:
    tokens = lex("css:Red")

    assert tokens[0].kind == TokenKind.TEXT
    assert tokens[0].text == "css"


def test_whitespace_and_comments_are_skipped() -> None:
    source = "-- single line\n--[[ multi\nline ]]\n \t\r\f"
    lexer = Lexer(source)

    assert lexer.lex() == []
    assert lexer.diagnostics == []


def test_comment_ends_at_line_break() -> None:
    tokens = lex("a -- comment\nb")

    assert [token.text for token in tokens] == ["a", "b"]


def test_unterminated_multi_line_comment_runs_to_end() -> None:
    lexer = Lexer("a --[[ never closed\nb c")

    tokens = lexer.lex()

    assert [token.text for token in tokens] == ["a"]
    assert [d.code for d in lexer.diagnostics] == [LEXER_UNTERMINATED_COMMENT.code]


def test_unrecognized_input_is_skipped_and_reported_once_per_run() -> None:
    source = "a @@@ b ~ c"
    lexer = Lexer(source)

    tokens = lexer.lex()
    debug_dump_diagnostics("unrecognized", lexer.diagnostics, source=source)

    assert [token.text for token in tokens] == ["a", "b", "c"]
    assert [d.code for d in lexer.diagnostics] == [LEXER_UNRECOGNIZED_INPUT.code] * 2
    assert lexer.diagnostics[0].range.as_tuple() == (2, 5)
    assert lexer.diagnostics[1].range.as_tuple() == (8, 9)
    assert all(d.severity == "warning" for d in lexer.diagnostics)


def test_recovery_severity_is_configurable() -> None:
    lexer = Lexer("~", recovery_severity="error")
    lexer.lex()

    assert [d.severity for d in lexer.diagnostics] == ["error"]


def test_lexer_is_lazy() -> None:
    lexer = Lexer("a b c")
    iterator = iter(lexer)

    first = next(iterator)

    assert first.text == "a"
    assert lexer.position == 1


def test_token_ranges_slice_the_source() -> None:
    source = 'Frame > .icon { Image = "x"; }'
    for token in lex(source):
        assert source[token.range.start : token.range.end] == token.lexeme


@pytest.mark.parametrize("case", ALL_RSML_CASES, ids=case_id)
def test_lexer_handles_all_central_cases(case: RsmlCase) -> None:
    lexer = Lexer(case.source)
    tokens = lexer.lex()
    debug_dump_tokens(f"lexer_case::{case.name}", case.source, tokens)

    assert all(token.kind != TokenKind.EOF for token in tokens)
    offsets = [token.range.start for token in tokens]
    assert offsets == sorted(offsets)
