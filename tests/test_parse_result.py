from rsmlpy.diagnostics import LEXER_UNRECOGNIZED_INPUT, PARSER_MISSING_SCOPE_CLOSE
from rsmlpy.lexer import TokenKind
from rsmlpy.parser import ParseMode, ParserOptions, parse_result, parse_text


def test_parse_result_exposes_tokens_tree_and_error_state() -> None:
    result = parse_result("Frame { !A = 1; }")

    assert result.source_text == "Frame { !A = 1; }"
    assert [token.kind for token in result.tokens][:2] == [TokenKind.TEXT, TokenKind.SCOPE_OPEN]
    assert result.arena.root.rules == {"Frame": [1]}
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.options == ParserOptions()


def test_parse_result_collects_lexer_before_parser_diagnostics() -> None:
    result = parse_result("Frame { ~")

    assert [d.code for d in result.diagnostics] == [
        LEXER_UNRECOGNIZED_INPUT.code,
        PARSER_MISSING_SCOPE_CLOSE.code,
    ]


def test_parse_result_strict_and_lenient_match_parse_text_contract() -> None:
    source = "Frame { ~ }"

    lenient = parse_result(source)
    strict = parse_result(source, mode=ParseMode.STRICT)

    assert lenient.arena.to_data() == parse_text(source).to_data()
    assert strict.arena.to_data() == parse_text(source, mode=ParseMode.STRICT).to_data()
    assert lenient.has_errors is False
    assert strict.has_errors is True
    assert strict.options.mode == ParseMode.STRICT


def test_parse_result_for_empty_source() -> None:
    result = parse_result("")

    assert result.tokens == []
    assert len(result.arena) == 1
    assert result.arena.root.is_empty()
    assert result.diagnostics == []
