"""Lexer."""

from rsmlpy.lexer.lexer import Lexer, dump_tokens, lex, token_text
from rsmlpy.lexer.rules import RULES, LexRule
from rsmlpy.lexer.tokens import Operator, Token, TokenKind, eof_token

__all__ = [
    "RULES",
    "LexRule",
    "Lexer",
    "Operator",
    "Token",
    "TokenKind",
    "dump_tokens",
    "eof_token",
    "lex",
    "token_text",
]
