"""RSML stylesheet front end: lexer, arena-backed tree builder, lint and snapshots."""

from rsmlpy.diagnostics import Diagnostic, has_errors
from rsmlpy.lexer import Lexer, Token, TokenKind, lex
from rsmlpy.parser import Arena, ParseMode, ParserOptions, TreeNode, parse, parse_result, parse_text
from rsmlpy.pipeline import RsmlParseResult, run_check, run_lint
from rsmlpy.snapshot import InstanceSnapshot, SnapshotError, snapshot_rsml

__all__ = [
    "Arena",
    "Diagnostic",
    "InstanceSnapshot",
    "Lexer",
    "ParseMode",
    "ParserOptions",
    "RsmlParseResult",
    "SnapshotError",
    "Token",
    "TokenKind",
    "TreeNode",
    "has_errors",
    "lex",
    "parse",
    "parse_result",
    "parse_text",
    "run_check",
    "run_lint",
    "snapshot_rsml",
]
