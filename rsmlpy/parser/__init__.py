"""Parser infrastructure (token source + recursive-descent tree builder + arena)."""

from rsmlpy.parser.arena import ROOT_INDEX, Arena, MacroDefinition, TreeNode
from rsmlpy.parser.grammar import parse_document, parse_scope_body, selector_key
from rsmlpy.parser.options import ParseMode, ParserOptions
from rsmlpy.parser.parse_recovery import STATEMENT_RECOVERY, ParseRecoveryTokenSet, RecoveryError
from rsmlpy.parser.parser import Parser, ParserProgress
from rsmlpy.parser.rsml import build_tree, parse, parse_result, parse_text
from rsmlpy.parser.token_source import TokenSource
from rsmlpy.parser.values import parse_value

__all__ = [
    "ROOT_INDEX",
    "STATEMENT_RECOVERY",
    "Arena",
    "MacroDefinition",
    "ParseMode",
    "ParseRecoveryTokenSet",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "RecoveryError",
    "TokenSource",
    "TreeNode",
    "build_tree",
    "parse",
    "parse_document",
    "parse_result",
    "parse_scope_body",
    "parse_text",
    "parse_value",
    "selector_key",
]
