"""Lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rsmlpy.diagnostics import (
    LINT_DERIVE_EXTENSION,
    LINT_EMPTY_RULE,
    LINT_UNDEFINED_VARIABLE,
    Diagnostic,
)
from rsmlpy.lexer import Token, TokenKind
from rsmlpy.parser import ROOT_INDEX, Arena
from rsmlpy.text import TextRange

if TYPE_CHECKING:
    from rsmlpy.pipeline import RsmlParseResult


class LintRule(Protocol):
    """Lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    def run(self, parse: RsmlParseResult) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class UndefinedVariableRule:
    """Flags `$name` references with no definition in the scope chain.

    Skipped for documents with `@derive`, since derived stylesheets may define
    the variable.
    """

    code: str = LINT_UNDEFINED_VARIABLE.code
    name: str = "undefinedVariable"
    category: str = "lint/correctness"

    def run(self, parse: RsmlParseResult) -> list[Diagnostic]:
        arena = parse.arena
        if arena.root.derives:
            return []

        scopes = _scope_spans(arena)
        diagnostics: list[Diagnostic] = []
        for token, following in _with_following(parse.tokens):
            if token.kind != TokenKind.VARIABLE or following == TokenKind.EQUALS:
                continue
            scope = _innermost_scope(scopes, token.range)
            if any(token.text in arena[index].variables for index in arena.ancestors(scope)):
                continue
            diagnostics.append(
                LINT_UNDEFINED_VARIABLE.at(
                    token.range,
                    message=f"{LINT_UNDEFINED_VARIABLE.message} `${token.text}` is never assigned.",
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class EmptyRuleRule:
    """Flags rule blocks that style nothing."""

    code: str = LINT_EMPTY_RULE.code
    name: str = "emptyRule"
    category: str = "lint/style"

    def run(self, parse: RsmlParseResult) -> list[Diagnostic]:
        arena = parse.arena
        diagnostics: list[Diagnostic] = []
        for index, selector, _ in arena.walk():
            if selector is None or not arena[index].is_empty():
                continue
            span = arena.span(index) or TextRange.empty(0)
            diagnostics.append(
                LINT_EMPTY_RULE.at(span, message=f"{LINT_EMPTY_RULE.message} Selector `{selector}` styles nothing.")
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class DeriveExtensionRule:
    """Flags `@derive` paths that do not name an `.rsml` file."""

    code: str = LINT_DERIVE_EXTENSION.code
    name: str = "deriveExtension"
    category: str = "lint/correctness"

    def run(self, parse: RsmlParseResult) -> list[Diagnostic]:
        return [
            LINT_DERIVE_EXTENSION.at(token.range, message=f"{LINT_DERIVE_EXTENSION.message} Got `{token.text}`.")
            for token in _derive_paths(parse.tokens)
            if not token.text.endswith(".rsml")
        ]


def default_lint_rules() -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        UndefinedVariableRule(),
        EmptyRuleRule(),
        DeriveExtensionRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    for rule in rules:
        if not rule.code.startswith("LINT_"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix.")
        if not rule.category.startswith("lint/"):
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid category `{rule.category}`; expected `lint/` prefix."
            )


def _with_following(tokens: Sequence[Token]) -> list[tuple[Token, TokenKind]]:
    kinds = [token.kind for token in tokens[1:]] + [TokenKind.EOF]
    return list(zip(tokens, kinds))


def _scope_spans(arena: Arena) -> list[tuple[TextRange, int]]:
    spans: list[tuple[TextRange, int]] = []
    for index in range(len(arena)):
        span = arena.span(index)
        if span is not None:
            spans.append((span, index))
    return spans


def _innermost_scope(scopes: Sequence[tuple[TextRange, int]], range: TextRange) -> int:
    innermost = ROOT_INDEX
    innermost_start = -1
    for span, index in scopes:
        if span.contains_range(range) and span.start >= innermost_start and index != ROOT_INDEX:
            innermost, innermost_start = index, span.start
    return innermost


def _derive_paths(tokens: Sequence[Token]) -> list[Token]:
    paths: list[Token] = []
    in_derive = False
    for token in tokens:
        match token.kind:
            case TokenKind.DERIVE_DECLARATION:
                in_derive = True
            case TokenKind.STRING if in_derive:
                paths.append(token)
            case TokenKind.LIST_DELIMITER if in_derive:
                pass
            case _:
                in_derive = False
    return paths
