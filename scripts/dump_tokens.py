#!/usr/bin/env python
"""Dump the tokens, diagnostics and scope tree of one `.rsml` file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from rsmlpy.diagnostics import sort_diagnostics
from rsmlpy.lexer import dump_tokens
from rsmlpy.parser import ParseMode, parse_result
from rsmlpy.text import line_col


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump RSML tokens, diagnostics and the parsed arena")
    parser.add_argument("path", type=Path, help="Path to an .rsml file")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.LENIENT.value,
        help="Parser mode (default: lenient)",
    )
    parser.add_argument("--no-tree", action="store_true", help="Skip the arena JSON dump")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging from the lexer and parser")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")

    text = path.read_text(encoding="utf-8")
    result = parse_result(text, mode=ParseMode(args.mode))

    dump_tokens(result.tokens, text)

    print(f"\nDiagnostics ({len(result.diagnostics)}):")
    for diagnostic in sort_diagnostics(result.diagnostics):
        line, column = line_col(text, diagnostic.range.start)
        print(f"- {path}:{line}:{column} {diagnostic.severity.upper()} {diagnostic.code} {diagnostic.message}")

    if not args.no_tree:
        print("\nArena:")
        print(json.dumps(result.arena.to_data(), indent=2))

    return 1 if result.has_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
