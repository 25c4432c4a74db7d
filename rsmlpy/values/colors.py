"""Resolution of color lexemes to `Color3`."""

from __future__ import annotations

from rsmlpy.values.model import Color3
from rsmlpy.values.palettes import (
    BC_PALETTE,
    CSS_PALETTE,
    TW_DEFAULT_SHADE,
    TW_PALETTE,
    TW_SHADES,
)


def resolve_hex(lexeme: str) -> Color3 | None:
    return Color3.from_hex(lexeme.removeprefix("#"))


def resolve_tw(lexeme: str) -> Color3 | None:
    _, _, rest = lexeme.partition(":")
    hue, _, shade = rest.partition(":")
    shades = TW_PALETTE.get(hue)
    if shades is None:
        return None
    shade = shade or TW_DEFAULT_SHADE
    if shade not in TW_SHADES:
        return None
    return Color3.from_hex(shades[TW_SHADES.index(shade)])


def resolve_css(lexeme: str) -> Color3 | None:
    digits = CSS_PALETTE.get(lexeme.removeprefix("css:"))
    return Color3.from_hex(digits) if digits is not None else None


def resolve_bc(lexeme: str) -> Color3 | None:
    rgb = BC_PALETTE.get(lexeme.removeprefix("bc:"))
    return Color3.from_rgb(*rgb) if rgb is not None else None


def resolve_color(lexeme: str) -> Color3 | None:
    """Resolve a raw color lexeme (`#FF0000`, `tw:red:500`, `css:red`, `bc:white`)."""
    if lexeme.startswith("#"):
        return resolve_hex(lexeme)
    if lexeme.startswith("tw:"):
        return resolve_tw(lexeme)
    if lexeme.startswith("css:"):
        return resolve_css(lexeme)
    if lexeme.startswith("bc:"):
        return resolve_bc(lexeme)
    return None
