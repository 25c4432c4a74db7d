"""Resolved value model for RSML data literals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class Offset:
    """Pixel quantity written with a `px` suffix."""

    value: float


@dataclass(frozen=True, slots=True)
class Scale:
    """Relative quantity written with a `%` suffix, stored as a fraction of 1."""

    value: float


@dataclass(frozen=True, slots=True)
class UDim:
    scale: float = 0.0
    offset: float = 0.0


@dataclass(frozen=True, slots=True)
class UDim2:
    x: UDim
    y: UDim

    @staticmethod
    def from_offset(x: float, y: float) -> UDim2:
        return UDim2(UDim(0.0, x), UDim(0.0, y))

    @staticmethod
    def from_scale(x: float, y: float) -> UDim2:
        return UDim2(UDim(x, 0.0), UDim(y, 0.0))


@dataclass(frozen=True, slots=True)
class Vector2:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class Rect:
    min: Vector2
    max: Vector2


@dataclass(frozen=True, slots=True)
class Color3:
    """RGB color with 0..1 channels."""

    r: float
    g: float
    b: float

    @staticmethod
    def from_rgb(r: float, g: float, b: float) -> Color3:
        return Color3(r / 255.0, g / 255.0, b / 255.0)

    @staticmethod
    def from_hex(digits: str) -> Color3 | None:
        """Decode `RGB` or `RRGGBB` hex digits (no `#`); None for any other form."""
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            return None
        try:
            channels = [int(digits[i : i + 2], 16) for i in (0, 2, 4)]
        except ValueError:
            return None
        return Color3.from_rgb(*channels)

    def to_rgb(self) -> tuple[int, int, int]:
        return (round(self.r * 255), round(self.g * 255), round(self.b * 255))

    def to_hex(self) -> str:
        r, g, b = self.to_rgb()
        return f"{r:02X}{g:02X}{b:02X}"


@dataclass(frozen=True, slots=True)
class Font:
    family: str
    weight: str = "Regular"
    style: str = "Normal"


@dataclass(frozen=True, slots=True)
class Tuple:
    """Fixed-size tuple marker: the arity and element shape of a parenthesised group.

    Only used as the lookup key into the composite table; never stored as a value.
    """

    arity: int
    shape: tuple[str, ...]


Composite: TypeAlias = UDim | UDim2 | Vector2 | Rect | Vector3 | Color3 | Font
Value: TypeAlias = bool | float | Offset | Scale | str | Composite


def value_to_data(value: Value) -> Any:
    """Plain JSON-compatible form of a value."""
    match value:
        case bool() | float() | int() | str():
            return value
        case Offset(number):
            return {"type": "Offset", "value": number}
        case Scale(number):
            return {"type": "Scale", "value": number}
        case UDim(scale, offset):
            return {"type": "UDim", "scale": scale, "offset": offset}
        case UDim2(x, y):
            return {"type": "UDim2", "x": value_to_data(x), "y": value_to_data(y)}
        case Vector2(x, y):
            return {"type": "Vector2", "x": x, "y": y}
        case Vector3(x, y, z):
            return {"type": "Vector3", "x": x, "y": y, "z": z}
        case Rect(low, high):
            return {"type": "Rect", "min": [low.x, low.y], "max": [high.x, high.y]}
        case Color3(r, g, b):
            return {"type": "Color3", "r": r, "g": g, "b": b}
        case Font(family, weight, style):
            return {"type": "Font", "family": family, "weight": weight, "style": style}
        case _:
            raise TypeError(f"Not an RSML value: {value!r}")
