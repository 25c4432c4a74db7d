"""Composite value construction from parenthesised groups of primitives.

A tuple `( e1, e2, ... )` is read as a sequence of elements, each element a
group of adjacent primitives. The element kinds form the tuple's shape and the
shape is looked up in a fixed table; there is no inference beyond that table.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from rsmlpy.values.model import (
    Color3,
    Font,
    Offset,
    Rect,
    Scale,
    Tuple,
    UDim,
    UDim2,
    Value,
    Vector2,
    Vector3,
)

NUMBER: Final = "number"
OFFSET: Final = "offset"
SCALE: Final = "scale"
AXIS: Final = "axis"
STRING: Final = "string"
ENUM: Final = "enum"
COLOR: Final = "color"
BOOL: Final = "bool"
REFERENCE: Final = "reference"
TEXT: Final = "text"
COMPOSITE: Final = "composite"


@dataclass(frozen=True, slots=True)
class Element:
    """One comma-separated member of a tuple, already resolved to a primitive."""

    kind: str
    value: Value


def element_from_group(primitives: Sequence[Element]) -> Element | None:
    """Collapse a whitespace-separated group into one element.

    A group is either one primitive, or one scale plus one offset (in either
    order) which together form a single `UDim` axis.
    """
    if len(primitives) == 1:
        return primitives[0]
    if len(primitives) != 2:
        return None

    kinds = {primitive.kind for primitive in primitives}
    if kinds != {SCALE, OFFSET}:
        return None

    scale = next(p.value for p in primitives if p.kind == SCALE)
    offset = next(p.value for p in primitives if p.kind == OFFSET)
    assert isinstance(scale, Scale) and isinstance(offset, Offset)
    return Element(AXIS, UDim(scale.value, offset.value))


def tuple_marker(elements: Sequence[Element]) -> Tuple:
    return Tuple(arity=len(elements), shape=tuple(element.kind for element in elements))


def _axis(element: Element) -> UDim:
    match element.value:
        case UDim() as udim:
            return udim
        case Scale(value):
            return UDim(value, 0.0)
        case Offset(value):
            return UDim(0.0, value)
    raise TypeError(f"Not an axis element: {element!r}")


def _number(element: Element) -> float:
    match element.value:
        case Offset(value) | Scale(value):
            return value
        case float() | int() as value:
            return float(value)
    raise TypeError(f"Not a numeric element: {element!r}")


def _enum_item(element: Element) -> str:
    text = str(element.value)
    return text.rsplit(".", 1)[-1]


def _font(elements: Sequence[Element]) -> Font:
    family = str(elements[0].value)
    weight = _enum_item(elements[1]) if len(elements) > 1 else "Regular"
    style = _enum_item(elements[2]) if len(elements) > 2 else "Normal"
    return Font(family, weight, style)


def _rect(elements: Sequence[Element]) -> Rect:
    x0, y0, x1, y1 = (_number(element) for element in elements)
    return Rect(Vector2(x0, y0), Vector2(x1, y1))


_AXES: Final = frozenset({OFFSET, SCALE, AXIS})
_NUMBERS: Final = frozenset({NUMBER})
_OFFSETS: Final = frozenset({OFFSET})
_STRINGS: Final = frozenset({STRING})
_ENUMS: Final = frozenset({ENUM, TEXT})

Pattern: TypeAlias = tuple[frozenset[str], ...]
Builder: TypeAlias = Callable[[Sequence[Element]], Value]

COMPOSITE_TABLE: Final[tuple[tuple[Pattern, Builder], ...]] = (
    ((_AXES,), lambda e: _axis(e[0])),
    ((_NUMBERS, _NUMBERS), lambda e: Vector2(_number(e[0]), _number(e[1]))),
    ((_AXES, _AXES), lambda e: UDim2(_axis(e[0]), _axis(e[1]))),
    ((_NUMBERS, _NUMBERS, _NUMBERS), lambda e: Vector3(*(_number(x) for x in e))),
    ((_NUMBERS,) * 4, _rect),
    ((_OFFSETS,) * 4, _rect),
    ((_STRINGS, _ENUMS), _font),
    ((_STRINGS, _ENUMS, _ENUMS), _font),
)


def _matches(pattern: Pattern, marker: Tuple) -> bool:
    return len(pattern) == marker.arity and all(kind in allowed for kind, allowed in zip(marker.shape, pattern))


def build_tuple_value(elements: Sequence[Element]) -> Value | None:
    """Map a tuple's elements to a composite value, or None for an unknown shape."""
    marker = tuple_marker(elements)
    if marker.arity == 1 and marker.shape[0] not in _AXES:
        return elements[0].value

    for pattern, builder in COMPOSITE_TABLE:
        if _matches(pattern, marker):
            return builder(elements)
    return None


def _all_numbers(elements: Sequence[Element], arity: int) -> bool:
    return len(elements) == arity and all(element.kind == NUMBER for element in elements)


def _construct_rgb(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 3):
        return None
    return Color3.from_rgb(*(_number(element) for element in elements))


def _construct_color3(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 3):
        return None
    return Color3(*(_number(element) for element in elements))


def _construct_udim(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 2):
        return None
    return UDim(_number(elements[0]), _number(elements[1]))


def _construct_udim2(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 4):
        return None
    xs, xo, ys, yo = (_number(element) for element in elements)
    return UDim2(UDim(xs, xo), UDim(ys, yo))


def _construct_vec2(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 2):
        return None
    return Vector2(_number(elements[0]), _number(elements[1]))


def _construct_vec3(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 3):
        return None
    return Vector3(*(_number(element) for element in elements))


def _construct_rect(elements: Sequence[Element]) -> Value | None:
    if not _all_numbers(elements, 4):
        return None
    return _rect(elements)


def _construct_font(elements: Sequence[Element]) -> Value | None:
    if not 1 <= len(elements) <= 3 or elements[0].kind != STRING:
        return None
    if any(element.kind not in _ENUMS for element in elements[1:]):
        return None
    return _font(elements)


KEYWORD_CONSTRUCTORS: Final[dict[str, Callable[[Sequence[Element]], Value | None]]] = {
    "rgb": _construct_rgb,
    "color3": _construct_color3,
    "udim": _construct_udim,
    "udim2": _construct_udim2,
    "vec2": _construct_vec2,
    "vector2": _construct_vec2,
    "vec3": _construct_vec3,
    "vector3": _construct_vec3,
    "rect": _construct_rect,
    "font": _construct_font,
}


def is_constructor_keyword(name: str) -> bool:
    return name.lower() in KEYWORD_CONSTRUCTORS


def construct(name: str, elements: Sequence[Element]) -> Value | None:
    """Apply a keyword constructor such as `rgb(255, 0, 0)`; None if the arguments don't fit."""
    constructor = KEYWORD_CONSTRUCTORS.get(name.lower())
    if constructor is None:
        return None
    return constructor(elements)
