"""Resolved RSML values: primitives, composites and named color palettes."""

from rsmlpy.values.colors import resolve_color
from rsmlpy.values.composite import (
    COMPOSITE_TABLE,
    KEYWORD_CONSTRUCTORS,
    Element,
    build_tuple_value,
    construct,
    element_from_group,
    is_constructor_keyword,
    tuple_marker,
)
from rsmlpy.values.model import (
    Color3,
    Composite,
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
    value_to_data,
)

__all__ = [
    "COMPOSITE_TABLE",
    "KEYWORD_CONSTRUCTORS",
    "Color3",
    "Composite",
    "Element",
    "Font",
    "Offset",
    "Rect",
    "Scale",
    "Tuple",
    "UDim",
    "UDim2",
    "Value",
    "Vector2",
    "Vector3",
    "build_tuple_value",
    "construct",
    "element_from_group",
    "is_constructor_keyword",
    "resolve_color",
    "tuple_marker",
    "value_to_data",
]
