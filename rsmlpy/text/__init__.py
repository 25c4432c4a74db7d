"""Source text offsets and ranges."""

from rsmlpy.text.text import TextRange, line_col, slice_text_range

__all__ = [
    "TextRange",
    "line_col",
    "slice_text_range",
]
