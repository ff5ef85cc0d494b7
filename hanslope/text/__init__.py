"""Text offsets, ranges and line/column positions."""

from hanslope.text.text import (
    LineColumn,
    TextRange,
    line_column,
    offset_of_rest,
)

__all__ = [
    "LineColumn",
    "TextRange",
    "line_column",
    "offset_of_rest",
]
