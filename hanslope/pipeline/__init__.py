"""Parse pipeline: match, reduce and rewrite in one carrier."""

from hanslope.pipeline.options import ParseMode, ParseOptions
from hanslope.pipeline.parse import parse
from hanslope.pipeline.result import ParseResult

__all__ = [
    "ParseMode",
    "ParseOptions",
    "ParseResult",
    "parse",
]
