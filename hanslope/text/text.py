from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in source text, as string offsets.

    Invariant:
    - 0 <= start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: int) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset, offset)

    @staticmethod
    def at(offset: int, length: int) -> "TextRange":
        """Create a TextRange at offset with given length."""
        return TextRange(offset, offset + length)

    def len(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def __repr__(self) -> str:
        return f"TextRange({self.start}, {self.end})"


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line and column of an offset."""

    line: int
    column: int


def offset_of_rest(source: str, rest: str) -> int:
    """Offset in `source` where the unconsumed suffix `rest` begins.

    Matchers only ever hand back suffixes of their input, so the offset is a
    length difference rather than a search.
    """
    if len(rest) > len(source):
        raise ValueError("rest is longer than the source it came from")
    return len(source) - len(rest)


def line_column(source: str, offset: int) -> LineColumn:
    if offset < 0 or offset > len(source):
        raise ValueError(f"offset {offset} is outside the source text")
    before = source[:offset]
    line = before.count("\n") + 1
    last_newline = before.rfind("\n")
    return LineColumn(line=line, column=offset - last_newline)

