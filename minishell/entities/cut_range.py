"""
Cut range entity and LIST parsing.
"""

import re

from minishell.exceptions import CutError

_RANGE_CHARS = re.compile(r"^[0-9-]*$")


class CutRange:
    """A 1-based inclusive (start, end) column range."""

    def __init__(self, start: int, end: int):
        if start < 1:
            raise CutError("byte/character positions are numbered from 1")
        if end < start:
            raise CutError(f"invalid decreasing range: '{start}-{end}'")
        self.start = start
        self.end = end

    def width(self, length: int) -> int:
        """Number of units this range selects on a line of ``length`` units."""
        if self.start > length:
            return 0
        return min(self.end, length) - self.start + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CutRange):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"

    def __repr__(self) -> str:
        return f"CutRange(start={self.start}, end={self.end})"


def parse_range_list(text: str) -> list[CutRange]:
    """
    Parse a cut LIST such as ``1,3-5``.

    Args:
        text: Comma separated positions and ``a-b`` ranges

    Returns:
        Ranges sorted by start position

    Raises:
        CutError: If any field is malformed
    """
    ranges: list[CutRange] = []
    for field in text.split(","):
        if not _RANGE_CHARS.match(field):
            raise CutError(f"invalid byte/character position: '{field}'")
        if field == "":
            raise CutError("byte/character positions are numbered from 1")
        if field == "-":
            raise CutError("invalid range with no endpoint: '-'")

        if "-" in field:
            parts = field.split("-")
            if len(parts) != 2 or not parts[0] or not parts[1]:
                raise CutError(f"invalid range format: '{field}'")
            start, end = int(parts[0]), int(parts[1])
            if start < 1:
                raise CutError("byte/character positions are numbered from 1")
            if start > end:
                raise CutError(f"invalid decreasing range: '{field}'")
        else:
            start = end = int(field)

        ranges.append(CutRange(start, end))

    ranges.sort(key=lambda r: r.start)
    return ranges
