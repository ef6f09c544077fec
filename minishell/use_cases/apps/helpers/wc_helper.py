"""
Counting and row formatting used by the wc application.
"""

from typing import NamedTuple


class WcCount(NamedTuple):
    lines: int
    words: int
    bytes: int

    def combine(self, other: "WcCount") -> "WcCount":
        return WcCount(
            self.lines + other.lines,
            self.words + other.words,
            self.bytes + other.bytes,
        )


def get_count_report(data: bytes) -> WcCount:
    """
    Count newlines, whitespace separated words and raw bytes.
    """
    return WcCount(data.count(b"\n"), len(data.split()), len(data))


def format_count(
    count: WcCount,
    is_lines: bool,
    is_words: bool,
    is_bytes: bool,
    name: str = "",
) -> str:
    """Render one wc row: enabled counts in lines, words, bytes order, then the name."""
    row = ""
    if is_lines:
        row += f" {count.lines:7d}"
    if is_words:
        row += f" {count.words:7d}"
    if is_bytes:
        row += f" {count.bytes:7d}"
    if name:
        row += f" {name}"
    return row
