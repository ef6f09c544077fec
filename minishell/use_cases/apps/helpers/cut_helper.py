"""
Column slicing used by the cut application.
"""

from minishell.adapters.files.local_fs_adapter import ENCODING
from minishell.entities.cut_range import CutRange


def cut_portion(line: str, ranges: list[CutRange], is_byte: bool) -> str:
    """
    Concatenate the portions of a line selected by each range.

    Character mode slices code points; byte mode slices the UTF-8 encoding
    and decodes the result with replacement characters. A range starting
    past the end of the line contributes nothing.

    Args:
        line: Line without its terminator
        ranges: Ranges sorted by start
        is_byte: Slice bytes instead of characters

    Returns:
        The selected portions joined together
    """
    if is_byte:
        data = line.encode(ENCODING)
        chunks = [data[r.start - 1 : min(r.end, len(data))] for r in ranges]
        return b"".join(chunks).decode(ENCODING, errors="replace")

    return "".join(line[r.start - 1 : min(r.end, len(line))] for r in ranges)


def cut_lines(lines: list[str], ranges: list[CutRange], is_byte: bool) -> list[str]:
    return [cut_portion(line, ranges, is_byte) for line in lines]
