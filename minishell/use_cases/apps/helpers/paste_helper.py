"""
Serial and parallel merging used by the paste application.
"""

from minishell.utils.string_utils import CHAR_TAB


def merge_serial(sources: list[list[str]]) -> list[str]:
    """Join each source's lines with tabs, one output row per source."""
    return [CHAR_TAB.join(lines) for lines in sources]


def merge_parallel(sources: list[list[str]]) -> list[str]:
    """
    Join line ``i`` of every source with tabs.

    Shorter sources contribute an empty field so that columns stay aligned;
    the row count is the length of the longest source.
    """
    rows = max((len(lines) for lines in sources), default=0)
    return [
        CHAR_TAB.join(lines[i] if i < len(lines) else "" for lines in sources)
        for i in range(rows)
    ]


def split_stdin(stdin_lines: list[str], dash_count: int, is_serial: bool) -> list[list[str]]:
    """
    Share stdin between several ``-`` operands.

    In parallel mode the k-th dash reads lines k, k+n, k+2n... In serial
    mode the first dash consumes everything.
    """
    if dash_count == 0:
        return []
    if is_serial:
        return [stdin_lines] + [[] for _ in range(dash_count - 1)]
    return [stdin_lines[k::dash_count] for k in range(dash_count)]
