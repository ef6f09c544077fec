"""
String helpers shared by the parsers, the resolver and the applications.
"""

STRING_NEWLINE = "\n"
CHAR_TAB = "\t"


def is_blank(text: str | None) -> bool:
    """Return True when text is None, empty or whitespace only."""
    return text is None or not text.strip()


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace."""
    return text.split()


def split_lines(text: str) -> list[str]:
    """
    Split text into lines the way a line reader does.

    A trailing newline does not produce an extra empty line and ``\\r\\n``
    endings are accepted.
    """
    if not text:
        return []
    lines = text.split(STRING_NEWLINE)
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: list[str]) -> str:
    """Join lines with newlines and terminate the last one, empty for no lines."""
    if not lines:
        return ""
    return STRING_NEWLINE.join(lines) + STRING_NEWLINE


def strip_trailing_newlines(text: str) -> str:
    return text.rstrip(STRING_NEWLINE)
