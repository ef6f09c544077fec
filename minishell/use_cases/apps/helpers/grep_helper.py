"""
Pattern compilation and line matching used by the grep application.
"""

import re

from minishell.exceptions import GrepError

ERR_INVALID_REGEX = "Invalid regular expression supplied"
STDIN_NAME = "(standard input)"


def compile_pattern(pattern: str, is_case_insensitive: bool) -> re.Pattern[str]:
    """
    Compile a grep pattern.

    Raises:
        GrepError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern, re.IGNORECASE if is_case_insensitive else 0)
    except re.error as e:
        raise GrepError(ERR_INVALID_REGEX) from e


def matching_lines(lines: list[str], regex: re.Pattern[str]) -> list[str]:
    return [line for line in lines if regex.search(line)]


def format_matches(
    name: str, matches: list[str], is_count: bool, is_prefix: bool
) -> list[str]:
    """Render the matches of one source as output lines."""
    prefix = f"{name}: " if is_prefix else ""
    if is_count:
        return [f"{prefix}{len(matches)}"]
    return [f"{prefix}{line}" for line in matches]
