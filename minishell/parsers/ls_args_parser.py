"""
Argument parser for ls.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_RECURSIVE = "R"
FLAG_IS_SORT_EXT = "X"


class LsArgsParser(ArgsParser):
    """Parser for ``ls [-R] [-X] [PATH]...``."""

    legal_flags = frozenset({FLAG_IS_RECURSIVE, FLAG_IS_SORT_EXT})

    def is_recursive(self) -> bool:
        return self.has_flag(FLAG_IS_RECURSIVE)

    def is_sort_by_ext(self) -> bool:
        return self.has_flag(FLAG_IS_SORT_EXT)

    def get_directories(self) -> list[str]:
        return list(self.non_flag_args)
