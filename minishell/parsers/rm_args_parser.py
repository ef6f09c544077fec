"""
Argument parser for rm.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_RECURSIVE = "r"
FLAG_IS_EMPTY_DIR = "d"


class RmArgsParser(ArgsParser):
    """Parser for ``rm [-r] [-d] FILE...``."""

    legal_flags = frozenset({FLAG_IS_RECURSIVE, FLAG_IS_EMPTY_DIR})

    def is_recursive(self) -> bool:
        return self.has_flag(FLAG_IS_RECURSIVE)

    def is_empty_folder(self) -> bool:
        return self.has_flag(FLAG_IS_EMPTY_DIR)

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
