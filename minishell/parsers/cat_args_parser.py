"""
Argument parser for cat.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_LINE_NUMBER = "n"


class CatArgsParser(ArgsParser):
    """Parser for ``cat [-n] [FILE]...``."""

    legal_flags = frozenset({FLAG_IS_LINE_NUMBER})

    def is_line_number(self) -> bool:
        return self.has_flag(FLAG_IS_LINE_NUMBER)

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
