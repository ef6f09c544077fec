"""
Argument parser for tee.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_APPEND = "a"


class TeeArgsParser(ArgsParser):
    """Parser for ``tee [-a] [FILE]...``."""

    legal_flags = frozenset({FLAG_IS_APPEND})

    def is_append(self) -> bool:
        return self.has_flag(FLAG_IS_APPEND)

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
