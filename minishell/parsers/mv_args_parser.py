"""
Argument parser for mv.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_NO_OVERWRITE = "n"


class MvArgsParser(ArgsParser):
    """Parser for ``mv [-n] SOURCE... TARGET``."""

    legal_flags = frozenset({FLAG_IS_NO_OVERWRITE})

    def is_overwrite(self) -> bool:
        return not self.has_flag(FLAG_IS_NO_OVERWRITE)

    def get_sources(self) -> list[str]:
        return self.non_flag_args[:-1]

    def get_target(self) -> str:
        return self.non_flag_args[-1]
