"""
Argument parser for mkdir.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_CREATE_PARENT = "p"


class MkdirArgsParser(ArgsParser):
    """Parser for ``mkdir [-p] DIR...``."""

    legal_flags = frozenset({FLAG_IS_CREATE_PARENT})

    def is_create_parent(self) -> bool:
        return self.has_flag(FLAG_IS_CREATE_PARENT)

    def get_directories(self) -> list[str]:
        return list(self.non_flag_args)
