"""
Argument parser for paste.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_SERIAL = "s"


class PasteArgsParser(ArgsParser):
    """Parser for ``paste [-s] [FILE]...``."""

    legal_flags = frozenset({FLAG_IS_SERIAL})

    def is_serial(self) -> bool:
        return self.has_flag(FLAG_IS_SERIAL)

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
