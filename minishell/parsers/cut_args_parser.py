"""
Argument parser for cut.
"""

from minishell.exceptions import ParserError
from minishell.parsers.args_parser import INSUFFICIENT_ARGS_MSG, ArgsParser

FLAG_CUT_BY_CHAR = "c"
FLAG_CUT_BY_BYTE = "b"


class CutArgsParser(ArgsParser):
    """Parser for ``cut -c|-b LIST [FILE]...``; the first operand is the LIST."""

    legal_flags = frozenset({FLAG_CUT_BY_CHAR, FLAG_CUT_BY_BYTE})

    def parse(self, *args: str) -> None:
        super().parse(*args)
        if not self.non_flag_args:
            raise ParserError(INSUFFICIENT_ARGS_MSG)

    def is_char_po(self) -> bool:
        return self.has_flag(FLAG_CUT_BY_CHAR)

    def is_byte_po(self) -> bool:
        return self.has_flag(FLAG_CUT_BY_BYTE)

    def get_range_list(self) -> str:
        return self.non_flag_args[0]

    def get_files(self) -> list[str]:
        return self.non_flag_args[1:]
