"""
Argument parser for uniq.
"""

from typing import Optional

from minishell.exceptions import ParserError
from minishell.parsers.args_parser import ArgsParser

FLAG_IS_COUNT = "c"
FLAG_IS_REPEATED = "d"
FLAG_IS_ALL_REPEATED = "D"


class UniqArgsParser(ArgsParser):
    """Parser for ``uniq [-c] [-d] [-D] [INPUT [OUTPUT]]``."""

    legal_flags = frozenset({FLAG_IS_COUNT, FLAG_IS_REPEATED, FLAG_IS_ALL_REPEATED})

    def parse(self, *args: str) -> None:
        super().parse(*args)
        if len(self.non_flag_args) > 2:
            raise ParserError(f"extra operand '{self.non_flag_args[2]}'")

    def is_count(self) -> bool:
        return self.has_flag(FLAG_IS_COUNT)

    def is_repeated(self) -> bool:
        return self.has_flag(FLAG_IS_REPEATED)

    def is_all_repeated(self) -> bool:
        return self.has_flag(FLAG_IS_ALL_REPEATED)

    def get_input_file(self) -> Optional[str]:
        return self.non_flag_args[0] if self.non_flag_args else None

    def get_output_file(self) -> Optional[str]:
        return self.non_flag_args[1] if len(self.non_flag_args) > 1 else None
