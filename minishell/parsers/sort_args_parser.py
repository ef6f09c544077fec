"""
Argument parser for sort.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_FIRST_NUM = "n"
FLAG_REV_ORDER = "r"
FLAG_CASE_IGNORE = "f"


class SortArgsParser(ArgsParser):
    """Parser for ``sort [-n] [-r] [-f] [FILE]...``."""

    legal_flags = frozenset({FLAG_FIRST_NUM, FLAG_REV_ORDER, FLAG_CASE_IGNORE})

    def is_first_word_number(self) -> bool:
        return self.has_flag(FLAG_FIRST_NUM)

    def is_reverse_order(self) -> bool:
        return self.has_flag(FLAG_REV_ORDER)

    def is_case_independent(self) -> bool:
        return self.has_flag(FLAG_CASE_IGNORE)

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
