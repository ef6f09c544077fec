"""
Argument parser for grep.
"""

from typing import Optional

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_CASE_INSENSITIVE = "i"
FLAG_IS_COUNT = "c"
FLAG_IS_PREFIX = "H"


class GrepArgsParser(ArgsParser):
    """
    Parser for ``grep [-i] [-c] [-H] PATTERN [FILE]...``.

    Flags are only recognized before the pattern; everything after the
    pattern is a file operand, even when it starts with ``-``.
    """

    legal_flags = frozenset({FLAG_IS_CASE_INSENSITIVE, FLAG_IS_COUNT, FLAG_IS_PREFIX})

    def __init__(self):
        super().__init__()
        self.pattern: Optional[str] = None

    def parse(self, *args: str) -> None:
        for arg in args:
            if self.pattern is None and self._is_flag_group(arg):
                for flag in arg[1:]:
                    self._add_flag(flag)
            elif self.pattern is None:
                self.pattern = arg
            else:
                self.non_flag_args.append(arg)

    def is_case_insensitive(self) -> bool:
        return self.has_flag(FLAG_IS_CASE_INSENSITIVE)

    def is_count_lines(self) -> bool:
        return self.has_flag(FLAG_IS_COUNT)

    def is_prefix_file_name(self) -> bool:
        return self.has_flag(FLAG_IS_PREFIX)

    def get_pattern(self) -> Optional[str]:
        return self.pattern

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
