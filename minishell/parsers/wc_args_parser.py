"""
Argument parser for wc.
"""

from minishell.parsers.args_parser import ArgsParser

FLAG_IS_BYTE_COUNT = "c"
FLAG_IS_LINE_COUNT = "l"
FLAG_IS_WORD_COUNT = "w"


class WcArgsParser(ArgsParser):
    """
    Parser for ``wc [-c] [-l] [-w] [FILE]...``.

    With no flag all three counts are shown.
    """

    legal_flags = frozenset({FLAG_IS_BYTE_COUNT, FLAG_IS_LINE_COUNT, FLAG_IS_WORD_COUNT})

    def _no_flags(self) -> bool:
        return not self.flags

    def is_byte_count(self) -> bool:
        return self._no_flags() or self.has_flag(FLAG_IS_BYTE_COUNT)

    def is_line_count(self) -> bool:
        return self._no_flags() or self.has_flag(FLAG_IS_LINE_COUNT)

    def is_word_count(self) -> bool:
        return self._no_flags() or self.has_flag(FLAG_IS_WORD_COUNT)

    def get_files(self) -> list[str]:
        return list(self.non_flag_args)
