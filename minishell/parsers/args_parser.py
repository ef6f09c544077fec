"""
Base parser for single-character command line flags.
"""

from minishell.exceptions import ParserError

CHAR_FLAG_PREFIX = "-"
ILLEGAL_FLAG_MSG = "illegal option -- "
INSUFFICIENT_ARGS_MSG = "insufficient arguments"


class ArgsParser:
    """
    Split an argument vector into flags and operands.

    A token starting with ``-`` and longer than one character is a flag group,
    so ``-cd`` sets both ``c`` and ``d``. A lone ``-`` is an operand (stdin).
    Subclasses declare ``legal_flags`` and expose typed accessors.
    """

    legal_flags: frozenset[str] = frozenset()

    def __init__(self):
        self.flags: set[str] = set()
        self.non_flag_args: list[str] = []

    def parse(self, *args: str) -> None:
        """
        Parse arguments into ``flags`` and ``non_flag_args``.

        Raises:
            ParserError: On the first flag that is not legal for the command
        """
        for arg in args:
            if self._is_flag_group(arg):
                for flag in arg[1:]:
                    self._add_flag(flag)
            else:
                self.non_flag_args.append(arg)

    def _is_flag_group(self, arg: str) -> bool:
        return len(arg) > 1 and arg.startswith(CHAR_FLAG_PREFIX)

    def _add_flag(self, flag: str) -> None:
        if flag not in self.legal_flags:
            raise ParserError(f"{ILLEGAL_FLAG_MSG}{flag}")
        self.flags.add(flag)

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags
