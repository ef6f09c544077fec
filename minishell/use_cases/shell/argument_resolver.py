"""
Quoting, globbing and command substitution for command arguments.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, Optional

from minishell.adapters.files.local_fs_adapter import decode
from minishell.entities.environment import Environment
from minishell.entities.regex_argument import RegexArgument
from minishell.exceptions import ERR_SYNTAX, ShellError
from minishell.utils.string_utils import STRING_NEWLINE, is_blank, strip_trailing_newlines, tokenize

if TYPE_CHECKING:
    from minishell.use_cases.commands.command_builder import CommandBuilder

CHAR_SINGLE_QUOTE = "'"
CHAR_DOUBLE_QUOTE = '"'
CHAR_BACK_QUOTE = "`"
CHAR_ASTERISK = "*"


class ArgumentResolver:
    """
    Turn raw (still quoted) argument tokens into the final argument list.

    Single quotes disable every special character. Double quotes disable
    everything except back quotes. Back quotes run their content as a
    command line and splice its output in. Unquoted asterisks glob.
    """

    def __init__(
        self,
        environment: Environment,
        command_builder: "CommandBuilder",
        logger: Optional[logging.Logger] = None,
    ):
        self._environment = environment
        self._command_builder = command_builder
        self._logger = logger or logging.getLogger(__name__)

    def parse_arguments(self, args_list: list[str]) -> list[str]:
        """Resolve every argument and flatten the results."""
        parsed: list[str] = []
        for arg in args_list:
            parsed.extend(self.resolve_one_argument(arg))
        return parsed

    def resolve_one_argument(self, arg: str) -> list[str]:
        """
        Resolve one raw argument.

        Returns:
            One or more arguments: command substitution may split a word and
            globbing may expand it. A glob without matches stays literal.

        Raises:
            ShellError: If a back quote is left unmatched
        """
        unmatched_quotes: list[str] = []
        segments: list[RegexArgument] = []
        parsed_arg = RegexArgument()
        sub_command: list[str] = []

        for chr_ in arg:
            top = unmatched_quotes[-1] if unmatched_quotes else None

            if chr_ == CHAR_BACK_QUOTE:
                if top is None or top == CHAR_DOUBLE_QUOTE:
                    # start of command substitution
                    if not parsed_arg.is_empty():
                        self._append_into_segment(segments, parsed_arg)
                        parsed_arg = RegexArgument()
                    unmatched_quotes.append(chr_)
                elif top == chr_:
                    unmatched_quotes.pop()
                    output = self._evaluate_sub_command("".join(sub_command))
                    sub_command.clear()
                    if not unmatched_quotes:
                        # unquoted: split into words, first word joins the current one
                        words = [RegexArgument(word) for word in tokenize(output)]
                        if words:
                            self._append_into_segment(segments, words.pop(0))
                        segments.extend(words)
                    else:
                        self._append_into_segment(segments, RegexArgument(output))
                else:
                    parsed_arg.append(chr_)

            elif chr_ in (CHAR_SINGLE_QUOTE, CHAR_DOUBLE_QUOTE):
                if top is None:
                    unmatched_quotes.append(chr_)
                elif top == chr_:
                    unmatched_quotes.pop()
                    # an empty quoted string is still an argument
                    self._append_into_segment(segments, RegexArgument())
                elif top == CHAR_BACK_QUOTE:
                    sub_command.append(chr_)
                else:
                    parsed_arg.append(chr_)

            elif chr_ == CHAR_ASTERISK:
                if top is None:
                    parsed_arg.append_asterisk()
                elif top == CHAR_BACK_QUOTE:
                    sub_command.append(chr_)
                else:
                    parsed_arg.append(chr_)

            elif top == CHAR_BACK_QUOTE:
                sub_command.append(chr_)
            else:
                parsed_arg.append(chr_)

        if unmatched_quotes and unmatched_quotes[-1] == CHAR_BACK_QUOTE:
            raise ShellError(ERR_SYNTAX)

        if not parsed_arg.is_empty():
            self._append_into_segment(segments, parsed_arg)

        resolved: list[str] = []
        for segment in segments:
            resolved.extend(segment.glob_files(self._environment) or [segment.plaintext])
        return resolved

    def _evaluate_sub_command(self, command_string: str) -> str:
        """Run a command line and return its output on a single line."""
        if is_blank(command_string):
            return ""
        self._logger.debug(f"Evaluating command substitution: {command_string}")
        command = self._command_builder.parse_command(command_string)
        output = io.BytesIO()
        command.evaluate(io.BytesIO(), output)
        result = strip_trailing_newlines(decode(output.getvalue()))
        return result.replace(STRING_NEWLINE, " ")

    @staticmethod
    def _append_into_segment(segments: list[RegexArgument], arg: RegexArgument) -> None:
        if not segments:
            segments.append(arg)
        else:
            segments[-1].merge(arg)
