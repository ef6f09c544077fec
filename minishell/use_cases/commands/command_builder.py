"""
Parse a command line into call, pipe and sequence commands.
"""

import logging
from typing import Optional

from minishell.entities.environment import Environment
from minishell.exceptions import ERR_SYNTAX, ShellError
from minishell.ports.commands.command_port import CommandPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.commands.call_command import CallCommand
from minishell.use_cases.commands.pipe_command import PipeCommand
from minishell.use_cases.commands.sequence_command import SequenceCommand
from minishell.use_cases.shell.application_runner import ApplicationRunner
from minishell.use_cases.shell.argument_resolver import ArgumentResolver
from minishell.use_cases.shell.io_redirection import CHAR_REDIR_INPUT, CHAR_REDIR_OUTPUT
from minishell.utils.string_utils import is_blank

CHAR_PIPE = "|"
CHAR_SEMICOLON = ";"
QUOTES = ("'", '"', "`")
SEPARATORS = (CHAR_PIPE, CHAR_SEMICOLON)
# Kind of the "|" and ";" tokens
_OPERATOR = object()


def tokenize_command(command_string: str) -> list[tuple[str, object]]:
    """
    Split a command line into words and operators.

    Quotes are kept inside words; ``|``, ``;``, ``<`` and ``>`` only act as
    operators outside quotes. Back quotes may open inside double quotes.

    Returns:
        Pairs of (text, kind) where kind is ``_OPERATOR`` for ``|`` and ``;``
        and ``None`` for words (redirection operators are plain words)

    Raises:
        ShellError: On unmatched quotes or a newline inside quotes
    """
    tokens: list[tuple[str, object]] = []
    current: list[str] = []
    unmatched_quotes: list[str] = []
    has_word = False

    def flush() -> None:
        nonlocal has_word
        if has_word:
            tokens.append(("".join(current), None))
        current.clear()
        has_word = False

    for chr_ in command_string:
        if unmatched_quotes:
            if chr_ in "\r\n":
                raise ShellError(ERR_SYNTAX)
            top = unmatched_quotes[-1]
            if chr_ == top:
                unmatched_quotes.pop()
            elif top == '"' and chr_ == "`":
                unmatched_quotes.append(chr_)
            current.append(chr_)
            continue

        if chr_.isspace():
            flush()
        elif chr_ in SEPARATORS:
            flush()
            tokens.append((chr_, _OPERATOR))
        elif chr_ in (CHAR_REDIR_INPUT, CHAR_REDIR_OUTPUT):
            flush()
            tokens.append((chr_, None))
        else:
            if chr_ in QUOTES:
                unmatched_quotes.append(chr_)
            current.append(chr_)
            has_word = True

    if unmatched_quotes:
        raise ShellError(ERR_SYNTAX)
    flush()
    return tokens


class CommandBuilder:
    """Build evaluable commands from command lines for one shell session."""

    def __init__(
        self,
        app_runner: ApplicationRunner,
        file_system: FileSystemPort,
        environment: Environment,
        logger: Optional[logging.Logger] = None,
    ):
        self._app_runner = app_runner
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)
        self.argument_resolver = ArgumentResolver(environment, self, self._logger)

    def parse_command(self, command_string: str) -> CommandPort:
        """
        Parse a command line.

        Returns:
            A CallCommand, a PipeCommand for ``a | b``, or a SequenceCommand
            when the line contains ``;``

        Raises:
            ShellError: If the line is blank or malformed
        """
        if is_blank(command_string):
            raise ShellError(ERR_SYNTAX)

        sequence: list[list[list[str]]] = [[[]]]
        for text, kind in tokenize_command(command_string):
            if kind is _OPERATOR:
                if not sequence[-1][-1]:
                    raise ShellError(ERR_SYNTAX)
                if text == CHAR_PIPE:
                    sequence[-1].append([])
                else:
                    sequence.append([[]])
            else:
                sequence[-1][-1].append(text)

        if not sequence[-1][-1]:
            raise ShellError(ERR_SYNTAX)

        commands = [self._build_pipeline(pipeline) for pipeline in sequence]
        self._logger.debug(f"Parsed '{command_string}' into {len(commands)} command(s)")
        if len(commands) == 1:
            return commands[0]
        return SequenceCommand(commands, self._logger)

    def _build_pipeline(self, pipeline: list[list[str]]) -> CommandPort:
        calls = [
            CallCommand(
                args,
                self._app_runner,
                self.argument_resolver,
                self._file_system,
                self._logger,
            )
            for args in pipeline
        ]
        if len(calls) == 1:
            return calls[0]
        return PipeCommand(calls)
