"""
Commands joined by ``;``.
"""

import io
import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import encode
from minishell.exceptions import (
    ERR_WRITE_STREAM,
    ApplicationError,
    ExitSignal,
    ShellError,
)
from minishell.ports.commands.command_port import CommandPort
from minishell.utils.string_utils import STRING_NEWLINE


class SequenceCommand(CommandPort):
    """
    Run commands one after another.

    A failing command writes its message inline and the sequence goes on.
    An exit request is remembered and raised once every command has run.
    """

    def __init__(self, commands: list[CommandPort], logger: Optional[logging.Logger] = None):
        self._commands = commands
        self._logger = logger or logging.getLogger(__name__)

    def get_commands(self) -> list[CommandPort]:
        return self._commands

    @override
    def evaluate(self, stdin: BinaryIO, stdout: BinaryIO) -> None:
        exit_signal: Optional[ExitSignal] = None
        for command in self._commands:
            output = io.BytesIO()
            try:
                command.evaluate(stdin, output)
            except ExitSignal as e:
                exit_signal = e
            except (ApplicationError, ShellError) as e:
                self._logger.debug(f"Sequence step failed: {e}")
                output.write(encode(str(e) + STRING_NEWLINE))

            if output.getvalue():
                try:
                    stdout.write(output.getvalue())
                    stdout.flush()
                except (OSError, ValueError) as e:
                    raise ShellError(ERR_WRITE_STREAM) from e

        if exit_signal is not None:
            raise exit_signal
