"""
Commands joined by ``|``.
"""

import io
from typing import BinaryIO

from typing_extensions import override

from minishell.ports.commands.command_port import CommandPort
from minishell.use_cases.commands.call_command import CallCommand


class PipeCommand(CommandPort):
    """
    Feed each call's output to the next call's input.

    Output is fully buffered between stages. The first failure propagates
    and the remaining stages are not run.
    """

    def __init__(self, call_commands: list[CallCommand]):
        self._call_commands = call_commands

    def get_call_commands(self) -> list[CallCommand]:
        return self._call_commands

    @override
    def evaluate(self, stdin: BinaryIO, stdout: BinaryIO) -> None:
        next_input: BinaryIO = stdin
        last = len(self._call_commands) - 1
        for i, call_command in enumerate(self._call_commands):
            if i == last:
                call_command.evaluate(next_input, stdout)
                continue
            buffer = io.BytesIO()
            call_command.evaluate(next_input, buffer)
            next_input = io.BytesIO(buffer.getvalue())
