"""
Shell use case: evaluate command lines and drive the read-eval loop.
"""

import io
import logging
from typing import BinaryIO, Callable, Optional

from minishell.entities.environment import Environment
from minishell.exceptions import BaseShellError, ExitSignal
from minishell.use_cases.commands.command_builder import CommandBuilder
from minishell.utils.string_utils import is_blank


class ShellImpl:
    """A Unix-like shell bound to one session environment."""

    def __init__(
        self,
        command_builder: CommandBuilder,
        environment: Environment,
        prompt_suffix: str = "$ ",
        log_history: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._command_builder = command_builder
        self._environment = environment
        self._prompt_suffix = prompt_suffix
        self._log_history = log_history
        self._logger = logger or logging.getLogger(__name__)

    @property
    def prompt(self) -> str:
        return f"{self._environment.current_directory}{self._prompt_suffix}"

    def parse_and_evaluate(
        self,
        command_string: str,
        stdout: BinaryIO,
        stdin: Optional[BinaryIO] = None,
    ) -> None:
        """
        Parse and evaluate one command line.

        Args:
            command_string: Raw command line
            stdout: Binary stream receiving the command output
            stdin: Binary stream for commands reading standard input

        Raises:
            ApplicationError: If an application fails
            ShellError: If the line is invalid
            ExitSignal: If the line asked the shell to stop
        """
        if self._log_history:
            self._logger.info(f"Evaluating: {command_string}")
        command = self._command_builder.parse_command(command_string)
        command.evaluate(stdin if stdin is not None else io.BytesIO(), stdout)

    def run_repl(
        self,
        read_line: Callable[[str], str],
        stdout: BinaryIO,
        report_error: Callable[[str], None],
        stdin: Optional[BinaryIO] = None,
    ) -> int:
        """
        Read, evaluate and print until exit or end of input.

        Args:
            read_line: Called with the prompt; raises EOFError at end of input
            stdout: Binary stream receiving command output
            report_error: Called with the message of every failed line
            stdin: Binary stream for commands reading standard input

        Returns:
            Exit code requested by ``exit``, 0 at end of input
        """
        while True:
            try:
                command_string = read_line(self.prompt)
            except EOFError:
                return 0

            if is_blank(command_string):
                continue

            try:
                self.parse_and_evaluate(command_string, stdout, stdin)
            except ExitSignal as e:
                self._logger.debug(f"Exit requested with code {e.code}")
                return e.code
            except BaseShellError as e:
                report_error(str(e))
