"""
Command port interface for parsed command lines.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class CommandPort(ABC):
    """Port interface for an evaluable command (call, pipe or sequence)."""

    @abstractmethod
    def evaluate(self, stdin: BinaryIO, stdout: BinaryIO) -> None:
        """
        Evaluate the command.

        Args:
            stdin: Binary input stream for the command
            stdout: Binary output stream for the command

        Raises:
            ApplicationError: If an application fails
            ShellError: If the command line is invalid
            ExitSignal: If the command asked the shell to stop
        """
        pass
