"""
Application port interface defining the contract for shell command applications.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class ApplicationPort(ABC):
    """Port interface implemented by every command application."""

    @abstractmethod
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        """
        Run the application.

        Args:
            args: Arguments following the application name, already resolved
            stdin: Binary input stream
            stdout: Binary output stream the result is written to

        Raises:
            ApplicationError: If the command fails
        """
        pass
