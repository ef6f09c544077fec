"""
File system port interface defining the contract for file and stream access.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class FileSystemPort(ABC):
    """Port interface for file system operations used by the applications."""

    @abstractmethod
    def resolve(self, path: str) -> str:
        """
        Resolve a path against the session's current directory.

        Args:
            path: Absolute or relative path

        Returns:
            Normalized absolute path
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True when the path exists (dangling links included)."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True when the path is a directory."""
        pass

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """
        Read a whole file.

        Args:
            path: Path to the file

        Returns:
            File content

        Raises:
            FileSystemError: If the file is missing, a directory or unreadable
        """
        pass

    @abstractmethod
    def read_lines(self, path: str) -> list[str]:
        """
        Read a file as lines without their terminators.

        Raises:
            FileSystemError: If the file cannot be read
        """
        pass

    @abstractmethod
    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        """
        Write data to a file, creating it when missing.

        Args:
            path: Path to the file
            data: Bytes to write
            append: Append instead of truncating

        Raises:
            FileSystemError: If the file cannot be written
        """
        pass

    @abstractmethod
    def open_input_stream(self, path: str) -> BinaryIO:
        """
        Open a file for binary reading.

        Raises:
            FileSystemError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def open_output_stream(self, path: str, append: bool = False) -> BinaryIO:
        """
        Open a file for binary writing.

        Raises:
            FileSystemError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        """
        List the visible entries of a directory, sorted by name.

        Raises:
            FileSystemError: If the directory cannot be listed
        """
        pass
