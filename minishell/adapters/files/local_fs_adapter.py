"""
Local file system adapter used by the applications and the redirection handler.
"""

import logging
import os
from typing import BinaryIO

from typing_extensions import override

from minishell.entities.environment import Environment
from minishell.exceptions import (
    ERR_FILE_NOT_FOUND,
    ERR_IS_DIR,
    ERR_NO_PERM,
    ERR_NULL_STREAMS,
    ERR_READING_FILE,
    ERR_WRITE_STREAM,
    FileSystemError,
)
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.utils.string_utils import split_lines

ENCODING = "utf-8"


def decode(data: bytes) -> str:
    return data.decode(ENCODING, errors="replace")


def encode(text: str) -> bytes:
    return text.encode(ENCODING)


class LocalFileSystemAdapter(FileSystemPort):
    """File and stream access resolved against a session's current directory."""

    def __init__(self, environment: Environment, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            environment: Session whose current directory anchors relative paths
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._environment = environment
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def resolve(self, path: str) -> str:
        return self._environment.resolve(path)

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(self.resolve(path))

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(self.resolve(path))

    def _validate_readable_file(self, path: str) -> str:
        """
        Validate that a path names a readable regular file.

        Args:
            path: Path as typed by the user

        Returns:
            The resolved absolute path

        Raises:
            FileSystemError: If the file is missing, a directory or unreadable
        """
        abs_path = self.resolve(path)
        if not os.path.exists(abs_path):
            raise FileSystemError(path, ERR_FILE_NOT_FOUND)

        if os.path.isdir(abs_path):
            raise FileSystemError(path, ERR_IS_DIR)

        if not os.access(abs_path, os.R_OK):
            raise FileSystemError(path, ERR_NO_PERM)
        return abs_path

    @override
    def read_bytes(self, path: str) -> bytes:
        """
        Read a whole file.

        Raises:
            FileSystemError: If the file cannot be read
        """
        abs_path = self._validate_readable_file(path)
        try:
            with open(abs_path, "rb") as f:
                return f.read()
        except OSError as e:
            self._logger.error(f"Error reading {abs_path}: {e}")
            raise FileSystemError(path, ERR_READING_FILE) from e

    @override
    def read_lines(self, path: str) -> list[str]:
        """Read a file as a list of lines without their terminators."""
        return split_lines(decode(self.read_bytes(path)))

    @override
    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        """
        Write data to a file, creating it when missing.

        Args:
            path: Path as typed by the user
            data: Bytes to write
            append: Append instead of truncating

        Raises:
            FileSystemError: If the path is a directory or cannot be written
        """
        abs_path = self.resolve(path)
        if os.path.isdir(abs_path):
            raise FileSystemError(path, ERR_IS_DIR)
        try:
            with open(abs_path, "ab" if append else "wb") as f:
                f.write(data)
        except FileNotFoundError as e:
            raise FileSystemError(path, ERR_FILE_NOT_FOUND) from e
        except PermissionError as e:
            raise FileSystemError(path, ERR_NO_PERM) from e
        self._logger.debug(f"Wrote {len(data)} bytes to {abs_path}")

    @override
    def open_input_stream(self, path: str) -> BinaryIO:
        """
        Open a file for reading as a binary stream.

        Raises:
            FileSystemError: If the file is missing, a directory or unreadable
        """
        abs_path = self._validate_readable_file(path)
        return open(abs_path, "rb")

    @override
    def open_output_stream(self, path: str, append: bool = False) -> BinaryIO:
        """
        Open a file for writing as a binary stream, truncating unless ``append``.

        Raises:
            FileSystemError: If the path is a directory or cannot be created
        """
        abs_path = self.resolve(path)
        if os.path.isdir(abs_path):
            raise FileSystemError(path, ERR_IS_DIR)
        try:
            return open(abs_path, "ab" if append else "wb")
        except FileNotFoundError as e:
            raise FileSystemError(path, ERR_FILE_NOT_FOUND) from e
        except PermissionError as e:
            raise FileSystemError(path, ERR_NO_PERM) from e

    @override
    def list_directory(self, path: str) -> list[str]:
        """
        List the visible entries of a directory, sorted by name.

        Raises:
            FileSystemError: If the directory is missing or cannot be opened
        """
        abs_path = self.resolve(path)
        if not os.path.exists(abs_path):
            raise FileSystemError(path, ERR_FILE_NOT_FOUND)
        try:
            names = os.listdir(abs_path)
        except PermissionError as e:
            raise FileSystemError(path, ERR_NO_PERM) from e
        return sorted(name for name in names if not name.startswith("."))


def read_stream(stream: BinaryIO | None) -> bytes:
    """
    Read everything left in a binary stream.

    Raises:
        FileSystemError: If the stream is missing or cannot be read
    """
    if stream is None:
        raise FileSystemError("stdin", ERR_NULL_STREAMS)
    try:
        return stream.read()
    except OSError as e:
        raise FileSystemError("stdin", ERR_READING_FILE) from e


def read_stream_lines(stream: BinaryIO | None) -> list[str]:
    return split_lines(decode(read_stream(stream)))


def write_stream(stream: BinaryIO, text: str) -> None:
    """
    Write text to a binary stream.

    Raises:
        FileSystemError: If the stream cannot be written
    """
    try:
        stream.write(encode(text))
        stream.flush()
    except (OSError, ValueError) as e:
        raise FileSystemError("stdout", ERR_WRITE_STREAM) from e
