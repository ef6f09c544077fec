"""
Use case for the cat application: concatenate files and stdin.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import read_stream_lines, write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    CatError,
    FileSystemError,
    ParserError,
)
from minishell.parsers.cat_args_parser import CatArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.utils.string_utils import join_lines

STDIN_OPERAND = "-"


class CatApplication(ApplicationPort):
    """Concatenate files and stdin, optionally numbering lines."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the application.

        Args:
            file_system: File system used to read operands
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        if stdout is None:
            raise CatError(ERR_NULL_STREAMS)

        parser = CatArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise CatError(str(e)) from e

        files = parser.get_files()
        if not files:
            result = self.cat_stdin(parser.is_line_number(), stdin)
        else:
            result = self.cat_file_and_stdin(parser.is_line_number(), stdin, *files)

        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise CatError(ERR_WRITE_STREAM) from e

    def cat_files(self, is_line_number: bool, *file_names: str) -> str:
        """
        Concatenate files.

        A missing file or a directory becomes an inline error line and the
        remaining files are still read.

        Returns:
            Concatenated lines, each terminated by a newline
        """
        return self.cat_file_and_stdin(is_line_number, None, *file_names)

    def cat_stdin(self, is_line_number: bool, stdin: Optional[BinaryIO]) -> str:
        """
        Return the content of stdin, optionally numbered.

        Raises:
            CatError: If stdin is missing
        """
        lines = self._read_stdin(stdin)
        return join_lines(self._number(lines) if is_line_number else lines)

    def cat_file_and_stdin(
        self, is_line_number: bool, stdin: Optional[BinaryIO], *file_names: str
    ) -> str:
        """
        Concatenate files and stdin (``-``) in operand order.

        Line numbers restart at 1 for every input.
        """
        output: list[str] = []
        for name in file_names:
            if name == STDIN_OPERAND:
                lines = self._read_stdin(stdin)
            else:
                try:
                    lines = self._file_system.read_lines(name)
                except FileSystemError as e:
                    self._logger.debug(f"cat skipping {name}: {e.reason}")
                    output.append(f"cat: '{name}': {e.reason}")
                    continue
            output.extend(self._number(lines) if is_line_number else lines)
        return join_lines(output)

    def _read_stdin(self, stdin: Optional[BinaryIO]) -> list[str]:
        try:
            return read_stream_lines(stdin)
        except FileSystemError as e:
            raise CatError(e.reason) from e

    @staticmethod
    def _number(lines: list[str]) -> list[str]:
        return [f"{i} {line}" for i, line in enumerate(lines, start=1)]
