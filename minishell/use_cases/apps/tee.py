"""
Use case for the tee application: copy stdin to stdout and files.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import read_stream_lines, write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    FileSystemError,
    ParserError,
    TeeError,
)
from minishell.parsers.tee_args_parser import TeeArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.helpers.tee_helper import write_to_files
from minishell.utils.string_utils import join_lines


class TeeApplication(ApplicationPort):
    """Echo stdin to stdout and to every named file."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        if stdin is None or stdout is None:
            raise TeeError(ERR_NULL_STREAMS)

        parser = TeeArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise TeeError(str(e)) from e

        result = self.tee_from_stdin(parser.is_append(), stdin, *parser.get_files())
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise TeeError(ERR_WRITE_STREAM) from e

    def tee_from_stdin(self, is_append: bool, stdin: BinaryIO, *file_names: str) -> str:
        """
        Write stdin to every file (appending or truncating).

        A file that cannot be written, such as a directory, produces an inline
        error line placed before the echoed data; the other files are still
        written.

        Returns:
            The text to print on stdout
        """
        try:
            data = join_lines(read_stream_lines(stdin))
        except FileSystemError as e:
            raise TeeError(e.reason) from e

        errors = write_to_files(self._file_system, list(file_names), data, is_append, self._logger)
        return join_lines(errors) + data
