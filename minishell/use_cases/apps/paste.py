"""
Use case for the paste application: merge lines of files side by side.
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
    PasteError,
)
from minishell.parsers.paste_args_parser import PasteArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.helpers.paste_helper import (
    merge_parallel,
    merge_serial,
    split_stdin,
)
from minishell.utils.string_utils import join_lines

STDIN_OPERAND = "-"


class PasteApplication(ApplicationPort):
    """Merge the lines of several sources, in parallel or serially."""

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
        if stdout is None:
            raise PasteError(ERR_NULL_STREAMS)

        parser = PasteArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise PasteError(str(e)) from e

        files = parser.get_files() or [STDIN_OPERAND]
        result = self.merge_file_and_stdin(parser.is_serial(), stdin, *files)
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise PasteError(ERR_WRITE_STREAM) from e

    def merge_file_and_stdin(
        self, is_serial: bool, stdin: Optional[BinaryIO], *file_names: str
    ) -> str:
        """
        Merge the sources named by the operands, ``-`` meaning stdin.

        Raises:
            PasteError: If a file is missing or is a directory
        """
        dash_count = file_names.count(STDIN_OPERAND)
        stdin_parts: list[list[str]] = []
        if dash_count:
            try:
                stdin_parts = split_stdin(read_stream_lines(stdin), dash_count, is_serial)
            except FileSystemError as e:
                raise PasteError(e.reason) from e

        sources: list[list[str]] = []
        for name in file_names:
            if name == STDIN_OPERAND:
                sources.append(stdin_parts.pop(0))
                continue
            try:
                sources.append(self._file_system.read_lines(name))
            except FileSystemError as e:
                raise PasteError(f"'{name}': {e.reason}") from e

        self._logger.debug(f"paste merging {len(sources)} sources")
        rows = merge_serial(sources) if is_serial else merge_parallel(sources)
        return join_lines(rows)
