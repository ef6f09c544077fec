"""
Use case for the wc application: count lines, words and bytes.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import read_stream, write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    FileSystemError,
    ParserError,
    WcError,
)
from minishell.parsers.wc_args_parser import WcArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.helpers.wc_helper import WcCount, format_count, get_count_report
from minishell.utils.string_utils import join_lines

STDIN_OPERAND = "-"
TOTAL_NAME = "total"


class WcApplication(ApplicationPort):
    """Print line, word and byte counts for files and stdin."""

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
            raise WcError(ERR_NULL_STREAMS)

        parser = WcArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise WcError(str(e)) from e

        flags = (parser.is_line_count(), parser.is_word_count(), parser.is_byte_count())
        files = parser.get_files()
        if not files:
            result = self.count_from_stdin(*flags, stdin)
        else:
            result = self.count_from_file_and_stdin(*flags, stdin, *files)

        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise WcError(ERR_WRITE_STREAM) from e

    def count_from_stdin(
        self, is_lines: bool, is_words: bool, is_bytes: bool, stdin: Optional[BinaryIO]
    ) -> str:
        count = get_count_report(self._read_stdin(stdin))
        return join_lines([format_count(count, is_lines, is_words, is_bytes)])

    def count_from_file_and_stdin(
        self,
        is_lines: bool,
        is_words: bool,
        is_bytes: bool,
        stdin: Optional[BinaryIO],
        *file_names: str,
    ) -> str:
        """
        One row per operand, then a ``total`` row when there are several.

        Unreadable files become inline error rows and are left out of the total.
        """
        rows: list[str] = []
        total = WcCount(0, 0, 0)
        for name in file_names:
            if name == STDIN_OPERAND:
                data = self._read_stdin(stdin)
            else:
                try:
                    data = self._file_system.read_bytes(name)
                except FileSystemError as e:
                    rows.append(f"wc: '{name}': {e.reason}")
                    continue
            count = get_count_report(data)
            total = total.combine(count)
            rows.append(format_count(count, is_lines, is_words, is_bytes, name))

        if len(file_names) > 1:
            rows.append(format_count(total, is_lines, is_words, is_bytes, TOTAL_NAME))
        return join_lines(rows)

    def _read_stdin(self, stdin: Optional[BinaryIO]) -> bytes:
        try:
            return read_stream(stdin)
        except FileSystemError as e:
            raise WcError(e.reason) from e
