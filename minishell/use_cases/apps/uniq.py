"""
Use case for the uniq application: report or filter adjacent repeated lines.
"""

import itertools
import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import encode, read_stream_lines, write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    FileSystemError,
    ParserError,
    UniqError,
)
from minishell.parsers.uniq_args_parser import UniqArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.utils.string_utils import join_lines

ERR_COUNT_ALL_DUP = "printing all duplicated lines and repeat counts is meaningless"
STDIN_OPERAND = "-"


def uniq_lines(
    lines: list[str], is_count: bool, is_repeated: bool, is_all_repeated: bool
) -> list[str]:
    """
    Collapse duplicate groups (maximal runs of equal adjacent lines).

    ``is_repeated`` keeps one line per group seen more than once,
    ``is_all_repeated`` keeps every line of such groups and wins over
    ``is_repeated``. ``is_count`` prefixes the group size.
    """
    if is_count and is_all_repeated:
        raise UniqError(ERR_COUNT_ALL_DUP)

    result: list[str] = []
    for line, group in itertools.groupby(lines):
        count = len(list(group))
        if is_all_repeated:
            if count > 1:
                result.extend([line] * count)
            continue
        if is_repeated and count == 1:
            continue
        result.append(f"{count} {line}" if is_count else line)
    return result


class UniqApplication(ApplicationPort):
    """Filter adjacent matching lines from a file or stdin."""

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
        parser = UniqArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise UniqError(str(e)) from e

        if parser.is_count() and parser.is_all_repeated():
            raise UniqError(ERR_COUNT_ALL_DUP)

        input_file = parser.get_input_file()
        output_file = parser.get_output_file()
        if input_file is None or input_file == STDIN_OPERAND:
            result = self.uniq_from_stdin(
                parser.is_count(), parser.is_repeated(), parser.is_all_repeated(), stdin
            )
        else:
            result = self.uniq_from_file(
                parser.is_count(), parser.is_repeated(), parser.is_all_repeated(), input_file
            )

        if output_file is not None:
            try:
                self._file_system.write_bytes(output_file, encode(result))
            except FileSystemError as e:
                raise UniqError(f"'{output_file}': {e.reason}") from e
            self._logger.info(f"uniq wrote result to {output_file}")
            return

        if stdout is None:
            raise UniqError(ERR_NULL_STREAMS)
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise UniqError(ERR_WRITE_STREAM) from e

    def uniq_from_file(
        self, is_count: bool, is_repeated: bool, is_all_repeated: bool, input_file_name: str
    ) -> str:
        """
        Raises:
            UniqError: If the input file cannot be read
        """
        try:
            lines = self._file_system.read_lines(input_file_name)
        except FileSystemError as e:
            raise UniqError(f"'{input_file_name}': {e.reason}") from e
        return join_lines(uniq_lines(lines, is_count, is_repeated, is_all_repeated))

    def uniq_from_stdin(
        self,
        is_count: bool,
        is_repeated: bool,
        is_all_repeated: bool,
        stdin: Optional[BinaryIO],
    ) -> str:
        try:
            lines = read_stream_lines(stdin)
        except FileSystemError as e:
            raise UniqError(e.reason) from e
        return join_lines(uniq_lines(lines, is_count, is_repeated, is_all_repeated))
