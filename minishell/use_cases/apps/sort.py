"""
Use case for the sort application.
"""

import functools
import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import read_stream_lines, write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    FileSystemError,
    ParserError,
    SortError,
)
from minishell.parsers.sort_args_parser import SortArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.utils.string_utils import join_lines

STDIN_OPERAND = "-"


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def get_chunk(text: str) -> str:
    """Leading run of digits, or leading run of non-digits."""
    is_digit = text[0].isdecimal()
    end = 1
    while end < len(text) and text[end].isdecimal() == is_digit:
        end += 1
    return text[:end]


def compare_lines(
    str1: str, str2: str, is_first_word_number: bool, is_case_independent: bool
) -> int:
    """
    Order two lines.

    With ``is_first_word_number`` the leading chunk decides first: numeric
    chunks compare by value and sort after non-numeric ones; the remainder
    breaks ties. Case independence is ignored in numeric mode.
    """
    if is_case_independent and not is_first_word_number:
        str1, str2 = str1.lower(), str2.lower()

    if is_first_word_number and str1 and str2:
        chunk1, chunk2 = get_chunk(str1), get_chunk(str2)
        is_num1, is_num2 = chunk1[0].isdecimal(), chunk2[0].isdecimal()
        if is_num1 and not is_num2:
            return 1
        if is_num2 and not is_num1:
            return -1
        if is_num1 and is_num2:
            result = _cmp(int(chunk1), int(chunk2))
        else:
            result = _cmp(chunk1, chunk2)
        if result != 0:
            return result
        return _cmp(str1[len(chunk1) :], str2[len(chunk2) :])

    return _cmp(str1, str2)


def sort_lines(
    lines: list[str],
    is_first_word_number: bool,
    is_reverse_order: bool,
    is_case_independent: bool,
) -> list[str]:
    key = functools.cmp_to_key(
        lambda a, b: compare_lines(a, b, is_first_word_number, is_case_independent)
    )
    result = sorted(lines, key=key)
    if is_reverse_order:
        result.reverse()
    return result


class SortApplication(ApplicationPort):
    """Sort the lines of files or stdin."""

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
            raise SortError(ERR_NULL_STREAMS)

        parser = SortArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise SortError(str(e)) from e

        files = parser.get_files() or [STDIN_OPERAND]
        result = self.sort_from_files_and_stdin(
            parser.is_first_word_number(),
            parser.is_reverse_order(),
            parser.is_case_independent(),
            stdin,
            *files,
        )
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise SortError(ERR_WRITE_STREAM) from e

    def sort_from_files_and_stdin(
        self,
        is_first_word_number: bool,
        is_reverse_order: bool,
        is_case_independent: bool,
        stdin: Optional[BinaryIO],
        *file_names: str,
    ) -> str:
        """
        Concatenate every input then sort the combined lines.

        Raises:
            SortError: If an input cannot be read
        """
        lines: list[str] = []
        for name in file_names:
            try:
                if name == STDIN_OPERAND:
                    lines.extend(read_stream_lines(stdin))
                else:
                    lines.extend(self._file_system.read_lines(name))
            except FileSystemError as e:
                if name == STDIN_OPERAND:
                    raise SortError(e.reason) from e
                raise SortError(f"'{name}': {e.reason}") from e

        self._logger.debug(f"sort ordering {len(lines)} lines")
        return join_lines(
            sort_lines(lines, is_first_word_number, is_reverse_order, is_case_independent)
        )
