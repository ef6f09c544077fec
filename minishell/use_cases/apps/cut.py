"""
Use case for the cut application: select character or byte ranges per line.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import read_stream_lines, write_stream
from minishell.entities.cut_range import CutRange, parse_range_list
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    CutError,
    FileSystemError,
    ParserError,
)
from minishell.parsers.cut_args_parser import CutArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.helpers.cut_helper import cut_lines
from minishell.utils.string_utils import join_lines

ERR_ONE_FLAG_ONLY = "Exactly one flag (cut by character or byte) should be selected, but not both"
STDIN_OPERAND = "-"


class CutApplication(ApplicationPort):
    """Cut out sections of each line of files or stdin."""

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
            raise CutError(ERR_NULL_STREAMS)

        parser = CutArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise CutError(str(e)) from e

        if parser.is_char_po() == parser.is_byte_po():
            raise CutError(ERR_ONE_FLAG_ONLY)

        ranges = parse_range_list(parser.get_range_list())
        self._logger.debug(f"cut ranges: {ranges}")

        files = parser.get_files() or [STDIN_OPERAND]
        result = self.cut_from_files_and_stdin(
            parser.is_char_po(), parser.is_byte_po(), ranges, stdin, *files
        )
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise CutError(ERR_WRITE_STREAM) from e

    def cut_from_files_and_stdin(
        self,
        is_char_po: bool,
        is_byte_po: bool,
        ranges: list[CutRange],
        stdin: Optional[BinaryIO],
        *file_names: str,
    ) -> str:
        """
        Cut every input in operand order, ``-`` meaning stdin.

        Unreadable files become inline error lines.

        Returns:
            Newline terminated output, empty when nothing was selected
        """
        if is_char_po == is_byte_po:
            raise CutError(ERR_ONE_FLAG_ONLY)

        output: list[str] = []
        for name in file_names:
            if name == STDIN_OPERAND:
                try:
                    lines = read_stream_lines(stdin)
                except FileSystemError as e:
                    raise CutError(e.reason) from e
            else:
                try:
                    lines = self._file_system.read_lines(name)
                except FileSystemError as e:
                    output.append(f"cut: '{name}': {e.reason}")
                    continue
            output.extend(cut_lines(lines, ranges, is_byte_po))
        return join_lines(output)
