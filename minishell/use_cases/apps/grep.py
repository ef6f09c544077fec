"""
Use case for the grep application: print lines matching a regular expression.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import read_stream_lines, write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_SYNTAX,
    ERR_WRITE_STREAM,
    FileSystemError,
    GrepError,
    ParserError,
)
from minishell.parsers.grep_args_parser import GrepArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.helpers.grep_helper import (
    STDIN_NAME,
    compile_pattern,
    format_matches,
    matching_lines,
)
from minishell.utils.string_utils import join_lines

ERR_EMPTY_PATTERN = "Pattern should not be empty."
STDIN_OPERAND = "-"


class GrepApplication(ApplicationPort):
    """Search files and stdin for lines matching a pattern."""

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
            raise GrepError(ERR_NULL_STREAMS)

        parser = GrepArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise GrepError(str(e)) from e

        files = parser.get_files() or [STDIN_OPERAND]
        result = self.grep_from_files_and_stdin(
            parser.get_pattern(),
            parser.is_case_insensitive(),
            parser.is_count_lines(),
            parser.is_prefix_file_name(),
            stdin,
            *files,
        )
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise GrepError(ERR_WRITE_STREAM) from e

    def grep_from_files_and_stdin(
        self,
        pattern: Optional[str],
        is_case_insensitive: bool,
        is_count_lines: bool,
        is_prefix_file_name: bool,
        stdin: Optional[BinaryIO],
        *file_names: str,
    ) -> str:
        """
        Search every input in operand order, ``-`` meaning stdin.

        The pattern is compiled before any input is read. Output lines are
        prefixed with the source name when several sources are searched or
        when ``is_prefix_file_name`` is set.

        Raises:
            GrepError: If the pattern is missing, empty or invalid
        """
        if pattern is None:
            raise GrepError(ERR_SYNTAX)
        if pattern == "":
            raise GrepError(ERR_EMPTY_PATTERN)
        regex = compile_pattern(pattern, is_case_insensitive)

        is_prefix = is_prefix_file_name or len(file_names) > 1
        output: list[str] = []
        for name in file_names:
            if name == STDIN_OPERAND:
                display = STDIN_NAME
                try:
                    lines = read_stream_lines(stdin)
                except FileSystemError as e:
                    raise GrepError(e.reason) from e
            else:
                display = name
                try:
                    lines = self._file_system.read_lines(name)
                except FileSystemError as e:
                    output.append(f"grep: {name}: {e.reason}")
                    continue
            matches = matching_lines(lines, regex)
            self._logger.debug(f"grep found {len(matches)} matches in {display}")
            output.extend(format_matches(display, matches, is_count_lines, is_prefix))
        return join_lines(output)
