"""
Use case for the ls application.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import write_stream
from minishell.exceptions import (
    ERR_NULL_STREAMS,
    ERR_WRITE_STREAM,
    FileSystemError,
    LsError,
    ParserError,
)
from minishell.parsers.ls_args_parser import LsArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.helpers.ls_helper import LsHelper


class LsApplication(ApplicationPort):
    """List directory contents."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._helper = LsHelper(file_system, logger)

    @override
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        if stdout is None:
            raise LsError(ERR_NULL_STREAMS)

        parser = LsArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise LsError(str(e)) from e

        result = self.list_folder_content(
            parser.is_recursive(), parser.is_sort_by_ext(), *parser.get_directories()
        )
        try:
            write_stream(stdout, result)
        except FileSystemError as e:
            raise LsError(ERR_WRITE_STREAM) from e

    def list_folder_content(
        self, is_recursive: bool, is_sort_by_ext: bool, *folder_names: str
    ) -> str:
        return self._helper.list_folder_content(
            is_recursive, is_sort_by_ext, list(folder_names)
        )
