"""
Use case for the mkdir application.
"""

import logging
import os
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.exceptions import (
    ERR_FILE_EXISTS,
    ERR_FILE_NOT_FOUND,
    ERR_MISSING_OPERAND,
    ERR_NO_PERM,
    MkdirError,
    ParserError,
)
from minishell.parsers.mkdir_args_parser import MkdirArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort


class MkdirApplication(ApplicationPort):
    """Create directories, optionally with their missing parents."""

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
        parser = MkdirArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise MkdirError(str(e)) from e

        directories = parser.get_directories()
        if not directories:
            raise MkdirError(ERR_MISSING_OPERAND)
        self.create_folder(parser.is_create_parent(), *directories)

    def create_folder(self, is_create_parent: bool, *folder_names: str) -> None:
        """
        Create every folder, collecting failures.

        Raises:
            MkdirError: Holding one message per folder that could not be created
        """
        errors: list[str] = []
        for name in folder_names:
            error = self._create_one(name, is_create_parent)
            if error:
                errors.append(f"cannot create directory '{name}': {error}")
        if errors:
            raise MkdirError(errors=errors)

    def _create_one(self, name: str, is_create_parent: bool) -> Optional[str]:
        path = self._file_system.resolve(name)
        if os.path.lexists(path):
            if is_create_parent and os.path.isdir(path):
                return None
            return ERR_FILE_EXISTS

        if not is_create_parent and not os.path.isdir(os.path.dirname(path)):
            return ERR_FILE_NOT_FOUND

        try:
            if is_create_parent:
                os.makedirs(path, exist_ok=True)
            else:
                os.mkdir(path)
        except PermissionError:
            return ERR_NO_PERM
        except OSError as e:
            self._logger.error(f"Error creating directory {path}: {e}")
            return e.strerror or str(e)

        self._logger.info(f"Created directory {path}")
        return None
