"""
Use case for the rm application.
"""

import logging
import os
import shutil
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.exceptions import (
    ERR_DIR_NOT_EMPTY,
    ERR_FILE_NOT_FOUND,
    ERR_IS_DIR,
    ERR_MISSING_OPERAND,
    ERR_NO_PERM,
    ParserError,
    RmError,
)
from minishell.parsers.rm_args_parser import RmArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort


class RmApplication(ApplicationPort):
    """Remove files and directories."""

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
        parser = RmArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise RmError(str(e)) from e

        files = parser.get_files()
        if not files:
            raise RmError(ERR_MISSING_OPERAND)
        self.remove(parser.is_empty_folder(), parser.is_recursive(), *files)

    def remove(self, is_empty_folder: bool, is_recursive: bool, *file_names: str) -> None:
        """
        Remove every operand, collecting failures.

        Regular files are always removed. Directories need ``is_recursive``
        (whole tree) or ``is_empty_folder`` (empty directories only).

        Raises:
            RmError: Holding one message per operand that could not be removed
        """
        errors: list[str] = []
        for name in file_names:
            reason = self._remove_one(name, is_empty_folder, is_recursive)
            if reason:
                errors.append(f"cannot remove '{name}': {reason}")
        if errors:
            raise RmError(errors=errors)

    def _remove_one(self, name: str, is_empty_folder: bool, is_recursive: bool) -> Optional[str]:
        path = self._file_system.resolve(name)
        if not os.path.lexists(path):
            return ERR_FILE_NOT_FOUND

        try:
            if os.path.isdir(path) and not os.path.islink(path):
                if is_recursive:
                    shutil.rmtree(path)
                elif is_empty_folder:
                    if os.listdir(path):
                        return ERR_DIR_NOT_EMPTY
                    os.rmdir(path)
                else:
                    return ERR_IS_DIR
            else:
                os.remove(path)
        except PermissionError:
            return ERR_NO_PERM
        except OSError as e:
            self._logger.error(f"Error removing {path}: {e}")
            return e.strerror or str(e)

        self._logger.info(f"Removed {path}")
        return None
