"""
Use case for the mv application: rename or move files into a directory.
"""

import errno
import logging
import os
import shutil
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.exceptions import (
    ERR_DIR_NOT_EMPTY,
    ERR_FILE_NOT_FOUND,
    ERR_MISSING_OPERAND,
    ERR_NO_PERM,
    MvError,
    ParserError,
)
from minishell.parsers.mv_args_parser import MvArgsParser
from minishell.ports.application.application_port import ApplicationPort
from minishell.ports.files.file_system_port import FileSystemPort


class MvApplication(ApplicationPort):
    """Move (rename) files."""

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
        parser = MvArgsParser()
        try:
            parser.parse(*args)
        except ParserError as e:
            raise MvError(str(e)) from e

        if len(parser.non_flag_args) < 2:
            raise MvError(ERR_MISSING_OPERAND)

        sources = parser.get_sources()
        target = parser.get_target()
        if len(sources) == 1 and not self._file_system.is_dir(target):
            self.mv_src_file_to_dest_file(parser.is_overwrite(), sources[0], target)
        else:
            self.mv_files_to_folder(parser.is_overwrite(), target, *sources)

    def mv_src_file_to_dest_file(self, is_overwrite: bool, src_file: str, dest_file: str) -> None:
        """
        Rename one file.

        With ``is_overwrite`` False an existing destination is left untouched
        and so is the source.

        Raises:
            MvError: If the source is missing or the rename fails
        """
        error = self._move(is_overwrite, src_file, self._file_system.resolve(dest_file))
        if error:
            raise MvError(errors=[error])

    def mv_files_to_folder(self, is_overwrite: bool, dest_folder: str, *file_names: str) -> None:
        """
        Move every file into a folder, collecting failures.

        Raises:
            MvError: If the folder is not a directory, or holding one message
                per file that could not be moved
        """
        if not self._file_system.is_dir(dest_folder):
            raise MvError(f"target '{dest_folder}' is not a directory")

        folder = self._file_system.resolve(dest_folder)
        errors: list[str] = []
        for name in file_names:
            dest = os.path.join(folder, os.path.basename(os.path.normpath(name)))
            error = self._move(is_overwrite, name, dest)
            if error:
                errors.append(error)
        if errors:
            raise MvError(errors=errors)

    def _move(self, is_overwrite: bool, name: str, dest: str) -> Optional[str]:
        src = self._file_system.resolve(name)
        if not os.path.lexists(src):
            return f"cannot stat '{name}': {ERR_FILE_NOT_FOUND}"

        if os.path.isdir(src) and (dest == src or dest.startswith(src + os.sep)):
            return f"cannot move '{name}' to a subdirectory of itself"

        if os.path.lexists(dest) and not is_overwrite:
            self._logger.info(f"Not overwriting existing {dest}")
            return None

        if os.path.isdir(dest) and not os.path.islink(dest):
            if not os.path.isdir(src):
                return f"cannot overwrite directory '{dest}' with non-directory"
            if os.listdir(dest):
                return f"cannot move '{name}': {ERR_DIR_NOT_EMPTY}"

        try:
            os.replace(src, dest)
        except PermissionError:
            return f"cannot move '{name}': {ERR_NO_PERM}"
        except OSError as e:
            if e.errno != errno.EXDEV:
                self._logger.error(f"Error moving {src} to {dest}: {e}")
                return f"cannot move '{name}': {e.strerror or e}"
            # Cross-device moves
            try:
                shutil.move(src, dest)
            except OSError as e:
                self._logger.error(f"Error moving {src} to {dest}: {e}")
                return f"cannot move '{name}': {e.strerror or e}"

        self._logger.info(f"Moved {src} to {dest}")
        return None
