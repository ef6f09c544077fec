"""
Use case for the cd application: change the session's current directory.
"""

import logging
import os
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.entities.environment import Environment
from minishell.exceptions import (
    ERR_FILE_NOT_FOUND,
    ERR_IS_NOT_DIR,
    ERR_NO_PERM,
    ERR_TOO_MANY_ARGS,
    CdError,
)
from minishell.ports.application.application_port import ApplicationPort
from minishell.utils.string_utils import is_blank


class CdApplication(ApplicationPort):
    """Change ``Environment.current_directory``."""

    def __init__(self, environment: Environment, logger: Optional[logging.Logger] = None):
        self._environment = environment
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        if len(args) > 1:
            raise CdError(ERR_TOO_MANY_ARGS)
        self.change_to_directory(args[0] if args else "")

    def change_to_directory(self, path: str) -> None:
        """
        Change the current directory.

        A blank path returns to the home directory of the session.

        Raises:
            CdError: If the path is missing, not a directory or not searchable
        """
        if is_blank(path):
            target = self._environment.home_directory
        else:
            target = self._get_normalized_abs_path(path)

        self._logger.info(f"Changing directory to {target}")
        self._environment.current_directory = target

    def _get_normalized_abs_path(self, path: str) -> str:
        abs_path = self._environment.resolve(path)

        if not os.path.exists(abs_path):
            raise CdError(f"{path}: {ERR_FILE_NOT_FOUND}")

        if not os.path.isdir(abs_path):
            raise CdError(f"{path}: {ERR_IS_NOT_DIR}")

        if not os.access(abs_path, os.X_OK):
            raise CdError(f"{path}: {ERR_NO_PERM}")

        return abs_path
