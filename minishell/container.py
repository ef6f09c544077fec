"""
Dependency injection container wiring one shell session.
"""

import logging
from typing import Optional

from minishell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from minishell.config.settings import settings
from minishell.entities.environment import Environment
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.apps.cat import CatApplication
from minishell.use_cases.apps.cd import CdApplication
from minishell.use_cases.apps.cut import CutApplication
from minishell.use_cases.apps.echo import EchoApplication
from minishell.use_cases.apps.exit import ExitApplication
from minishell.use_cases.apps.grep import GrepApplication
from minishell.use_cases.apps.ls import LsApplication
from minishell.use_cases.apps.mkdir import MkdirApplication
from minishell.use_cases.apps.mv import MvApplication
from minishell.use_cases.apps.paste import PasteApplication
from minishell.use_cases.apps.rm import RmApplication
from minishell.use_cases.apps.sort import SortApplication
from minishell.use_cases.apps.tee import TeeApplication
from minishell.use_cases.apps.uniq import UniqApplication
from minishell.use_cases.apps.wc import WcApplication
from minishell.use_cases.commands.command_builder import CommandBuilder
from minishell.use_cases.shell.application_runner import (
    ApplicationFactory,
    ApplicationRunner,
)
from minishell.use_cases.shell.shell import ShellImpl


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.

    Every container owns one ``Environment``, so two containers are two
    independent shell sessions.
    """

    def __init__(self, home_directory: Optional[str] = None):
        self._instances = {}
        self._home_directory = home_directory
        self._logger = logging.getLogger(__name__)

    def get_environment(self) -> Environment:
        """
        Get the session environment.

        Returns:
            Environment rooted at the configured home directory
        """
        if "environment" not in self._instances:
            self._instances["environment"] = Environment(
                self._home_directory or settings.home_directory
            )
        return self._instances["environment"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(
                self.get_environment(), self._logger
            )
        return self._instances["file_system"]

    def get_application_factories(self) -> dict[str, ApplicationFactory]:
        """
        Factories for every application, keyed by command name.
        """
        fs = self.get_file_system()
        env = self.get_environment()
        logger = self._logger
        return {
            "cat": lambda: CatApplication(fs, logger),
            "cd": lambda: CdApplication(env, logger),
            "cut": lambda: CutApplication(fs, logger),
            "echo": EchoApplication,
            "exit": ExitApplication,
            "grep": lambda: GrepApplication(fs, logger),
            "ls": lambda: LsApplication(fs, logger),
            "mkdir": lambda: MkdirApplication(fs, logger),
            "mv": lambda: MvApplication(fs, logger),
            "paste": lambda: PasteApplication(fs, logger),
            "rm": lambda: RmApplication(fs, logger),
            "sort": lambda: SortApplication(fs, logger),
            "tee": lambda: TeeApplication(fs, logger),
            "uniq": lambda: UniqApplication(fs, logger),
            "wc": lambda: WcApplication(fs, logger),
        }

    def get_application_runner(self) -> ApplicationRunner:
        """
        Get application runner with every application registered.

        Returns:
            Configured ApplicationRunner
        """
        if "application_runner" not in self._instances:
            self._instances["application_runner"] = ApplicationRunner(
                self.get_application_factories(), self._logger
            )
        return self._instances["application_runner"]

    def get_command_builder(self) -> CommandBuilder:
        """
        Get command builder with injected dependencies.

        Returns:
            Configured CommandBuilder
        """
        if "command_builder" not in self._instances:
            self._instances["command_builder"] = CommandBuilder(
                self.get_application_runner(),
                self.get_file_system(),
                self.get_environment(),
                self._logger,
            )
        return self._instances["command_builder"]

    def get_shell(self) -> ShellImpl:
        """
        Get the shell for this session.

        Returns:
            Configured ShellImpl
        """
        if "shell" not in self._instances:
            self._instances["shell"] = ShellImpl(
                self.get_command_builder(),
                self.get_environment(),
                prompt_suffix=settings.prompt_suffix,
                log_history=settings.log_history,
                logger=self._logger,
            )
        return self._instances["shell"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
