"""
A single application call, with redirection and argument resolution.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.exceptions import ERR_SYNTAX, ShellError
from minishell.ports.commands.command_port import CommandPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.shell.application_runner import ApplicationRunner
from minishell.use_cases.shell.argument_resolver import ArgumentResolver
from minishell.use_cases.shell.io_redirection import IORedirectionHandler


class CallCommand(CommandPort):
    """Run one application: redirect, resolve arguments, dispatch."""

    def __init__(
        self,
        args_list: list[str],
        app_runner: ApplicationRunner,
        argument_resolver: ArgumentResolver,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._args_list = args_list
        self._app_runner = app_runner
        self._argument_resolver = argument_resolver
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def get_args_list(self) -> list[str]:
        return self._args_list

    @override
    def evaluate(self, stdin: BinaryIO, stdout: BinaryIO) -> None:
        if not self._args_list:
            raise ShellError(ERR_SYNTAX)

        redir_handler = IORedirectionHandler(
            self._args_list,
            stdin,
            stdout,
            self._argument_resolver,
            self._file_system,
            self._logger,
        )
        try:
            redir_handler.extract_redir_options()
            parsed_args = self._argument_resolver.parse_arguments(
                redir_handler.get_no_redir_args_list()
            )
            if parsed_args:
                app = parsed_args.pop(0)
                self._app_runner.run_app(
                    app,
                    parsed_args,
                    redir_handler.get_input_stream(),
                    redir_handler.get_output_stream(),
                )
        finally:
            redir_handler.close()
