"""
Input and output redirection for a single call command.
"""

import logging
from typing import BinaryIO, Optional

from minishell.exceptions import (
    ERR_AMBIGUOUS_REDIRECT,
    ERR_SYNTAX,
    FileSystemError,
    ShellError,
)
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.shell.argument_resolver import ArgumentResolver

CHAR_REDIR_INPUT = "<"
CHAR_REDIR_OUTPUT = ">"


def is_redir_operator(token: str) -> bool:
    return token in (CHAR_REDIR_INPUT, CHAR_REDIR_OUTPUT)


class IORedirectionHandler:
    """
    Extract ``<`` and ``>`` operators from a token list and open their files.

    The last redirection of each kind wins. Streams opened by the handler are
    closed when replaced and by ``close``; the caller's streams are never
    closed.
    """

    def __init__(
        self,
        args_list: list[str],
        orig_input_stream: Optional[BinaryIO],
        orig_output_stream: Optional[BinaryIO],
        argument_resolver: ArgumentResolver,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._args_list = args_list
        self._argument_resolver = argument_resolver
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._input_stream = orig_input_stream
        self._output_stream = orig_output_stream
        self._opened_input: Optional[BinaryIO] = None
        self._opened_output: Optional[BinaryIO] = None
        self._no_redir_args_list: list[str] = []

    def extract_redir_options(self) -> None:
        """
        Scan the tokens, opening redirection files.

        Raises:
            ShellError: On a missing or invalid file token, an ambiguous
                redirect, or a file that cannot be opened
        """
        if not self._args_list:
            raise ShellError(ERR_SYNTAX)

        self._no_redir_args_list = []
        tokens = iter(self._args_list)
        for arg in tokens:
            if not is_redir_operator(arg):
                self._no_redir_args_list.append(arg)
                continue

            file_token = next(tokens, None)
            if file_token is None or is_redir_operator(file_token):
                raise ShellError(ERR_SYNTAX)

            file_segment = self._argument_resolver.resolve_one_argument(file_token)
            if len(file_segment) > 1:
                raise ShellError(f"{file_token}: {ERR_AMBIGUOUS_REDIRECT}")
            if not file_segment:
                raise ShellError(ERR_SYNTAX)
            file_name = file_segment[0]

            try:
                if arg == CHAR_REDIR_INPUT:
                    self._close(self._opened_input)
                    self._opened_input = self._file_system.open_input_stream(file_name)
                    self._input_stream = self._opened_input
                else:
                    self._close(self._opened_output)
                    self._opened_output = self._file_system.open_output_stream(file_name)
                    self._output_stream = self._opened_output
            except FileSystemError as e:
                raise ShellError(f"{file_name}: {e.reason}") from e
            self._logger.debug(f"Redirected {arg} to {file_name}")

    def get_no_redir_args_list(self) -> list[str]:
        return self._no_redir_args_list

    def get_input_stream(self) -> Optional[BinaryIO]:
        return self._input_stream

    def get_output_stream(self) -> Optional[BinaryIO]:
        return self._output_stream

    def close(self) -> None:
        """Close every stream this handler opened."""
        self._close(self._opened_input)
        self._close(self._opened_output)
        self._opened_input = None
        self._opened_output = None

    @staticmethod
    def _close(stream: Optional[BinaryIO]) -> None:
        if stream is not None:
            stream.close()
