"""
Use case for the echo application.
"""

from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.adapters.files.local_fs_adapter import write_stream
from minishell.exceptions import ERR_NULL_STREAMS, ERR_WRITE_STREAM, EchoError, FileSystemError
from minishell.ports.application.application_port import ApplicationPort
from minishell.utils.string_utils import STRING_NEWLINE


class EchoApplication(ApplicationPort):
    """Print the arguments separated by spaces."""

    @override
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        if stdout is None:
            raise EchoError(ERR_NULL_STREAMS)
        try:
            write_stream(stdout, self.construct_result(*args))
        except FileSystemError as e:
            raise EchoError(ERR_WRITE_STREAM) from e

    def construct_result(self, *args: str) -> str:
        return " ".join(args) + STRING_NEWLINE
