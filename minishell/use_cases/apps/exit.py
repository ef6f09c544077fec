"""
Use case for the exit application.
"""

from typing import BinaryIO, Optional

from typing_extensions import override

from minishell.exceptions import ExitError, ExitSignal
from minishell.ports.application.application_port import ApplicationPort


class ExitApplication(ApplicationPort):
    """Ask the enclosing shell loop to stop."""

    @override
    def run(
        self,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        code = 0
        if args:
            try:
                code = int(args[0])
            except ValueError as e:
                raise ExitError(f"{args[0]}: numeric argument required") from e
        self.terminate_execution(code)

    def terminate_execution(self, code: int = 0) -> None:
        raise ExitSignal(code)
