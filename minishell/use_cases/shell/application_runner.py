"""
Application registry and dispatch.
"""

import logging
from typing import BinaryIO, Callable, Optional

from minishell.exceptions import ERR_INVALID_APP, ShellError
from minishell.ports.application.application_port import ApplicationPort

ApplicationFactory = Callable[[], ApplicationPort]


class ApplicationRunner:
    """Map application names to factories and run them."""

    def __init__(
        self,
        factories: dict[str, ApplicationFactory],
        logger: Optional[logging.Logger] = None,
    ):
        self._factories = dict(factories)
        self._logger = logger or logging.getLogger(__name__)

    def available_apps(self) -> list[str]:
        return sorted(self._factories)

    def create_app(self, app: str) -> ApplicationPort:
        """
        Build a fresh application instance.

        Raises:
            ShellError: If no application has this name
        """
        factory = self._factories.get(app)
        if factory is None:
            raise ShellError(f"{app}: {ERR_INVALID_APP}")
        return factory()

    def run_app(
        self,
        app: str,
        args: list[str],
        stdin: Optional[BinaryIO],
        stdout: Optional[BinaryIO],
    ) -> None:
        application = self.create_app(app)
        self._logger.debug(f"Running {app} with args {args}")
        application.run(args, stdin, stdout)
