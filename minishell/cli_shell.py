import argparse
import logging
import os
import sys

from rich.console import Console
from rich.text import Text

from minishell.config.settings import settings
from minishell.container import DependencyContainer, container
from minishell.exceptions import BaseShellError, ExitSignal

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(level_name: str | None) -> None:
    level = settings.log_level
    if level_name:
        level = logging.getLevelName(level_name.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minishell",
        description="A small Unix-like shell with built-in cat, grep, ls, sort and friends.",
    )
    parser.add_argument(
        "-c",
        dest="command",
        default=None,
        help="Run a single command line and exit",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Start directory (default: MINISHELL_HOME or the current directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: MINISHELL_LOG_LEVEL)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored prompt and errors",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    logger = logging.getLogger(__name__)

    no_color = args.no_color or bool(os.getenv("NO_COLOR"))
    console = Console(highlight=False, no_color=no_color, soft_wrap=True)
    error_console = Console(stderr=True, highlight=False, no_color=no_color, soft_wrap=True)

    def report_error(message: str) -> None:
        error_console.print(Text(message, style="red"))

    if args.cwd and not os.path.isdir(os.path.expanduser(args.cwd)):
        report_error(f"minishell: {args.cwd}: not a directory")
        return 2

    if args.cwd:
        session = DependencyContainer(home_directory=os.path.expanduser(args.cwd))
    else:
        session = container
    shell = session.get_shell()
    stdout = sys.stdout.buffer
    stdin = sys.stdin.buffer

    if args.command is not None:
        try:
            shell.parse_and_evaluate(args.command, stdout, stdin)
        except ExitSignal as e:
            return e.code
        except BaseShellError as e:
            report_error(str(e))
            return 1
        return 0

    def read_line(prompt: str) -> str:
        try:
            return console.input(Text(prompt, style="bold cyan"))
        except KeyboardInterrupt:
            console.print()
            return ""

    logger.info(f"Starting shell in {session.get_environment().current_directory}")
    return shell.run_repl(read_line, stdout, report_error, stdin)


if __name__ == "__main__":
    raise SystemExit(main())
