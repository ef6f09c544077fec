"""
Custom exceptions for the shell and its applications.
"""

from typing import Optional

# Messages shared by several applications
ERR_SYNTAX = "Invalid syntax"
ERR_INVALID_APP = "Invalid app"
ERR_FILE_NOT_FOUND = "No such file or directory"
ERR_IS_DIR = "Is a directory"
ERR_IS_NOT_DIR = "Is not a directory"
ERR_NO_PERM = "Permission denied"
ERR_DIR_NOT_EMPTY = "Directory not empty"
ERR_FILE_EXISTS = "File exists"
ERR_TOO_MANY_ARGS = "Too many arguments"
ERR_MISSING_OPERAND = "missing operand"
ERR_NULL_STREAMS = "Null Pointer Exception"
ERR_READING_FILE = "Could not read file"
ERR_WRITE_STREAM = "Could not write to output stream"
ERR_AMBIGUOUS_REDIRECT = "ambiguous redirect"


class BaseShellError(Exception):
    """Base exception class for shell errors."""

    pass


class ConfigurationError(BaseShellError):
    """Exception raised for configuration errors."""

    pass


class ParserError(BaseShellError):
    """Exception raised when command line flags cannot be parsed."""

    pass


class FileSystemError(BaseShellError):
    """
    Exception raised by the file system adapter.

    ``reason`` is one of the shared messages (for example ``ERR_FILE_NOT_FOUND``)
    so that applications can format it in their own style.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ShellError(BaseShellError):
    """Exception raised for command line syntax and dispatch errors."""

    def __init__(self, message: str):
        super().__init__(f"shell: {message}")


class ExitSignal(BaseShellError):
    """Raised by the exit application to ask the enclosing shell loop to stop."""

    def __init__(self, code: int = 0):
        super().__init__("exit")
        self.code = code


class ApplicationError(BaseShellError):
    """
    Base exception for command applications.

    Subclasses set ``command`` so that every message reads ``"<cmd>: <message>"``.
    Batch operations may pass ``errors`` to report several per-item failures
    at once; the messages are then joined with newlines.
    """

    command = "app"

    def __init__(self, message: str = "", errors: Optional[list[str]] = None):
        self.errors: list[str] = list(errors or [])
        if self.errors:
            text = "\n".join(f"{self.command}: {err}" for err in self.errors)
        else:
            text = f"{self.command}: {message}"
        super().__init__(text)


class CatError(ApplicationError):
    """Exception raised by the cat application."""

    command = "cat"


class CdError(ApplicationError):
    """Exception raised by the cd application."""

    command = "cd"


class CutError(ApplicationError):
    """Exception raised by the cut application."""

    command = "cut"


class EchoError(ApplicationError):
    """Exception raised by the echo application."""

    command = "echo"


class ExitError(ApplicationError):
    """Exception raised by the exit application."""

    command = "exit"


class GrepError(ApplicationError):
    """Exception raised by the grep application."""

    command = "grep"


class LsError(ApplicationError):
    """Exception raised by the ls application."""

    command = "ls"


class MkdirError(ApplicationError):
    """Exception raised by the mkdir application."""

    command = "mkdir"


class MvError(ApplicationError):
    """Exception raised by the mv application."""

    command = "mv"


class PasteError(ApplicationError):
    """Exception raised by the paste application."""

    command = "paste"


class RmError(ApplicationError):
    """Exception raised by the rm application."""

    command = "rm"


class SortError(ApplicationError):
    """Exception raised by the sort application."""

    command = "sort"


class TeeError(ApplicationError):
    """Exception raised by the tee application."""

    command = "tee"


class UniqError(ApplicationError):
    """Exception raised by the uniq application."""

    command = "uniq"


class WcError(ApplicationError):
    """Exception raised by the wc application."""

    command = "wc"
