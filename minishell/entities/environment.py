"""
Environment entity holding the per-session working directory.
"""

import os
from typing import Any, Optional


class Environment:
    """
    Session context shared by every component that resolves relative paths.

    The shell never changes the process working directory; ``cd`` updates
    ``current_directory`` on the session instead.
    """

    def __init__(self, home_directory: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            home_directory: Directory the session starts in and returns to on a
                bare ``cd``. Defaults to the process working directory.
        """
        home = os.path.abspath(home_directory or os.getcwd())
        self.home_directory = home
        self.current_directory = home

    def resolve(self, path: str) -> str:
        """
        Resolve a path against the current directory.

        Args:
            path: Absolute or relative path, ``~`` is expanded

        Returns:
            Normalized absolute path
        """
        s = os.path.expanduser(path)
        if not os.path.isabs(s):
            s = os.path.join(self.current_directory, s)
        return os.path.normpath(s)

    def get_details(self) -> dict[str, Any]:
        return {
            "home_directory": self.home_directory,
            "current_directory": self.current_directory,
        }

    def __str__(self) -> str:
        return self.current_directory

    def __repr__(self) -> str:
        return f"Environment(current_directory='{self.current_directory}')"
