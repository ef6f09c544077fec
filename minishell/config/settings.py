"""
Configuration settings for the shell.
"""

import logging
import os

from dotenv import load_dotenv

from minishell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Shell settings loaded from environment variables."""

    def __init__(self):
        self.home_directory: str = os.path.abspath(
            os.path.expanduser(self._get_env("MINISHELL_HOME", os.getcwd()))
        )
        self.prompt_suffix: str = self._get_env("MINISHELL_PROMPT_SUFFIX", "$ ")
        self.log_level: int = self._get_log_level("MINISHELL_LOG_LEVEL", "WARNING")
        self.log_history: bool = self._get_env("MINISHELL_HISTORY", "0").strip().lower() in (
            "1",
            "true",
            "yes",
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name from the environment, raise error if unknown."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level in {key}: {name}")
        return level


# Global settings instance
settings = Settings()
