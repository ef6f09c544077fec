"""
RegexArgument entity: one shell word being assembled, with glob support.
"""

import os
import re

from minishell.entities.environment import Environment

# An unquoted asterisk matches any run of characters inside one path segment
ASTERISK_REGEX = "[^/]*"


class RegexArgument:
    """
    A shell word kept both as plain text and as a regular expression.

    Quoted characters are added with ``append`` or ``merge`` and match
    literally; unquoted asterisks are added with ``append_asterisk``.
    """

    def __init__(self, text: str = ""):
        self._plaintext: list[str] = []
        self._regex: list[str] = []
        self.has_asterisk = False
        if text:
            self.merge(text)

    def append(self, chr_: str) -> None:
        self._plaintext.append(chr_)
        self._regex.append(re.escape(chr_))

    def append_asterisk(self) -> None:
        self._plaintext.append("*")
        self._regex.append(ASTERISK_REGEX)
        self.has_asterisk = True

    def merge(self, other: "RegexArgument | str") -> None:
        """Append another argument (or literal text) to this one."""
        if isinstance(other, RegexArgument):
            self._plaintext.extend(other._plaintext)
            self._regex.extend(other._regex)
            self.has_asterisk = self.has_asterisk or other.has_asterisk
        else:
            self._plaintext.append(other)
            self._regex.append(re.escape(other))

    def is_empty(self) -> bool:
        return not self._plaintext

    @property
    def plaintext(self) -> str:
        return "".join(self._plaintext)

    @property
    def regex(self) -> str:
        return "".join(self._regex)

    def glob_files(self, environment: Environment) -> list[str]:
        """
        Expand the argument against the filesystem.

        Only the last path segment is expanded; the directory part is listed
        relative to the session's current directory (or as an absolute path).
        Entries starting with a dot are matched only when the pattern segment
        itself starts with a dot.

        Args:
            environment: Session whose current directory anchors relative patterns

        Returns:
            Sorted matching paths, ``[plaintext]`` for a word without an
            asterisk, or an empty list when nothing matches
        """
        if not self.has_asterisk:
            return [self.plaintext]

        text = self.plaintext
        dir_part, _, name_part = text.rpartition("/")
        prefix = f"{dir_part}/" if "/" in text else ""
        search_dir = environment.resolve(prefix or ".")
        pattern = re.compile(self.regex)

        try:
            candidates = os.listdir(search_dir)
        except OSError:
            return []

        matches: list[str] = []
        for name in candidates:
            if name.startswith(".") and not name_part.startswith("."):
                continue
            candidate = prefix + name
            if pattern.fullmatch(candidate):
                matches.append(candidate)
        return sorted(matches)

    def __str__(self) -> str:
        return self.plaintext

    def __repr__(self) -> str:
        return f"RegexArgument(plaintext='{self.plaintext}', has_asterisk={self.has_asterisk})"
