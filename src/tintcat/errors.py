"""Exception classes for tintcat.

Only loading problems are raised as exceptions. Undecodable bytes and
ambiguous pattern matches are reported through the diagnostics sink instead.
"""

from __future__ import annotations


class TintcatError(Exception):
    """Base exception for all tintcat errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarError(TintcatError):
    """Grammar definition could not be loaded.

    Raised for missing or malformed grammar documents, invalid patterns,
    and a missing default grammar. Always raised before tokenizing starts.
    """

    def __init__(self, message: str, grammar: str | None = None) -> None:
        """Initialize grammar error.

        Args:
            message: Description of the problem
            grammar: Grammar name or path (optional)
        """
        self.message = message
        self.grammar = grammar

        prefix = f"Grammar '{grammar}': " if grammar else ""
        super().__init__(f"{prefix}{message}")


class ConfigError(TintcatError):
    """Render configuration is malformed."""

    pass


class SourceReadError(TintcatError):
    """Input file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
