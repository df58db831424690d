"""Diagnostics sink shared by the lexer and the highlighter.

Undecodable byte runs and ambiguous pattern matches are not failures;
they are recorded here and shown to the user after the file is rendered.
The core only ever appends to the sink.

Each entry is also forwarded to the ``tintcat.diagnostics`` stdlib logger,
so library users can observe diagnostics through their own handlers.

Usage:
    >>> from tintcat.diagnostics import Diagnostics, LogLevel, Severity
    >>> diag = Diagnostics(LogLevel.WARN)
    >>> diag.warn("More than one pattern matches the token `x`.")
    >>> diag.note("Matched patterns: ['a', 'b']", Severity.WARN)
    >>> len(diag.visible())
    2

"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from tintcat.utils.ansi import BOLD, BRIGHT_BLACK, RED, YELLOW, style
from tintcat.utils.logger import get_logger

logger = get_logger(__name__)


class LogLevel(Enum):
    """Minimum level an entry needs to be shown."""

    ALL = 0
    WARN = 1
    ERROR = 2
    NEVER = 3

    @classmethod
    def parse(cls, value: str | int) -> LogLevel:
        """Parse ``0``-``3`` or ``all``/``warn``/``error``/``never``.

        Raises:
            ValueError: For anything else.
        """
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        text = str(value).strip().lower()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"unknown log level {value!r}") from None


class Severity(Enum):
    """Severity of a diagnostic entry."""

    INFO = 0
    WARN = 1
    ERROR = 2
    NOTE = 3


_LABELS: dict[Severity, tuple[str, tuple[str, ...]]] = {
    Severity.INFO: ("Info", (BRIGHT_BLACK, BOLD)),
    Severity.NOTE: ("Note", (BRIGHT_BLACK, BOLD)),
    Severity.WARN: ("Warn", (YELLOW, BOLD)),
    Severity.ERROR: ("Error", (RED, BOLD)),
}

_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.INFO: logging.INFO,
    Severity.NOTE: logging.DEBUG,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One recorded entry.

    Attributes:
        severity: Kind of entry
        message: Human-readable text
        note_for: For notes, the severity of the entry being annotated

    """

    severity: Severity
    message: str
    note_for: Severity | None = None

    @property
    def level(self) -> int:
        """Numeric level compared against LogLevel; notes take their target's."""
        if self.severity is Severity.NOTE:
            return (self.note_for or Severity.INFO).value
        return self.severity.value

    def format(self, *, color: bool = False) -> str:
        label, codes = _LABELS[self.severity]
        return f"{style(label, *codes, enabled=color)} {self.message}"


class Diagnostics:
    """Append-only diagnostics channel.

    Thread Safety:
        Not thread-safe. One sink per run.

    """

    __slots__ = ("_entries", "log_level")

    def __init__(self, log_level: LogLevel = LogLevel.ERROR) -> None:
        self._entries: list[Diagnostic] = []
        self.log_level = log_level

    def _record(self, entry: Diagnostic) -> None:
        self._entries.append(entry)
        logger.log(_STDLIB_LEVELS[entry.severity], entry.message)

    def info(self, message: str) -> None:
        self._record(Diagnostic(Severity.INFO, message))

    def note(self, message: str, note_for: Severity) -> None:
        """Record a note annotating an entry of severity ``note_for``."""
        if note_for is Severity.NOTE:
            raise ValueError("a note cannot annotate another note")
        self._record(Diagnostic(Severity.NOTE, message, note_for))

    def warn(self, message: str) -> None:
        self._record(Diagnostic(Severity.WARN, message))

    def error(self, message: str) -> None:
        self._record(Diagnostic(Severity.ERROR, message))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._entries)

    def of(self, severity: Severity) -> list[Diagnostic]:
        """All entries of one severity, in recording order."""
        return [e for e in self._entries if e.severity is severity]

    def visible(self) -> list[Diagnostic]:
        """Entries at or above the configured log level."""
        threshold = self.log_level.value
        return [e for e in self._entries if e.level >= threshold]

    def format(self, *, color: bool = False) -> str:
        """One line per visible entry, newline-terminated."""
        return "".join(f"{e.format(color=color)}\n" for e in self.visible())
