"""Byte classes for O(1) classification.

All sets are frozensets of byte values for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from tintcat.lexer.charsets import OPERATORS

    if byte in OPERATORS:  # O(1) lookup
        ...
"""

from __future__ import annotations

from enum import Enum, auto

# Punctuation that groups into operator runs. Note: "_" and quotes are not here.
OPERATORS: frozenset[int] = frozenset(b"+-*/~`!@#$%^&()=[]{}|;:?.,<>\\")

# Horizontal whitespace (newline is its own class)
BLANKS: frozenset[int] = frozenset(b" \t\r")

NEWLINE: int = ord("\n")

# String delimiters, always emitted as single-byte tokens
QUOTES: frozenset[int] = frozenset(b"'\"")

# Bytes that stop an "other" run. Newlines and quotes are absorbed.
OTHER_STOP: frozenset[int] = OPERATORS | BLANKS


class ByteClass(Enum):
    """Lexical class of a single byte."""

    OPERATOR = auto()
    BLANK = auto()
    NEWLINE = auto()
    QUOTE = auto()
    OTHER = auto()


def classify(byte: int) -> ByteClass:
    """Return the class of ``byte``."""
    if byte in OPERATORS:
        return ByteClass.OPERATOR
    if byte in BLANKS:
        return ByteClass.BLANK
    if byte == NEWLINE:
        return ByteClass.NEWLINE
    if byte in QUOTES:
        return ByteClass.QUOTE
    return ByteClass.OTHER
