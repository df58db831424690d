"""Byte-class lexer for tintcat.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize, ByteClass
├── core.py              # Lexer class (single cursor, run grouping, decoding)
└── charsets.py          # Byte class sets and classify()

Usage:
    >>> from tintcat.lexer import tokenize
    >>> tokens, lines = tokenize(b"a+=b;\\n")
    >>> [t.text for t in tokens]
['a', '+=', 'b', ';', '\\n']

"""

from tintcat.lexer.charsets import ByteClass, classify
from tintcat.lexer.core import Lexer, tokenize

__all__ = ["ByteClass", "Lexer", "classify", "tokenize"]
