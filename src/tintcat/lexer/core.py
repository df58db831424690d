"""Byte-class lexer with a single forward cursor.

Every byte is classified once; runs of operator bytes, blank bytes and
"other" bytes are grouped into one token each, while newlines and quotes
always become single-byte tokens.

No regex in the hot path. Each run is decoded as UTF-8 on its own; a run
that fails to decode is dropped and reported to the diagnostics sink,
and scanning resumes at the next byte.

Thread Safety:
Lexer instances are single-use. Create one per source buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from tintcat.diagnostics import Diagnostics, Severity
from tintcat.lexer.charsets import BLANKS, OPERATORS, OTHER_STOP, ByteClass, classify
from tintcat.tokens import NEXTLINE, Token


class Lexer:
    """Scan raw bytes into a flat token list.

    Usage:
            >>> tokens, lines = Lexer(b"let x = 1;\\n").tokenize()
            >>> [t.text for t in tokens]
        ['let', ' ', 'x', ' ', '=', ' ', '1', ';', '\\n']
            >>> lines
        2

    """

    __slots__ = ("_data", "_data_len", "_pos", "_diagnostics")

    def __init__(self, data: bytes, diagnostics: Diagnostics | None = None) -> None:
        """Initialize lexer with source bytes.

        Args:
            data: Whole-file contents
            diagnostics: Sink for decode errors (a private one if omitted)
        """
        self._data = bytes(data)
        self._data_len = len(self._data)
        self._pos = 0
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def tokenize(self) -> tuple[list[Token], int]:
        """Tokenize the whole buffer.

        Returns:
            (tokens, line_count) where line_count is the number of
            newline tokens plus one.

        Complexity: O(n) where n = len(data)
        """
        tokens: list[Token] = []
        lines = 1
        data = self._data
        data_len = self._data_len

        while self._pos < data_len:
            begin = self._pos
            kind = classify(data[begin])

            if kind is ByteClass.OPERATOR:
                end = self._extend_while(begin, OPERATORS)
            elif kind is ByteClass.BLANK:
                end = self._extend_while(begin, BLANKS)
            elif kind is ByteClass.NEWLINE:
                tokens.append(Token("\n", begin, begin, NEXTLINE))
                lines += 1
                self._pos = begin + 1
                continue
            elif kind is ByteClass.QUOTE:
                end = begin
            else:
                end = self._extend_until(begin, OTHER_STOP)

            self._pos = end + 1
            token = self._make_token(begin, end)
            if token is not None:
                tokens.append(token)

        return tokens, lines

    # =========================================================================
    # Run helpers
    # =========================================================================

    def _extend_while(self, begin: int, members: frozenset[int]) -> int:
        """Index of the last byte of the run of ``members`` starting at ``begin``."""
        data = self._data
        end = begin
        while end + 1 < self._data_len and data[end + 1] in members:
            end += 1
        return end

    def _extend_until(self, begin: int, stops: frozenset[int]) -> int:
        """Index of the last byte before the next byte in ``stops``."""
        data = self._data
        end = begin
        while end + 1 < self._data_len and data[end + 1] not in stops:
            end += 1
        return end

    def _make_token(self, begin: int, end: int) -> Token | None:
        """Decode ``data[begin..=end]``; report and drop the run on failure."""
        raw = self._data[begin : end + 1]
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            self._diagnostics.error(
                f"UTF-8 error: unexpected byte sequence at bytes {begin}..{end}."
            )
            self._diagnostics.note(f"Raw error: {e}", Severity.ERROR)
            return None
        return Token(text, begin, end)


def tokenize(data: bytes, diagnostics: Diagnostics | None = None) -> tuple[list[Token], int]:
    """Tokenize ``data`` in one call.

    Args:
        data: Whole-file contents
        diagnostics: Sink for decode errors

    Returns:
        (tokens, line_count)
    """
    return Lexer(data, diagnostics).tokenize()
