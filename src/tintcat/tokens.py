"""Token definitions for the tintcat lexer and highlighter.

The lexer produces a flat list of Token objects; the highlighter produces
a new list where each token carries its color tag.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, replace

# Reserved color tags. Everything else is a grammar rule name or a
# resolved color identifier looked up in the palette.
UNKNOWN = "unknown"
DEFAULT = "default"
NEXTLINE = "nextline"
BOLD = "bold"
SYMBOL = "symbol"

RESERVED_TAGS: frozenset[str] = frozenset({UNKNOWN, DEFAULT, NEXTLINE, BOLD, SYMBOL})


@dataclass(frozen=True, slots=True)
class Token:
    """A contiguous run of source bytes.

    Attributes:
        text: The decoded run
        start: Offset of the first byte in the source buffer
        end: Offset of the last byte in the source buffer (inclusive)
        color: Symbolic color tag, ``unknown`` until classified

    """

    text: str
    start: int
    end: int
    color: str = UNKNOWN

    @property
    def range(self) -> tuple[int, int]:
        """Inclusive (start, end) byte offsets."""
        return (self.start, self.end)

    @property
    def colored(self) -> bool:
        """True once a color tag has been assigned."""
        return self.color != UNKNOWN

    def with_color(self, color: str) -> Token:
        """Return a copy of this token carrying ``color``.

        Raises:
            ValueError: If the token is already colored or ``color`` is empty.
        """
        if self.colored:
            raise ValueError(f"token {self.text!r} is already colored {self.color!r}")
        if not color:
            raise ValueError("color tag must be a non-empty string")
        return replace(self, color=color)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({val!r}, {self.start}..{self.end}, {self.color})"
