"""ANSI escape sequences for terminal output.

All helpers take ``enabled`` so callers can produce identical text
with color turned off.
"""

from __future__ import annotations

C_TRUE = "\x1b[38;2;{r};{g};{b}m"
C_RESET = "\x1b[0m"

BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"
BRIGHT_BLACK = "\x1b[90m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"

RGB = tuple[int, int, int]


def style(text: str, *codes: str, enabled: bool = True) -> str:
    """Wrap text in the given escape codes, followed by a reset."""
    if not enabled or not codes or not text:
        return text
    return f"{''.join(codes)}{text}{C_RESET}"


def truecolor(rgb: RGB) -> str:
    """24-bit foreground color escape for an (r, g, b) triple."""
    r, g, b = rgb
    return C_TRUE.format(r=r, g=g, b=b)


def parse_hex(s: str) -> RGB:
    """Parse ``#rrggbb`` into an (r, g, b) triple.

    Raises:
        ValueError: If the string is not a 7-character hex color.
    """
    if len(s) != 7 or not s.startswith("#"):
        raise ValueError(f"expected #rrggbb, got {s!r}")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))
