"""Terminal renderer: colored tokens to ANSI-escaped text.

Reserved tags map to formatting directives:

- ``default`` / ``unknown``: plain text
- ``bold``: bold bright black
- ``symbol``: italic bright black
- ``nextline``: line break followed by the next line-number gutter

Every other tag is a color identifier looked up in the palette.

Thread Safety:
All per-render state is local to render(). A TerminalRenderer can be
shared freely.
"""

from __future__ import annotations

from collections.abc import Iterable

from tintcat.config import RenderConfig
from tintcat.tokens import BOLD, DEFAULT, NEXTLINE, SYMBOL, UNKNOWN, Token
from tintcat.utils import ansi
from tintcat.utils.logger import get_logger

logger = get_logger(__name__)


class TerminalRenderer:
    """Render colored tokens with a line-number gutter."""

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config if config is not None else RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def _paint(self, text: str, name: str, *extra: str) -> str:
        rgb = self._config.palette.get(name)
        if rgb is None:
            logger.debug("No palette entry for %r, rendering plain", name)
            return ansi.style(text, *extra, enabled=self._config.color)
        return ansi.style(text, ansi.truecolor(rgb), *extra, enabled=self._config.color)

    def gutter(self, line: int, width: int) -> str:
        """Line number, padded to ``width``, followed by two spaces."""
        number = str(line)
        return f"{self._paint(number, NEXTLINE, ansi.BOLD)}{' ' * (width - len(number))}  "

    def render_title(self, version: str, path: str) -> str:
        """Header line: ``tintcat@<version> - <path>``, bold throughout."""
        bold = ansi.BOLD
        head = self._paint(f"tintcat@{version}", "title", bold)
        dash = ansi.style(" - ", bold, enabled=self._config.color)
        return f"{head}{dash}{self._paint(path, 'file_path', bold)}\n"

    def render(self, tokens: Iterable[Token], line_count: int) -> str:
        """Render tokens; ``line_count`` sets the gutter width.

        Returns:
            The rendered text, newline-terminated.
        """
        color = self._config.color
        width = len(str(line_count))
        line = 1
        parts = [self.gutter(line, width)]

        for token in tokens:
            tag = token.color
            if tag in (DEFAULT, UNKNOWN):
                parts.append(token.text)
            elif tag == BOLD:
                parts.append(ansi.style(token.text, ansi.BOLD, ansi.BRIGHT_BLACK, enabled=color))
            elif tag == SYMBOL:
                parts.append(ansi.style(token.text, ansi.ITALIC, ansi.BRIGHT_BLACK, enabled=color))
            elif tag == NEXTLINE:
                line += 1
                parts.append("\n")
                parts.append(self.gutter(line, width))
            else:
                parts.append(self._paint(token.text, tag))

        parts.append("\n")
        return "".join(parts)
