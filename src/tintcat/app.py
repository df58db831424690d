"""Per-file pipeline: read, tokenize, highlight, render.

The grammar is resolved before the file is tokenized, so a broken or
missing grammar fails the file before any output is written for it.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from tintcat.config import RenderConfig
from tintcat.diagnostics import Diagnostics
from tintcat.errors import SourceReadError
from tintcat.highlighter import Highlighter
from tintcat.languages import LanguageMap
from tintcat.lexer import Lexer
from tintcat.renderers.terminal import TerminalRenderer
from tintcat.utils.logger import get_logger

logger = get_logger(__name__)


def read_source(path: str | Path) -> bytes:
    """Whole-file contents of ``path``.

    Raises:
        SourceReadError: If the file cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(str(path), e.strerror or str(e)) from e


class App:
    """Pretty-print files to a text stream."""

    def __init__(
        self,
        version: str,
        config: RenderConfig | None = None,
        language_map: LanguageMap | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.version = version
        self.config = config if config is not None else RenderConfig()
        self.language_map = language_map if language_map is not None else LanguageMap.load()
        self.stream = stream if stream is not None else sys.stdout
        self.renderer = TerminalRenderer(self.config)

    def run(self, path: str | Path) -> Diagnostics:
        """Render one file and return the diagnostics gathered for it.

        Raises:
            GrammarError: If no usable grammar exists for the file.
            SourceReadError: If the file cannot be read.
        """
        grammar = self.language_map.load_grammar(path)
        data = read_source(path)
        logger.debug("Rendering %s (%d bytes) with grammar %s", path, len(data), grammar.name)

        diagnostics = Diagnostics(self.config.log_level)
        tokens, lines = Lexer(data, diagnostics).tokenize()
        colored = Highlighter(grammar, diagnostics).color(tokens)

        self.stream.write(self.renderer.render_title(self.version, str(path)))
        self.stream.write(self.renderer.render(colored, lines))
        return diagnostics
