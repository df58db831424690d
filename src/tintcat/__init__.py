"""
tintcat — terminal source-code pretty-printer

Scans a file's bytes into tokens, colors each token with a small
TextMate-style grammar (standalone regex rules plus begin/end regions),
and prints the result with ANSI colors and a line-number gutter.

Quick Start:
    >>> from tintcat import GrammarModel, highlight_source
    >>> grammar = GrammarModel.from_dict({
    ...     "color_map": {"kw": "keyword"},
    ...     "pattern_regex": [{"name": "kw", "regex": "^fn$"}],
    ...     "pattern_begin_end": [],
    ... })
    >>> tokens, lines = highlight_source(b"fn main", grammar)
    >>> tokens[0].color
    'keyword'

Command line:
    tintcat src/main.rs
    python -m tintcat --log-level warn script.py
"""

import logging

from tintcat.config import DEFAULT_PALETTE, RenderConfig, load_config
from tintcat.diagnostics import Diagnostic, Diagnostics, LogLevel, Severity
from tintcat.errors import ConfigError, GrammarError, SourceReadError, TintcatError
from tintcat.grammar import GrammarModel, RegionRule, StandaloneRule, load_grammar
from tintcat.highlighter import HighlightState, Highlighter, highlight
from tintcat.languages import LanguageMap
from tintcat.lexer import Lexer, tokenize
from tintcat.renderers.terminal import TerminalRenderer
from tintcat.tokens import Token

__version__ = "1.0.0"

logging.getLogger("tintcat").addHandler(logging.NullHandler())


def highlight_source(
    data: bytes,
    grammar: GrammarModel,
    diagnostics: Diagnostics | None = None,
) -> tuple[list[Token], int]:
    """Tokenize and color ``data`` in one call.

    Args:
        data: Whole-file contents
        grammar: Grammar to color with
        diagnostics: Sink shared by the lexer and the highlighter

    Returns:
        (colored tokens, line_count)
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    tokens, lines = tokenize(data, diagnostics)
    return Highlighter(grammar, diagnostics).color(tokens), lines


__all__ = [
    "DEFAULT_PALETTE",
    "ConfigError",
    "Diagnostic",
    "Diagnostics",
    "GrammarError",
    "GrammarModel",
    "HighlightState",
    "Highlighter",
    "LanguageMap",
    "Lexer",
    "LogLevel",
    "RegionRule",
    "RenderConfig",
    "Severity",
    "SourceReadError",
    "StandaloneRule",
    "TerminalRenderer",
    "TintcatError",
    "Token",
    "__version__",
    "highlight",
    "highlight_source",
    "load_config",
    "load_grammar",
    "tokenize",
]
