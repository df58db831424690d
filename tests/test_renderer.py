"""Tests for the terminal renderer."""

import pytest

from tintcat.config import RenderConfig
from tintcat.renderers.terminal import TerminalRenderer
from tintcat.tokens import BOLD, DEFAULT, NEXTLINE, SYMBOL, UNKNOWN, Token

RESET = "\x1b[0m"


@pytest.fixture
def plain() -> TerminalRenderer:
    return TerminalRenderer(RenderConfig(color=False))


@pytest.fixture
def colored() -> TerminalRenderer:
    return TerminalRenderer(RenderConfig(palette={"keyword": (1, 2, 3), NEXTLINE: (9, 9, 9)}))


def tok(text: str, color: str = UNKNOWN) -> Token:
    return Token(text, 0, max(len(text) - 1, 0), color)


class TestPlainOutput:
    def test_gutter_and_lines(self, plain) -> None:
        tokens = [tok("fn", "keyword"), tok(" "), tok("x"), tok("\n", NEXTLINE), tok("y")]
        assert plain.render(tokens, 2) == "1  fn x\n2  y\n"

    def test_empty_file(self, plain) -> None:
        assert plain.render([], 1) == "1  \n"

    def test_gutter_width_follows_line_count(self, plain) -> None:
        assert plain.gutter(3, 2) == "3   "
        assert plain.gutter(10, 2) == "10  "

    def test_wide_gutter(self, plain) -> None:
        tokens = [tok("\n", NEXTLINE)] * 10
        out = plain.render(tokens, 11)
        lines = out.split("\n")
        assert lines[0] == "1   "
        assert lines[9] == "10  "
        assert lines[10] == "11  "

    def test_title(self, plain) -> None:
        assert plain.render_title("1.0.0", "src/main.rs") == "tintcat@1.0.0 - src/main.rs\n"


class TestColoredOutput:
    def test_palette_color(self, colored) -> None:
        out = colored.render([tok("fn", "keyword")], 1)
        assert "\x1b[38;2;1;2;3mfn" + RESET in out

    def test_gutter_is_bold_nextline_color(self, colored) -> None:
        assert colored.gutter(1, 1) == f"\x1b[38;2;9;9;9m\x1b[1m1{RESET}  "

    def test_unknown_and_default_are_plain(self, colored) -> None:
        out = colored.render([tok("a", UNKNOWN), tok("b", DEFAULT)], 1)
        assert out.endswith("ab\n")

    def test_bold_directive(self, colored) -> None:
        out = colored.render([tok("self", BOLD)], 1)
        assert f"\x1b[1m\x1b[90mself{RESET}" in out

    def test_symbol_directive(self, colored) -> None:
        out = colored.render([tok(";", SYMBOL)], 1)
        assert f"\x1b[3m\x1b[90m;{RESET}" in out

    def test_missing_palette_entry_renders_plain(self, colored) -> None:
        out = colored.render([tok("x", "no_such_color")], 1)
        assert out.endswith("  x\n")

    def test_color_disabled_has_no_escapes(self) -> None:
        renderer = TerminalRenderer(RenderConfig(color=False))
        tokens = [tok("fn", "keyword"), tok("self", BOLD), tok(";", SYMBOL), tok("\n", NEXTLINE)]
        out = renderer.render(tokens, 2) + renderer.render_title("1.0.0", "a.rs")
        assert "\x1b" not in out

    def test_title_is_bold_in_every_segment(self) -> None:
        renderer = TerminalRenderer(RenderConfig())
        assert renderer.render_title("1.0.0", "a.rs") == (
            f"\x1b[38;2;255;107;107m\x1b[1mtintcat@1.0.0{RESET}"
            f"\x1b[1m - {RESET}"
            f"\x1b[38;2;107;107;255m\x1b[1ma.rs{RESET}\n"
        )

    def test_title_without_palette_entries_stays_bold(self, colored) -> None:
        out = colored.render_title("1.0.0", "a.rs")
        assert out == f"\x1b[1mtintcat@1.0.0{RESET}\x1b[1m - {RESET}\x1b[1ma.rs{RESET}\n"
