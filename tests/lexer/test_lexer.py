"""Tests for byte-class grouping in the lexer."""

import pytest

from tintcat.diagnostics import Diagnostics, Severity
from tintcat.lexer import ByteClass, Lexer, classify, tokenize
from tintcat.tokens import NEXTLINE, UNKNOWN


def texts(data: bytes) -> list[str]:
    tokens, _ = tokenize(data)
    return [t.text for t in tokens]


class TestByteClasses:
    """classify() assigns each byte to exactly one class."""

    @pytest.mark.parametrize("char", list("+-*/~`!@#$%^&()=[]{}|;:?.,<>\\"))
    def test_operators(self, char: str) -> None:
        assert classify(ord(char)) is ByteClass.OPERATOR

    @pytest.mark.parametrize("char", [" ", "\t", "\r"])
    def test_blanks(self, char: str) -> None:
        assert classify(ord(char)) is ByteClass.BLANK

    def test_newline(self) -> None:
        assert classify(ord("\n")) is ByteClass.NEWLINE

    @pytest.mark.parametrize("char", ["'", '"'])
    def test_quotes(self, char: str) -> None:
        assert classify(ord(char)) is ByteClass.QUOTE

    @pytest.mark.parametrize("char", ["a", "Z", "0", "_", "\x00", "\x0b"])
    def test_other(self, char: str) -> None:
        assert classify(ord(char)) is ByteClass.OTHER

    def test_non_ascii_is_other(self) -> None:
        assert classify(0xC3) is ByteClass.OTHER
        assert classify(0xFF) is ByteClass.OTHER


class TestGrouping:
    """Runs of one class become one token."""

    def test_statement(self) -> None:
        assert texts(b"let x = 1;\n") == ["let", " ", "x", " ", "=", " ", "1", ";", "\n"]

    def test_operator_run_is_greedy(self) -> None:
        assert texts(b"x+=1") == ["x", "+=", "1"]
        assert texts(b"a);}") == ["a", ");}"]

    def test_blank_run_is_greedy(self) -> None:
        assert texts(b"a  \t b") == ["a", "  \t ", "b"]

    def test_crlf_carriage_return_is_blank(self) -> None:
        assert texts(b"a;\r\nb") == ["a", ";", "\r", "\n", "b"]

    def test_newlines_never_merge(self) -> None:
        tokens, lines = tokenize(b"\n\n")
        assert [t.text for t in tokens] == ["\n", "\n"]
        assert lines == 3

    def test_quotes_never_merge(self) -> None:
        assert texts(b'""') == ['"', '"']
        assert texts(b"'\"") == ["'", '"']

    def test_backslash_is_operator(self) -> None:
        assert texts(b"a\\b") == ["a", "\\", "b"]

    def test_underscore_is_part_of_word(self) -> None:
        assert texts(b"_foo_bar") == ["_foo_bar"]

    def test_multibyte_characters_stay_in_word(self) -> None:
        tokens, _ = tokenize("héllo wörld".encode())
        assert [t.text for t in tokens] == ["héllo", " ", "wörld"]
        assert [t.range for t in tokens] == [(0, 5), (6, 6), (7, 12)]


class TestOtherRunBoundaries:
    """An "other" run stops only at operators and blanks."""

    def test_absorbs_trailing_quote(self) -> None:
        assert texts(b'"hi"') == ['"', 'hi"']

    def test_absorbs_newline(self) -> None:
        tokens, lines = tokenize(b"ab\ncd")
        assert [t.text for t in tokens] == ["ab\ncd"]
        assert lines == 1
        assert tokens[0].color == UNKNOWN

    def test_quote_inside_parens(self) -> None:
        assert texts(b"('x')") == ["(", "'", "x'", ")"]

    def test_run_starting_with_quote_is_single_byte(self) -> None:
        assert texts(b"'abc") == ["'", "abc"]


class TestTokens:
    """Token ranges and pre-colored newline markers."""

    def test_empty_input(self) -> None:
        assert tokenize(b"") == ([], 1)

    def test_ranges_are_inclusive_byte_offsets(self) -> None:
        tokens, _ = tokenize(b"ab + c")
        assert [t.range for t in tokens] == [(0, 1), (2, 2), (3, 3), (4, 4), (5, 5)]

    def test_newline_is_precolored(self) -> None:
        tokens, lines = tokenize(b"a;\nb")
        newline = tokens[2]
        assert newline.text == "\n"
        assert newline.color == NEXTLINE
        assert newline.range == (2, 2)
        assert lines == 2

    def test_other_tokens_are_unknown(self) -> None:
        tokens, _ = tokenize(b"x = 'y'")
        assert all(t.color == UNKNOWN for t in tokens)

    def test_accepts_bytearray(self) -> None:
        tokens, _ = Lexer(bytearray(b"a b")).tokenize()
        assert [t.text for t in tokens] == ["a", " ", "b"]


class TestDecodeFailures:
    """Undecodable runs are dropped and reported, scanning continues."""

    def test_invalid_run_is_dropped(self) -> None:
        diag = Diagnostics()
        tokens, _ = tokenize(b"ab \xff\xfe cd", diag)

        assert [t.text for t in tokens] == ["ab", " ", " ", "cd"]
        assert [t.range for t in tokens] == [(0, 1), (2, 2), (5, 5), (6, 7)]

    def test_error_and_note_are_recorded(self) -> None:
        diag = Diagnostics()
        tokenize(b"ab \xff\xfe cd", diag)

        entries = list(diag)
        assert [e.severity for e in entries] == [Severity.ERROR, Severity.NOTE]
        assert "UTF-8" in entries[0].message
        assert entries[1].note_for is Severity.ERROR

    def test_truncated_multibyte_character(self) -> None:
        diag = Diagnostics()
        tokens, _ = tokenize(b"ok \xc3", diag)
        assert [t.text for t in tokens] == ["ok", " "]
        assert len(diag.of(Severity.ERROR)) == 1

    def test_each_bad_run_reported_once(self) -> None:
        diag = Diagnostics()
        tokens, _ = tokenize(b"\xff;\xfe", diag)
        assert [t.text for t in tokens] == [";"]
        assert len(diag.of(Severity.ERROR)) == 2
        assert len(diag.of(Severity.NOTE)) == 2

    def test_valid_input_records_nothing(self) -> None:
        diag = Diagnostics()
        tokenize("fn main() { println!(\"hé\"); }\n".encode(), diag)
        assert len(diag) == 0
