"""Single-pass highlighter: assigns a color tag to every token.

The highlighter walks the token list once with a two-state machine:

- Scanning: no region open. Begin patterns are tried, then standalone rules.
- InRegion(r): region rule ``r`` is open. Tokens take the region's color
  until its end pattern matches.

Only one region can be open at a time; regions do not nest.

Per token, in order:

1. Tokens that already carry a color (newline markers) pass through.
2. In a region, the end pattern is checked. On a match the region closes;
   with ``include_end`` the token takes the region color, otherwise it
   falls through to step 3. Without a match the token takes the region color.
3. While scanning, every begin pattern is tried. The first match opens its
   region; with ``include_first`` the token takes the region color,
   otherwise it falls through to step 4. Other begin rules are not retried.
4. Standalone rules are tried; the first match colors the token.
   Unmatched tokens stay ``unknown``.

When several rules match one token, the first declared wins and a warning
plus a note listing all candidates go to the diagnostics sink.

Thread Safety:
One Highlighter per run. It owns the grammar's pattern cache for that run.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tintcat.diagnostics import Diagnostics, Severity
from tintcat.grammar import GrammarModel
from tintcat.tokens import Token


@dataclass(slots=True)
class HighlightState:
    """Mutable machine state; ``open_region`` is None while scanning."""

    open_region: int | None = None

    @property
    def scanning(self) -> bool:
        return self.open_region is None


class Highlighter:
    """Color a token list using a grammar.

    Usage:
            >>> from tintcat.lexer import tokenize
            >>> grammar = GrammarModel.from_dict({
            ...     "color_map": {},
            ...     "pattern_regex": [{"name": "keyword", "regex": "^let$"}],
            ...     "pattern_begin_end": [],
            ... })
            >>> tokens, _ = tokenize(b"let x")
            >>> [t.color for t in Highlighter(grammar).color(tokens)]
        ['keyword', 'unknown', 'unknown']

    """

    __slots__ = ("_grammar", "_diagnostics", "state")

    def __init__(self, grammar: GrammarModel, diagnostics: Diagnostics | None = None) -> None:
        self._grammar = grammar
        self._diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.state = HighlightState()

    @property
    def grammar(self) -> GrammarModel:
        return self._grammar

    def color(self, tokens: Iterable[Token]) -> list[Token]:
        """Return a new list of tokens with color tags assigned.

        The state machine starts in Scanning on every call; the state after
        the last token stays available as ``self.state``.
        """
        self.state = HighlightState()
        return [self._color_token(token) for token in tokens]

    def _color_token(self, token: Token) -> Token:
        if token.colored:
            return token

        grammar = self._grammar
        state = self.state

        if state.open_region is not None:
            region = grammar.region(state.open_region)
            if not grammar.match_end(state.open_region, token.text):
                return token.with_color(grammar.resolve_color(region.name))
            state.open_region = None
            if region.include_end:
                return token.with_color(grammar.resolve_color(region.name))

        begins = grammar.match_begin(token.text)
        if begins:
            if len(begins) > 1:
                self._report_ambiguity("begin patterns", token, [name for name, _ in begins])
            name, index = begins[0]
            state.open_region = index
            if grammar.region(index).include_first:
                return token.with_color(grammar.resolve_color(name))

        matched = grammar.match_standalone(token.text)
        if not matched:
            return token
        if len(matched) > 1:
            self._report_ambiguity("patterns", token, matched)
        return token.with_color(grammar.resolve_color(matched[0]))

    def _report_ambiguity(self, kind: str, token: Token, names: list[str]) -> None:
        self._diagnostics.warn(
            f"More than one of the {kind} matches the token `{token.text}` "
            f"at byte {token.start}; using `{names[0]}`."
        )
        self._diagnostics.note(f"Matched patterns: {names}", Severity.WARN)


def highlight(
    tokens: Iterable[Token],
    grammar: GrammarModel,
    diagnostics: Diagnostics | None = None,
) -> list[Token]:
    """Color ``tokens`` with a fresh Highlighter."""
    return Highlighter(grammar, diagnostics).color(tokens)
