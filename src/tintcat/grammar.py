"""Grammar model: standalone rules, region rules and the color map.

A grammar document is JSON with three required keys:

    {
      "color_map": {"keyword": "keyword"},
      "pattern_regex": [{"name": "keyword", "regex": "^(fn|let)$"}],
      "pattern_begin_end": [
        {"name": "string", "begin": "^\\"$", "end": "\\"$",
         "include_first": true, "include_end": true}
      ]
    }

Rule order is significant: when several rules match one token the first
declared wins. Region rules are addressed by their index, which never
changes for the lifetime of a model.

Patterns are validated when the grammar is loaded, but compiled for
matching lazily, on first use, into a cache owned by the model.

Thread Safety:
GrammarModel is meant to be owned by one Highlighter for one run.
The pattern cache is a plain dict with no locking.

"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tintcat.errors import GrammarError
from tintcat.tokens import NEXTLINE, UNKNOWN
from tintcat.utils.logger import get_logger

logger = get_logger(__name__)

# Tags that would leave a token uncolored or turn it into a line break.
UNASSIGNABLE_TAGS: frozenset[str] = frozenset({UNKNOWN, NEXTLINE})


@dataclass(frozen=True, slots=True)
class StandaloneRule:
    """Colors a single token when ``pattern`` matches it."""

    name: str
    pattern: str


@dataclass(frozen=True, slots=True)
class RegionRule:
    """Opens a region on ``begin`` and closes it on ``end``.

    Attributes:
        name: Color tag of the region
        begin: Pattern that opens the region
        end: Pattern that closes the region
        include_first: Color the opening token with the region tag
        include_end: Color the closing token with the region tag

    """

    name: str
    begin: str
    end: str
    include_first: bool
    include_end: bool


@dataclass(slots=True)
class GrammarModel:
    """In-memory highlighting rules for one language.

    Attributes:
        color_map: Tag -> color identifier
        standalone_rules: Ordered standalone rules
        region_rules: Ordered region rules, indexed by position
        name: Grammar name for messages

    """

    color_map: dict[str, str] = field(default_factory=dict)
    standalone_rules: tuple[StandaloneRule, ...] = ()
    region_rules: tuple[RegionRule, ...] = ()
    name: str = "<grammar>"
    _patterns: dict[str, re.Pattern[str]] = field(
        default_factory=dict, repr=False, compare=False
    )

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], name: str = "<grammar>") -> GrammarModel:
        """Build a model from a decoded grammar document.

        Raises:
            GrammarError: On missing keys, wrong types or invalid patterns.
        """
        if not isinstance(data, Mapping):
            raise GrammarError("document must be a JSON object", name)
        for key in ("color_map", "pattern_regex", "pattern_begin_end"):
            if key not in data:
                raise GrammarError(f"missing required key '{key}'", name)

        color_map = data["color_map"]
        if not isinstance(color_map, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) and v for k, v in color_map.items()
        ):
            raise GrammarError("'color_map' must map names to non-empty strings", name)
        reserved = sorted(set(color_map.values()) & UNASSIGNABLE_TAGS)
        if reserved:
            raise GrammarError(f"'color_map' cannot target reserved tag '{reserved[0]}'", name)

        standalone = tuple(
            StandaloneRule(
                name=_field(entry, "name", str, name, i),
                pattern=_pattern(entry, "regex", name, i),
            )
            for i, entry in enumerate(_rule_list(data, "pattern_regex", name))
        )
        regions = tuple(
            RegionRule(
                name=_field(entry, "name", str, name, i),
                begin=_pattern(entry, "begin", name, i),
                end=_pattern(entry, "end", name, i),
                include_first=_field(entry, "include_first", bool, name, i),
                include_end=_field(entry, "include_end", bool, name, i),
            )
            for i, entry in enumerate(_rule_list(data, "pattern_begin_end", name))
        )

        for rule in (*standalone, *regions):
            target = color_map.get(rule.name, rule.name)
            if target in UNASSIGNABLE_TAGS:
                raise GrammarError(f"rule '{rule.name}' resolves to reserved tag '{target}'", name)

        logger.debug(
            "Loaded grammar %s: %d standalone rules, %d region rules",
            name,
            len(standalone),
            len(regions),
        )
        return cls(
            color_map=dict(color_map),
            standalone_rules=standalone,
            region_rules=regions,
            name=name,
        )

    @classmethod
    def from_json(cls, text: str, name: str = "<grammar>") -> GrammarModel:
        """Build a model from grammar JSON text.

        Raises:
            GrammarError: If the text is not valid JSON or not a valid grammar.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise GrammarError(f"invalid JSON: {e}", name) from e
        return cls.from_dict(data, name=name)

    # =========================================================================
    # Matching
    # =========================================================================

    def _regex(self, pattern: str) -> re.Pattern[str]:
        compiled = self._patterns.get(pattern)
        if compiled is None:
            compiled = re.compile(pattern)
            self._patterns[pattern] = compiled
        return compiled

    def resolve_color(self, tag: str) -> str:
        """Color identifier for ``tag``; the tag itself when unmapped."""
        return self.color_map.get(tag, tag)

    def match_standalone(self, text: str) -> list[str]:
        """Names of all standalone rules matching ``text``, in declaration order."""
        return [
            rule.name
            for rule in self.standalone_rules
            if self._regex(rule.pattern).search(text)
        ]

    def match_begin(self, text: str) -> list[tuple[str, int]]:
        """(name, index) of all region rules whose begin matches ``text``."""
        return [
            (rule.name, i)
            for i, rule in enumerate(self.region_rules)
            if self._regex(rule.begin).search(text)
        ]

    def match_end(self, region: int, text: str) -> bool:
        """True if the end pattern of region ``region`` matches ``text``."""
        return self._regex(self.region_rules[region].end).search(text) is not None

    def region(self, region: int) -> RegionRule:
        return self.region_rules[region]

    @property
    def compiled_count(self) -> int:
        """Number of patterns compiled so far."""
        return len(self._patterns)


def load_grammar(path: str | Path) -> GrammarModel:
    """Read and parse a grammar file; the file stem becomes the grammar name.

    Raises:
        GrammarError: If the file cannot be read or is not a valid grammar.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GrammarError(f"cannot read {path}: {e}", path.stem) from e
    return GrammarModel.from_json(text, name=path.stem)


# =========================================================================
# Validation helpers
# =========================================================================


def _rule_list(data: Mapping[str, Any], key: str, grammar: str) -> list[Mapping[str, Any]]:
    rules = data[key]
    if not isinstance(rules, list):
        raise GrammarError(f"'{key}' must be a list", grammar)
    for i, entry in enumerate(rules):
        if not isinstance(entry, Mapping):
            raise GrammarError(f"'{key}'[{i}] must be an object", grammar)
    return rules


def _field(entry: Mapping[str, Any], key: str, kind: type, grammar: str, index: int) -> Any:
    if key not in entry:
        raise GrammarError(f"rule {index} is missing '{key}'", grammar)
    value = entry[key]
    if not isinstance(value, kind):
        raise GrammarError(
            f"rule {index}: '{key}' must be {kind.__name__}, got {type(value).__name__}",
            grammar,
        )
    if kind is str and not value:
        raise GrammarError(f"rule {index}: '{key}' must not be empty", grammar)
    return value


def _pattern(entry: Mapping[str, Any], key: str, grammar: str, index: int) -> str:
    pattern = _field(entry, key, str, grammar, index)
    try:
        re.compile(pattern)
    except re.error as e:
        raise GrammarError(f"rule {index}: invalid {key} pattern {pattern!r}: {e}", grammar) from e
    return pattern
