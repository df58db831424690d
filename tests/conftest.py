"""Shared fixtures for tintcat tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from tintcat.diagnostics import Diagnostics, LogLevel
from tintcat.grammar import GrammarModel


def build_grammar(
    standalone: list[tuple[str, str]] | None = None,
    regions: list[tuple[str, str, str, bool, bool]] | None = None,
    color_map: dict[str, str] | None = None,
) -> GrammarModel:
    """Build a GrammarModel from compact tuples."""
    data: dict[str, Any] = {
        "color_map": color_map or {},
        "pattern_regex": [{"name": n, "regex": r} for n, r in standalone or []],
        "pattern_begin_end": [
            {
                "name": n,
                "begin": b,
                "end": e,
                "include_first": first,
                "include_end": last,
            }
            for n, b, e, first, last in regions or []
        ],
    }
    return GrammarModel.from_dict(data, name="test")


@pytest.fixture
def make_grammar() -> Callable[..., GrammarModel]:
    return build_grammar


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics(LogLevel.ALL)
