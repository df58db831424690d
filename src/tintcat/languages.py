"""Language map: picks a grammar for a file path.

The map lives next to the grammars as ``language_map.json``:

    {"default": "default", "highlighter_map": {"rs": "rust", "py": "python"}}

The extension of the file is looked up in ``highlighter_map``; an unmapped
extension is used as the grammar name directly. When no grammar file
exists under that name, the default grammar is used. A missing default
grammar is fatal.

"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tintcat.errors import GrammarError
from tintcat.grammar import GrammarModel, load_grammar
from tintcat.utils.logger import get_logger

logger = get_logger(__name__)

BUNDLED_GRAMMAR_DIR = Path(__file__).resolve().parent / "grammars"
LANGUAGE_MAP_FILE = "language_map.json"

_RE_EXTENSION = re.compile(r"\.([a-zA-Z0-9]+)$")


@dataclass(frozen=True, slots=True)
class LanguageMap:
    """Extension -> grammar name mapping rooted at ``grammar_dir``."""

    default: str
    highlighter_map: Mapping[str, str] = field(default_factory=dict)
    grammar_dir: Path = BUNDLED_GRAMMAR_DIR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], grammar_dir: Path = BUNDLED_GRAMMAR_DIR) -> LanguageMap:
        """Build from a decoded ``language_map.json``.

        Raises:
            GrammarError: If ``default`` or ``highlighter_map`` is malformed.
        """
        default = data.get("default") if isinstance(data, Mapping) else None
        if not isinstance(default, str) or not default:
            raise GrammarError("language map needs a non-empty 'default'", LANGUAGE_MAP_FILE)
        mapping = data.get("highlighter_map", {})
        if not isinstance(mapping, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in mapping.items()
        ):
            raise GrammarError("'highlighter_map' must map extensions to names", LANGUAGE_MAP_FILE)
        return cls(default=default, highlighter_map=dict(mapping), grammar_dir=Path(grammar_dir))

    @classmethod
    def load(cls, grammar_dir: str | Path | None = None) -> LanguageMap:
        """Read ``language_map.json`` from ``grammar_dir`` (bundled grammars if None).

        Raises:
            GrammarError: If the file is missing or malformed.
        """
        root = Path(grammar_dir) if grammar_dir is not None else BUNDLED_GRAMMAR_DIR
        path = root / LANGUAGE_MAP_FILE
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise GrammarError(f"cannot load {path}: {e}", LANGUAGE_MAP_FILE) from e
        return cls.from_dict(data, grammar_dir=root)

    def grammar_name_for(self, path: str | Path) -> str:
        """Grammar name for ``path`` (before the default fallback)."""
        match = _RE_EXTENSION.search(Path(path).name)
        if match is None:
            return self.default
        extension = match.group(1)
        return self.highlighter_map.get(extension, extension)

    def grammar_path(self, name: str) -> Path:
        return self.grammar_dir / f"{name}.json"

    def load_grammar(self, path: str | Path) -> GrammarModel:
        """Load the grammar for ``path``, falling back to the default grammar.

        Raises:
            GrammarError: If the chosen grammar is malformed, or the default
                grammar is needed and missing.
        """
        name = self.grammar_name_for(path)
        candidate = self.grammar_path(name)
        if not candidate.is_file():
            logger.debug("No grammar %r for %s, falling back to %r", name, path, self.default)
            candidate = self.grammar_path(self.default)
            if not candidate.is_file():
                raise GrammarError(f"default grammar not found at {candidate}", self.default)
        return load_grammar(candidate)
