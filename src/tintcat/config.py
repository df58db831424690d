"""Render configuration for tintcat.

Holds the color palette (identifier -> RGB), the diagnostics log level and
whether escape sequences are emitted at all. Configuration is immutable
once built and is passed explicitly to the renderer and the app.

Usage:
    config = load_config("tintcat.config.json")  # defaults if missing
    config = RenderConfig.from_dict({"palette": {"keyword": "#ff6b6b"}})

"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any

from tintcat.diagnostics import LogLevel
from tintcat.errors import ConfigError
from tintcat.utils.ansi import RGB, parse_hex
from tintcat.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PALETTE: Mapping[str, RGB] = MappingProxyType(
    {
        "title": (255, 107, 107),
        "file_path": (107, 107, 255),
        "keyword": (255, 107, 107),
        "literal_string": (107, 255, 107),
        "literal_number": (255, 255, 107),
        "literal_boolean": (107, 255, 255),
        "type": (255, 107, 255),
        "nextline": (155, 155, 155),
        "note": (155, 155, 155),
    }
)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        palette: Color identifier -> (r, g, b)
        log_level: Minimum level of diagnostics shown after each file
        color: Emit ANSI escape sequences

    """

    palette: Mapping[str, RGB] = field(default_factory=lambda: DEFAULT_PALETTE)
    log_level: LogLevel = LogLevel.ERROR
    color: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create RenderConfig from a dictionary.

        ``palette`` entries are merged over the defaults and may be
        ``[r, g, b]`` lists or ``"#rrggbb"`` strings. Unknown keys are
        silently ignored.

        Raises:
            ConfigError: If a known key has an invalid value.
        """
        kwargs: dict[str, Any] = {}

        if "palette" in config_dict:
            raw = config_dict["palette"]
            if not isinstance(raw, Mapping):
                raise ConfigError("'palette' must be an object")
            palette = dict(DEFAULT_PALETTE)
            for name, value in raw.items():
                palette[name] = _parse_rgb(name, value)
            kwargs["palette"] = MappingProxyType(palette)

        if "log_level" in config_dict:
            try:
                kwargs["log_level"] = LogLevel.parse(config_dict["log_level"])
            except ValueError as e:
                raise ConfigError(str(e)) from e

        if "color" in config_dict:
            if not isinstance(config_dict["color"], bool):
                raise ConfigError("'color' must be true or false")
            kwargs["color"] = config_dict["color"]

        return cls(**kwargs)

    def with_overrides(self, **changes: Any) -> RenderConfig:
        """Copy with some fields replaced (used for command-line flags)."""
        return replace(self, **changes)


def load_config(path: str | Path | None) -> RenderConfig:
    """Load configuration from a JSON file.

    A missing file (or ``None``) yields the default configuration.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    if path is None:
        return RenderConfig()
    path = Path(path)
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return RenderConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path}: expected a JSON object")
    return RenderConfig.from_dict(data)


def _parse_rgb(name: str, value: Any) -> RGB:
    if isinstance(value, str):
        try:
            return parse_hex(value)
        except ValueError as e:
            raise ConfigError(f"palette '{name}': {e}") from e
    if (
        isinstance(value, (list, tuple))
        and len(value) == 3
        and all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)
    ):
        return (value[0], value[1], value[2])
    raise ConfigError(f"palette '{name}': expected [r, g, b] or \"#rrggbb\", got {value!r}")


__all__ = ["DEFAULT_PALETTE", "RenderConfig", "load_config"]
