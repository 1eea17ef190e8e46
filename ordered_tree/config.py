"""Display configuration for the textual tree views."""

from __future__ import annotations

from dataclasses import dataclass, fields
import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .errors import ConfigError

__all__ = [
    "DisplayConfig",
    "load_display_config",
]


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """Formatting knobs for :mod:`ordered_tree.display`."""

    indent_width: int = 4
    separator: str = " "
    placeholder: str = "·"
    empty_marker: str = "<empty>"

    def __post_init__(self) -> None:
        if not isinstance(self.indent_width, int) or isinstance(self.indent_width, bool):
            raise ConfigError("indent_width must be an integer")
        if self.indent_width < 0:
            raise ConfigError("indent_width must be non-negative")
        for name in ("separator", "placeholder", "empty_marker"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string")
        if not self.separator:
            raise ConfigError("separator must not be empty")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "DisplayConfig":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigError(f"Unknown display options: {', '.join(unknown)}")
        return cls(**payload)


def load_display_config(path: Optional[Union[str, Path]]) -> DisplayConfig:
    """Load a :class:`DisplayConfig` from a JSON or YAML file.

    ``None`` yields the defaults.  Files ending in ``.json`` are parsed with
    :mod:`json`; everything else goes through ``yaml.safe_load``.  An empty
    document also yields the defaults.
    """

    if path is None:
        return DisplayConfig()

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read display config {config_path}: {exc}") from exc

    try:
        if config_path.suffix.lower() == ".json":
            payload = json.loads(text) if text.strip() else None
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Display config {config_path} is not well formed") from exc

    if payload is None:
        return DisplayConfig()
    if not isinstance(payload, Mapping):
        raise ConfigError("Display config must be a mapping of option names to values")
    return DisplayConfig.from_mapping(payload)
