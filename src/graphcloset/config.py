"""Configuration loading for the plot command."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .formatting import DEFAULT_FORMAT, FORMATTERS

# Default point list when none is given
DEFAULT_INPUT = "(4,5) (1,2) (7,8)"


@dataclass
class PlotConfig:
    """Settings for a plot run."""

    input: str = DEFAULT_INPUT
    strict: bool = False
    format: str = DEFAULT_FORMAT

    def __post_init__(self) -> None:
        """Validate field types and the output format."""
        if not isinstance(self.input, str):
            raise ValueError(f"'input' must be a string, got {type(self.input).__name__}")
        if not isinstance(self.strict, bool):
            raise ValueError(f"'strict' must be a boolean, got {type(self.strict).__name__}")
        if not isinstance(self.format, str):
            raise ValueError(f"'format' must be a string, got {type(self.format).__name__}")
        if self.format not in FORMATTERS:
            raise ValueError(
                f"Unknown output format: {self.format} (choose from {', '.join(FORMATTERS)})"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlotConfig":
        """Create PlotConfig from a YAML dict."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "PlotConfig":
        """Load configuration from a YAML file.

        Settings may sit at the top level or under a ``plot`` section.
        An empty file yields the defaults.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping: {path}")

        if "plot" in data:
            section = data["plot"] or {}
            if not isinstance(section, dict):
                raise ValueError(f"'plot' section must be a mapping: {path}")
            data = section

        return cls.from_dict(data)

    def override(self, **values: Any) -> None:
        """Override settings, ignoring values that are None."""
        known = {f.name for f in fields(self)}
        for name, value in values.items():
            if name not in known:
                raise ValueError(f"Unknown config key: {name}")
            if value is not None:
                setattr(self, name, value)
        self.__post_init__()
