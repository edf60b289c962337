from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class StyloStatsConfig:
    """Configuration options for the analysis CLI and report writer."""

    dictionary_path: str = "words.txt"
    report_extension: str = "txt"
    default_base_name: str = "stdin"
    strip_extensions: tuple[str, ...] = (".txt",)
    output_dir: str | None = None
    encoding: str = "utf-8"
    prompt: str = "Enter text (end with EOF):"

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the configuration."""
        data = dict(asdict(self))
        data["strip_extensions"] = list(self.strip_extensions)
        return data


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(StyloStatsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "strip_extensions" in kwargs:
        value = kwargs["strip_extensions"]
        if isinstance(value, str):
            value = [value]
        kwargs["strip_extensions"] = tuple(str(item) for item in value)
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> StyloStatsConfig:
    """Build a StyloStatsConfig from a dictionary-like input."""
    if data is None:
        return StyloStatsConfig()
    return StyloStatsConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> StyloStatsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> StyloStatsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return StyloStatsConfig()
    return config_from_yaml(path)
