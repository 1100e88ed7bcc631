from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .models import ReadabilityAlgorithm


@dataclass(slots=True, frozen=True)
class ReadabilityConfig:
    """Editor settings that control readability highlighting."""

    enabled: bool = False
    algorithm: ReadabilityAlgorithm = ReadabilityAlgorithm.DALE_CHALL

    def __post_init__(self) -> None:
        # Reject bad values here so scoring never sees one. Overrides go
        # through dataclasses.replace, which runs this again.
        if not isinstance(self.enabled, bool):
            raise ValueError(f"enabled must be a boolean, got {self.enabled!r}.")
        algorithm = ReadabilityAlgorithm.parse(self.algorithm)
        object.__setattr__(self, "algorithm", algorithm)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the configuration."""
        data = dict(asdict(self))
        data["algorithm"] = self.algorithm.value
        return data


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadabilityConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "enabled" in kwargs:
        kwargs["enabled"] = _parse_bool(kwargs["enabled"])
    return kwargs


_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def _parse_bool(value: Any) -> bool:
    """Accept booleans, 0/1 and the usual YAML-style spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise ValueError(f"enabled must be a boolean, got {value!r}.")


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    return ReadabilityConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
