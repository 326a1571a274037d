"""YAML configuration loading."""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]

from cropcheck.models.config import DEFAULT_SCORING, ScoringConfig, ServiceConfig

_T = TypeVar("_T", ScoringConfig, ServiceConfig)


def _coerce(section: str, key: str, default: Any, value: Any) -> Any:
    """Check an override against the type of the field's default."""
    expected = type(default)
    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if expected is int and isinstance(value, bool):
        raise ValueError(f"Config key {section}.{key} must be int, got bool")
    if not isinstance(value, expected):
        raise ValueError(
            f"Config key {section}.{key} must be {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _apply_overrides(base: _T, section: str, data: Any) -> _T:
    if data is None:
        return base
    if not isinstance(data, dict):
        raise ValueError(f"Config section {section!r} must be a mapping")

    defaults = {f.name: getattr(base, f.name) for f in fields(base)}
    unknown = sorted(str(k) for k in data if k not in defaults)
    if unknown:
        raise ValueError(f"Unknown keys in config section {section!r}: {', '.join(unknown)}")

    overrides = {k: _coerce(section, k, defaults[k], v) for k, v in data.items()}
    return replace(base, **overrides)


def load_config(path: str | Path) -> tuple[ScoringConfig, ServiceConfig]:
    """Load scoring and service settings from a YAML file.

    The file may hold a ``scoring`` and a ``service`` mapping; anything left
    out keeps its default. An empty file yields the defaults.
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return DEFAULT_SCORING, ServiceConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    extra = sorted(str(k) for k in data if k not in ("scoring", "service"))
    if extra:
        raise ValueError(f"Unknown config sections: {', '.join(extra)}")

    scoring = _apply_overrides(DEFAULT_SCORING, "scoring", data.get("scoring"))
    service = _apply_overrides(ServiceConfig(), "service", data.get("service"))
    return scoring, service
