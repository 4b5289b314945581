"""Configuration loading utilities for proteoplot figure commands."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, TypeVar

from proteoplot.core.types import ComparisonConfig, RankLogConfig
from proteoplot.plotting.styles import PlotStyle

_T = TypeVar("_T")


def load_json_config(path: str | Path) -> dict[str, Any]:
    """Load and validate a figure config from a JSON file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    if config_path.suffix.lower() != ".json":
        raise ValueError(
            f"Unsupported config format for '{config_path}'. Use a .json config file."
        )

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"Invalid JSON in config '{config_path}' at line {exc.lineno}, "
            f"column {exc.colno}: {exc.msg}"
        ) from exc

    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid config root in '{config_path}': expected JSON object, got {type(data).__name__}."
        )
    return data


def _from_dict(cls: type[_T], section: str, data: dict[str, Any] | None) -> _T:
    if not data:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"Config section '{section}' must be a JSON object.")
    fields = {f.name: f for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - set(fields))
    if unknown:
        raise ValueError(f"Unknown keys in config section '{section}': {unknown}")
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        # JSON arrays arrive as lists; tuple-typed fields stay hashable.
        kwargs[key] = tuple(value) if isinstance(value, list) else value
    return cls(**kwargs)


def rank_log_config_from_dict(data: dict[str, Any] | None) -> RankLogConfig:
    return _from_dict(RankLogConfig, "ranklog", data)


def comparison_config_from_dict(data: dict[str, Any] | None) -> ComparisonConfig:
    return _from_dict(ComparisonConfig, "compare", data)


def plot_style_from_dict(data: dict[str, Any] | None) -> PlotStyle:
    return _from_dict(PlotStyle, "style", data)
