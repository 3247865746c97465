"""Configuration utilities for the demonstration harness."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class TimingConfig:
    """Whether the harness times its run, and the label the total is reported under."""

    enabled: bool = True
    label: str = "Execution time"


@dataclass
class DemoConfig:
    """Demonstrations to run; an empty list selects all of them."""

    names: List[str] = field(default_factory=list)


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    demos: DemoConfig = field(default_factory=DemoConfig)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{path} must contain a mapping")
    return data


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, Mapping):
        raise TypeError(f"'{name}' section must be a mapping")
    return value


def load_app_config(path: Optional[Path] = None) -> AppConfig:
    """Load :class:`AppConfig` from ``path``, or return the defaults."""

    if path is None:
        return AppConfig()

    raw = load_yaml(Path(path))
    logging_cfg = _section(raw, "logging")
    timing = _section(raw, "timing")
    demos = _section(raw, "demos")

    names = demos.get("names") or []
    if isinstance(names, str):
        names = [names]

    return AppConfig(
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        timing=TimingConfig(
            enabled=bool(timing.get("enabled", True)),
            label=str(timing.get("label", "Execution time")),
        ),
        demos=DemoConfig(names=[str(name) for name in names]),
    )


__all__ = [
    "LoggingConfig",
    "TimingConfig",
    "DemoConfig",
    "AppConfig",
    "load_yaml",
    "load_app_config",
]
