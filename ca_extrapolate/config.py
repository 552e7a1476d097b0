from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError


@dataclass
class ExtrapolationConfig:
    confidence: int = 1


@dataclass
class RunConfig:
    name: str = "default"
    input_path: str = "input.txt"
    generations: list[int] = field(default_factory=lambda: [20, 50_000_000_000])
    direct_limit: int = 1_000
    log_level: str = "WARNING"
    extrapolation: ExtrapolationConfig = field(default_factory=ExtrapolationConfig)


def _deep_update(target: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
    return target


def _build(cls, section: str, values: dict[str, Any]):
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"unknown {section} config keys: {', '.join(unknown)}")
    return cls(**values)


def build_run_config(raw: dict[str, Any] | None = None, overrides: dict[str, Any] | None = None) -> RunConfig:
    base = asdict(RunConfig())
    if raw:
        _deep_update(base, raw)
    if overrides:
        _deep_update(base, overrides)

    extrapolation = _build(ExtrapolationConfig, "extrapolation", base.pop("extrapolation", None) or {})
    cfg = _build(RunConfig, "run", base)
    cfg.extrapolation = extrapolation
    if isinstance(cfg.generations, int):
        cfg.generations = [cfg.generations]
    cfg.generations = [int(n) for n in cfg.generations]
    if any(n < 0 for n in cfg.generations):
        raise ConfigError("generations must be >= 0")
    if not isinstance(logging.getLevelName(str(cfg.log_level).upper()), int):
        raise ConfigError(f"unknown log_level: {cfg.log_level}")
    return cfg


def load_run_config(path: str | Path, overrides: dict[str, Any] | None = None) -> RunConfig:
    raw = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"run config {path} must be a mapping")
    return build_run_config(raw, overrides)


def save_run_config(config: RunConfig, path: str | Path) -> None:
    payload = asdict(config)
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Path(path).write_text(yaml.safe_dump(payload, sort_keys=False))
