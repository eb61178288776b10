"""Wizard configuration: YAML file plus SHOWCASE_WIZARD_* environment overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

ENV_PREFIX = "SHOWCASE_WIZARD_"


@dataclass
class WizardConfig:
    connect_timeout: float = 3.0
    read_timeout: float = 30.0
    user_agent: str = "showcase-wizard"
    accept_language: str = "en"
    log_level: str = "INFO"


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, float):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid config value for {name}: {value!r}") from e
    return str(value)


def load_config(path: str | Path | None = None, environ: dict[str, str] | None = None) -> WizardConfig:
    env = os.environ if environ is None else environ
    defaults = WizardConfig()
    known = {f.name for f in fields(WizardConfig)}
    values: dict[str, Any] = {}

    if path is not None:
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config {path}: expected a mapping")
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        values.update(raw)

    for name in known:
        env_value = env.get(ENV_PREFIX + name.upper())
        if env_value is not None:
            values[name] = env_value

    return WizardConfig(**{
        name: _coerce(name, value, getattr(defaults, name)) for name, value in values.items()
    })
