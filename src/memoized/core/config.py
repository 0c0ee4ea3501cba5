"""Configuration loading and resolution for the example programs."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when configuration is invalid."""


DEFAULT_CONFIG: dict[str, Any] = {
    "fib": {
        "start": 0,
        "end": 20,
    },
    "primes": {
        "start": 0,
    },
    "bench": {
        "repeat": 5,
        "fib_max": 35,
        "huge_n": 20000,
        "primes_max": 1000,
    },
    "recursion_limit": None,
}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries and return a new dictionary."""

    out = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping at root: {p}")
    return data


def resolve_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve configuration from defaults, an optional user file and overrides."""

    resolved = deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        resolved = deep_merge(resolved, load_yaml(config_path))
    if overrides:
        resolved = deep_merge(resolved, overrides)
    _validate(resolved)
    return resolved


def dump_yaml(data: dict[str, Any], out_path: str | Path) -> None:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def _validate(cfg: dict[str, Any]) -> None:
    for section, key in [
        ("fib", "start"),
        ("fib", "end"),
        ("primes", "start"),
        ("bench", "fib_max"),
        ("bench", "huge_n"),
        ("bench", "primes_max"),
    ]:
        _require_int(cfg, section, key, minimum=0)
    _require_int(cfg, "bench", "repeat", minimum=1)

    if cfg["fib"]["end"] < cfg["fib"]["start"]:
        raise ConfigError(
            f"fib.end ({cfg['fib']['end']}) must not be below fib.start ({cfg['fib']['start']})"
        )

    limit = cfg.get("recursion_limit")
    if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool) or limit < 100):
        raise ConfigError(f"recursion_limit must be an integer >= 100 or null, got {limit!r}")


def _require_int(cfg: dict[str, Any], section: str, key: str, minimum: int) -> None:
    block = cfg.get(section)
    if not isinstance(block, dict):
        raise ConfigError(f"Config section '{section}' must be a mapping, got {block!r}")
    value = block.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{section}.{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{section}.{key} must be >= {minimum}, got {value}")
