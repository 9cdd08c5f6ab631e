"""Configuration loading utilities for choicealign."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_INT_KEYS = {"api_port", "workers", "max_token_distance"}
_STR_KEYS = {"log_level", "api_host", "locale"}
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    locale: str
    max_token_distance: int


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("CHOICEALIGN_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 1,
        "locale": "en-us",
        "max_token_distance": 2,
    }
    file_values = _load_profile(profile_path)
    defaults.update(file_values)

    log_level = os.getenv("CHOICEALIGN_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("CHOICEALIGN_API_HOST", str(defaults["api_host"]))
    api_port = _parse_int(
        "CHOICEALIGN_API_PORT", os.getenv("CHOICEALIGN_API_PORT"), defaults["api_port"]
    )
    workers = _parse_int(
        "CHOICEALIGN_WORKERS", os.getenv("CHOICEALIGN_WORKERS"), defaults["workers"]
    )
    locale = os.getenv("CHOICEALIGN_LOCALE", str(defaults["locale"]))
    max_token_distance = _parse_int(
        "CHOICEALIGN_MAX_TOKEN_DISTANCE",
        os.getenv("CHOICEALIGN_MAX_TOKEN_DISTANCE"),
        defaults["max_token_distance"],
    )
    if max_token_distance < 0:
        raise ValueError(f"max_token_distance must be >= 0, got {max_token_distance!r}")

    return AppConfig(
        env=env,
        log_level=log_level,
        api_host=api_host,
        api_port=api_port,
        workers=workers,
        locale=locale,
        max_token_distance=max_token_distance,
    )


def configure_logging(log_level: str) -> None:
    """Configure root logging for the CLI and API processes."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {log_level!r}")
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int] = {}
    for key, raw in payload.items():
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key in _STR_KEYS:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_int(name: str, raw: str | None, default: str | int) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
