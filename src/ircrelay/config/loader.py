"""Config loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ircrelay.core.errors import RelayConfigurationError


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Load config from YAML file. Use SafeLoader. Returns raw dict."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise RelayConfigurationError(
            f"invalid YAML in {path}",
            code="invalid_yaml",
            details={"path": str(path)},
            original_error=exc,
        ) from exc
    if not isinstance(data, dict):
        logger.warning("Config file {} has invalid structure (expected dict)", path)
        return {}
    return data


def load_config_with_env(path: str | Path, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Load .env into the process environment, then config from YAML merged with overrides."""
    from dotenv import load_dotenv

    load_dotenv()
    data = load_config(path)
    if overrides:
        data = _deep_update(data, overrides)
    return data
