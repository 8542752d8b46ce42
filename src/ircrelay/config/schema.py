"""Config schema and accessor."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from ircrelay.core.constants import DEFAULT_MAX_MESSAGE_LENGTH
from ircrelay.core.errors import RelayConfigurationError

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = (
    "RELAY_INCLUDE_EDITED",
    "RELAY_TINT_ROLE_MENTIONS",
)


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def _parse_bool_env(val: str) -> bool | None:
    """Parse env string to bool; None if not a recognized bool."""
    v = val.lower()
    if v in ("1", "true", "yes"):
        return True
    if v in ("0", "false", "no"):
        return False
    return None


def _str_list(val: Any) -> list[str]:
    if isinstance(val, list):
        return [str(v) for v in val]
    if isinstance(val, str):
        # "alice, bob" shorthand
        return [v.strip() for v in val.split(",") if v.strip()]
    return []


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Config reloaded: {} mappings", len(self.mappings))

    def _validate(self) -> None:
        """Validate config structure; raise RelayConfigurationError on failure."""
        mappings = self._data.get("mappings")
        if mappings is not None and not isinstance(mappings, list):
            raise RelayConfigurationError(
                "mappings must be a list",
                code="invalid_mappings",
                details={"type": type(mappings).__name__},
            )
        for i, item in enumerate(self.mappings):
            if not isinstance(item, dict):
                raise RelayConfigurationError(
                    f"mappings[{i}] must be a dict",
                    code="invalid_mapping_item",
                    details={"index": i},
                )
            for key in ("discord_channel_id", "irc_channel"):
                if not item.get(key):
                    raise RelayConfigurationError(
                        f"mappings[{i}] missing {key}",
                        code=f"missing_{key}",
                        details={"index": i},
                    )
        try:
            max_len = int(self._data.get("max_message_length", DEFAULT_MAX_MESSAGE_LENGTH))
        except (TypeError, ValueError) as exc:
            raise RelayConfigurationError(
                "max_message_length must be an integer",
                code="invalid_max_message_length",
                original_error=exc,
            ) from exc
        if max_len <= 0:
            raise RelayConfigurationError(
                "max_message_length must be positive",
                code="invalid_max_message_length",
                details={"value": max_len},
            )

    @property
    def raw(self) -> dict[str, Any]:
        """Raw config dict for router."""
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def mappings(self) -> list[dict[str, Any]]:
        """Channel mapping list."""
        m = self._data.get("mappings")
        return m if isinstance(m, list) else []

    @property
    def irc_nickname(self) -> str:
        return str(self.get("irc.nickname", ""))

    @property
    def discord_bot_user_id(self) -> str:
        return str(self.get("discord.bot_user_id", ""))

    @property
    def include_edited(self) -> bool:
        parsed = _parse_bool_env(self._env.get("RELAY_INCLUDE_EDITED", ""))
        if parsed is not None:
            return parsed
        return bool(self.get("discord.include_edited", False))

    @property
    def tint_role_mentions(self) -> bool:
        parsed = _parse_bool_env(self._env.get("RELAY_TINT_ROLE_MENTIONS", ""))
        if parsed is not None:
            return parsed
        return bool(self._data.get("tint_role_mentions", False))

    @property
    def max_message_length(self) -> int:
        return int(self._data.get("max_message_length", DEFAULT_MAX_MESSAGE_LENGTH))

    @property
    def ignore_irc(self) -> list[str]:
        return _str_list(self.get("ignore.irc"))

    @property
    def ignore_discord(self) -> list[str]:
        return _str_list(self.get("ignore.discord"))


cfg: Config = Config({})
