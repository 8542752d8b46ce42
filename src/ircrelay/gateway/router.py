"""Channel router: Discord channel ID <-> IRC channel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger


@dataclass
class ChannelMapping:
    """One channel mapping: Discord <-> IRC."""

    discord_channel_id: str
    irc_channel: str


class ChannelRouter:
    """Routes messages by channel mapping. Uses config mappings."""

    def __init__(self) -> None:
        self._by_discord: dict[str, ChannelMapping] = {}
        self._by_irc: dict[str, ChannelMapping] = {}

    def load_from_config(self, config: dict[str, Any]) -> None:
        """Load mappings from config dict (from config.mappings)."""
        raw = config.get("mappings")
        by_discord: dict[str, ChannelMapping] = {}
        by_irc: dict[str, ChannelMapping] = {}
        if not isinstance(raw, list):
            logger.warning("Router: no mappings list in config; using empty mappings")
            raw = []

        skipped = 0
        for item in raw:
            if not isinstance(item, dict):
                skipped += 1
                continue
            dc_id = str(item.get("discord_channel_id", ""))
            irc_channel = str(item.get("irc_channel", ""))
            if not dc_id or not irc_channel:
                skipped += 1
                continue
            mapping = ChannelMapping(discord_channel_id=dc_id, irc_channel=irc_channel)
            by_discord[dc_id] = mapping
            # IRC channel names are case-insensitive
            by_irc[irc_channel.lower()] = mapping

        self._by_discord = by_discord
        self._by_irc = by_irc
        logger.info(
            "Router: loaded {} mappings{}",
            len(by_discord),
            f", skipped {skipped}" if skipped else "",
        )

    def get_mapping_for_discord(self, discord_channel_id: str) -> ChannelMapping | None:
        """Get mapping for a Discord channel ID."""
        return self._by_discord.get(discord_channel_id)

    def get_mapping_for_irc(self, channel: str) -> ChannelMapping | None:
        """Get mapping for an IRC channel."""
        return self._by_irc.get(channel.lower())

    def all_mappings(self) -> list[ChannelMapping]:
        """Return all channel mappings."""
        return list(self._by_discord.values())
