"""Relay: inbound IRC/Discord messages -> outbound lines for the other side."""

from __future__ import annotations

from loguru import logger

from ircrelay.config import Config
from ircrelay.events import DiscordMessage, IrcMessage, MessageOut, ReplyTarget
from ircrelay.formatting.discord_to_irc import discord_to_irc
from ircrelay.formatting.irc_message_split import split_irc_message
from ircrelay.formatting.irc_to_discord import irc_to_discord
from ircrelay.formatting.mention_resolution import MemberLookup, resolve_irc_mentions
from ircrelay.gateway.filters import IgnoreList
from ircrelay.gateway.router import ChannelRouter

# Room for " [n/m]" between author and chunk
_NUMBERING_OVERHEAD = 5


def _format_irc_body(msg: IrcMessage, lookup: MemberLookup | None) -> str:
    content = msg.content
    if msg.kind == "notice":
        # Notices are often bot output full of literal asterisks
        content = content.replace("*", "\\*")
    body = resolve_irc_mentions(irc_to_discord(content), lookup)
    if msg.kind == "action":
        return f"_**{msg.nick}** {body}_"
    if msg.kind == "notice":
        return f"<{msg.nick}> NOTICE: {body}"
    return f"<{msg.nick}> {body}"


class Relay:
    """Turns inbound messages into outbound lines. No protocol client coupling."""

    def __init__(self, router: ChannelRouter, config: Config) -> None:
        self._router = router
        self._config = config
        self._irc_ignore = IgnoreList(config.ignore_irc)
        self._discord_ignore = IgnoreList(config.ignore_discord)

    def from_irc(self, msg: IrcMessage, lookup: MemberLookup | None = None) -> MessageOut | None:
        """Format an IRC message for Discord. None when it should not be relayed."""
        own_nick = self._config.irc_nickname
        if own_nick and msg.nick.lower() == own_nick.lower():
            return None
        if msg.nick in self._irc_ignore:
            logger.debug("Relay: ignoring IRC user {}", msg.nick)
            return None

        mapping = self._router.get_mapping_for_irc(msg.channel)
        if not mapping:
            logger.debug("Relay: no mapping for IRC channel {}", msg.channel)
            return None

        logger.info("Relay: irc -> discord channel={}", mapping.discord_channel_id)
        return MessageOut(
            target_origin="discord",
            channel_id=mapping.discord_channel_id,
            content=_format_irc_body(msg, lookup),
        )

    def from_discord(self, msg: DiscordMessage) -> list[MessageOut]:
        """Format a Discord message as one or more IRC lines."""
        if msg.author_id == self._config.discord_bot_user_id:
            return []
        if msg.author_name in self._discord_ignore:
            logger.debug("Relay: ignoring Discord user {}", msg.author_name)
            return []
        if msg.is_edit and not self._config.include_edited:
            return []

        mapping = self._router.get_mapping_for_discord(msg.channel_id)
        if not mapping:
            logger.debug("Relay: no mapping for Discord channel {}", msg.channel_id)
            return []

        author = self._author_prefix(msg)
        author_bytes = len(author.encode("utf-8"))
        # At least one byte per chunk, however long the author prefix
        max_bytes = max(self._config.max_message_length - author_bytes - _NUMBERING_OVERHEAD, 1)
        chunks = split_irc_message(discord_to_irc(msg.content, msg.context), max_bytes)

        logger.info("Relay: discord -> irc channel={} lines={}", mapping.irc_channel, len(chunks))
        out: list[MessageOut] = []
        for n, chunk in enumerate(chunks, start=1):
            numbering = f" [{n}/{len(chunks)}]" if len(chunks) > 1 else ""
            out.append(
                MessageOut(
                    target_origin="irc",
                    channel_id=mapping.irc_channel,
                    content=f"{author}{numbering} {chunk}",
                )
            )
        return out

    def _author_prefix(self, msg: DiscordMessage) -> str:
        label = msg.author_name
        if msg.reply_to is not None:
            replied = self._replied_author(msg.reply_to)
            if replied:
                label = f"{label}, replying to {replied}"
        prefix = f"<{label}>"
        if msg.is_edit:
            prefix += " (edited)"
        return prefix

    def _replied_author(self, reply: ReplyTarget) -> str | None:
        """Name of the replied-to user; for relayed lines, the IRC nick in "<nick> text"."""
        if reply.author_id != self._config.discord_bot_user_id:
            return reply.author_name
        parts = reply.content.split(" ")
        if len(parts) > 1 and parts[0].startswith("<") and parts[0].endswith(">"):
            return parts[0][1:-1]
        return None
