"""Build relay events and mention lookups from discord.py objects (no client calls)."""

from __future__ import annotations

import discord

from ircrelay.config import cfg
from ircrelay.events import DiscordMessage, ReplyTarget
from ircrelay.formatting.mention_resolution import MemberLookup, MentionContext

# Do not resolve these
_SKIP_IDENTIFIERS = frozenset({"everyone", "here"})


def mention_context(message: discord.Message, *, tint_roles: bool = False) -> MentionContext:
    """Collect the users, roles, channels and attachments a message references."""
    roles = {str(role.id): role.name for role in message.role_mentions}
    # Colour value 0 is Discord's "no color"
    role_colors = {str(role.id): role.colour.value for role in message.role_mentions if role.colour.value}
    return MentionContext(
        users={str(user.id): user.display_name for user in message.mentions},
        roles=roles,
        channels={str(channel.id): channel.name for channel in message.channel_mentions},
        role_colors=role_colors,
        attachments=tuple(attachment.url for attachment in message.attachments),
        tint_roles=tint_roles,
    )


def _match_member(member: discord.Member, identifier: str) -> bool:
    """Case-insensitive match: nick, display_name, or name."""
    ident = identifier.lower()
    return bool(
        (member.nick is not None and member.nick.lower() == ident)
        or (member.display_name and member.display_name.lower() == ident)
        or (member.name and member.name.lower() == ident)
    )


def member_lookup(guild: discord.Guild | None) -> MemberLookup:
    """Name -> member ID lookup over the guild's cached members."""

    def lookup(identifier: str) -> str | None:
        if guild is None or identifier.lower() in _SKIP_IDENTIFIERS:
            return None
        member = discord.utils.find(lambda m: _match_member(m, identifier), guild.members)
        return str(member.id) if member else None

    return lookup


def discord_message_in(
    message: discord.Message,
    *,
    replied_to: discord.Message | None = None,
    is_edit: bool = False,
    tint_roles: bool | None = None,
) -> DiscordMessage:
    """Convert a discord.py message (and the message it replies to, if fetched) to a relay event.

    tint_roles defaults to the tint_role_mentions setting.
    """
    if tint_roles is None:
        tint_roles = cfg.tint_role_mentions
    reply_to = None
    if replied_to is not None:
        reply_to = ReplyTarget(
            author_id=str(replied_to.author.id),
            author_name=replied_to.author.display_name,
            content=replied_to.content,
        )
    return DiscordMessage(
        channel_id=str(message.channel.id),
        author_id=str(message.author.id),
        author_name=message.author.display_name,
        content=message.content,
        context=mention_context(message, tint_roles=tint_roles),
        is_edit=is_edit,
        reply_to=reply_to,
    )
