"""Read-only helpers that turn protocol library objects into relay events."""

from ircrelay.adapters.discord_context import discord_message_in, member_lookup, mention_context

__all__ = ["discord_message_in", "member_lookup", "mention_context"]
