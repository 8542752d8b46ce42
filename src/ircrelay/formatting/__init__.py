"""Message formatting and splitting for IRC <-> Discord relaying."""

from ircrelay.formatting.discord_to_irc import discord_to_irc, markdown_to_irc
from ircrelay.formatting.irc_message_split import split_irc_message
from ircrelay.formatting.irc_to_discord import irc_to_discord, render_runs
from ircrelay.formatting.mention_resolution import MentionContext, replace_discord_mentions, resolve_irc_mentions
from ircrelay.formatting.runs import Run, parse_runs

__all__ = [
    "MentionContext",
    "Run",
    "discord_to_irc",
    "irc_to_discord",
    "markdown_to_irc",
    "parse_runs",
    "render_runs",
    "replace_discord_mentions",
    "resolve_irc_mentions",
    "split_irc_message",
]
