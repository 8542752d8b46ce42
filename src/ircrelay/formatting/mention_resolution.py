"""Rewrite user/role/channel mentions between Discord and IRC syntax."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from ircrelay.formatting.palette import tint

# Name -> Discord user ID, or None when nobody matches
MemberLookup = Callable[[str], str | None]

_USER_MENTION = re.compile(r"<@!?(\d+)>")
_ROLE_MENTION = re.compile(r"<@&(\d+)>")
_CHANNEL_MENTION = re.compile(r"<#(\d+)>")

# @identifier up to whitespace, @, # or a backtick
_AT_PATTERN = re.compile(r"@([^\s@#`]+)")
# IRC addressing convention: "nick: hello" / "nick, hello" at start of line
_ADDRESS_PATTERN = re.compile(r"([^\s:,@`<>]+)([:,])(?=\s|$)")
# Mass pings: never resolved, wrapped in backticks so Discord shows them inert
_MASS_MENTIONS = ("everyone", "here")
_TRAILING_PUNCTUATION = ":,.!?;"


@dataclass(frozen=True)
class MentionContext:
    """Directory entries referenced by one Discord message."""

    users: Mapping[str, str] = field(default_factory=dict)
    roles: Mapping[str, str] = field(default_factory=dict)
    channels: Mapping[str, str] = field(default_factory=dict)
    role_colors: Mapping[str, int] = field(default_factory=dict)
    attachments: tuple[str, ...] = ()
    tint_roles: bool = False


EMPTY_CONTEXT = MentionContext()


def replace_discord_mentions(content: str, context: MentionContext) -> str:
    """Replace <@id>, <@&id>, <#id> with @name / @role / #channel.

    Unknown IDs are left as-is.
    """

    def user(m: re.Match[str]) -> str:
        name = context.users.get(m.group(1))
        return f"@{name}" if name is not None else m.group(0)

    def role(m: re.Match[str]) -> str:
        name = context.roles.get(m.group(1))
        if name is None:
            return m.group(0)
        if context.tint_roles:
            return tint(f"@{name}", context.role_colors.get(m.group(1)))
        return f"@{name}"

    def channel(m: re.Match[str]) -> str:
        name = context.channels.get(m.group(1))
        return f"#{name}" if name is not None else m.group(0)

    content = _USER_MENTION.sub(user, content)
    content = _ROLE_MENTION.sub(role, content)
    return _CHANNEL_MENTION.sub(channel, content)


def _split_identifier(identifier: str) -> tuple[str, str]:
    """Separate trailing punctuation ("alice:" -> "alice", ":")."""
    stripped = identifier.rstrip(_TRAILING_PUNCTUATION)
    return stripped, identifier[len(stripped) :]


def _resolve_at(identifier: str, lookup: MemberLookup) -> str | None:
    name, tail = _split_identifier(identifier)
    if not name:
        return None
    user_id = lookup(name)
    return f"<@{user_id}>{tail}" if user_id else None


def _skip_code(text: str, i: int) -> int:
    """Return index just past the inline code or code block starting at text[i]."""
    if text[i : i + 3] == "```":
        end = text.find("```", i + 3)
        return len(text) if end == -1 else end + 3
    end = text.find("`", i + 1)
    return len(text) if end == -1 else end + 1


def resolve_irc_mentions(content: str, lookup: MemberLookup | None) -> str:
    """Resolve @nick (and a leading "nick:" address) to Discord <@userId>.

    @everyone/@here are wrapped in backticks. Nothing inside backticks is touched.
    Names the lookup does not know stay as typed.
    """
    if not content:
        return content

    result_parts: list[str] = []
    i = 0
    if lookup is not None:
        match = _ADDRESS_PATTERN.match(content)
        if match:
            user_id = lookup(match.group(1))
            if user_id:
                result_parts.append(f"<@{user_id}>{match.group(2)}")
                i = match.end()

    while i < len(content):
        if content[i] == "`":
            end = _skip_code(content, i)
            result_parts.append(content[i:end])
            i = end
            continue
        match = _AT_PATTERN.match(content, i)
        if match:
            identifier = match.group(1)
            if _split_identifier(identifier)[0].lower() in _MASS_MENTIONS:
                result_parts.append(f"`{match.group(0)}`")
            else:
                resolved = _resolve_at(identifier, lookup) if lookup is not None else None
                result_parts.append(resolved or match.group(0))
            i = match.end()
            continue
        result_parts.append(content[i])
        i += 1
    return "".join(result_parts)
