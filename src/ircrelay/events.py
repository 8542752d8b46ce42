"""Event types passed between protocol clients and the relay."""

from __future__ import annotations

from dataclasses import dataclass, field

from ircrelay.core.constants import MessageKind, ProtocolOrigin
from ircrelay.formatting.mention_resolution import EMPTY_CONTEXT, MentionContext


@dataclass
class IrcMessage:
    """Inbound IRC channel message, notice or CTCP ACTION."""

    channel: str
    nick: str
    content: str
    kind: MessageKind = "message"


@dataclass
class ReplyTarget:
    """The Discord message a reply points at."""

    author_id: str
    author_name: str
    content: str = ""


@dataclass
class DiscordMessage:
    """Inbound Discord message (created or edited)."""

    channel_id: str
    author_id: str
    author_name: str
    content: str
    context: MentionContext = field(default=EMPTY_CONTEXT)
    is_edit: bool = False
    reply_to: ReplyTarget | None = None


@dataclass
class MessageOut:
    """Outbound line to send to the target protocol."""

    target_origin: ProtocolOrigin
    channel_id: str
    content: str
