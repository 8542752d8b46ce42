"""Protocol constants."""

from __future__ import annotations

from typing import Literal

ProtocolOrigin = Literal["discord", "irc"]
ORIGINS: tuple[ProtocolOrigin, ...] = ("discord", "irc")

MessageKind = Literal["message", "notice", "action"]

# Upper bound for one relayed IRC line (author prefix included)
DEFAULT_MAX_MESSAGE_LENGTH = 400
