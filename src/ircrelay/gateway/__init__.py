"""Gateway: channel routing, ignore lists, relay."""

from ircrelay.gateway.filters import IgnoreList
from ircrelay.gateway.relay import Relay
from ircrelay.gateway.router import ChannelMapping, ChannelRouter

__all__ = ["ChannelMapping", "ChannelRouter", "IgnoreList", "Relay"]
