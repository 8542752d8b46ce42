"""RGB to IRC palette mapping (role colors -> color directives)."""

from __future__ import annotations

from ircrelay.formatting.control_codes import COLOR

# 256 / 6 rounded up: splits 0-255 into six levels (0-5)
_CUBE_STEP = 43

# Standard 16 IRC colors (mIRC defaults)
IRC_COLORS: tuple[tuple[int, int, int], ...] = (
    (0xFF, 0xFF, 0xFF),  # 0 white
    (0x00, 0x00, 0x00),  # 1 black
    (0x00, 0x00, 0x7F),  # 2 blue
    (0x00, 0x93, 0x00),  # 3 green
    (0xFF, 0x00, 0x00),  # 4 red
    (0x7F, 0x00, 0x00),  # 5 brown
    (0x9C, 0x00, 0x9C),  # 6 magenta
    (0xFC, 0x7F, 0x00),  # 7 orange
    (0xFF, 0xFF, 0x00),  # 8 yellow
    (0x00, 0xFC, 0x00),  # 9 light green
    (0x00, 0x93, 0x93),  # 10 cyan
    (0x00, 0xFF, 0xFF),  # 11 light cyan
    (0x00, 0x00, 0xFC),  # 12 light blue
    (0xFF, 0x00, 0xFF),  # 13 pink
    (0x7F, 0x7F, 0x7F),  # 14 grey
    (0xD2, 0xD2, 0xD2),  # 15 light grey
)


def split_rgb(value: int) -> tuple[int, int, int]:
    """Split a 24-bit 0xRRGGBB integer into channels."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_palette_index(value: int) -> int:
    """Quantize 0xRRGGBB to a 6x6x6 color cube index (0-215)."""
    r, g, b = (channel // _CUBE_STEP for channel in split_rgb(value))
    return 36 * r + 6 * g + b


def nearest_irc_color(value: int) -> int:
    """Closest standard IRC color (0-15) to 0xRRGGBB by squared distance."""
    r, g, b = split_rgb(value)
    return min(
        range(len(IRC_COLORS)),
        key=lambda i: (IRC_COLORS[i][0] - r) ** 2 + (IRC_COLORS[i][1] - g) ** 2 + (IRC_COLORS[i][2] - b) ** 2,
    )


def tint(text: str, value: int | None) -> str:
    """Wrap text in a foreground-only color directive. value None or 0 leaves text as-is."""
    if not value:
        return text
    # Two digits so a leading digit in text is not read as part of the color
    return f"{COLOR}{nearest_irc_color(value):02d}{text}{COLOR}"
