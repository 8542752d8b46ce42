"""IRC formatting control codes."""

from __future__ import annotations

import re

BOLD = "\x02"
COLOR = "\x03"
RESET = "\x0F"
MONOSPACE = "\x11"
REVERSE = "\x16"
ITALIC = "\x1D"
STRIKETHROUGH = "\x1E"
UNDERLINE = "\x1F"

# Codes that flip a single boolean style
TOGGLES = frozenset({BOLD, MONOSPACE, ITALIC, STRIKETHROUGH, UNDERLINE})
ALL_CODES = TOGGLES | {COLOR, REVERSE, RESET}

# \x03 then optional fg (1-2 digits), then optional ",bg" (1-2 digits).
# A comma with no digit after it is not part of the directive.
COLOR_PATTERN = re.compile(r"\x03([0-9]{1,2})?(?:,([0-9]{1,2}))?")

# Marker for "no color set"
NO_COLOR = -1
