"""Parse IRC control codes into styled text runs."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ircrelay.formatting.control_codes import (
    BOLD,
    COLOR,
    COLOR_PATTERN,
    ITALIC,
    MONOSPACE,
    NO_COLOR,
    RESET,
    REVERSE,
    STRIKETHROUGH,
    UNDERLINE,
)

# Toggle code -> Run field it flips
_TOGGLE_FIELDS = {
    BOLD: "bold",
    MONOSPACE: "monospace",
    ITALIC: "italic",
    STRIKETHROUGH: "strikethrough",
    UNDERLINE: "underline",
}


@dataclass(frozen=True)
class Run:
    """Maximal span of text sharing one cumulative style state."""

    text: str = ""
    bold: bool = False
    monospace: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    reverse: bool = False
    foreground: int = NO_COLOR
    background: int = NO_COLOR


EMPTY_RUN = Run()


@dataclass(frozen=True)
class ColorDirective:
    """Parsed \\x03 directive. size counts the digits/comma consumed after \\x03."""

    foreground: int
    background: int
    size: int


def scan_color_directives(text: str) -> dict[int, ColorDirective]:
    """Map index of every \\x03 in text to its parsed directive."""
    directives: dict[int, ColorDirective] = {}
    for m in COLOR_PATTERN.finditer(text):
        fg, bg = m.group(1), m.group(2)
        directives[m.start()] = ColorDirective(
            foreground=int(fg) if fg is not None else NO_COLOR,
            background=int(bg) if bg is not None else NO_COLOR,
            size=m.end() - m.start() - 1,
        )
    return directives


def _reverse(prev: Run) -> Run:
    """Swap the previous run's colors and flip reverse video."""
    foreground, background = prev.background, prev.foreground
    turning_on = not prev.reverse
    if turning_on and foreground == NO_COLOR:
        foreground = 0
    return replace(prev, foreground=foreground, background=background, reverse=turning_on)


def parse_runs(text: str) -> list[Run]:
    """Split IRC-formatted text into runs in document order.

    Never fails: unknown bytes are text, truncated color directives clear color.
    Empty runs are dropped.
    """
    directives = scan_color_directives(text)
    # Trailing reset flushes the last pending run
    text += RESET

    runs: list[Run] = []
    prev = EMPTY_RUN
    start = 0
    for i, ch in enumerate(text):
        next_start = i + 1
        if ch in _TOGGLE_FIELDS:
            field_name = _TOGGLE_FIELDS[ch]
            current = replace(prev, **{field_name: not getattr(prev, field_name)})
        elif ch == COLOR:
            directive = directives[i]
            current = replace(prev, foreground=directive.foreground, background=directive.background)
            next_start = i + 1 + directive.size
        elif ch == REVERSE:
            current = _reverse(prev)
        elif ch == RESET:
            current = EMPTY_RUN
        else:
            continue

        if i > start:
            runs.append(replace(prev, text=text[start:i]))
        prev = current
        start = next_start
    return runs
