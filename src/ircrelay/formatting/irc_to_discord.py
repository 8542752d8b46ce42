"""Convert IRC control codes to Discord markdown."""

from __future__ import annotations

from collections.abc import Sequence

from ircrelay.formatting.control_codes import NO_COLOR
from ircrelay.formatting.runs import EMPTY_RUN, Run, parse_runs

ITALIC_MD = "*"
BOLD_MD = "**"
UNDERLINE_MD = "__"
STRIKETHROUGH_MD = "~~"
MONOSPACE_MD = "`"
SPOILER_MD = "||"


def _is_italic(run: Run) -> bool:
    # Many IRC clients use reverse video for emphasis
    return run.italic or run.reverse


def _is_spoiler(run: Run) -> bool:
    return run.foreground != NO_COLOR and run.foreground == run.background


def _styles(run: Run) -> tuple[tuple[bool, str], ...]:
    """Style flags with their delimiter, in opening order."""
    return (
        (_is_italic(run), ITALIC_MD),
        (run.bold, BOLD_MD),
        (run.underline, UNDERLINE_MD),
        (run.strikethrough, STRIKETHROUGH_MD),
        (run.monospace, MONOSPACE_MD),
    )


def render_runs(runs: Sequence[Run]) -> str:
    """Render runs as markdown by diffing each run's style against the previous one.

    Openings are emitted italic-first, closings in reverse so delimiters nest.
    Spoiler (fg == bg) is opened after and closed after the other styles.
    """
    parts: list[str] = []
    for i in range(len(runs) + 1):
        run = runs[i] if i < len(runs) else EMPTY_RUN
        prev = runs[i - 1] if i > 0 else EMPTY_RUN
        prev_styles, cur_styles = _styles(prev), _styles(run)
        prev_spoiler, spoiler = _is_spoiler(prev), _is_spoiler(run)

        for (was_on, md), (is_on, _) in zip(prev_styles, cur_styles):
            if is_on and not was_on:
                parts.append(md)
        if spoiler and not prev_spoiler:
            parts.append(SPOILER_MD)

        for (was_on, md), (is_on, _) in reversed(list(zip(prev_styles, cur_styles))):
            if was_on and not is_on:
                parts.append(md)
        if prev_spoiler and not spoiler:
            parts.append(SPOILER_MD)

        parts.append(run.text)
    return "".join(parts)


def irc_to_discord(content: str) -> str:
    """Convert IRC formatting to Discord markdown."""
    if not content:
        return content
    return render_runs(parse_runs(content))
