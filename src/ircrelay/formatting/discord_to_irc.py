"""Convert Discord markdown to IRC control codes."""

from __future__ import annotations

import re

from ircrelay.formatting.control_codes import ALL_CODES, BOLD, ITALIC, STRIKETHROUGH, UNDERLINE
from ircrelay.formatting.mention_resolution import EMPTY_CONTEXT, MentionContext, replace_discord_mentions

# Order matters: ** before *, and __ before _ (see markdown_to_irc)
_PAIRED_PASSES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.+?)\*\*"), BOLD),
    (re.compile(r"\*(.+?)\*"), ITALIC),
    (re.compile(r"__(.+?)__"), UNDERLINE),
    (re.compile(r"~~(.+?)~~"), STRIKETHROUGH),
)
_UNDERSCORE_ITALIC = re.compile(r"_(.+?)_")

# <:name:123> / <a:name:123> -> :name:
_CUSTOM_EMOJI = re.compile(r"<a?(:[A-Za-z0-9_\-]+:)[0-9]+>")
# </command:123> / </command sub:123> -> /command sub
_SLASH_COMMAND = re.compile(r"</([^:<>]+)(?::[0-9]*)?>")

# Characters that may surround a standalone _italic_ span
_WORD_DELIMITERS = frozenset(" \t\r\n<>()[]{}\"'") | ALL_CODES


def is_within_url(text: str, start: int, end: int) -> bool:
    """True if text[start:end] is glued to surrounding non-delimiter characters.

    Only the single characters just before and just after the span are checked,
    e.g. the underscores in http://a_b_c.com are inside a URL.
    """
    before_ok = start == 0 or text[start - 1] in _WORD_DELIMITERS
    after_ok = end >= len(text) or text[end] in _WORD_DELIMITERS
    return not (before_ok and after_ok)


def _underscore_italic(text: str) -> str:
    def repl(m: re.Match[str]) -> str:
        if is_within_url(text, m.start(), m.end()):
            return m.group(0)
        return f"{ITALIC}{m.group(1)}{ITALIC}"

    return _UNDERSCORE_ITALIC.sub(repl, text)


def markdown_to_irc(content: str) -> str:
    """Replace paired markdown delimiters with IRC control codes.

    One level per pass, no nesting within a pass.
    """
    for pattern, code in _PAIRED_PASSES:
        content = pattern.sub(lambda m, code=code: f"{code}{m.group(1)}{code}", content)
    content = _CUSTOM_EMOJI.sub(r"\1", content)
    return _underscore_italic(content)


def discord_to_irc(content: str, context: MentionContext = EMPTY_CONTEXT) -> str:
    """Convert a Discord message body for IRC.

    Formatting, custom emoji, mentions and slash-command tags are rewritten;
    attachment URLs are appended one per line.
    """
    content = markdown_to_irc(content)
    content = replace_discord_mentions(content, context)
    content = _SLASH_COMMAND.sub(lambda m: f"/{m.group(1)}", content)
    if context.attachments:
        content = "\n".join([content, *context.attachments] if content else context.attachments)
    return content
