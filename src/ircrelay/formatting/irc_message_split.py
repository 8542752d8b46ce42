"""Split relayed text into IRC-sized lines at word boundaries."""

from __future__ import annotations

import re

# str.splitlines also breaks on \x1d/\x1e (italic/strikethrough codes)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _longest_valid_prefix(chunk: bytes) -> bytes:
    """Drop trailing bytes until chunk decodes as UTF-8."""
    while chunk:
        try:
            chunk.decode("utf-8", errors="strict")
            return chunk
        except UnicodeDecodeError:
            chunk = chunk[:-1]
    return chunk


def _split_line(line: str, max_bytes: int) -> list[str]:
    encoded = line.encode("utf-8", errors="replace")
    if len(encoded) <= max_bytes:
        return [line]

    chunks: list[str] = []
    start = 0
    while start < len(encoded):
        chunk = _longest_valid_prefix(encoded[start : start + max_bytes])
        if not chunk:
            # Invalid UTF-8 at start; take one byte (decode will replace)
            chunk = encoded[start : start + 1]
        elif start + len(chunk) < len(encoded):
            # Prefer breaking after the last space in the second half
            last_space = chunk.rfind(b" ")
            if last_space > max_bytes // 2:
                chunk = _longest_valid_prefix(chunk[: last_space + 1]) or chunk
        chunks.append(chunk.decode("utf-8", errors="replace"))
        start += len(chunk)
    return chunks


def split_irc_message(content: str, max_bytes: int = 450) -> list[str]:
    """Split content into IRC lines, each <= max_bytes of UTF-8.

    IRC forbids newlines in a message, so every line of content is sent on its
    own; blank lines are dropped. Long lines break at word boundaries and never
    in the middle of a multi-byte character. A non-positive max_bytes only
    splits on line breaks.
    """
    chunks: list[str] = []
    for line in _LINE_BREAK.split(content):
        if not line.strip():
            continue
        if max_bytes <= 0:
            chunks.append(line)
        else:
            chunks.extend(_split_line(line, max_bytes))
    return chunks
