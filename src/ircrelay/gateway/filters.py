"""Ignore lists: users whose messages are never relayed."""

from __future__ import annotations

import re
from collections.abc import Iterable

from loguru import logger

from ircrelay.core.errors import RelayConfigurationError


class IgnoreList:
    """Exact names plus /regex/ entries (regexes are case-insensitive)."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._names: set[str] = set()
        self._patterns: list[re.Pattern[str]] = []
        for entry in entries:
            entry = entry.strip()
            if not entry:
                continue
            if len(entry) > 2 and entry.startswith("/") and entry.endswith("/"):
                self._add_pattern(entry[1:-1])
            else:
                self._names.add(entry)

    def _add_pattern(self, source: str) -> None:
        try:
            pattern = re.compile(source, re.IGNORECASE)
        except re.error as exc:
            raise RelayConfigurationError(
                f"invalid ignore pattern /{source}/",
                code="invalid_ignore_pattern",
                details={"pattern": source},
                original_error=exc,
            ) from exc
        if pattern.search(""):
            # Would match every user
            logger.warning("Ignoring ignore-list pattern /{}/: matches empty names", source)
            return
        self._patterns.append(pattern)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name in self._names or any(p.search(name) for p in self._patterns)

    def __len__(self) -> int:
        return len(self._names) + len(self._patterns)
