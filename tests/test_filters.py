"""Test ignore lists."""

import pytest

from ircrelay.core.errors import RelayConfigurationError
from ircrelay.gateway.filters import IgnoreList


class TestIgnoreList:
    def test_exact_names(self):
        ignore = IgnoreList(["ChanServ", "spammer"])
        assert "ChanServ" in ignore
        assert "chanserv" not in ignore
        assert "alice" not in ignore

    def test_regex_entries_case_insensitive(self):
        ignore = IgnoreList(["/^bot/"])
        assert "botty" in ignore
        assert "BOTTY" in ignore
        assert "robot" not in ignore

    def test_blank_entries_skipped(self):
        ignore = IgnoreList(["", "  ", " alice "])
        assert len(ignore) == 1
        assert "alice" in ignore

    def test_pattern_matching_everything_dropped(self):
        ignore = IgnoreList(["/.*/", "/x?/"])
        assert len(ignore) == 0
        assert "anyone" not in ignore

    def test_invalid_pattern_raises(self):
        with pytest.raises(RelayConfigurationError) as exc_info:
            IgnoreList(["/(unclosed/"])
        assert exc_info.value.code == "invalid_ignore_pattern"
        assert exc_info.value.original_error is not None

    def test_lone_slashes_are_names(self):
        ignore = IgnoreList(["//", "/"])
        assert "//" in ignore
        assert "/" in ignore

    def test_non_string_not_contained(self):
        assert 42 not in IgnoreList(["42"])
