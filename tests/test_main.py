"""Tests for ircrelay.__main__ entrypoint functions."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest

from ircrelay.__main__ import convert, decode_escapes, encode_escapes, main, setup_logging

# ---------------------------------------------------------------------------
# setup_logging
# ---------------------------------------------------------------------------


class TestSetupLogging:
    def test_removes_default_handler_and_adds_stderr(self, monkeypatch):
        """setup_logging configures loguru with the correct level."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        with patch("ircrelay.__main__.logger") as mock_logger:
            setup_logging(verbose=False)
            mock_logger.remove.assert_called_once()
            mock_logger.add.assert_called_once()
            assert mock_logger.add.call_args[1]["level"] == "WARNING"

    def test_verbose_sets_debug_level(self):
        with patch("ircrelay.__main__.logger") as mock_logger:
            setup_logging(verbose=True)
            assert mock_logger.add.call_args[1]["level"] == "DEBUG"

    def test_log_level_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "info")
        with patch("ircrelay.__main__.logger") as mock_logger:
            setup_logging()
            assert mock_logger.add.call_args[1]["level"] == "INFO"

    def test_format_includes_time_and_level(self):
        with patch("ircrelay.__main__.logger") as mock_logger:
            setup_logging()
            fmt = mock_logger.add.call_args[1]["format"]
            assert "{time:" in fmt
            assert "{level:" in fmt
            assert "{message}" in fmt


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


class TestEscapes:
    def test_decode(self):
        assert decode_escapes(r"\x02bold\x02 \x0304red") == "\x02bold\x02 \x0304red"

    def test_decode_leaves_other_backslashes(self):
        assert decode_escapes(r"a\*b \xZZ") == r"a\*b \xZZ"

    def test_encode(self):
        assert encode_escapes("\x02bold\x1d") == r"\x02bold\x1d"


class TestConvert:
    def test_irc_to_discord(self):
        assert convert("\x02hi\x02", "irc-to-discord", 400) == ["**hi**"]

    def test_discord_to_irc_splits_lines(self):
        assert convert("**a**\nb", "discord-to-irc", 400) == ["\x02a\x02", "b"]


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    def test_text_arguments(self, capsys):
        main(["--escapes", "irc-to-discord", r"\x02Hello\x02", r"\x1dworld\x1d"])
        assert capsys.readouterr().out == "**Hello** *world*\n"

    def test_discord_to_irc_with_escapes(self, capsys):
        main(["-e", "discord-to-irc", "**bold** and _ital_"])
        assert capsys.readouterr().out == "\\x02bold\\x02 and \\x1dital\\x1d\n"

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("\x02a\x02\nplain\n"))
        main(["irc-to-discord"])
        assert capsys.readouterr().out == "**a**\nplain\n"

    def test_missing_config_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.yaml"), "irc-to-discord", "x"])
        assert exc_info.value.code == 1

    def test_invalid_config_exits(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("max_message_length: 0\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path), "irc-to-discord", "x"])
        assert exc_info.value.code == 1

    def test_config_limits_line_length(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("max_message_length: 10\n")
        main(["--config", str(path), "discord-to-irc", "aaaaaa bbbbb"])
        assert capsys.readouterr().out == "aaaaaa \nbbbbb\n"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out
