"""Tests for parsing IRC control codes into styled runs."""

from __future__ import annotations

import pytest

from ircrelay.formatting.control_codes import NO_COLOR
from ircrelay.formatting.runs import ColorDirective, Run, parse_runs, scan_color_directives


class TestScanColorDirectives:
    """Test the color directive pre-scan."""

    def test_foreground_and_background(self):
        assert scan_color_directives("\x0301,02text") == {0: ColorDirective(1, 2, 5)}

    def test_no_digits_clears_color(self):
        assert scan_color_directives("\x03text") == {0: ColorDirective(NO_COLOR, NO_COLOR, 0)}

    def test_trailing_comma_not_consumed(self):
        assert scan_color_directives("\x034,text") == {0: ColorDirective(4, NO_COLOR, 1)}

    def test_at_most_two_digits(self):
        assert scan_color_directives("\x03123") == {0: ColorDirective(12, NO_COLOR, 2)}

    def test_background_only(self):
        assert scan_color_directives("\x03,5x") == {0: ColorDirective(NO_COLOR, 5, 2)}

    def test_keys_are_positions(self):
        directives = scan_color_directives("a\x034b\x03c")
        assert set(directives) == {1, 4}
        assert directives[4] == ColorDirective(NO_COLOR, NO_COLOR, 0)

    def test_non_ascii_digits_ignored(self):
        assert scan_color_directives("\x03٣x") == {0: ColorDirective(NO_COLOR, NO_COLOR, 0)}


class TestParseRuns:
    """Test run parsing."""

    def test_empty(self):
        assert parse_runs("") == []

    def test_plain_text_single_run(self):
        assert parse_runs("hello world") == [Run("hello world")]

    def test_color_pair(self):
        assert parse_runs("\x0301,02text") == [Run("text", foreground=1, background=2)]

    def test_color_without_digits(self):
        assert parse_runs("\x03text") == [Run("text")]

    def test_trailing_comma_is_text(self):
        assert parse_runs("\x034,text") == [Run(",text", foreground=4)]

    def test_third_digit_is_text(self):
        assert parse_runs("\x03123") == [Run("3", foreground=12)]

    def test_foreground_only_clears_background(self):
        assert parse_runs("\x034,2a\x035b") == [
            Run("a", foreground=4, background=2),
            Run("b", foreground=5),
        ]

    def test_toggles_are_cumulative(self):
        assert parse_runs("\x02a\x1Db\x02c") == [
            Run("a", bold=True),
            Run("b", bold=True, italic=True),
            Run("c", italic=True),
        ]

    @pytest.mark.parametrize(
        "code,field",
        [
            ("\x02", "bold"),
            ("\x11", "monospace"),
            ("\x1D", "italic"),
            ("\x1E", "strikethrough"),
            ("\x1F", "underline"),
        ],
    )
    def test_each_toggle(self, code, field):
        runs = parse_runs(f"{code}x{code}y")
        assert runs == [Run("x", **{field: True}), Run("y")]

    def test_reset_clears_everything(self):
        assert parse_runs("\x02\x1D\x0304ab\x0Fc") == [
            Run("ab", bold=True, italic=True, foreground=4),
            Run("c"),
        ]

    def test_reverse_without_colors(self):
        assert parse_runs("\x16x") == [Run("x", reverse=True, foreground=0, background=NO_COLOR)]

    def test_reverse_swaps_colors(self):
        assert parse_runs("\x034,2a\x16b") == [
            Run("a", foreground=4, background=2),
            Run("b", reverse=True, foreground=2, background=4),
        ]

    def test_reverse_with_foreground_only(self):
        assert parse_runs("\x034a\x16b") == [
            Run("a", foreground=4),
            Run("b", reverse=True, foreground=0, background=4),
        ]

    def test_reverse_off_does_not_coerce(self):
        assert parse_runs("\x16a\x16b") == [
            Run("a", reverse=True, foreground=0),
            Run("b", foreground=NO_COLOR, background=0),
        ]

    def test_empty_toggle_pair_dropped(self):
        assert parse_runs("\x02\x02x") == [Run("x")]

    def test_no_empty_runs(self):
        runs = parse_runs("\x02\x1D\x03\x16\x0F\x11")
        assert runs == []

    def test_color_at_end_of_string(self):
        assert parse_runs("abc\x03") == [Run("abc")]

    def test_unknown_control_bytes_are_text(self):
        assert parse_runs("\x04a\x07") == [Run("\x04a\x07")]

    def test_runs_in_document_order(self):
        runs = parse_runs("one\x02two\x02three")
        assert [r.text for r in runs] == ["one", "two", "three"]

    def test_runs_are_immutable(self):
        run = parse_runs("x")[0]
        with pytest.raises(AttributeError):
            run.bold = True  # type: ignore[misc]
