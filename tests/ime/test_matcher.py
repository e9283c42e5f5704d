"""Tests for the progress matcher."""
import pytest

from kanatype.ime import MatchState, common_prefix_length, convert, match


class TestMatch:
    """Test matching typed kana against a target reading."""

    def test_complete(self):
        assert match("がっこう", "がっこう") == MatchState(matched_count=4, is_complete=True)

    def test_partial(self):
        assert match("がっ", "がっこう") == MatchState(matched_count=2, is_complete=False)

    def test_mismatch_stops_common_prefix(self):
        """つ is not っ, so only が matches."""
        state = match("がつ", "がっこう")
        assert state.matched_count == 1
        assert not state.is_complete

    def test_nothing_typed(self):
        assert match("", "がっこう") == MatchState(0, False)

    def test_overshoot_is_not_complete(self):
        """Typing past the end keeps the full count but is not a completion."""
        state = match("がっこうう", "がっこう")
        assert state.matched_count == 4
        assert not state.is_complete

    @pytest.mark.parametrize("typed", ["", "あ", "anything"])
    def test_empty_target_never_completes(self, typed):
        assert match(typed, "") == MatchState(matched_count=0, is_complete=False)

    def test_counts_code_points(self):
        """Characters outside the BMP count once."""
        target = "𠮟る"
        assert match("𠮟", target).matched_count == 1
        assert match(target, target) == MatchState(2, True)

    def test_deterministic(self):
        assert match("がっ", "がっこう") == match("がっ", "がっこう")

    def test_with_transliterator_output(self, index):
        target = "がっこう"
        assert match(convert("ga", index), target).matched_count == 1
        assert match(convert("gakk", index), target).matched_count == 2
        assert match(convert("gakkou", index), target).is_complete

    def test_progress(self):
        assert match("がっ", "がっこう").progress("がっこう") == 0.5
        assert match("", "").progress("") == 0.0


class TestCommonPrefixLength:

    @pytest.mark.parametrize("a, b, expected", [
        ("", "", 0),
        ("abc", "abd", 2),
        ("abc", "abc", 3),
        ("abc", "ab", 2),
        ("x", "abc", 0),
    ])
    def test_lengths(self, a, b, expected):
        assert common_prefix_length(a, b) == expected
