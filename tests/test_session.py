"""Tests for the practice session consumer of the matcher."""
import pytest

from kanatype.ime import MatchState
from kanatype.session import PracticeSession, SessionStats
from kanatype.sets import WordItem


@pytest.fixture
def session(sample_words, index):
    return PracticeSession(sample_words, index=index)


def type_out(session, text):
    """Feed *text* one keystroke at a time, like an input field would."""
    state = None
    for end in range(1, len(text) + 1):
        state = session.update(text[:end])
    return state


class TestPracticeSession:
    """Test word advancement and raw counts."""

    def test_initial_state(self, session):
        assert session.target == "がっこう"
        assert session.current_word.surface == "学校"
        assert session.state == MatchState(0, False)
        assert session.stats == SessionStats()
        assert not session.is_finished

    def test_progress_while_typing(self, session):
        assert session.update("ga").matched_count == 1
        assert session.update("gakk").matched_count == 2
        assert session.kana == "がっ"
        assert session.raw == "gakk"

    def test_completion_advances_and_resets_buffer(self, session):
        state = type_out(session, "gakkou")
        assert state.is_complete
        assert session.target == "ほん"
        assert session.raw == ""
        assert session.kana == ""
        assert session.stats.words_completed == 1
        assert session.stats.chars_completed == 4
        assert session.stats.errors == 0
        assert session.stats.keystrokes == 6

    def test_katakana_input_matches_hiragana_reading(self, session):
        """Kana typed as katakana completes the hiragana target."""
        assert session.update("ガッ").matched_count == 2
        state = session.update("ガッコウ")
        assert state.is_complete
        assert session.target == "ほん"
        assert session.stats.errors == 0

    def test_mixed_katakana_and_romaji(self, session):
        state = session.update("ガッkou")
        assert state.is_complete

    def test_pending_input_is_not_an_error(self, session):
        """A consonant waiting for its vowel does not advance, but is fine."""
        session.update("g")
        assert not session.regressed
        session.update("ga")
        session.update("gak")
        assert not session.regressed
        assert session.stats.errors == 0

    def test_wrong_kana_counts_an_error(self, session):
        session.update("g")
        session.update("gi")
        assert session.regressed
        assert session.stats.errors == 1
        assert session.state.matched_count == 0

    def test_deleting_is_not_an_error(self, session):
        session.update("gi")
        errors = session.stats.errors
        session.update("g")
        session.update("")
        assert not session.regressed
        assert session.stats.errors == errors

    def test_recovering_after_a_mistake(self, session):
        session.update("gi")
        session.update("g")
        state = type_out(session, "gakkou")
        assert state.is_complete
        assert session.stats.errors == 1

    def test_trailing_n_needs_resolving(self, session):
        type_out(session, "gakkou")
        assert not session.update("hon").is_complete
        assert session.update("hon'").is_complete

    def test_double_n_completes_nasal(self, session):
        type_out(session, "gakkou")
        assert session.update("honn").is_complete

    def test_input_is_capped(self, session):
        limit = session.input_limit
        assert limit == 16
        session.update("x" * 40)
        assert len(session.raw) == limit

    def test_finishing_the_session(self, session):
        type_out(session, "gakkou")
        session.update("hon'")
        type_out(session, "ocha")
        assert session.is_finished
        assert session.current_word is None
        assert session.target == ""
        assert session.update("anything") == MatchState(0, False)
        assert session.stats.words_completed == 3
        assert session.stats.chars_completed == 4 + 2 + 3

    def test_reset(self, session):
        type_out(session, "gakkou")
        session.update("gi")
        session.reset()
        assert session.position == 0
        assert session.target == "がっこう"
        assert session.stats == SessionStats()

    def test_sessions_share_an_index(self, index):
        words = [WordItem(surface="水", reading="みず")]
        first = PracticeSession(words, index=index)
        second = PracticeSession(words, index=index)
        assert first.index is second.index
        first.update("mi")
        assert second.state.matched_count == 0

    def test_empty_word_list(self, index):
        session = PracticeSession([], index=index)
        assert session.is_finished
        assert session.update("a") == MatchState(0, False)
