"""Per-word typing progress on top of the transliterator and matcher.

A session walks through a list of words. Each word goes
EMPTY -> MATCHING -> COMPLETE; on completion the raw buffer is cleared and the
next word becomes the target. There is no error state: a mismatch simply
leaves ``matched_count`` where the typed kana stops agreeing with the reading.
"""

from dataclasses import dataclass
from typing import List, Optional

from kanatype import MAX_INPUT_FACTOR
from kanatype.ime import ConversionResult, MatchState, TableIndex, kata_to_hira, match, transliterate
from kanatype.ime.table import get_default_index
from kanatype.logger import logger
from kanatype.sets import WordItem

_EMPTY_STATE = MatchState(matched_count=0, is_complete=False)


@dataclass
class SessionStats:
    """Raw counts only; rates and percentages are left to the caller."""
    words_completed: int = 0
    chars_completed: int = 0
    errors: int = 0
    keystrokes: int = 0


class PracticeSession:
    """Typing session over a fixed list of words."""

    def __init__(self, words: List[WordItem], index: Optional[TableIndex] = None,
                 max_input_factor: int = MAX_INPUT_FACTOR):
        self.words = list(words)
        self.index = index if index is not None else get_default_index()
        self.max_input_factor = max_input_factor
        self.reset()

    def reset(self):
        """Back to the first word with all counts cleared."""
        self.position = 0
        self.raw = ""
        self.result = ConversionResult(confirmed="", consumed_length=0)
        self.state = _EMPTY_STATE
        self.regressed = False
        self.stats = SessionStats()

    @property
    def is_finished(self) -> bool:
        return self.position >= len(self.words)

    @property
    def current_word(self) -> Optional[WordItem]:
        return None if self.is_finished else self.words[self.position]

    @property
    def target(self) -> str:
        word = self.current_word
        return word.reading if word else ""

    @property
    def kana(self) -> str:
        return self.result.confirmed

    @property
    def input_limit(self) -> int:
        return len(self.target) * self.max_input_factor

    def update(self, raw: str) -> MatchState:
        """Feed the full current input buffer and return the match against the target.

        Counts one error when the buffer grew, the match did not advance and the
        confirmed kana already disagrees with the target. Input still waiting on
        more keystrokes (``k`` on its way to ``か``) is not an error.
        """
        if self.is_finished:
            return _EMPTY_STATE

        target = self.target
        raw = raw[:self.input_limit]
        previous_raw, previous_state = self.raw, self.state

        # Katakana typed straight from a kana keyboard counts as its hiragana
        result = transliterate(kata_to_hira(raw), self.index)
        state = match(result.confirmed, target)

        added = len(raw) - len(previous_raw)
        self.regressed = (
            added > 0
            and state.matched_count <= previous_state.matched_count
            and len(result.confirmed) > state.matched_count
        )
        if added > 0:
            self.stats.keystrokes += added
        if self.regressed:
            self.stats.errors += 1

        if state.is_complete:
            self._advance(target)
            return state

        self.raw, self.result, self.state = raw, result, state
        return state

    def _advance(self, completed: str):
        self.stats.words_completed += 1
        self.stats.chars_completed += len(completed)
        self.position += 1
        self.raw = ""
        self.result = ConversionResult(confirmed="", consumed_length=0)
        self.state = _EMPTY_STATE
        if self.is_finished:
            logger.info(f"Session finished: {self.stats.words_completed} words, {self.stats.errors} errors")
