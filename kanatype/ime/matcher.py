"""Typed-kana vs. target-reading progress matching."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchState:
    """How far the typed kana agrees with the target reading.

    ``matched_count`` counts code points (morae for plain hiragana), the same
    unit used for word length elsewhere.
    """
    matched_count: int
    is_complete: bool

    def progress(self, target: str) -> float:
        """Fraction of *target* typed correctly, in ``[0, 1]``."""
        return self.matched_count / len(target) if target else 0.0


def common_prefix_length(a: str, b: str) -> int:
    """Length of the longest shared leading run of *a* and *b*."""
    count = 0
    for x, y in zip(a, b):
        if x != y:
            break
        count += 1
    return count


def match(typed_kana: str, target: str) -> MatchState:
    """Compare *typed_kana* against *target*.

    An empty target can never be completed, so it always yields ``(0, False)``.
    """
    if not target:
        return MatchState(matched_count=0, is_complete=False)

    return MatchState(
        matched_count=common_prefix_length(typed_kana, target),
        is_complete=typed_kana == target,
    )
