"""Romaji keystroke buffer → hiragana conversion.

The whole buffer is converted from scratch on every edit. There is no parser
state carried between calls, so inserts, deletes and pastes anywhere in the
buffer all go through the same path.
"""

from dataclasses import dataclass
from typing import Optional

from .table import TableIndex, get_default_index

VOWELS = frozenset("aeiou")
# Letters that double into a small っ; n is excluded because "nn" is ん + n
GEMINATE_CONSONANTS = frozenset("bcdfghjklmpqrstvwxyz")
APOSTROPHES = frozenset("'’")

MORAIC_NASAL = "ん"
SOKUON = "っ"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one raw buffer.

    ``confirmed`` is everything emitted so far, ``pending`` the lower-cased tail
    that is still ambiguous and produced no output yet.
    """
    confirmed: str
    consumed_length: int
    pending: str = ""


def _nasal_is_ambiguous(text: str, pos: int, index: TableIndex) -> bool:
    """Whether the ``n`` at *pos* might still become な/に/にゃ… with more typing."""
    rest = text[pos + 1:]
    if not rest:
        return True
    if rest[0] in VOWELS:
        return True
    if len(rest) >= 2 and rest[0] == "y" and rest[1] in VOWELS:
        return True
    # e.g. a trailing "ny" on its way to "nya"
    return index.is_prefix(text[pos:])


def transliterate(raw: str, index: Optional[TableIndex] = None) -> ConversionResult:
    """Convert *raw* romaji input into hiragana.

    Scans left to right and applies, at each position, the first rule that
    fits: explicit ``n'``, doubled consonant, longest table match, lone ``n``,
    unfinished key prefix, passthrough. Scanning stops at the first ambiguous
    tail, which is reported as ``pending``.

    Args:
        raw: The complete keystroke buffer, any case
        index: Lookup index to use, defaults to the process-wide one

    Returns:
        ConversionResult with the emitted text and how much of *raw* was used
    """
    if index is None:
        index = get_default_index()

    # Without a table nothing is ever converted
    if index.is_empty:
        return ConversionResult(confirmed=raw, consumed_length=len(raw))

    text = raw.lower()
    out = []
    pos = 0
    length = len(text)

    while pos < length:
        ch = text[pos]
        nxt = text[pos + 1] if pos + 1 < length else ""

        # n' always closes the nasal, even before a vowel or y
        if ch == "n" and nxt in APOSTROPHES:
            out.append(MORAIC_NASAL)
            pos += 2
            continue

        # kk → っk; the second k is left for the next syllable
        if ch == nxt and ch in GEMINATE_CONSONANTS:
            out.append(SOKUON)
            pos += 1
            continue

        key = index.longest_match(text, pos)
        if key is not None:
            out.append(index.exact[key])
            pos += len(key)
            continue

        if ch == "n":
            if _nasal_is_ambiguous(text, pos, index):
                break
            out.append(MORAIC_NASAL)
            pos += 1
            continue

        # A letter that could still start a key waits, so passthrough never emits one
        if index.is_prefix(text[pos:pos + 2]) or index.is_prefix(text[pos:pos + 1]):
            break

        out.append(ch)
        pos += 1

    return ConversionResult(
        confirmed="".join(out),
        consumed_length=pos,
        pending=text[pos:],
    )


def convert(raw: str, index: Optional[TableIndex] = None) -> str:
    """Convert *raw* romaji input and return only the confirmed kana."""
    return transliterate(raw, index).confirmed
