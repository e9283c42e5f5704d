"""Normalisation of arbitrary user input to hiragana."""

import re
from typing import Optional

import jaconv

from .table import TableIndex
from .transliterator import convert

_LATIN_RE = re.compile(r"[A-Za-z]")


def kata_to_hira(text: str) -> str:
    """Convert katakana in *text* to hiragana, leaving everything else alone."""
    return jaconv.kata2hira(text)


def to_hiragana(text: str, index: Optional[TableIndex] = None) -> str:
    """Normalise any user input to hiragana.

    - Katakana -> hiragana
    - Romaji -> hiragana (through the transliterator)
    - Hiragana stays
    - Kanji stays (not converted)
    """
    if not text:
        return ""
    kana = kata_to_hira(text)
    if _LATIN_RE.search(kana):
        return convert(kana, index)
    return kana
