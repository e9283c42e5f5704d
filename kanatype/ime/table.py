"""Romaji → kana mapping table and the lookup index derived from it."""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kanatype import ROMANIZATION_TABLE_PATH
from kanatype.logger import logger

# Romaji units are short runs of lowercase ASCII letters, optionally with an apostrophe
_ROMAJI_KEY_RE = re.compile(r"[a-z']{1,3}")


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class MappingTableError(ValueError):
    """Raised when a romaji → kana pair cannot be used to build an index."""
    def __init__(self, key: str, value: str, reason: str):
        super().__init__(f"Invalid mapping '{key}' -> '{value}': {reason}")
        self.key = key
        self.value = value
        self.reason = reason


class RomanizationTable(BaseModel):
    """On-disk layout of the mapping data file."""
    digraphs: List[Tuple[str, str]] = Field(default_factory=list)
    syllables: List[Tuple[str, str]] = Field(default_factory=list)
    model_config = ConfigDict(extra="forbid")

    def pairs(self) -> List[Tuple[str, str]]:
        return list(self.digraphs) + list(self.syllables)


@dataclass(frozen=True)
class TableIndex:
    """Read-only lookup structures derived from a mapping table.

    Built once and shared by every caller; nothing here is ever mutated.
    """
    exact: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    keys_by_length: Tuple[str, ...] = ()
    prefixes: FrozenSet[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.exact

    def longest_match(self, text: str, start: int = 0) -> Optional[str]:
        """Return the longest key that *text* starts with at *start*, if any."""
        for key in self.keys_by_length:
            if text.startswith(key, start):
                return key
        return None

    def is_prefix(self, fragment: str) -> bool:
        """True when *fragment* could still grow into a key with more typing."""
        return fragment in self.prefixes


EMPTY_INDEX = TableIndex()


def load_table(path: str) -> List[Tuple[str, str]]:
    """Read the mapping data file at *path*.

    Digraphs come first, then syllables. Order inside the file does not
    matter for matching since the index re-sorts keys by length.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
        pydantic.ValidationError: If the file is not a valid mapping table
    """
    with open(path, 'r', encoding='utf-8') as f:
        table = RomanizationTable.model_validate_json(f.read())
    return table.pairs()


def build_index(pairs: Iterable[Tuple[str, str]]) -> TableIndex:
    """Build the lookup index for a list of ``(romaji, kana)`` pairs.

    Args:
        pairs: Romaji units and the kana they produce

    Returns:
        A frozen TableIndex

    Raises:
        MappingTableError: If a key is empty, too long or not made of
            ``[a-z']``, or a kana value is empty
    """
    exact = {}
    for key, value in pairs:
        if not key:
            raise MappingTableError(key, value, "empty romaji key")
        if not _ROMAJI_KEY_RE.fullmatch(key):
            raise MappingTableError(key, value, "key must be 1-3 characters from [a-z']")
        if not value:
            raise MappingTableError(key, value, "empty kana value")
        # Last one wins on duplicates; insertion order of the first occurrence is kept
        exact[key] = value

    # sorted() is stable, so equal-length keys keep their table order
    keys_by_length = tuple(sorted(exact, key=len, reverse=True))
    prefixes = frozenset(
        key[:size] for key in exact for size in range(1, len(key))
    )

    return TableIndex(
        exact=MappingProxyType(exact),
        keys_by_length=keys_by_length,
        prefixes=prefixes,
    )


def load_index(path: Optional[str] = None) -> TableIndex:
    """Load the mapping file and build its index, never raising.

    Any problem with the data degrades to :data:`EMPTY_INDEX`, which turns
    transliteration into a pure passthrough.
    """
    path = path or ROMANIZATION_TABLE_PATH
    try:
        index = build_index(load_table(path))
    except (OSError, UnicodeDecodeError, ValidationError, MappingTableError) as e:
        logger.warning(f"⚠️ Could not load romanization table {path}: {e}. Falling back to passthrough.")
        return EMPTY_INDEX

    logger.debug(f"Loaded {len(index.exact)} romaji units from {path}")
    return index


@lru_cache(maxsize=None)
def get_default_index() -> TableIndex:
    """The process-wide index, built on first use and cached for the life of the process."""
    return load_index()
