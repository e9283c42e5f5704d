"""Romaji input-method core: mapping table, transliterator and progress matcher."""

from .table import (
    EMPTY_INDEX,
    MappingTableError,
    RomanizationTable,
    TableIndex,
    build_index,
    get_default_index,
    load_index,
    load_table,
)
from .transliterator import ConversionResult, convert, transliterate
from .matcher import MatchState, common_prefix_length, match
from .normalize import kata_to_hira, to_hiragana

__all__ = [
    'EMPTY_INDEX',
    'MappingTableError',
    'RomanizationTable',
    'TableIndex',
    'build_index',
    'get_default_index',
    'load_index',
    'load_table',
    'ConversionResult',
    'convert',
    'transliterate',
    'MatchState',
    'common_prefix_length',
    'match',
    'kata_to_hira',
    'to_hiragana',
]
