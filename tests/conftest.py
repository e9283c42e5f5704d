"""Test configuration and fixtures."""
import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def index():
    """The packaged romanization index."""
    from kanatype.ime import load_index
    from kanatype import DATA_DIR
    return load_index(os.path.join(DATA_DIR, 'romanization.json'))


@pytest.fixture
def table_pairs():
    """All (romaji, kana) pairs from the packaged table."""
    from kanatype.ime import load_table
    from kanatype import DATA_DIR
    return load_table(os.path.join(DATA_DIR, 'romanization.json'))


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    def _write(name, payload):
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding='utf-8')
        else:
            path.write_text(json.dumps(payload, ensure_ascii=False), encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def sample_words():
    """A few practice words with hiragana readings."""
    from kanatype.sets import WordItem
    return [
        WordItem(surface="学校", reading="がっこう", romaji="gakkou"),
        WordItem(surface="本", reading="ほん", romaji="hon"),
        WordItem(surface="お茶", reading="おちゃ", romaji="ocha"),
    ]
