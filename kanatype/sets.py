"""Vocabulary word sets bundled with the app.

Each set is a JSON file holding an ``id``, a ``label``, a ``description`` and a
list of ``items`` (``surface``, ``reading`` and an optional ``romaji`` hint).
"""

import glob
import os
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pykakasi import kakasi

from kanatype import DEFAULT_SET_ID, SETS_DIR
from kanatype.ime.normalize import kata_to_hira
from kanatype.logger import logger

KKS = kakasi()


class WordSetError(ValueError):
    """Raised when a word set file is missing or malformed."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid word set '{path}': {reason}")
        self.path = path
        self.reason = reason


class WordItemModel(BaseModel):
    surface: str = ""
    reading: str = ""
    romaji: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class WordSetModel(BaseModel):
    id: Optional[str] = None
    label: Optional[str] = None
    description: str = ""
    items: List[WordItemModel] = []
    model_config = ConfigDict(extra="ignore")


@dataclass
class WordItem:
    surface: str
    reading: str
    romaji: str = ""


@dataclass
class WordSet:
    id: str
    label: str
    description: str = ""
    items: List[WordItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


def to_romaji(text: str) -> str:
    """Hepburn romanisation of *text*, used as a typing hint."""
    return ''.join(item['hepburn'] for item in KKS.convert(text))


def _set_path(set_id: str, sets_dir: str) -> str:
    return os.path.join(sets_dir, f"{set_id}.json")


def _read_set_file(path: str) -> WordSetModel:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return WordSetModel.model_validate_json(f.read())
    except OSError as e:
        raise WordSetError(path, str(e)) from e
    except ValidationError as e:
        raise WordSetError(path, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e


def _normalise_items(raw_items: List[WordItemModel], path: str) -> List[WordItem]:
    items: List[WordItem] = []
    for i, raw in enumerate(raw_items):
        reading = kata_to_hira(raw.reading.strip())
        if not reading:
            logger.warning(f"⚠️ Skipping item {i} in {path}: empty reading")
            continue
        items.append(WordItem(
            surface=raw.surface.strip() or reading,
            reading=reading,
            romaji=(raw.romaji or '').strip() or to_romaji(reading),
        ))
    return items


def list_sets(sets_dir: Optional[str] = None) -> List[Dict[str, Any]]:
    """Summaries of every word set in *sets_dir*, sorted by id."""
    sets_dir = sets_dir or SETS_DIR
    summaries: List[Dict[str, Any]] = []
    for path in sorted(glob.glob(os.path.join(sets_dir, '*.json'))):
        set_id = os.path.splitext(os.path.basename(path))[0]
        try:
            model = _read_set_file(path)
        except WordSetError as e:
            logger.error(f"Failed to read word set: {e}")
            continue
        summaries.append({
            'id': model.id or set_id,
            'label': model.label or model.id or set_id,
            'description': model.description,
            'size': len(model.items),
        })
    return sorted(summaries, key=lambda s: s['id'])


def get_set(set_id: Optional[str] = None, sets_dir: Optional[str] = None) -> WordSet:
    """Load a word set by id, normalising readings to hiragana.

    Unknown ids fall back to the default set. Items without a romaji hint get
    one generated from their reading.

    Raises:
        WordSetError: If the file (or the default set, on fallback) is missing
            or malformed
    """
    sets_dir = sets_dir or SETS_DIR
    set_id = set_id or DEFAULT_SET_ID
    path = _set_path(set_id, sets_dir)

    if not os.path.exists(path) and set_id != DEFAULT_SET_ID:
        logger.warning(f"⚠️ Unknown word set '{set_id}', falling back to '{DEFAULT_SET_ID}'")
        set_id = DEFAULT_SET_ID
        path = _set_path(set_id, sets_dir)

    model = _read_set_file(path)
    word_set = WordSet(
        id=model.id or set_id,
        label=model.label or model.id or set_id,
        description=model.description,
        items=_normalise_items(model.items, path),
    )
    logger.info(f"Loaded word set '{word_set.id}' with {len(word_set)} items")
    return word_set


def shuffled(items: List[WordItem], seed: Optional[int] = None) -> List[WordItem]:
    """Return a shuffled copy of *items*; pass *seed* for a repeatable order."""
    out = list(items)
    random.Random(seed).shuffle(out)
    return out
