from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .models import Dictionary
from .normalize import normalize
from . import config as CFG

log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Normalize each line; lines that are blank after normalization are skipped."""
    for raw in lines:
        word = normalize(raw)
        if word:
            yield word


def resolve_choice(choice: str) -> Path:
    """
    Map a menu shortcut ("1", "2", "3") to its dictionary file under DATA_ROOT.
    Raises ValueError for anything else.
    """
    key = str(choice).strip()
    try:
        name = CFG.DICTIONARY_FILES[key]
    except KeyError:
        raise ValueError(f"Invalid dictionary choice: {choice!r}") from None
    return Path(CFG.DATA_ROOT) / name


def load_words(path: PathLike) -> Dictionary:
    """
    Read a word list (one entry per line) into a Dictionary.
    Each line is normalized (whitespace removed, lowercased); file order is kept.
    Missing / unreadable files raise OSError (FileNotFoundError for a missing one).
    """
    path = os.fspath(path)
    words: List[str] = []
    with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
        for word in _iter_words(f):
            words.append(word)
            if len(words) % CFG.PROGRESS_EVERY_WORDS == 0:
                log.debug("[loaded] words=%s", f"{len(words):,}")

    log.info("Loaded %d words from %s", len(words), path)
    return Dictionary(words=tuple(words), source=path)


def from_words(words: Iterable[str], source: str = "<memory>") -> Dictionary:
    """Build a Dictionary from in-memory entries, normalized the same way as files."""
    return Dictionary(words=tuple(_iter_words(words)), source=source)
