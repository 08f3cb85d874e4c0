# src/anagram/engine.py
from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from . import config as CFG
from .loader import PathLike, from_words, load_words, resolve_choice
from .match import find_all, find_by_exact_length, find_longest
from .models import Dictionary, MatchResult
from .normalize import normalize

log = logging.getLogger(__name__)


class DictionaryNotLoaded(RuntimeError):
    """Raised when a search is requested before a non-empty dictionary is loaded."""


class Engine:
    """
    Thin orchestration layer that owns the mutable session state the matching
    functions deliberately do not have:
      - the current Dictionary (replaced wholesale on every load),
      - the current query,
      - how long the last operation took.

    Public API (used by the CLI, Flask and the GUI):
      * load(path) / select(choice) / use_words(words): replace the dictionary
      * set_query(raw):                                   normalize + store the query
      * find_all / find_longest / find_by_exact_length:   run a search
    """

    # ------------- lifecycle -------------

    def __init__(self, *, query: str = CFG.DEFAULT_QUERY, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        self.dictionary: Optional[Dictionary] = None
        self.query: str = normalize(query)
        self.last_elapsed_ms: float = 0.0

    # /* ~~~ Load a word list and make it the current dictionary ~~~ */
    def load(self, path: PathLike) -> Dictionary:
        t0 = time.perf_counter()
        try:
            # on failure the previous dictionary stays in place
            dictionary = load_words(path)
        finally:
            self.last_elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.dictionary = dictionary
        log.info("Dictionary ready: %s (%d words)", dictionary.source, len(dictionary))
        return dictionary

    def select(self, choice: str) -> Dictionary:
        """Load one of the configured dictionary files by menu shortcut."""
        return self.load(resolve_choice(choice))

    def use_words(self, words: Iterable[str], source: str = "<memory>") -> Dictionary:
        self.dictionary = from_words(words, source=source)
        return self.dictionary

    @property
    def loaded(self) -> bool:
        return self.dictionary is not None and len(self.dictionary) > 0

    @property
    def source(self) -> str:
        return self.dictionary.source if self.dictionary is not None else ""

    @property
    def size(self) -> int:
        return len(self.dictionary) if self.dictionary is not None else 0

    # ------------- query -------------

    def set_query(self, raw: str) -> str:
        self.query = normalize(raw)
        return self.query

    def find_all(self, query: Optional[str] = None) -> MatchResult:
        dictionary, q = self._prepare(query)
        t0 = time.perf_counter()
        words = find_all(dictionary, q)
        return self._result("all", q, words, t0)

    def find_longest(self, query: Optional[str] = None) -> MatchResult:
        dictionary, q = self._prepare(query)
        t0 = time.perf_counter()
        best = find_longest(dictionary, q)
        return self._result("longest", q, [best] if best is not None else [], t0)

    def find_by_exact_length(self, n: int, query: Optional[str] = None) -> MatchResult:
        dictionary, q = self._prepare(query)
        t0 = time.perf_counter()
        words = find_by_exact_length(dictionary, q, int(n))
        return self._result("length", q, words, t0, length=int(n))

    # ------------- internals -------------

    def _prepare(self, query: Optional[str]) -> tuple[Dictionary, str]:
        if not self.loaded:
            raise DictionaryNotLoaded("Dictionary not loaded. Please select a dictionary first.")
        q = self.query if query is None else normalize(query)
        return self.dictionary, q  # type: ignore[return-value]

    def _result(self, mode: str, query: str, words: list, t0: float, *, length: Optional[int] = None) -> MatchResult:
        self.last_elapsed_ms = (time.perf_counter() - t0) * 1000.0
        log.info("%s(%r) -> %d word(s) in %.2fms", mode, query, len(words), self.last_elapsed_ms)
        return MatchResult(mode=mode, query=query, words=words, elapsed_ms=self.last_elapsed_ms, length=length)
