# src/anagram/models.py
"""
Data models for the anagram solver.

- Dictionary: the ordered, normalized word list plus where it came from.
- MatchResult: what the engine hands back to the CLI / web / GUI layers.

The matching functions in ``anagram.match`` accept any iterable of words; a
Dictionary is the form the engine keeps so per-word frequency maps are built
once per loaded file instead of once per query.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .frequency import count


@dataclass(frozen=True)
class Dictionary:
    """
    Attributes
    ----------
    words : Tuple[str, ...]
        Normalized words (lowercase, no whitespace) in file order. Never
        mutated after construction.
    source : str
        File path (or any label) the words were loaded from.
    """
    words: Tuple[str, ...]
    source: str = ""
    _counts: Optional[Tuple[Counter, ...]] = field(default=None, init=False, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def counts(self) -> Tuple[Counter, ...]:
        """Per-word frequency maps, aligned with ``words``; built on first use."""
        if self._counts is None:
            object.__setattr__(self, "_counts", tuple(count(w) for w in self.words))
        return self._counts  # type: ignore[return-value]


@dataclass(frozen=True)
class MatchResult:
    """
    One engine answer.

    mode is "all", "longest" or "length"; length is set only for "length".
    For "longest", words holds zero or one entry.
    """
    mode: str
    query: str
    words: List[str]
    elapsed_ms: float = 0.0
    length: Optional[int] = None

    @property
    def found(self) -> bool:
        return bool(self.words)

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "mode": self.mode,
            "length": self.length,
            "words": list(self.words),
            "elapsed_ms": round(self.elapsed_ms, 3),
        }
