"""
Subset-Match Engine.

A dictionary word is *formable* from a query when the query holds every
letter of the word at least as many times as the word uses it. The word may
leave query letters unused, so this is a multiset-subset test rather than an
anagram-equality test.

All functions here are pure: the dictionary and query are read, never
modified, and nothing is cached between calls.
"""

from __future__ import annotations
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .frequency import count
from .models import Dictionary

Letters = Union[str, Counter]


def _freq(x: Letters) -> Counter:
    return x if isinstance(x, Counter) else count(x)


def formable(candidate: Letters, query: Letters) -> bool:
    """
    True iff every character of ``candidate`` occurs in ``query`` at least as
    often. Either argument may be a string or a pre-built frequency map.

    >>> formable("tac", "cats")
    True
    >>> formable("cass", "cats")
    False
    >>> formable("", "anything")
    True
    """
    need = _freq(candidate)
    have = _freq(query)
    for ch, n in need.items():
        # Counter returns 0 for missing keys without inserting them
        if have[ch] < n:
            return False
    return True


def _candidates(dictionary: Iterable[str]) -> Iterator[Tuple[str, Letters]]:
    """Yield (word, letters); letters is the Dictionary's cached map when available, else the word."""
    if isinstance(dictionary, Dictionary):
        yield from zip(dictionary.words, dictionary.counts())
    else:
        for word in dictionary:
            yield word, word


def find_all(dictionary: Iterable[str], query: str) -> List[str]:
    """
    Every word no longer than ``query`` that can be formed from its letters,
    in dictionary order. Words exactly as long as the query are included.
    """
    have = count(query)
    limit = len(query)
    out: List[str] = []
    for word, letters in _candidates(dictionary):
        if len(word) <= limit and formable(letters, have):
            out.append(word)
    return out


def find_longest(dictionary: Iterable[str], query: str) -> Optional[str]:
    """
    The longest formable word no longer than ``query``, or None.

    Only a strictly longer word replaces the running best, so among words of
    equal length the first in dictionary order wins.
    """
    have = count(query)
    limit = len(query)
    best: Optional[str] = None
    best_len = 0
    for word, letters in _candidates(dictionary):
        n = len(word)
        if best_len < n <= limit and formable(letters, have):
            best, best_len = word, n
    return best


def find_by_exact_length(dictionary: Iterable[str], query: str, n: int) -> List[str]:
    """Every formable word of exactly ``n`` letters, in dictionary order."""
    have = count(query)
    out: List[str] = []
    for word, letters in _candidates(dictionary):
        if len(word) == n and formable(letters, have):
            out.append(word)
    return out
