"""
Frequency Counter.

Turns a string into a multiset of its characters: a mapping from each distinct
character to the number of times it occurs. Every match decision in
``anagram.match`` is made on these maps.
"""

from __future__ import annotations
from collections import Counter

# character -> occurrence count
FrequencyMap = Counter


def count(s: str) -> Counter:
    """
    Count how many times each character occurs in ``s``.

    No normalization happens here; callers pass already-normalized text.
    The result is a fresh map, so mutating it never affects a later call.

    >>> count("aab")
    Counter({'a': 2, 'b': 1})
    >>> count("")
    Counter()
    """
    return Counter(s)
