"""
Anagram solver.

Finds dictionary words that can be spelled from a subset of the letters of a
word or phrase ("sub-anagrams"), plus the longest such word and all such
words of a fixed length.

Layers:
- frequency / match: pure counting and subset-matching functions
- loader / models:   word-list files and the in-memory Dictionary
- engine:            session state (current dictionary, query, timing)
- __main__:          argparse CLI and the interactive menu

Example Usage:
    from anagram import find_all, find_longest

    find_all(["cat", "act", "cats", "tac", "dog"], "cats")
    # ['cat', 'act', 'cats', 'tac']
    find_longest(["a", "an", "ant", "ants"], "ants")
    # 'ants'
"""

# src/anagram/__init__.py
from .frequency import count, FrequencyMap
from .match import formable, find_all, find_longest, find_by_exact_length
from .models import Dictionary, MatchResult
from .loader import load_words
from .engine import Engine, DictionaryNotLoaded

__version__ = "1.0.0"
__all__ = [
    "count", "FrequencyMap",
    "formable", "find_all", "find_longest", "find_by_exact_length",
    "Dictionary", "MatchResult", "load_words",
    "Engine", "DictionaryNotLoaded",
]
