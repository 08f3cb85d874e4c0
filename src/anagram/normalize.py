from __future__ import annotations
import re

_ws_re = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    Normalize a dictionary line or a user query:
      * drop every whitespace character (not just leading/trailing)
      * lowercase

    The same routine is applied to the word list and to queries so both sides
    of a match compare letter for letter.

    >>> normalize("  Tea Pot\\n")
    'teapot'
    """
    return _ws_re.sub("", text).lower()
