from __future__ import annotations
import os
from pathlib import Path

# project root: the folder holding pyproject.toml
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# where the dictionary files live
DATA_ROOT = Path(os.environ.get("ANAGRAM_DATA_ROOT", PROJECT_ROOT / "data"))

# menu shortcut -> dictionary file name
DICTIONARY_FILES = {
    "1": "Words_100.csv",
    "2": "Words_1K.csv",
    "3": "Words_75K.csv",
}
DICTIONARY_LABELS = {
    "1": "100 words",
    "2": "1K words",
    "3": "75K words",
}

# loaded once at startup (if present)
DEFAULT_CHOICE = "1"

# the query shown before the user enters one
DEFAULT_QUERY = "16080142"

# fixed-length shortcuts offered by the menu (options 4 and 5)
SHORTCUT_LENGTHS = (3, 5)

ENCODING = "utf-8"

# Progress logging (set ANAGRAM_VERBOSE=1 to enable)
VERBOSE = os.environ.get("ANAGRAM_VERBOSE") == "1"
PROGRESS_EVERY_WORDS = 10_000
