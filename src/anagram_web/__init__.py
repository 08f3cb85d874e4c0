"""Flask JSON API and a one-page UI for the anagram solver."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
