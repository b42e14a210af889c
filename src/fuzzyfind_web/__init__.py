"""Flask presenter for the fuzzy finder: JSON API plus a single page UI."""
from .web import app, main

__all__ = ["app", "main"]
