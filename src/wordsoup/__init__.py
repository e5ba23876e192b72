"""Word-soup puzzle search."""

from .finder import WordFinder, FinderConfig, InvalidGridError

__all__ = ["WordFinder", "FinderConfig", "InvalidGridError"]
