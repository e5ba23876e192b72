"""Word-soup search engine."""

from .finder import WordFinder
from .models import FinderConfig, InvalidGridError, WordCount, SearchResult
from .compare import Comparer, fold, index_of
from .grid import Grid, build_rows, render_grid
from .validation import is_valid_word, iter_candidates
from .ranking import rank_counts, top_words, DEFAULT_TOP_K

__all__ = [
    # Engine
    "WordFinder",
    # Models
    "FinderConfig",
    "InvalidGridError",
    "WordCount",
    "SearchResult",
    # Comparison
    "Comparer",
    "fold",
    "index_of",
    # Grid utilities
    "Grid",
    "build_rows",
    "render_grid",
    # Candidates
    "is_valid_word",
    "iter_candidates",
    # Ranking
    "rank_counts",
    "top_words",
    "DEFAULT_TOP_K",
]
