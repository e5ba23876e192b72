"""
Word-soup search engine.

Finds candidate words along every row and column of a grid:
1. Candidates are validated and deduplicated (case-insensitively) per call
2. Each row containing the word's first letter is scanned for the word
3. Each column where that first letter sits is scanned once per word
4. Occurrences are tallied per word and the top matches are returned
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from .compare import Comparer
from .grid import Grid, Row
from .models import FinderConfig, WordCount
from .ranking import rank_counts
from .validation import iter_candidates

logger = logging.getLogger("wordsoup.finder")


class WordFinder:
    """
    Counts occurrences of candidate words in a fixed grid.

    The grid never changes after construction. The occurrence tally is keyed
    by the first spelling under which a word was found and, unless the config
    says otherwise, keeps growing across calls to ``find``.

    Not safe for concurrent use: ``find`` mutates the tally without locking.

    Attributes:
        grid: The searched grid
        config: Finder configuration
    """

    def __init__(
        self,
        rows: Iterable[Row],
        config: Optional[FinderConfig] = None,
        comparer: Optional[Comparer] = None,
    ):
        self.grid = Grid(rows)
        self.config = config or FinderConfig()
        self._comparer = comparer or Comparer()
        self._tally: Dict[str, int] = {}
        logger.debug("Built %dx%d grid", self.grid.height, self.grid.width)

    @property
    def rows(self) -> List[str]:
        return list(self.grid.rows)

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def counts(self) -> Dict[str, int]:
        """Copy of the occurrence tally."""
        return dict(self._tally)

    def reset(self) -> None:
        """Forget every occurrence counted so far."""
        self._tally = {}

    def find(self, words: Iterable[str]) -> List[str]:
        """
        Search for the given words and return the most frequent matches.

        Args:
            words: Candidate words; invalid ones and case-insensitive repeats
                within this call are skipped

        Returns:
            Up to ``config.top_k`` words, most occurrences first
        """
        if not self.config.accumulate:
            self.reset()

        searched = 0
        for word in iter_candidates(words, self._comparer, self.config.min_word_length):
            self._search_word(word)
            searched += 1

        logger.debug("Searched %d candidates, %d words found so far", searched, len(self._tally))
        return [entry.word for entry in self.ranking()]

    def ranking(self, limit: Optional[int] = None) -> List[WordCount]:
        """Ranked tally entries with their counts."""
        return rank_counts(self._tally, self.config.top_k if limit is None else limit)

    def _search_word(self, word: str) -> None:
        analyzed_columns: Set[int] = set()
        first = word[0]

        for row in self.grid.rows:
            index = self._comparer.index_of(row, first)
            if index == -1:
                continue

            self._scan_vector(row, word)
            self._scan_columns(row, word, index, analyzed_columns)

    def _scan_columns(self, row: str, word: str, index: int, analyzed: Set[int]) -> None:
        """Scan every column where ``row`` holds the word's first letter, from ``index`` on."""
        while index != -1:
            if index not in analyzed:
                analyzed.add(index)
                self._scan_vector(self.grid.column(index), word)
            index = self._comparer.index_of(row, word[0], index + 1)

    def _scan_vector(self, vector: str, word: str) -> None:
        if len(vector) < len(word):
            return

        index = self._comparer.index_of(vector, word)
        while index != -1:
            self._tally[word] = self._tally.get(word, 0) + 1
            index = self._comparer.index_of(vector, word, index + 1)
