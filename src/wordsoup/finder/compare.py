"""
Locale-invariant, case- and symbol-insensitive text comparison.

Every search in the finder goes through ``index_of``: letters compare equal
regardless of case, and combining marks, punctuation, symbols, whitespace and
control characters are ignored on both sides. Only Unicode normalization and
``str.casefold`` are used, so results never depend on the host locale.
"""

import unicodedata
from bisect import bisect_left
from functools import lru_cache
from typing import List, Tuple


# Unicode general categories skipped when comparing
IGNORED_CATEGORIES = ("M", "P", "S", "Z", "C")


def _is_ignored(char: str) -> bool:
    return unicodedata.category(char)[0] in IGNORED_CATEGORIES


def fold(text: str) -> Tuple[str, List[int]]:
    """
    Fold text into its comparison form.

    Returns the folded string and, for every folded character, the index of
    the source character it came from. A single source character can fold to
    several characters (``ß`` -> ``ss``) or to none (``-``).
    """
    folded: List[str] = []
    positions: List[int] = []

    for i, char in enumerate(text):
        for part in unicodedata.normalize("NFKD", char.casefold()):
            if _is_ignored(part):
                continue
            folded.append(part)
            positions.append(i)

    return "".join(folded), positions


def _index_in_folded(
    source: Tuple[str, List[int]],
    term: str,
    start: int,
    length: int,
) -> int:
    if start < 0 or start > length:
        return -1
    if not term:
        # Nothing left to compare: an ignorable term matches where we stand
        return start

    folded, positions = source
    hit = folded.find(term, bisect_left(positions, start))
    return positions[hit] if hit != -1 else -1


def index_of(source: str, term: str, start: int = 0) -> int:
    """
    Find the first index at or after ``start`` where ``term`` occurs in ``source``.

    Args:
        source: Text to search
        term: Character or string to look for
        start: Index in ``source`` to start from

    Returns:
        Index in ``source`` of the first matching character, or -1
    """
    return _index_in_folded(fold(source), fold(term)[0], start, len(source))


class Comparer:
    """
    Stateless comparison strategy with a folding cache.

    The finder folds the same rows, columns and words over and over; caching
    the folded forms keeps repeated lookups cheap.
    """

    def __init__(self, cache_size: int = 4096):
        self._fold = lru_cache(maxsize=cache_size)(fold)

    def index_of(self, source: str, term: str, start: int = 0) -> int:
        """Same contract as the module-level ``index_of``."""
        return _index_in_folded(self._fold(source), self._fold(term)[0], start, len(source))

    def equals(self, a: str, b: str) -> bool:
        """True if both strings fold to the same comparison form."""
        return self._fold(a)[0] == self._fold(b)[0]

    def key(self, text: str) -> str:
        """Comparison form of ``text``, usable as a set or dict key."""
        return self._fold(text)[0]
