"""Top-K ranking of the occurrence tally."""

from typing import Dict, List

from .models import WordCount


DEFAULT_TOP_K = 10


def rank_counts(tally: Dict[str, int], limit: int = DEFAULT_TOP_K) -> List[WordCount]:
    """
    Rank tally entries by descending count.

    Ties keep the tally's insertion order, which is the order in which each
    word was first found. Python's sort is stable, so this needs no extra key.

    Args:
        tally: Word -> occurrence count, in first-found order
        limit: Maximum number of entries to return

    Returns:
        At most ``limit`` ranked entries
    """
    if limit < 1:
        return []

    ranked = sorted(tally.items(), key=lambda item: -item[1])
    return [WordCount(word=word, count=count) for word, count in ranked[:limit]]


def top_words(tally: Dict[str, int], limit: int = DEFAULT_TOP_K) -> List[str]:
    """The words of ``rank_counts``, in rank order."""
    return [entry.word for entry in rank_counts(tally, limit)]
