"""Candidate word validation and per-call deduplication."""

import logging
from typing import Iterable, Iterator, Set

from .compare import Comparer

logger = logging.getLogger("wordsoup.finder")


def is_valid_word(word: str, min_length: int = 2) -> bool:
    """A candidate is valid if it is long enough and made only of ASCII letters."""
    return (
        isinstance(word, str)
        and len(word) >= min_length
        and word.isascii()
        and word.isalpha()
    )


def iter_candidates(
    words: Iterable[str],
    comparer: Comparer,
    min_length: int = 2,
) -> Iterator[str]:
    """
    Yield the words worth searching for, in input order.

    Invalid words and case-insensitive repeats of an earlier word are
    skipped silently. The first spelling seen is the one yielded.
    """
    analyzed: Set[str] = set()

    for word in words:
        if not is_valid_word(word, min_length):
            logger.debug("Skipping invalid candidate %r", word)
            continue

        key = comparer.key(word)
        if key in analyzed:
            logger.debug("Skipping duplicate candidate %r", word)
            continue

        analyzed.add(key)
        yield word
