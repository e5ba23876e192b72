"""Data models for the word finder."""

from typing import List, Dict, Optional
from pydantic import BaseModel, Field


class InvalidGridError(ValueError):
    """Raised when a grid cannot be searched (empty, ragged, bad cells)."""

    def __init__(self, code: str, message: str, row: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.row = row


class FinderConfig(BaseModel):
    """Configuration for a WordFinder."""
    top_k: int = Field(default=10, ge=1)
    min_word_length: int = Field(default=2, ge=1)
    accumulate: bool = True  # keep the tally across find() calls


class WordCount(BaseModel):
    """A ranked word and how many times it was found."""
    word: str
    count: int = Field(..., ge=1)


class SearchResult(BaseModel):
    """Result of a search run, as written by the CLI."""
    words: List[str] = Field(default_factory=list)
    counts: Dict[str, int] = Field(default_factory=dict)
    ranking: List[WordCount] = Field(default_factory=list)
    rows: int = 0
    columns: int = 0
    candidates: int = 0
