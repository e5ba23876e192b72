"""Built-in sample puzzle."""

from typing import List

SAMPLE_GRID: List[List[str]] = [
    ["H", "I", "P", "P", "O"],
    ["H", "I", "C", "E", "W"],
    ["H", "C", "A", "T", "L"],
    ["T", "Y", "T", "O", "X"],
    ["D", "O", "G", "Y", "O"],
]

SAMPLE_WORDS: List[str] = ["hippo", "cat", "dog", "owl", "pet", "toy"]
