"""
Command-line entry point for the word-soup finder.

Usage:
    python -m wordsoup.main
    python -m wordsoup.main puzzle.yaml
    python -m wordsoup.main puzzle.yaml --config finder.yaml --output results/run1.json --verbose

Puzzle files are YAML with a ``grid`` (row strings, or rows of single
characters) and a ``words`` list. Without a puzzle the built-in sample is used.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from .finder import FinderConfig, InvalidGridError, SearchResult, WordFinder, render_grid
from .samples import SAMPLE_GRID, SAMPLE_WORDS

logger = logging.getLogger("wordsoup")


def _read_yaml(path: Path, kind: str) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return data or {}


def load_config(config_path: str) -> FinderConfig:
    """Load finder configuration from a YAML file."""
    return FinderConfig(**_read_yaml(Path(config_path), "Config"))


def load_puzzle(puzzle_path: str) -> Tuple[list, List[str]]:
    """
    Load a puzzle from a YAML file.

    Returns:
        Tuple of (grid rows, candidate words)
    """
    data = _read_yaml(Path(puzzle_path), "Puzzle")

    grid = data.get("grid")
    if not isinstance(grid, list):
        raise ValueError(f"Puzzle {puzzle_path} must define 'grid' as a list of rows")

    # YAML reads rows such as NO or ON as booleans
    for i, row in enumerate(grid):
        if not isinstance(row, (str, list)):
            raise ValueError(f"Row {i} of {puzzle_path} must be quoted text or a list, got {row!r}")

    words = data.get("words") or []
    if not isinstance(words, list):
        raise ValueError(f"Puzzle {puzzle_path} must define 'words' as a list")

    for word in words:
        if not isinstance(word, str):
            logger.warning("Ignoring non-text word %r in %s (quote it in YAML)", word, puzzle_path)

    return grid, [w for w in words if isinstance(w, str)]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find and rank words in a word-soup grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example puzzle.yaml:
  grid:
    - HIPPO
    - HICEW
    - HCATL
  words: [hippo, cat, dog]
        """
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Path to YAML puzzle file (default: built-in sample)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML finder configuration"
    )
    parser.add_argument(
        "--top-k", "-k",
        type=int,
        help="Number of words to report (overrides config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print the grid and per-word counts"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else FinderConfig()
        if args.top_k is not None:
            config = FinderConfig(**{**config.model_dump(), "top_k": args.top_k})

        if args.puzzle:
            grid, words = load_puzzle(args.puzzle)
        else:
            grid, words = SAMPLE_GRID, SAMPLE_WORDS
    except Exception as e:
        print(f"Error loading input: {e}", file=sys.stderr)
        return 1

    try:
        finder = WordFinder(grid, config=config)
    except InvalidGridError as e:
        print(f"Invalid grid ({e.code}): {e.message}", file=sys.stderr)
        return 1

    found = finder.find(words)
    logger.info("Found %d of %d candidate words", len(finder.counts), len(words))

    if args.verbose:
        print(render_grid(finder.grid))
        print()
        for entry in finder.ranking():
            print(f"{entry.word}: {entry.count}")
        print()

    for word in found:
        print(word)

    if args.output:
        result = SearchResult(
            words=found,
            counts=finder.counts,
            ranking=finder.ranking(),
            rows=finder.height,
            columns=finder.width,
            candidates=len(words),
        )
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.model_dump_json(indent=2))
        if args.verbose:
            print(f"\nResults saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
