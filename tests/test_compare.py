"""Test the case-, diacritic- and symbol-insensitive comparison primitive."""

import pytest

from wordsoup.finder.compare import Comparer, fold, index_of


class TestFold:
    """Test the folded comparison form."""

    def test_lowercases(self):
        assert fold("CaT")[0] == "cat"

    def test_drops_symbols_and_tracks_positions(self):
        """Ignored characters leave gaps in the position map."""
        assert fold("A-b") == ("ab", [0, 2])

    def test_drops_whitespace_and_punctuation(self):
        assert fold("c a.t!")[0] == "cat"

    def test_strips_diacritics(self):
        assert fold("Ñandú")[0] == "nandu"

    def test_expanding_fold(self):
        """A character may fold to several; all map back to it."""
        assert fold("ß") == ("ss", [0, 0])

    def test_dotted_capital_i(self):
        """Folding does not depend on a Turkish or any other locale."""
        assert fold("İ")[0] == "i"


class TestIndexOf:
    """Test index_of semantics."""

    def test_single_character(self):
        assert index_of("HIPPO", "p") == 2

    def test_start_offset(self):
        """Search begins at start, inclusive."""
        assert index_of("HIPPO", "p", 3) == 3
        assert index_of("HIPPO", "p", 4) == -1

    def test_substring(self):
        assert index_of("HCATL", "cat") == 1

    def test_not_found(self):
        assert index_of("HIPPO", "z") == -1

    def test_start_past_end(self):
        assert index_of("abc", "a", 4) == -1

    def test_start_at_end(self):
        assert index_of("abc", "c", 3) == -1

    def test_ignorable_term_matches_at_start(self):
        assert index_of("abc", "", 1) == 1
        assert index_of("abc", "-", 2) == 2

    def test_symbols_in_source_ignored(self):
        """Matches can span ignored characters and report the source index."""
        assert index_of("xx c.a.t", "CAT") == 3

    def test_symbols_in_term_ignored(self):
        assert index_of("HCATL", "c-a-t") == 1

    def test_diacritics_ignored(self):
        assert index_of("El Ñandú", "nandu") == 3

    def test_case_ignored(self):
        assert index_of("HeLLo", "HELLO") == 0

    @pytest.mark.parametrize("source, term, expected", [
        ("CATCAT", "cat", 0),
        ("CATCAT", "CAT", 0),
        ("İSTANBUL", "istanbul", 0),
        ("straße", "STRASSE", 0),
    ])
    def test_locale_invariant(self, source, term, expected):
        assert index_of(source, term) == expected


class TestComparer:
    """Test the cached comparison strategy."""

    def test_same_results_as_function(self):
        comparer = Comparer()
        for source, term, start in [("HIPPO", "p", 0), ("HIPPO", "p", 3), ("C-AT", "cat", 0), ("abc", "z", 0)]:
            assert comparer.index_of(source, term, start) == index_of(source, term, start)

    def test_equals(self):
        comparer = Comparer()
        assert comparer.equals("Cat", "CAT")
        assert not comparer.equals("cat", "cot")

    def test_key(self):
        assert Comparer().key("HiPpO") == "hippo"
