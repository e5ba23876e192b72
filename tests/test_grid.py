"""Test grid construction, validation and column extraction."""

import pytest

from wordsoup.finder import Grid, InvalidGridError, build_rows, render_grid


class TestBuildRows:
    """Test row normalization."""

    def test_string_rows(self):
        assert build_rows(["AB", "CD"]) == ["AB", "CD"]

    def test_cell_rows(self):
        """Rows of single characters are joined."""
        assert build_rows([["A", "B"], ("C", "D")]) == ["AB", "CD"]

    def test_generator_input(self):
        assert build_rows(row for row in ["AB", "CD"]) == ["AB", "CD"]


class TestGridErrors:
    """Test structural grid errors."""

    def test_empty_grid(self):
        with pytest.raises(InvalidGridError) as exc:
            build_rows([])
        assert exc.value.code == "EMPTY_GRID"

    def test_empty_row(self):
        with pytest.raises(InvalidGridError) as exc:
            build_rows(["AB", ""])
        assert exc.value.code == "EMPTY_ROW"
        assert exc.value.row == 1

    def test_ragged_rows(self):
        """The offending row is reported with both lengths."""
        with pytest.raises(InvalidGridError) as exc:
            build_rows(["ABC", "ABC", "AB"])
        assert exc.value.code == "RAGGED_GRID"
        assert exc.value.row == 2
        assert "2" in exc.value.message and "3" in exc.value.message

    def test_multi_character_cell(self):
        with pytest.raises(InvalidGridError) as exc:
            build_rows([["A", "BC"]])
        assert exc.value.code == "INVALID_CELL"

    def test_non_text_cell(self):
        with pytest.raises(InvalidGridError) as exc:
            build_rows([["A", 1]])
        assert exc.value.code == "INVALID_CELL"

    def test_non_sequence_row(self):
        with pytest.raises(InvalidGridError) as exc:
            build_rows(["AB", True])
        assert exc.value.code == "INVALID_ROW"

    def test_error_message_is_str(self):
        with pytest.raises(InvalidGridError, match="no rows"):
            Grid([])


class TestGrid:
    """Test grid access."""

    def test_dimensions(self):
        grid = Grid(["ABC", "DEF"])
        assert grid.height == 2
        assert grid.width == 3
        assert len(grid) == 2

    def test_rows(self):
        grid = Grid([["A", "B"], ["C", "D"]])
        assert grid.rows == ("AB", "CD")
        assert grid.row(1) == "CD"

    def test_column(self):
        """Columns read top to bottom."""
        grid = Grid(["HIPPO", "HICEW", "HCATL", "TYTOX", "DOGYO"])
        assert grid.column(0) == "HHHTD"
        assert grid.column(3) == "PETOY"
        assert grid.column(4) == "OWLXO"

    def test_render(self):
        grid = Grid(["AB", "CD"])
        assert render_grid(grid) == "A B\nC D"
        assert render_grid(grid, separator="") == "AB\nCD"
