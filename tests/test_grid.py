"""
Tests for the static hex adjacency graph.
"""

import pytest

from hex_mc.inference.grid import HexGrid


@pytest.fixture
def grid3():
    return HexGrid(3)


class TestHexGrid:

    def test_rejects_small_boards(self):
        with pytest.raises(ValueError):
            HexGrid(2)

    def test_index_conversion(self, grid3):
        assert grid3.rowcol_to_index(0, 0) == 0
        assert grid3.rowcol_to_index(1, 2) == 5
        assert grid3.rowcol_to_index(2, 2) == 8
        for idx in range(9):
            assert grid3.rowcol_to_index(*grid3.index_to_rowcol(idx)) == idx

    def test_bounds(self, grid3):
        assert grid3.in_bounds(0, 0)
        assert grid3.in_bounds(2, 2)
        assert not grid3.in_bounds(-1, 0)
        assert not grid3.in_bounds(0, 3)
        assert not grid3.in_bounds(3, 0)

    def test_centre_neighbor_order(self, grid3):
        """left, right, up, up-right, down, down-left"""
        assert grid3.neighbors(4) == (3, 5, 1, 2, 7, 6)

    def test_corner_neighbors(self, grid3):
        # (0, 0): right, down
        assert grid3.neighbors(0) == (1, 3)
        # (0, 2): left, down, down-left
        assert grid3.neighbors(2) == (1, 5, 4)
        # (2, 0): right, up, up-right
        assert grid3.neighbors(6) == (7, 3, 4)
        # (2, 2): left, up
        assert grid3.neighbors(8) == (7, 5)

    def test_obtuse_diagonal_not_adjacent(self, grid3):
        # (1, 1) touches (0, 2) and (2, 0) but not (0, 0) or (2, 2)
        assert 2 in grid3.neighbors(4)
        assert 6 in grid3.neighbors(4)
        assert 0 not in grid3.neighbors(4)
        assert 8 not in grid3.neighbors(4)

    @pytest.mark.parametrize("size", [3, 4, 5, 8, 11])
    def test_adjacency_is_symmetric(self, size):
        grid = HexGrid(size)
        for idx in range(grid.num_cells):
            for n in grid.neighbors(idx):
                assert idx in grid.neighbors(n)

    @pytest.mark.parametrize("size", [3, 5, 7])
    def test_interior_cells_have_six_neighbors(self, size):
        grid = HexGrid(size)
        for r in range(1, size - 1):
            for c in range(1, size - 1):
                assert len(grid.neighbors(grid.rowcol_to_index(r, c))) == 6
        total_edges = sum(len(grid.neighbors(i)) for i in range(grid.num_cells)) // 2
        # horizontal + vertical + one diagonal per cell pair across adjacent rows
        assert total_edges == size * (size - 1) * 2 + (size - 1) ** 2

    def test_borders(self, grid3):
        assert grid3.top_row() == [0, 1, 2]
        assert grid3.bottom_row() == [6, 7, 8]
        assert grid3.left_column() == [0, 3, 6]
        assert grid3.right_column() == [2, 5, 8]
