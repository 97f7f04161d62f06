"""Tests for toroidal grid addressing."""

import pytest
import numpy as np
from py_heightmap.core.errors import InvalidDimension
from py_heightmap.core.toroidal_grid import ToroidalGrid, is_power_of_two


class TestToroidalGrid:
    """Test wraparound addressing and size validation."""

    @pytest.fixture
    def grid(self):
        """8x8 grid with a distinct value per cell."""
        grid = ToroidalGrid(8)
        grid.values[:] = np.arange(64, dtype=np.float64).reshape(8, 8)
        return grid

    def test_allocation(self):
        grid = ToroidalGrid(16)
        assert grid.values.shape == (16, 16)
        assert grid.values.dtype == np.float64
        assert len(grid) == 256
        assert np.all(grid.values == 0)

    def test_row_major_layout(self, grid):
        """(x, y) lives at flat index y * size + x."""
        assert grid.get(3, 2) == 2 * 8 + 3
        assert grid.values.ravel()[2 * 8 + 3] == grid.get(3, 2)

    @pytest.mark.parametrize("k", [-3, -1, 1, 2, 5])
    def test_wraparound_is_periodic(self, grid, k):
        for x in range(8):
            for y in range(8):
                assert grid.get(x + k * 8, y) == grid.get(x, y)
                assert grid.get(x, y + k * 8) == grid.get(x, y)

    def test_negative_coordinates(self, grid):
        assert grid.get(-1, 0) == grid.get(7, 0)
        assert grid.get(0, -1) == grid.get(0, 7)
        assert grid.get(-1, -1) == grid.get(7, 7)

    def test_set_wraps(self, grid):
        grid.set(-1, 9, 123.5)
        assert grid.get(7, 1) == 123.5

    def test_snapshot_is_independent(self, grid):
        snapshot = grid.snapshot()
        grid.set(0, 0, -5.0)
        assert snapshot[0, 0] == 0.0

    def test_copy(self, grid):
        clone = grid.copy()
        np.testing.assert_array_equal(clone.values, grid.values)
        clone.set(1, 1, 99.0)
        assert grid.get(1, 1) != 99.0

    @pytest.mark.parametrize("size", [0, -4, 3, 6, 10, 12, 100])
    def test_invalid_size(self, size):
        with pytest.raises(InvalidDimension):
            ToroidalGrid(size)

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            ToroidalGrid(10)

    def test_power_of_two(self):
        assert all(is_power_of_two(n) for n in [1, 2, 4, 64, 1024])
        assert not any(is_power_of_two(n) for n in [0, -2, 3, 10, 1023])
