"""Tests for square-diamond midpoint displacement."""

import pytest
import numpy as np
from py_heightmap.core.alea_prng import RandomSource
from py_heightmap.core.square_diamond import SquareDiamondGenerator
from py_heightmap.core.toroidal_grid import ToroidalGrid


def make_generator(size=8, seed="sd-test"):
    return SquareDiamondGenerator(ToroidalGrid(size), RandomSource(seed))


class TestNoiseFloor:
    """Test the initial full-grid randomization."""

    def test_every_cell_sampled(self):
        generator = make_generator(size=8)
        generator.randomize()

        assert generator.random_source.call_count == 64
        assert np.all(generator.grid.values >= -1.0)
        assert np.all(generator.grid.values < 1.0)
        assert len(np.unique(generator.grid.values)) == 64

    def test_column_major_fill_order(self):
        """Samples are drawn with x in the outer loop."""
        generator = make_generator(size=4, seed="order")
        generator.randomize()

        reference = RandomSource("order")
        first_column = [reference.random() for _ in range(4)]
        np.testing.assert_array_equal(generator.grid.values[:, 0], first_column)


class TestSquareDiamond:
    """Test the refinement passes."""

    @pytest.fixture
    def ramp_grid(self):
        grid = ToroidalGrid(4)
        grid.values[:] = np.arange(16, dtype=np.float64).reshape(4, 4)
        return grid

    def test_square_and_diamond_averages(self, ramp_grid):
        """With zero scale each point is the plain mean of its neighbours."""
        generator = SquareDiamondGenerator(ramp_grid, RandomSource("zero"))
        generator.square_diamond(2, 0.0)

        # lattice origins are never written at step 2
        assert ramp_grid.get(0, 0) == 0.0
        assert ramp_grid.get(2, 2) == 10.0
        # square centres average the four diagonal corners, wrapping at the edge
        assert ramp_grid.get(1, 1) == pytest.approx(5.0)
        assert ramp_grid.get(3, 3) == pytest.approx(5.0)
        # first diamond point reads the square results above and below it
        assert ramp_grid.get(1, 0) == pytest.approx(3.0)

    def test_constant_grid_stays_constant_without_displacement(self):
        grid = ToroidalGrid(8)
        grid.values[:] = 0.5
        generator = SquareDiamondGenerator(grid, RandomSource("flat"))
        generator.generate(8, 0.0)
        np.testing.assert_array_equal(grid.values, np.full((8, 8), 0.5))

    def test_random_draws_per_pass(self):
        generator = make_generator(size=4)
        generator.square_diamond(2, 1.0)
        # 4 square centres + 2 diamond points for each of 4 lattice origins
        assert generator.random_source.call_count == 12

    def test_octave_count(self):
        generator = make_generator(size=16)
        assert generator.generate(16, 1.0) == 5
        assert generator.generate(1, 1.0) == 1

    def test_total_draws_small_grid(self):
        generator = make_generator(size=4)
        generator.randomize()
        generator.generate(2, 1.0)
        # 16 noise + 12 at step 2 + 16 square + 32 diamond at step 1
        assert generator.random_source.call_count == 76

    def test_deterministic(self):
        a = make_generator(size=16, seed="same")
        b = make_generator(size=16, seed="same")
        for generator in (a, b):
            generator.randomize()
            generator.generate(8, 1.0)
        np.testing.assert_array_equal(a.grid.values, b.grid.values)

    def test_samples_larger_than_grid(self):
        """Steps wider than the grid still terminate and stay finite."""
        generator = make_generator(size=4)
        generator.randomize()
        assert generator.generate(16, 1.0) == 5
        assert np.all(np.isfinite(generator.grid.values))
