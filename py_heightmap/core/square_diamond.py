"""
Square-diamond midpoint displacement.

Every cell is seeded with noise first, then each octave re-estimates the
lattice points from their neighbours plus a random offset whose magnitude
halves from one octave to the next.
"""

import structlog

from .alea_prng import RandomSource
from .toroidal_grid import ToroidalGrid

logger = structlog.get_logger()


class SquareDiamondGenerator:
    """
    Refines a ToroidalGrid in place.

    Args:
        grid: Grid to write into
        random_source: Per-run sampler producing values in [-1, 1)
    """

    def __init__(self, grid: ToroidalGrid, random_source: RandomSource):
        self.grid = grid
        self.random_source = random_source

    def randomize(self) -> None:
        """Fill every cell with an independent sample (noise floor)."""
        size = self.grid.size
        for x in range(size):
            for y in range(size):
                self.grid.set(x, y, self.random_source.random())

    def generate(self, samples: int, scale: float) -> int:
        """
        Run octaves while ``samples`` is positive.

        Args:
            samples: Lattice step of the first octave, halved after each one
            scale: Displacement magnitude of the first octave, halved likewise

        Returns:
            Number of octaves applied
        """
        octaves = 0
        while samples > 0:
            self.square_diamond(samples, scale)
            logger.debug("Applied square-diamond octave", step=samples, scale=scale)
            samples //= 2
            scale /= 2.0
            octaves += 1
        return octaves

    def square_diamond(self, step: int, scale: float) -> None:
        """One square pass followed by one diamond pass at ``step``."""
        size = self.grid.size
        half = step // 2

        for y in range(half, size + half, step):
            for x in range(half, size + half, step):
                self._square(x, y, half, self.random_source.random() * scale)

        for y in range(0, size, step):
            for x in range(0, size, step):
                self._diamond(x + half, y, half, self.random_source.random() * scale)
                self._diamond(x, y + half, half, self.random_source.random() * scale)

    def _square(self, x: int, y: int, half: int, offset: float) -> None:
        get = self.grid.get
        a = get(x - half, y - half)
        b = get(x + half, y - half)
        c = get(x - half, y + half)
        d = get(x + half, y + half)
        self.grid.set(x, y, ((a + b + c + d) / 4.0) + offset)

    def _diamond(self, x: int, y: int, half: int, offset: float) -> None:
        get = self.grid.get
        a = get(x - half, y)
        b = get(x + half, y)
        c = get(x, y - half)
        d = get(x, y + half)
        self.grid.set(x, y, ((a + b + c + d) / 4.0) + offset)
