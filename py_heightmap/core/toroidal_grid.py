"""
Square float grid with toroidal (wraparound) addressing.
"""

import numpy as np

from .errors import InvalidDimension


def is_power_of_two(value: int) -> bool:
    """Return True for 1, 2, 4, 8, ..."""
    if not isinstance(value, (int, np.integer)):
        return False
    return value > 0 and (value & (value - 1)) == 0


class ToroidalGrid:
    """
    Fixed-size square buffer addressed modulo its size.

    Coordinates are masked with ``size - 1`` so any integer pair, negative
    or past the edge, lands on a cell. That only works for power-of-two
    sizes, which is checked here.

    Values are stored as a ``(size, size)`` float64 array indexed ``[y, x]``.
    """

    def __init__(self, size: int):
        if not is_power_of_two(size):
            raise InvalidDimension(f"Grid size must be a positive power of two, got {size!r}")

        self.size = int(size)
        self._mask = self.size - 1
        self.values = np.zeros((self.size, self.size), dtype=np.float64)

    def get(self, x: int, y: int) -> float:
        return self.values[y & self._mask, x & self._mask]

    def set(self, x: int, y: int, value: float) -> None:
        self.values[y & self._mask, x & self._mask] = value

    def snapshot(self) -> np.ndarray:
        """Copy of the current values, safe to read while the grid is written."""
        return self.values.copy()

    def copy(self) -> "ToroidalGrid":
        grid = ToroidalGrid(self.size)
        grid.values[:] = self.values
        return grid

    def __len__(self) -> int:
        return self.size * self.size

    def __repr__(self) -> str:
        return f"ToroidalGrid(size={self.size})"
