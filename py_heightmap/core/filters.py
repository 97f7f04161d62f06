"""
Post-processing passes over a generated grid: box blur and normalization.
"""

from dataclasses import dataclass

import numpy as np
import structlog

from .errors import InvalidParameter
from .toroidal_grid import ToroidalGrid

logger = structlog.get_logger()

BACKGROUND_LEVEL = 0.0


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of a normalization pass."""

    minimum: float
    maximum: float
    degenerate: bool = False


def box_blur(grid: ToroidalGrid, radius: int) -> None:
    """
    Replace each cell with the mean of its ``(2*radius + 1)^2`` window.

    The window wraps around the edges, so border cells get as many samples
    as interior ones. All reads come from a snapshot taken before the pass.

    Args:
        grid: Grid to blur in place
        radius: Window radius; 0 leaves the grid unchanged
    """
    if radius < 0:
        raise InvalidParameter(f"Blur radius must be >= 0, got {radius}")

    source = grid.snapshot()
    total = np.zeros_like(source)
    count = 0

    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            total += np.roll(source, shift=(-dy, -dx), axis=(0, 1))
            count += 1

    grid.values[:] = total / count


def quantize(values: np.ndarray, levels: int) -> np.ndarray:
    """
    Round values in [0, 1] to the nearest multiple of ``1 / levels``.

    Ties round away from zero (0.125 -> 0.25 with 4 levels), the same as
    ``math.floor(v * levels + 0.5)`` for non-negative input.
    """
    return np.floor(values * levels + 0.5) / levels


def normalize(grid: ToroidalGrid, levels: int = 4) -> NormalizationResult:
    """
    Rescale the grid to [0, 1] and quantize it into ``levels`` bands.

    A uniform grid (max == min) cannot be rescaled; every cell is set to the
    background band and the result is flagged as degenerate instead.

    Args:
        grid: Grid to normalize in place
        levels: Number of bands above the background level

    Returns:
        NormalizationResult with the pre-normalization range
    """
    if levels < 1:
        raise InvalidParameter(f"Quantization levels must be >= 1, got {levels}")

    minimum = float(np.min(grid.values))
    maximum = float(np.max(grid.values))

    if maximum == minimum:
        logger.warning("Uniform grid, normalizing to background band", value=minimum)
        grid.values[:] = BACKGROUND_LEVEL
        return NormalizationResult(minimum, maximum, degenerate=True)

    scaled = (grid.values - minimum) / (maximum - minimum)
    grid.values[:] = quantize(scaled, levels)

    logger.debug("Normalized grid", minimum=minimum, maximum=maximum, levels=levels)
    return NormalizationResult(minimum, maximum)
