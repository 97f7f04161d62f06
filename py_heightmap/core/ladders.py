"""
Ladder detection: marks steps between quantization bands.

The grid is cut into square blocks and each block is scanned on its own,
with a cap on how many cells it may flag so steep slopes don't flood the
overlay.
"""

from typing import Iterator, Tuple

import numpy as np
import structlog

from .errors import InvalidBlockConfiguration, InvalidParameter
from .filters import BACKGROUND_LEVEL

logger = structlog.get_logger()


def block_scan_indices(size: int, block_step: int, block_x: int, block_y: int) -> Iterator[int]:
    """
    Yield the row-major grid indices of one block in block-local scan order.

    Args:
        size: Grid edge length
        block_step: Block edge length
        block_x: Block column
        block_y: Block row
    """
    for p in range(block_step * block_step):
        row, col = divmod(p, block_step)
        yield (block_y * block_step + row) * size + block_x * block_step + col


def block_scan_predecessor(index: int) -> int:
    """
    Flat index whose value a scanned cell is compared against.

    This is the previous cell of the row-major grid, not the 2-D left
    neighbour inside the block: for a block's first column it lies in the
    block to the left, and for grid column 0 it is the last cell of the
    previous grid row.
    """
    return index - 1


def _is_excluded(index: int, size: int) -> bool:
    # First cell has no predecessor; last cell of the top row is skipped too.
    return index == 0 or index == size - 1


def detect_ladders(
    heights: np.ndarray,
    block_step: int = 8,
    ladders_per_block: int = 2,
) -> np.ndarray:
    """
    Build the ladder overlay for a quantized grid.

    A cell is flagged when its value differs from its block-scan
    predecessor and neither of the two is the background band.

    Args:
        heights: Quantized ``(size, size)`` grid indexed ``[y, x]``
        block_step: Edge length of the scan blocks; must divide ``size``
        ladders_per_block: Maximum flags per block

    Returns:
        Boolean overlay with the same shape as ``heights``
    """
    size = heights.shape[0]
    validate_block_configuration(size, block_step)
    if ladders_per_block < 1:
        raise InvalidParameter(f"Ladders per block must be >= 1, got {ladders_per_block}")

    flat = heights.ravel()
    ladders = np.zeros(flat.shape, dtype=bool)
    blocks = size // block_step

    for block_x, block_y in _blocks(blocks):
        placed = 0
        for index in block_scan_indices(size, block_step, block_x, block_y):
            if _is_excluded(index, size):
                continue

            current = flat[index]
            previous = flat[block_scan_predecessor(index)]
            if current != previous and current != BACKGROUND_LEVEL and previous != BACKGROUND_LEVEL:
                ladders[index] = True
                placed += 1
                if placed >= ladders_per_block:
                    break

    logger.debug("Detected ladders", count=int(ladders.sum()), blocks=blocks * blocks)
    return ladders.reshape(heights.shape)


def validate_block_configuration(size: int, block_step: int) -> None:
    """Raise InvalidBlockConfiguration unless ``block_step`` tiles ``size``."""
    if block_step < 1 or block_step > size or size % block_step != 0:
        raise InvalidBlockConfiguration(
            f"Block step {block_step} must be positive and evenly divide grid size {size}"
        )


def _blocks(count: int) -> Iterator[Tuple[int, int]]:
    for block_x in range(count):
        for block_y in range(count):
            yield block_x, block_y
