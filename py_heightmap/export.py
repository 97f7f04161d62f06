"""
Rendering of a finished heightmap to an RGBA image.

Heights become grey levels and ladder cells are painted red on top.
PNG encoding is left to matplotlib.
"""

import io
from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import structlog  # noqa: E402

from .core.heightmap_generator import HeightmapResult  # noqa: E402

logger = structlog.get_logger()

LADDER_COLOR = (255, 0, 0, 255)


def render_rgba(heights: np.ndarray, ladders: np.ndarray) -> np.ndarray:
    """
    Map heights in [0, 1] and the ladder overlay to an RGBA image.

    Each height becomes a 16-bit grey level ``round(v * 65535)``, stored in
    8 bits per channel by keeping its high byte.

    Args:
        heights: ``(size, size)`` array indexed ``[y, x]``
        ladders: Boolean overlay of the same shape

    Returns:
        ``(size, size, 4)`` uint8 array
    """
    if heights.shape != ladders.shape:
        raise ValueError(f"Shape mismatch: heights {heights.shape}, ladders {ladders.shape}")

    gray16 = np.round(np.clip(heights, 0.0, 1.0) * 0xFFFF).astype(np.uint16)
    gray8 = (gray16 >> 8).astype(np.uint8)

    image = np.empty(heights.shape + (4,), dtype=np.uint8)
    image[..., 0] = gray8
    image[..., 1] = gray8
    image[..., 2] = gray8
    image[..., 3] = 255
    image[ladders] = LADDER_COLOR
    return image


def png_bytes(result: HeightmapResult) -> bytes:
    """Encode a result as PNG bytes."""
    buffer = io.BytesIO()
    plt.imsave(buffer, render_rgba(result.heights, result.ladders), format="png")
    return buffer.getvalue()


def save_png(result: HeightmapResult, path: Union[str, Path]) -> Path:
    """
    Write a result to a PNG file.

    Args:
        result: Finished heightmap
        path: Destination file; parent directories are created

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(path, render_rgba(result.heights, result.ladders), format="png")
    logger.info("Generated image", path=str(path), size=result.parameters.size)
    return path
