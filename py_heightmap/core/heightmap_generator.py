"""
Heightmap generation pipeline.

Ties the pieces together in their fixed order: noise floor and
square-diamond refinement, box blur, normalization, ladder detection.
Each run owns its grid, its overlay and its random source.
"""

import math
from dataclasses import asdict, dataclass
from typing import Optional

import numpy as np
import structlog

from .alea_prng import RandomSource, Seed
from .errors import InvalidDimension, InvalidParameter
from .filters import NormalizationResult, box_blur, normalize
from .ladders import detect_ladders, validate_block_configuration
from .square_diamond import SquareDiamondGenerator
from .toroidal_grid import ToroidalGrid, is_power_of_two

logger = structlog.get_logger()


def validate_post_processing(
    size: int, quantization_levels: int, block_step: int, ladders_per_block: int
) -> None:
    """Check the normalization and ladder settings for a grid of ``size``."""
    if not is_power_of_two(size):
        raise InvalidDimension(f"Grid size must be a positive power of two, got {size}")
    if quantization_levels < 1:
        raise InvalidParameter(f"Quantization levels must be >= 1, got {quantization_levels}")
    if ladders_per_block < 1:
        raise InvalidParameter(f"Ladders per block must be >= 1, got {ladders_per_block}")
    validate_block_configuration(size, block_step)


@dataclass(frozen=True)
class GenerationParameters:
    """
    Parameters of one generation run.

    Validated on construction so that bad values fail before any grid is
    allocated.
    """

    size: int = 32
    samples: int = 16
    scale: float = 1.0
    blur_radius: int = 1
    quantization_levels: int = 4
    block_step: int = 8
    ladders_per_block: int = 2

    def __post_init__(self):
        if not is_power_of_two(self.size):
            raise InvalidDimension(f"Grid size must be a positive power of two, got {self.size}")
        if not is_power_of_two(self.samples):
            raise InvalidParameter(f"Samples must be a positive power of two, got {self.samples}")
        if not math.isfinite(self.scale):
            raise InvalidParameter(f"Scale must be finite, got {self.scale}")
        if self.blur_radius < 0:
            raise InvalidParameter(f"Blur radius must be >= 0, got {self.blur_radius}")
        validate_post_processing(
            self.size, self.quantization_levels, self.block_step, self.ladders_per_block
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class HeightmapResult:
    """Finished grid and ladder overlay, everything an exporter needs."""

    heights: np.ndarray
    ladders: np.ndarray
    degenerate: bool
    parameters: GenerationParameters
    seed: Seed

    @property
    def ladder_count(self) -> int:
        return int(np.count_nonzero(self.ladders))


class Heightmap:
    """
    Square-diamond heightmap with post-processing stages.

    The grid is filled with noise on construction; call the stages in
    order (generate, blur, normalize, ladder_generate) or use
    ``generate_heightmap`` to run them all.

    Args:
        size: Grid edge, a power of two
        random_source: Per-run sampler; use ``RandomSource(seed)``
        quantization_levels: Number of bands produced by ``normalize``
        block_step: Edge of the ladder scan blocks
        ladders_per_block: Cap on ladders per block
    """

    def __init__(
        self,
        size: int,
        random_source: RandomSource,
        quantization_levels: int = 4,
        block_step: int = 8,
        ladders_per_block: int = 2,
    ):
        validate_post_processing(size, quantization_levels, block_step, ladders_per_block)

        self.grid = ToroidalGrid(size)
        self.size = self.grid.size
        self.random_source = random_source
        self.quantization_levels = quantization_levels
        self.block_step = block_step
        self.ladders_per_block = ladders_per_block
        self.ladders = np.zeros((self.size, self.size), dtype=bool)
        self.normalization: Optional[NormalizationResult] = None

        self._generator = SquareDiamondGenerator(self.grid, random_source)
        self._generator.randomize()

    @property
    def heights(self) -> np.ndarray:
        return self.grid.values

    def get(self, x: int, y: int) -> float:
        return self.grid.get(x, y)

    def set(self, x: int, y: int, value: float) -> None:
        self.grid.set(x, y, value)

    def generate(self, samples: int, scale: float) -> None:
        octaves = self._generator.generate(samples, scale)
        logger.debug("Generated terrain", octaves=octaves, random_calls=self.random_source.call_count)

    def blur(self, radius: int) -> None:
        box_blur(self.grid, radius)

    def normalize(self) -> NormalizationResult:
        self.normalization = normalize(self.grid, self.quantization_levels)
        return self.normalization

    def ladder_generate(self) -> np.ndarray:
        self.ladders = detect_ladders(self.grid.values, self.block_step, self.ladders_per_block)
        return self.ladders


def generate_heightmap(parameters: GenerationParameters, seed: Seed) -> HeightmapResult:
    """
    Run the full pipeline for one set of parameters.

    Args:
        parameters: Validated generation parameters
        seed: Seed for this run's random source

    Returns:
        HeightmapResult with quantized heights and the ladder overlay
    """
    logger.info("Generating heightmap", seed=seed, **parameters.to_dict())

    heightmap = Heightmap(
        parameters.size,
        RandomSource(seed),
        quantization_levels=parameters.quantization_levels,
        block_step=parameters.block_step,
        ladders_per_block=parameters.ladders_per_block,
    )
    heightmap.generate(parameters.samples, parameters.scale)
    heightmap.blur(parameters.blur_radius)
    normalization = heightmap.normalize()
    heightmap.ladder_generate()

    result = HeightmapResult(
        heights=heightmap.heights.copy(),
        ladders=heightmap.ladders.copy(),
        degenerate=normalization.degenerate,
        parameters=parameters,
        seed=seed,
    )
    logger.info(
        "Heightmap generated",
        seed=seed,
        ladders=result.ladder_count,
        degenerate=result.degenerate,
    )
    return result
