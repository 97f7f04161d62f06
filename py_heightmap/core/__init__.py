"""
Core heightmap generation functionality.
"""

from .alea_prng import AleaPRNG, RandomSource
from .errors import (
    HeightmapConfigurationError,
    InvalidBlockConfiguration,
    InvalidDimension,
    InvalidParameter,
)
from .filters import NormalizationResult, box_blur, normalize
from .heightmap_generator import GenerationParameters, Heightmap, HeightmapResult, generate_heightmap
from .ladders import detect_ladders
from .square_diamond import SquareDiamondGenerator
from .toroidal_grid import ToroidalGrid

__all__ = ['AleaPRNG', 'RandomSource', 'HeightmapConfigurationError', 'InvalidBlockConfiguration',
           'InvalidDimension', 'InvalidParameter', 'NormalizationResult', 'box_blur', 'normalize',
           'GenerationParameters', 'Heightmap', 'HeightmapResult', 'generate_heightmap',
           'detect_ladders', 'SquareDiamondGenerator', 'ToroidalGrid']
