"""
py-heightmap: square-diamond heightmaps with quantized bands and ladder markers.
"""

from .core import (
    GenerationParameters,
    Heightmap,
    HeightmapConfigurationError,
    HeightmapResult,
    InvalidBlockConfiguration,
    InvalidDimension,
    InvalidParameter,
    RandomSource,
    ToroidalGrid,
    generate_heightmap,
)

__version__ = "0.1.0"

__all__ = ['GenerationParameters', 'Heightmap', 'HeightmapConfigurationError', 'HeightmapResult',
           'InvalidBlockConfiguration', 'InvalidDimension', 'InvalidParameter', 'RandomSource',
           'ToroidalGrid', 'generate_heightmap', '__version__']
