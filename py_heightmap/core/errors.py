"""
Exceptions raised for invalid heightmap configuration.

All of them are raised eagerly, before any grid is allocated or any random
sample is drawn, so a failed run never leaves a partial grid behind.
"""


class HeightmapConfigurationError(ValueError):
    """Base class for invalid generation parameters."""


class InvalidDimension(HeightmapConfigurationError):
    """Grid size is not a positive power of two."""


class InvalidBlockConfiguration(HeightmapConfigurationError):
    """Ladder block step does not evenly tile the grid."""


class InvalidParameter(HeightmapConfigurationError):
    """Any other generation parameter is out of range."""
