"""
Configuration for heightmap generation.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
