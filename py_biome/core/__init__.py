"""
Core biome data types.
"""

from .biome import Biome, DEFAULT_BIOME_NAME, DEFAULT_TEMPERATURE, DEFAULT_HUMIDITY

__all__ = ['Biome', 'DEFAULT_BIOME_NAME', 'DEFAULT_TEMPERATURE', 'DEFAULT_HUMIDITY']
