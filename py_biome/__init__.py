"""
Biome value objects.
"""

from .core import Biome, DEFAULT_BIOME_NAME, DEFAULT_TEMPERATURE, DEFAULT_HUMIDITY

__version__ = "0.1.0"

__all__ = ['Biome', 'DEFAULT_BIOME_NAME', 'DEFAULT_TEMPERATURE', 'DEFAULT_HUMIDITY']
