"""
Biome value object.

A biome is a named environment described by a temperature and a humidity
reading. Values are stored exactly as given: no clamping or range checks
are applied (humidity is nominally a 0-100 percentage, temperature is in °C).
"""

from dataclasses import dataclass

DEFAULT_BIOME_NAME = "Default Biome"
DEFAULT_TEMPERATURE = 20  # °C
DEFAULT_HUMIDITY = 50  # percent


@dataclass
class Biome:
    """Named environment with temperature and humidity readings."""

    name: str = DEFAULT_BIOME_NAME
    temperature: float = DEFAULT_TEMPERATURE
    humidity: float = DEFAULT_HUMIDITY
