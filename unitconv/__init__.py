"""Interactive converter for temperature, distance and weight units."""

__version__ = "1.0.0"
__all__ = ["cli", "distance", "screen", "temperature", "weight"]