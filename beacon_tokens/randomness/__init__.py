"""Random byte acquisition."""

from .source import RandomBytes, RandomSource

__all__ = ["RandomSource", "RandomBytes"]
