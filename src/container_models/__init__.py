"""
Immutable data containers passed between the level generation steps.

A :class:`TgaImage` is produced by the TGA decoder and consumed by the level
extractor, which produces a :class:`Level`. Both are frozen pydantic models
backed by read-only numpy arrays, so a step can never modify the input of
another step.
"""

from .image import TgaImage
from .level import Level, TilePosition


__all__ = ["Level", "TgaImage", "TilePosition"]
