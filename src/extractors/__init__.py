"""
Level extraction from decoded TGA images.

Colours in a level image have a fixed meaning: black is empty space, red
marks the start tile, cyan the end tile and any other non-black colour an
ordinary tile.
"""

from .classification import MarkerClassification, TileCounts, classify_markers, marker_sums, tile_grid
from .exceptions import ClassificationError, InvalidTileCount
from .level import extract_level
from .naming import level_name

__all__ = (
    "classify_markers",
    "extract_level",
    "level_name",
    "marker_sums",
    "tile_grid",
    "ClassificationError",
    "InvalidTileCount",
    "MarkerClassification",
    "TileCounts",
)
