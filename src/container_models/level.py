from __future__ import annotations

from typing import Final, Self

import numpy as np
from pydantic import Field, PositiveInt, model_validator

from .base import ConfigBaseModel, TileGrid

# pixel ordinal written for a level without an end tile
MISSING_INDEX: Final[int] = -1


class TilePosition(ConfigBaseModel):
    row: int = Field(..., ge=-1)
    col: int = Field(..., ge=-1)

    @classmethod
    def from_index(cls, index: int, width: int) -> TilePosition:
        """
        Build a position from a flat, row-major pixel ordinal.

        Division truncates towards zero, so `MISSING_INDEX` maps to (0, -1), or to
        (-1, 0) for a single column level.
        """
        row = -(-index // width) if index < 0 else index // width
        return cls(row=row, col=index - row * width)

    def inside(self, rows: int, cols: int) -> bool:
        return 0 <= self.row < rows and 0 <= self.col < cols


class Level(ConfigBaseModel):
    """
    A game level extracted from a single TGA image.

    `tiles` holds 1 for every tile that can be walked on and 0 for empty space.
    A level without an end marker gets the position of `MISSING_INDEX` as end tile.
    `width` and `depth` are left empty for editing by hand after generation.
    """

    name: str
    rows: PositiveInt
    cols: PositiveInt
    tiles: TileGrid
    start_tile: TilePosition = Field(..., serialization_alias="startTile")
    end_tile: TilePosition = Field(..., serialization_alias="endTile")
    width: None = None
    depth: None = None

    @property
    def has_end_tile(self) -> bool:
        return self.end_tile.inside(self.rows, self.cols)

    @model_validator(mode="after")
    def _check_tiles(self) -> Self:
        if self.tiles.shape != (self.rows, self.cols):
            raise ValueError(f"Tile grid has shape {self.tiles.shape}, expected {(self.rows, self.cols)}")
        if not np.isin(self.tiles, (0, 1)).all():
            raise ValueError("Tile values must be 0 or 1")
        if not self.start_tile.inside(self.rows, self.cols):
            raise ValueError(f"Tile {self.start_tile} lies outside of the {self.rows}x{self.cols} level")
        if not (self.has_end_tile or self.end_tile == TilePosition.from_index(MISSING_INDEX, self.cols)):
            raise ValueError(f"Tile {self.end_tile} lies outside of the {self.rows}x{self.cols} level")
        return self
