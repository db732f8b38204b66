"""Decoded TGA raster container.

::

    +--------------------------------------+
    |              TgaImage                |
    |--------------------------------------|
    | width    : int (columns)             |
    | height   : int (rows)                |
    | channels : 1 | 3 | 4                 |
    | pixels   : PixelBuffer (uint8)       |
    +--------------------------------------+
    | at(x, y, channel) -> int             |
    | intensity(x, y) -> int               |
    | grid -> (H, W, C) view               |
    | intensity_map() -> (H, W) array      |
    +--------------------------------------+

Pixels are stored row-major in the channel order found in the file: Blue, Green,
Red and optionally Alpha for true-colour images, a single Gray value for
monochrome images. Alpha is never used for intensity.
"""

from __future__ import annotations

from typing import Literal, Self

import numpy as np
from numpy.typing import NDArray
from pydantic import PositiveInt, model_validator

from utils.constants import GRAY, Channel

from .base import ConfigBaseModel, PixelBuffer


class TgaImage(ConfigBaseModel):
    width: PositiveInt
    height: PositiveInt
    channels: Literal[1, 3, 4]
    pixels: PixelBuffer

    @model_validator(mode="after")
    def _check_buffer_size(self) -> Self:
        expected = self.width * self.height * self.channels
        if self.pixels.size != expected:
            raise ValueError(f"Pixel buffer holds {self.pixels.size} bytes, expected {expected}")
        return self

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @property
    def grid(self) -> NDArray[np.uint8]:
        """Read-only (height, width, channels) view on the pixel buffer."""
        return self.pixels.reshape(self.height, self.width, self.channels)

    def at(self, x: int, y: int, channel: int) -> int:
        """Return the raw byte stored for `channel` of the pixel in column `x`, row `y`."""
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= channel < self.channels):
            raise IndexError(f"Pixel ({x}, {y}, {channel}) outside of {self.width}x{self.height}x{self.channels} image")
        return int(self.pixels[y * self.width * self.channels + x * self.channels + channel])

    def intensity(self, x: int, y: int) -> int:
        """
        Return the intensity of a single pixel.

        Monochrome pixels use their gray value, colour pixels the integer mean of red,
        green and blue.
        """
        if self.channels == 1:
            return self.at(x, y, GRAY)
        red, green, blue = (self.at(x, y, channel) for channel in (Channel.RED, Channel.GREEN, Channel.BLUE))
        return (red + green + blue) // 3

    def intensity_map(self) -> NDArray[np.int64]:
        """Vectorised :meth:`intensity` for all pixels, shape (height, width)."""
        grid = self.grid.astype(np.int64)
        if self.channels == 1:
            return grid[..., GRAY]
        return grid[..., [Channel.RED, Channel.GREEN, Channel.BLUE]].sum(axis=-1) // 3
