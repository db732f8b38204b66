from enum import IntEnum
from typing import Final


class Channel(IntEnum):
    """Byte position of a colour channel inside a decoded TGA pixel."""

    BLUE = 0
    GREEN = 1
    RED = 2
    ALPHA = 3


# single-channel images store one gray value per pixel
GRAY: Final[int] = 0


class MarkerSum(IntEnum):
    """Raw B + G + R sums that mark special tiles in a level image."""

    START = 255  # red
    END = 255 * 2  # cyan
    ACTIVE = 255 * 3  # white
