from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from container_models.image import TgaImage
from utils.constants import GRAY, Channel, MarkerSum


class TileCounts(NamedTuple):
    start: int
    end: int
    active: int


class MarkerClassification(NamedTuple):
    counts: TileCounts
    start_index: int | None
    end_index: int | None


def marker_sums(image: TgaImage) -> NDArray[np.int64]:
    """
    Compute the raw Blue + Green + Red sum of every pixel, in row-major order.

    A monochrome pixel counts its gray value once for every colour channel.
    """
    pixels = image.pixels.reshape(image.num_pixels, image.channels).astype(np.int64)
    if image.channels == 1:
        return pixels[:, GRAY] * 3
    return pixels[:, [Channel.BLUE, Channel.GREEN, Channel.RED]].sum(axis=1)


def _last_index(indices: NDArray[np.intp]) -> int | None:
    return int(indices[-1]) if indices.size else None


def classify_markers(image: TgaImage) -> MarkerClassification:
    """
    Locate the start and end markers of a level image.

    Pixels summing to exactly 255 are start markers, 510 end markers and 765 active
    tiles. Marker indices are pixel ordinals; if a marker occurs more than once the
    last occurrence is reported.

    :param image: The decoded level image.
    :returns: The marker counts and the flat indices of the start and end markers.
    """
    sums = marker_sums(image)
    starts = np.flatnonzero(sums == MarkerSum.START)
    ends = np.flatnonzero(sums == MarkerSum.END)
    counts = TileCounts(
        start=starts.size,
        end=ends.size,
        active=int(np.count_nonzero(sums == MarkerSum.ACTIVE)),
    )
    return MarkerClassification(counts=counts, start_index=_last_index(starts), end_index=_last_index(ends))


def tile_grid(image: TgaImage) -> NDArray[np.uint8]:
    """Map every pixel with a nonzero intensity to 1 and every black pixel to 0."""
    return (image.intensity_map() != 0).astype(np.uint8)
