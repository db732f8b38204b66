from loguru import logger
from returns.result import safe

from container_models.image import TgaImage
from container_models.level import MISSING_INDEX, Level, TilePosition
from utils.logger import FailureLevel, log_railway_function

from .classification import classify_markers, tile_grid
from .exceptions import InvalidTileCount


@log_railway_function(
    "Failed to extract level",
    "Successfully extracted level",
    failure_level=FailureLevel.DEBUG,
)
@safe
def extract_level(image: TgaImage, name: str) -> Level:
    """
    Turn a decoded level image into a `Level`.

    Exactly one start marker is required. End markers are not validated: the last
    one found is used, and without any the end tile is the position of `MISSING_INDEX`.

    :param image: The decoded level image.
    :param name: The name of the level.
    :returns: A `ResultE` holding the `Level`, or an `InvalidTileCount` failure.
    """
    markers = classify_markers(image)
    counts = markers.counts
    logger.debug(f"{name}: {counts.start} start, {counts.end} end and {counts.active} active tiles")

    if counts.start != 1:
        raise InvalidTileCount(counts.start, counts.end)

    end_index = MISSING_INDEX if markers.end_index is None else markers.end_index

    return Level(
        name=name,
        rows=image.height,
        cols=image.width,
        tiles=tile_grid(image),
        start_tile=TilePosition.from_index(markers.start_index, image.width),  # type: ignore[arg-type]
        end_tile=TilePosition.from_index(end_index, image.width),
    )
