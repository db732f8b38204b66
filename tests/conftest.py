import logging
from pathlib import Path

import pytest
from loguru import logger

from container_models.image import TgaImage
from parsers import decode_tga

from .constants import SQUARE_LEVEL
from .helper_function import build_tga, unwrap_result


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def square_level_bytes() -> bytes:
    """Uncompressed 24-bit TGA of the 2x2 reference level."""
    return build_tga(SQUARE_LEVEL)


@pytest.fixture(scope="session")
def square_level_image(square_level_bytes: bytes) -> TgaImage:
    return unwrap_result(decode_tga(square_level_bytes))


@pytest.fixture
def levels_dir(tmp_path: Path, square_level_bytes: bytes) -> Path:
    """Directory holding a valid level, a level without start tile and a file that is no TGA."""
    directory = tmp_path / "levels"
    directory.mkdir()
    (directory / "forest.tga").write_bytes(square_level_bytes)
    (directory / "no_start.tga").write_bytes(build_tga([[(0, 0, 0), (255, 255, 255)]]))
    (directory / "broken.tga").write_bytes(b"not a tga")
    return directory
