"""
Railway-oriented level generation pipelines.

Every input file runs through a pipeline of two tracks: a success track and a
failure track. Each step (reading, decoding, extracting) either continues on the
success track or switches to the failure track, so a broken file only affects
its own result. `run_batch` drives the pipeline for a list of files, streams the
successful levels to a `LevelWriter` and reports every skipped file.
"""

from collections.abc import Iterable
from functools import partial
from pathlib import Path
from typing import NamedTuple

from loguru import logger
from returns.io import IOFailure, IOResultE, IOSuccess
from returns.result import Failure, Success

from container_models.level import Level
from extractors import InvalidTileCount, extract_level, level_name
from parsers import DecodeError, FileOpenError, load_tga_image
from renders import LevelWriter


class BatchSummary(NamedTuple):
    processed: int
    skipped: int

    @property
    def total(self) -> int:
        return self.processed + self.skipped

    def __str__(self) -> str:
        return f"{self.total} files: {self.processed} processed, {self.skipped} skipped"


def process_tga_file(path: Path) -> IOResultE[Level]:
    """
    Read, decode and extract the level stored in a single TGA file.

    :param path: The path to the TGA file.
    :returns: An `IOResultE` holding the `Level`, or the error that stopped the pipeline.
    """
    return load_tga_image(path).bind_result(partial(extract_level, name=level_name(path)))


def _skip_message(path: Path, error: Exception) -> str:
    match error:
        case FileOpenError():
            return f"Couldn't open {path}. Skipping."
        case DecodeError():
            return f"Error reading TGA {path}: {error}. Skipping."
        case InvalidTileCount(start_count=start_count, end_count=end_count):
            return f"Error: {path} contains {start_count} start tiles and {end_count} end tiles. Skipping."
        case _:
            return f"Unexpected error while processing {path}: {error!r}. Skipping."


def run_batch(paths: Iterable[Path], writer: LevelWriter) -> BatchSummary:
    """
    Convert TGA files one after the other, writing every extracted level.

    Failures are logged and counted; they never stop the batch.

    :param paths: The TGA files, in output order.
    :param writer: The entered `LevelWriter` receiving the levels.
    :returns: The number of processed and skipped files.
    """
    processed = skipped = 0
    for number, path in enumerate(paths, start=1):
        logger.info(f"[{number}] Processing {path}")
        match process_tga_file(path):
            case IOSuccess(Success(level)):
                writer.write(level)
                processed += 1
            case IOFailure(Failure(error)):
                logger.error(_skip_message(path, error))
                skipped += 1
    return BatchSummary(processed=processed, skipped=skipped)
