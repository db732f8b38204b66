"""Convert TGA level images into a level list for the game.

In a level image a black pixel means no tile, a red pixel marks the start
tile, a cyan pixel (r, g, b = 0, 255, 255) marks the end tile and any other
non-black pixel is an ordinary tile.

Usage:
    levelgen levels.js forest.tga desert.tga
    levelgen - levels/*.tga > levels.js
"""

import argparse
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn, TextIO

from loguru import logger

from parsers import FileOpenError
from pipelines import run_batch
from renders import LevelWriter
from settings import Settings, get_settings

STDOUT_TARGET = "-"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="levelgen", description="Convert TGA level images into a level list")
    parser.add_argument("output", help=f"Level file to write, or '{STDOUT_TARGET}' for standard output")
    parser.add_argument("images", nargs="+", type=Path, metavar="tga-file", help="TGA level images to convert")
    return parser


def configure_logging(settings: Settings) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=settings.log_format)


@contextmanager
def open_output(target: str) -> Iterator[TextIO]:
    """
    Open the output stream, standard output for ``-``.

    Standard output is left open when the context is left.

    :param target: The output path or ``-``.
    :raises FileOpenError: If the output file cannot be opened for writing.
    """
    if target == STDOUT_TARGET:
        yield sys.stdout
        return
    try:
        stream = open(target, "w", encoding="utf-8")
    except OSError as error:
        raise FileOpenError(Path(target)) from error
    with stream:
        yield stream


def main(argv: Sequence[str] | None = None) -> int:
    """Run the level generator and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)
    settings.log_startup_config()

    try:
        with open_output(args.output) as stream:
            with LevelWriter(stream, settings.variable_name, settings.indent) as writer:
                summary = run_batch(args.images, writer)
    except FileOpenError as error:
        logger.error(str(error))
        return 1

    logger.info(str(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
