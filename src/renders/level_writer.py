"""Serialization of levels to the level-list text format read by the game.

The output is a JavaScript-style list of single-quoted maps::

    var levels = [
      {
        'name': 'forest',
        'rows': 2,
        'cols': 2,
        'tiles': [
          [ 1, 0, ],
          [ 1, 1, ],
        ],
        'startTile': { 'row': 0, 'col': 0 },
        'endTile': { 'row': 1, 'col': 0 },
        'width': null,
        'depth': null,
      },
    ];
"""

from types import TracebackType
from typing import Self, TextIO

from container_models.level import Level, TilePosition


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _format_position(position: TilePosition) -> str:
    return f"{{ 'row': {position.row}, 'col': {position.col} }}"


def format_level(level: Level, indent: int = 2) -> str:
    """
    Render a single level record, including its trailing comma and newline.

    :param level: The level to render.
    :param indent: The number of spaces of one indentation step.
    :returns: The rendered record.
    """
    pad = " " * indent
    lines = [
        f"{pad}{{",
        f"{pad * 2}'name': {_quote(level.name)},",
        f"{pad * 2}'rows': {level.rows},",
        f"{pad * 2}'cols': {level.cols},",
        f"{pad * 2}'tiles': [",
        *(f"{pad * 3}[{''.join(f' {value},' for value in row)} ]," for row in level.tiles.tolist()),
        f"{pad * 2}],",
        f"{pad * 2}'startTile': {_format_position(level.start_tile)},",
        f"{pad * 2}'endTile': {_format_position(level.end_tile)},",
        f"{pad * 2}'width': null,",
        f"{pad * 2}'depth': null,",
        f"{pad}}},",
    ]
    return "\n".join(lines) + "\n"


class LevelWriter:
    """
    Stream levels to a text stream as they are produced.

    The list header is written when the context is entered and the footer when it
    is left, also when an exception is propagating. The stream is flushed after each
    level but never closed.
    """

    def __init__(self, stream: TextIO, variable_name: str = "levels", indent: int = 2):
        self.stream = stream
        self.variable_name = variable_name
        self.indent = indent
        self.count = 0

    @property
    def header(self) -> str:
        return f"var {self.variable_name} = [\n" if self.variable_name else "[\n"

    @property
    def footer(self) -> str:
        return "];\n" if self.variable_name else "]\n"

    def __enter__(self) -> Self:
        self.stream.write(self.header)
        return self

    def write(self, level: Level) -> None:
        self.stream.write(format_level(level, self.indent))
        self.stream.flush()
        self.count += 1

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.stream.write(self.footer)
        self.stream.flush()
