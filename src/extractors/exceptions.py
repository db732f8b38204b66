from parsers.exceptions import LevelGenError


class ClassificationError(LevelGenError):
    """Raised when a decoded image does not describe a valid level."""


class InvalidTileCount(ClassificationError):
    def __init__(self, start_count: int, end_count: int):
        self.start_count = start_count
        self.end_count = end_count
        super().__init__(f"contains {start_count} start tiles and {end_count} end tiles")
