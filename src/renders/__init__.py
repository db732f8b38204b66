from .level_writer import LevelWriter, format_level

__all__ = ["LevelWriter", "format_level"]
