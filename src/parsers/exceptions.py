from pathlib import Path


class LevelGenError(Exception):
    """Base class of all errors raised while turning an image into a level."""


class FileOpenError(LevelGenError):
    """Raised when an input or output path cannot be opened."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Couldn't open {path}")


class DecodeError(LevelGenError):
    """Raised when a byte stream is not a supported TGA image."""

    def __init__(self, message: str, offset: int | None = None):
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)


class UnsupportedColormap(DecodeError):
    def __init__(self, colormap_type: int):
        self.colormap_type = colormap_type
        super().__init__(f"Colormap TGA files aren't supported (colormap type: {colormap_type})", offset=1)


class UnsupportedBitDepth(DecodeError):
    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"TGA files with a bit depth of {depth} aren't supported", offset=0x10)


class UnsupportedImageType(DecodeError):
    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Unknown TGA image type (type code: {code})", offset=2)


class EmptyImage(DecodeError):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"TGA image has no pixels ({width}x{height})", offset=0xC)


class TruncatedData(DecodeError):
    """Raised when the stream ends before all required bytes were read."""

    def __init__(self, expected: int, actual: int, offset: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Missing or invalid TGA image data: expected {expected} bytes, got {actual}", offset=offset)
