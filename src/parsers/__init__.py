"""
TGA decoding for level images.

The decoder turns a raw TGA byte stream into a :class:`~container_models.TgaImage`.
Parser functions are designed to work within railway-oriented programming
pipelines: they return ``Result``/``IOResult`` containers holding either the
decoded image or the :class:`DecodeError` describing why decoding stopped.

Supported Variants
------------------
- Image types 2 and 3: uncompressed true-colour and monochrome data
- Image types 10 and 11: run-length encoded true-colour and monochrome data
- Bit depths 8, 24 and 32
- No colour-mapped (palette) images
"""

from .exceptions import (
    DecodeError,
    EmptyImage,
    FileOpenError,
    LevelGenError,
    TruncatedData,
    UnsupportedBitDepth,
    UnsupportedColormap,
    UnsupportedImageType,
)
from .tga import decode_tga, load_tga_image, parse_header, read_tga_file

__all__ = (
    "decode_tga",
    "load_tga_image",
    "parse_header",
    "read_tga_file",
    "DecodeError",
    "EmptyImage",
    "FileOpenError",
    "LevelGenError",
    "TruncatedData",
    "UnsupportedBitDepth",
    "UnsupportedColormap",
    "UnsupportedImageType",
)
