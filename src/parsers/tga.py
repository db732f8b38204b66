"""TGA (Truevision raster image) decoder.

Only the variants used for level images are supported: uncompressed and
run-length encoded true-colour (8, 24 or 32 bit) and monochrome images without
a colour map. Pixel rows are returned in the order in which they are stored;
the origin bit of the image descriptor is not interpreted.

Header layout (18 bytes, little-endian)::

    0x00  image ID length
    0x01  colour map type     (must be 0)
    0x02  image type          (2, 3, 10 or 11)
    0x03  colour map spec     (5 bytes, ignored)
    0x08  x / y origin        (2 x 2 bytes, ignored)
    0x0C  width
    0x0E  height
    0x10  bits per pixel      (8, 24 or 32)
    0x11  image descriptor    (ignored)
"""

import struct
from collections.abc import Callable
from pathlib import Path
from typing import Final, NamedTuple

import numpy as np
from numpy.typing import NDArray
from returns.io import IOResultE, impure_safe
from returns.pipeline import flow
from returns.pointfree import bind_result
from returns.result import safe

from container_models.image import TgaImage
from utils.logger import FailureLevel, log_railway_function

from .exceptions import (
    EmptyImage,
    FileOpenError,
    TruncatedData,
    UnsupportedBitDepth,
    UnsupportedColormap,
    UnsupportedImageType,
)

HEADER_SIZE: Final[int] = 18
SUPPORTED_BIT_DEPTHS: Final[frozenset[int]] = frozenset({8, 24, 32})

RLE_PACKET_FLAG: Final[int] = 0x80
RLE_COUNT_MASK: Final[int] = 0x7F

_HEADER_FORMAT = struct.Struct("<BBB5x4xHHBB")


class TgaHeader(NamedTuple):
    id_length: int
    colormap_type: int
    image_type: int
    width: int
    height: int
    bit_depth: int
    descriptor: int

    @property
    def channels(self) -> int:
        return self.bit_depth // 8

    @property
    def num_pixels(self) -> int:
        return self.width * self.height


class _ByteReader:
    """Sequential reader over an in-memory byte stream that remembers its offset."""

    def __init__(self, data: bytes, offset: int = 0):
        self._data = memoryview(data)
        self.offset = offset

    def read(self, size: int) -> bytes:
        chunk = bytes(self._data[self.offset : self.offset + size])
        if len(chunk) < size:
            raise TruncatedData(expected=size, actual=len(chunk), offset=self.offset)
        self.offset += size
        return chunk

    def read_byte(self) -> int:
        return self.read(1)[0]


def parse_header(data: bytes) -> TgaHeader:
    """
    Parse and validate the fixed size TGA header.

    :param data: The raw file contents, starting at the header.
    :returns: The parsed header.
    :raises TruncatedData: If fewer than 18 bytes are available.
    :raises UnsupportedColormap: If the image uses a colour map.
    :raises UnsupportedBitDepth: If the bit depth is not 8, 24 or 32.
    :raises EmptyImage: If the width or height is zero.
    """
    if len(data) < HEADER_SIZE:
        raise TruncatedData(expected=HEADER_SIZE, actual=len(data), offset=0)
    header = TgaHeader(*_HEADER_FORMAT.unpack_from(data))

    if header.colormap_type != 0:
        raise UnsupportedColormap(header.colormap_type)
    if header.bit_depth not in SUPPORTED_BIT_DEPTHS:
        raise UnsupportedBitDepth(header.bit_depth)
    if header.num_pixels == 0:
        raise EmptyImage(header.width, header.height)
    return header


def _decode_uncompressed(reader: _ByteReader, num_pixels: int, channels: int) -> bytes:
    return reader.read(num_pixels * channels)


def _decode_rle(reader: _ByteReader, num_pixels: int, channels: int) -> bytes:
    """
    Expand run-length encoded packets until `num_pixels` pixels are produced.

    A packet starts with a header byte; its low 7 bits hold the pixel count minus one.
    With the high bit set a single pixel follows that is repeated, otherwise the
    pixels follow verbatim. A packet running past the last pixel is clipped.
    """
    pixels = bytearray()
    produced = 0
    while produced < num_pixels:
        packet = reader.read_byte()
        count = (packet & RLE_COUNT_MASK) + 1
        if packet & RLE_PACKET_FLAG:
            pixels += reader.read(channels) * count
        else:
            pixels += reader.read(count * channels)
        produced += count
    return bytes(pixels[: num_pixels * channels])


type PixelDecoder = Callable[[_ByteReader, int, int], bytes]

_PIXEL_DECODERS: Final[dict[int, PixelDecoder]] = {
    2: _decode_uncompressed,  # true-colour
    3: _decode_uncompressed,  # monochrome
    10: _decode_rle,  # true-colour, RLE compressed
    11: _decode_rle,  # monochrome, RLE compressed
}


@log_railway_function(
    "Failed to decode TGA data",
    "Successfully decoded TGA data",
    failure_level=FailureLevel.DEBUG,
)
@safe
def decode_tga(data: bytes) -> TgaImage:
    """
    Decode a complete TGA file held in memory.

    :param data: The raw file contents.
    :returns: A `ResultE` holding the decoded `TgaImage`, or the `DecodeError` that stopped decoding.
    """
    header = parse_header(data)
    decoder = _PIXEL_DECODERS.get(header.image_type)
    if decoder is None:
        raise UnsupportedImageType(header.image_type)

    reader = _ByteReader(data, offset=HEADER_SIZE)
    reader.read(header.id_length)  # image ID field
    pixels: NDArray[np.uint8] = np.frombuffer(decoder(reader, header.num_pixels, header.channels), dtype=np.uint8)
    return TgaImage(width=header.width, height=header.height, channels=header.channels, pixels=pixels)


@log_railway_function(
    "Failed to read TGA file",
    failure_level=FailureLevel.DEBUG,
)
@impure_safe
def read_tga_file(path: Path) -> bytes:
    """
    Read the raw contents of a TGA file.

    :param path: The path to the file.
    :returns: An `IOResultE` holding the bytes, or a `FileOpenError` if the file could not be read.
    """
    try:
        return path.read_bytes()
    except OSError as error:
        raise FileOpenError(path) from error


def load_tga_image(path: Path) -> IOResultE[TgaImage]:
    """
    Load and decode a TGA file.

    :param path: The path to the file.
    :returns: An `IOResultE` holding the decoded `TgaImage`.
    """
    return flow(path, read_tga_file, bind_result(decode_tga))
