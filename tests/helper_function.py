import struct
from typing import Any

from returns.io import IOFailure, IOResultE, IOSuccess
from returns.result import Failure, ResultE, Success

type RGB = tuple[int, int, int]


def unwrap_result[T](result: IOResultE[T] | ResultE[T]) -> T:
    match result:
        case IOSuccess(Success(value)) | Success(value):
            return value
        case _:
            assert False, "failed to unwrap"


def unwrap_failure(result: IOResultE[Any] | ResultE[Any]) -> Exception:
    match result:
        case IOFailure(Failure(error)) | Failure(error):
            return error
        case _:
            assert False, "expected a failure"


def build_header(
    width: int,
    height: int,
    *,
    image_type: int = 2,
    bit_depth: int = 24,
    colormap_type: int = 0,
    id_length: int = 0,
    descriptor: int = 0,
) -> bytes:
    """Build an 18 byte TGA header."""
    return struct.pack(
        "<BBB5x4xHHBB", id_length, colormap_type, image_type, width, height, bit_depth, descriptor
    )


def bgr_bytes(rows: list[list[RGB]], alpha: int | None = None) -> bytes:
    """Convert rows of (r, g, b) pixels to the byte order stored in a TGA file."""
    pixels = bytearray()
    for row in rows:
        for red, green, blue in row:
            pixels += bytes((blue, green, red))
            if alpha is not None:
                pixels.append(alpha)
    return bytes(pixels)


def encode_rle(pixels: bytes, channels: int) -> bytes:
    """Run-length encode a pixel buffer using run packets for repeats and raw packets otherwise."""
    chunks = [pixels[i : i + channels] for i in range(0, len(pixels), channels)]
    encoded = bytearray()
    i = 0
    while i < len(chunks):
        run = 1
        while i + run < len(chunks) and run < 128 and chunks[i + run] == chunks[i]:
            run += 1
        if run > 1:
            encoded.append(0x80 | (run - 1))
            encoded += chunks[i]
            i += run
            continue
        raw = [chunks[i]]
        i += 1
        while i < len(chunks) and len(raw) < 128 and not (i + 1 < len(chunks) and chunks[i + 1] == chunks[i]):
            raw.append(chunks[i])
            i += 1
        encoded.append(len(raw) - 1)
        encoded += b"".join(raw)
    return bytes(encoded)


def build_tga(rows: list[list[RGB]], *, rle: bool = False, alpha: int | None = None) -> bytes:
    """Build a complete true-colour TGA file from rows of (r, g, b) pixels."""
    channels = 3 if alpha is None else 4
    pixels = bgr_bytes(rows, alpha=alpha)
    header = build_header(len(rows[0]), len(rows), image_type=10 if rle else 2, bit_depth=channels * 8)
    return header + (encode_rle(pixels, channels) if rle else pixels)
