from collections.abc import Sequence
from functools import partial
from typing import Annotated, Any

from numpy import array, uint8
from numpy.typing import DTypeLike, NDArray
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, PlainSerializer


def _serialize_ndarray(array_: NDArray[Any]) -> list:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def _coerce_to_array(dtype: DTypeLike, value: Sequence | bytes | NDArray | None) -> NDArray | None:
    """
    Coerce input to a read-only numpy array of the given dtype.

    Accepts raw ``bytes`` (as read from disk) as well as nested sequences of integers.
    """
    if isinstance(value, (bytes, bytearray)):
        value = array(bytearray(value), dtype=dtype)
    elif isinstance(value, Sequence):
        try:
            value = array(value, dtype=dtype)
        except OverflowError as ofe:
            raise ValueError("Array's value(s) out of range") from ofe
    return value


def _validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := value.ndim) != n_dims:
        raise ValueError(f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}")
    value.setflags(write=False)
    return value


type UInt8Array = Annotated[
    NDArray[uint8],
    BeforeValidator(partial(_coerce_to_array, uint8)),
    PlainSerializer(_serialize_ndarray),
]

type PixelBuffer = Annotated[UInt8Array, AfterValidator(partial(_validate_shape, 1))]  # Shape: (H * W * C,)
type TileGrid = Annotated[UInt8Array, AfterValidator(partial(_validate_shape, 2))]  # Shape: (H, W)


class ConfigBaseModel(BaseModel):
    """Frozen base model for the containers passed between the decoding and extraction steps."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )
