"""
Flat binary codec for tensors.

Layout (all integers big-endian):

    +--------+----------+------------------+--------------------+---------+
    | tag u8 | rank i32 | rank x shape i32 | rank x stride i32  | payload |
    +--------+----------+------------------+--------------------+---------+

- ``tag`` identifies the element type (see `DataType.tag`).
- The payload holds every element in row-major logical order, so a view is
  encoded exactly like its compact copy.
- Numeric payloads use the element's big-endian fixed-width encoding
  (two's complement integers, IEEE-754 floats).
- BOOLEAN payloads are bit-packed, least significant bit first within each
  byte; the final partial byte is zero-padded.
- A rank-0 tensor is encoded as the header alone.

Decoding always produces a fresh, non-view tensor with an identity
indirection table.
"""

from __future__ import annotations

import struct
from typing import Optional, Type

import numpy as np

from ..numeric._traits import numeric_traits
from ..tensor._tensor import Tensor
from ...domain._errors import InvalidArgumentError, InvalidShapeError
from ...domain._tensor import ITensor
from ...domain.types._dtype import DataType
from ...domain.utils._shape import compute_size, compute_strides, normalize_shape

_PREAMBLE = struct.Struct(">Bi")


def _wire_dtype(dtype: DataType) -> np.dtype:
    """Big-endian NumPy dtype of a numeric element type."""
    return numeric_traits(dtype).np_dtype.newbyteorder(">")


def _payload_length(dtype: DataType, size: int) -> int:
    if dtype.is_boolean():
        return (size + 7) // 8
    return size * _wire_dtype(dtype).itemsize


def encode(tensor: ITensor) -> bytes:
    """
    Encode a tensor into its flat binary form.

    Parameters
    ----------
    tensor : ITensor
        Any tensor, view or not.

    Returns
    -------
    bytes
        Header followed by the row-major payload.
    """
    rank = tensor.rank
    header = _PREAMBLE.pack(tensor.dtype.tag, rank)
    header += struct.pack(f">{rank}i", *tensor.shape)
    header += struct.pack(f">{rank}i", *tensor.strides)

    if rank == 0:
        return header

    values = tensor.as_buffer(tensor.dtype)
    if tensor.dtype.is_boolean():
        payload = np.packbits(values, bitorder="little").tobytes()
    else:
        payload = values.astype(_wire_dtype(tensor.dtype)).tobytes()
    return header + payload


def decode(data: bytes, tensor_class: Optional[Type[Tensor]] = None) -> Tensor:
    """
    Decode a tensor produced by `encode`.

    Parameters
    ----------
    data : bytes
        Encoded tensor.
    tensor_class : Optional[Type[Tensor]]
        Concrete class to instantiate. Defaults to `Tensor`.

    Returns
    -------
    Tensor
        A non-view tensor with the encoded dtype, shape and elements.

    Raises
    ------
    InvalidArgumentError
        If the type tag is unknown, the header or payload is truncated, the
        shape is invalid, the strides do not match the shape, or bytes remain
        after the payload.
    """
    cls = tensor_class or Tensor
    data = bytes(data)

    try:
        tag, rank = _PREAMBLE.unpack_from(data, 0)
    except struct.error as e:
        raise InvalidArgumentError("truncated tensor header") from e

    try:
        dtype = DataType.from_tag(tag)
    except ValueError as e:
        raise InvalidArgumentError(f"unknown element type tag {tag}") from e

    if rank < 0:
        raise InvalidArgumentError(f"invalid rank {rank}")

    offset = _PREAMBLE.size
    try:
        shape = struct.unpack_from(f">{rank}i", data, offset)
        strides = struct.unpack_from(f">{rank}i", data, offset + 4 * rank)
    except struct.error as e:
        raise InvalidArgumentError("truncated tensor header") from e
    offset += 8 * rank

    if rank == 0:
        if len(data) != offset:
            raise InvalidArgumentError("unexpected bytes after rank-0 tensor")
        return cls.empty(dtype)

    try:
        shape = normalize_shape(shape)
    except InvalidShapeError as e:
        raise InvalidArgumentError(f"invalid encoded shape {shape}") from e
    if tuple(strides) != compute_strides(shape):
        raise InvalidArgumentError(
            f"encoded strides {strides} are inconsistent with shape {shape}"
        )

    size = compute_size(shape)
    length = _payload_length(dtype, size)
    payload = data[offset:]
    if len(payload) < length:
        raise InvalidArgumentError(
            f"truncated payload: expected {length} bytes, got {len(payload)}"
        )
    if len(payload) > length:
        raise InvalidArgumentError(f"{len(payload) - length} unexpected trailing bytes")

    if dtype.is_boolean():
        raw = np.frombuffer(payload, dtype=np.uint8)
        flat = np.unpackbits(raw, count=size, bitorder="little").astype(np.bool_)
    else:
        flat = np.frombuffer(payload, dtype=_wire_dtype(dtype))

    return cls._from_logical(shape, dtype, flat)
