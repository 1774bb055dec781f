"""
Memory-level Tensor operations: copies, conversions and whole-tensor queries.

This module declares `TensorMixinMemory`, grouping the operations that read
or duplicate a tensor's elements without changing its structure:

- deep copies (`clone`, `Tensor.copy`),
- conversions (`to_numpy`, `to_list`, `as_buffer`),
- the binary codec entrypoints (`to_bytes`, `Tensor.from_bytes`),
- queries (`contains`, `equals` and ``==``).

Design notes
------------
- All reads go through the logical view ``self._logical()``, which gathers
  storage through the indirection table, so views and fresh tensors behave
  identically.
- Copies are always materialized in logical (row-major) order with an
  identity indirection table and never share storage with their source.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .....domain._errors import InvalidTypeError
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType


class TensorMixinMemory:
    """
    Copy, conversion and comparison helpers for the concrete Tensor.

    Notes
    -----
    The host class must provide ``_logical()``, ``_from_logical(...)``,
    ``shape``, ``dtype`` and ``traits``.
    """

    # ----------------------------
    # Copies
    # ----------------------------
    def clone(self: ITensor) -> ITensor:
        """
        Deep copy of the tensor.

        Returns
        -------
        ITensor
            A non-view tensor with the same dtype, shape and elements whose
            storage is compact and laid out in logical order.
        """
        return self._from_logical(self.shape, self.dtype, self._logical())

    @classmethod
    def copy(cls, tensor: ITensor) -> ITensor:
        """Deep copy of `tensor` (see `clone`)."""
        return tensor.clone()

    # ----------------------------
    # Conversions
    # ----------------------------
    def to_numpy(self: ITensor) -> np.ndarray:
        """
        Materialize the tensor as a NumPy array.

        Returns
        -------
        np.ndarray
            A new array of shape ``self.shape`` in the element type's NumPy
            dtype. The rank-0 tensor yields an empty array of shape ``(0,)``.
        """
        flat = np.array(self._logical())
        if self.rank == 0:
            return flat
        return flat.reshape(self.shape)

    def to_list(self: ITensor) -> list[Any]:
        """Return the elements in row-major order as a flat list of Python scalars."""
        return self._logical().tolist()

    def as_buffer(self: ITensor, dtype: DataType) -> np.ndarray:
        """
        Return a flat row-major copy of the elements, checked against `dtype`.

        Parameters
        ----------
        dtype : DataType
            The element type the caller expects.

        Returns
        -------
        np.ndarray
            One-dimensional array of length ``self.size``.

        Raises
        ------
        InvalidTypeError
            If the tensor's element type is not `dtype`.
        """
        if self.dtype is not dtype:
            raise InvalidTypeError(
                f"cannot view a {self.dtype.name} tensor as a {dtype.name} buffer"
            )
        return np.array(self._logical())

    # ----------------------------
    # Codec
    # ----------------------------
    def to_bytes(self: ITensor) -> bytes:
        """Encode the tensor with the flat binary codec."""
        from ....encoding._binary import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> ITensor:
        """Decode a tensor produced by `to_bytes`."""
        from ....encoding._binary import decode

        return decode(data, tensor_class=cls)

    # ----------------------------
    # Queries
    # ----------------------------
    def contains(self: ITensor, value: Any) -> bool:
        """
        Check whether any element equals `value`.

        `value` is compared after conversion to the tensor's element type. For
        BOOLEAN and integral tensors a value the conversion changes (``2.5``, or
        an integer outside the type's range) is never contained.
        """
        if self.size == 0:
            return False
        target = self.traits.coerce(value)
        if not self.dtype.is_floating() and target != value:
            return False
        return bool(np.any(self._logical() == target))

    def equals(self: ITensor, other: Any) -> bool:
        """
        Structural equality.

        Returns
        -------
        bool
            True if `other` is a tensor with the same dtype, the same shape and
            equal elements in logical order. Views compare by content, not by
            storage identity.
        """
        if not isinstance(other, TensorMixinMemory):
            return False
        if self.dtype is not other.dtype or self.shape != other.shape:
            return False
        return bool(np.array_equal(self._logical(), other._logical()))

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.equals(other)

    __hash__ = None
