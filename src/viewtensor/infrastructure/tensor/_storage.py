"""
Flat element storage shared between tensors.

This module defines `Storage`, a thin wrapper around a one-dimensional NumPy
array holding the physical elements of one or more tensors. Views created by
transpose, slice, reverse and friends share a single `Storage` instance and
differ only in shape, strides and indirection table.

Core Concepts
-------------
- **Physical order**:
    Elements are stored in a flat buffer. Which physical slot a logical
    multi-index addresses is decided by the owning tensor's indirection table,
    never by the storage itself.

- **Sharing**:
    Several tensors may hold a reference to the same `Storage`. A write
    through any of them is observed by all of them. Lifetime is managed by the
    garbage collector: the buffer lives as long as one tensor references it.

Design Notes
------------
- `Storage` imposes no shape or layout semantics; these remain the
  responsibility of the tensor.
- The buffer is always contiguous and owned (never a NumPy view of a foreign
  array), so mutating it can never alias caller-provided data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from ..numeric._traits import NumericTraits, numeric_traits
from ...domain.types._dtype import DataType


@dataclass(eq=False)
class Storage:
    """
    Flat, typed, shareable element buffer.

    Parameters
    ----------
    dtype : DataType
        Element type of the buffer.
    array : np.ndarray
        One-dimensional contiguous array of ``numpy_dtype(dtype)``.

    Notes
    -----
    Construct instances through `allocate` or `from_array` rather than
    directly; both guarantee an owned, contiguous, correctly typed buffer.
    """

    dtype: DataType
    array: np.ndarray

    @classmethod
    def allocate(cls, dtype: DataType, length: int, fill: Any = None) -> "Storage":
        """
        Allocate a buffer of `length` elements.

        Parameters
        ----------
        dtype : DataType
            Element type.
        length : int
            Number of physical slots.
        fill : Any, optional
            Initial value of every slot. Defaults to the type's zero
            (False for BOOLEAN).

        Returns
        -------
        Storage
            Freshly allocated storage.
        """
        traits = numeric_traits(dtype)
        value = traits.zero if fill is None else traits.coerce(fill)
        return cls(dtype, np.full(int(length), value, dtype=traits.np_dtype))

    @classmethod
    def from_array(cls, dtype: DataType, array: np.ndarray) -> "Storage":
        """
        Wrap a copy of `array`, flattened and cast to `dtype`.
        """
        traits = numeric_traits(dtype)
        flat = np.ravel(np.asarray(array))
        return cls(dtype, np.array(traits.as_array(flat), dtype=traits.np_dtype))

    @property
    def traits(self) -> NumericTraits:
        """Numeric capabilities of the element type."""
        return numeric_traits(self.dtype)

    def __len__(self) -> int:
        return int(self.array.shape[0])

    def read(self, offset: int) -> Any:
        """Return the element at a physical offset as a Python scalar."""
        return self.array[offset].item()

    def write(self, offset: int, value: Any) -> None:
        """Store `value` (converted to the element type) at a physical offset."""
        self.array[offset] = self.traits.coerce(value)

    def gather(self, table: np.ndarray) -> np.ndarray:
        """
        Return a new array with the elements addressed by `table`, in order.
        """
        return self.array[table]

    def scatter(self, table: np.ndarray, values: np.ndarray) -> None:
        """Write `values` into the slots addressed by `table`."""
        self.array[table] = self.traits.as_array(np.asarray(values))
