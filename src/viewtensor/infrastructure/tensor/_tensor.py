"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete `Tensor`, which satisfies the domain-level
`ITensor` protocol. A tensor is the combination of:

- a shape and its row-major strides (always canonical for that shape),
- a shared `Storage` holding the physical elements,
- an indirection table mapping every canonical flat position to a storage
  offset.

Element access resolves ``indices -> flat position -> table[flat] ->
storage[offset]``. Views (reshape, transpose, slice, ...) share the storage
and differ only in shape and table, so writes through any of them are seen
by all of them.

Design notes
------------
- This file sits in the infrastructure layer: it imports NumPy and concrete
  error types, and provides a concrete runtime implementation.
- Operations are grouped in mixins (memory, view, broadcast, functional,
  arithmetic, unary, comparison, reduction). Kind-specific operators are
  dispatched through control paths on ``self.kind``.
- Metadata is immutable after construction: shape and strides are tuples and
  the indirection table is a read-only array.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence, Union

import numpy as np

from ..numeric._traits import NumericTraits, numeric_traits
from ...domain._errors import InvalidArgumentError
from ...domain._tensor import ITensor
from ...domain.types._dtype import DataType, ElementKind
from ...domain.utils._shape import compute_size, compute_strides, normalize_shape
from ._indices import IndexIterator, resolve_flat_position
from ._storage import Storage

from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.broadcast import TensorMixinBroadcast
from .mixins.comparison import TensorMixinComparison
from .mixins.functional import TensorMixinFunctional
from .mixins.memory import TensorMixinFactories, TensorMixinMemory
from .mixins.reduction import TensorMixinReduction
from .mixins.unary import TensorMixinUnary
from .mixins.view import TensorMixinView

Index = Union[int, Sequence[int]]


class Tensor(
    TensorMixinFactories,
    TensorMixinMemory,
    TensorMixinView,
    TensorMixinBroadcast,
    TensorMixinFunctional,
    TensorMixinArithmetic,
    TensorMixinUnary,
    TensorMixinComparison,
    TensorMixinReduction,
    ITensor,
):
    """
    Dense, homogeneously typed multi-dimensional array.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape. Every dimension must be strictly positive; the empty
        shape ``()`` builds the rank-0 tensor of size 0.
    dtype : DataType, optional
        Element type. Defaults to ``DataType.FLOAT``.

    Notes
    -----
    - The regular constructor allocates fresh storage filled with the type's
      zero (False for BOOLEAN). Use the classmethod factories
      (`from_data`, `from_nested`, `repeat`, ...) for other contents.
    - Views are never built through the constructor; see `_assemble`.

    Examples
    --------
    >>> t = Tensor.from_nested([[5, 6, 1], [-1, 0, 2]], DataType.INT)
    >>> t[1, 2]
    2
    >>> t.transpose().shape
    (3, 2)
    """

    def __init__(self, shape: Sequence[int], dtype: DataType = DataType.FLOAT) -> None:
        shape = normalize_shape(shape)
        size = compute_size(shape)
        self._init_fields(
            shape,
            dtype,
            Storage.allocate(dtype, size),
            np.arange(size, dtype=np.int64),
            False,
        )

    def _init_fields(
        self,
        shape: tuple[int, ...],
        dtype: DataType,
        storage: Storage,
        table: np.ndarray,
        is_view: bool,
    ) -> None:
        table = np.array(table, dtype=np.int64)
        table.setflags(write=False)

        self._shape = shape
        self._strides = compute_strides(shape)
        self._size = compute_size(shape)
        self._dtype = dtype
        self._storage = storage
        self._table = table
        self._is_view = bool(is_view)

        if table.shape != (self._size,):
            raise InvalidArgumentError(
                f"indices table of length {table.shape[0]} does not match size {self._size}"
            )

    # ------------------------------------------------------------------
    # Internal factories
    # ------------------------------------------------------------------
    @classmethod
    def _assemble(
        cls,
        shape: Sequence[int],
        dtype: DataType,
        storage: Storage,
        table: np.ndarray,
        is_view: bool,
    ) -> "Tensor":
        """
        Build a tensor from explicit parts without copying storage.

        This is the single internal entrypoint for tensors whose storage or
        indirection table is not the default (views, decoded tensors, ...).

        Parameters
        ----------
        shape : Sequence[int]
            Validated shape.
        dtype : DataType
            Element type; must match the storage.
        storage : Storage
            Storage to share.
        table : np.ndarray
            Indirection table of length ``prod(shape)``; copied and frozen.
        is_view : bool
            Whether the storage is shared with another tensor.

        Raises
        ------
        InvalidArgumentError
            If the table length does not match the shape.
        """
        tensor = cls.__new__(cls)
        tensor._init_fields(tuple(shape), dtype, storage, table, is_view)
        return tensor

    @classmethod
    def _from_logical(
        cls,
        shape: Sequence[int],
        dtype: DataType,
        flat: np.ndarray,
    ) -> "Tensor":
        """
        Build a fresh, non-view tensor from elements in row-major order.

        `flat` is copied (and converted to `dtype`) into new storage and the
        tensor gets an identity indirection table.
        """
        storage = Storage.from_array(dtype, flat)
        return cls._assemble(
            tuple(shape), dtype, storage, np.arange(len(storage), dtype=np.int64), False
        )

    def _derive(self, shape: Sequence[int], table: np.ndarray) -> "Tensor":
        """Return a view of this tensor's storage with a new shape and table."""
        return self._assemble(tuple(shape), self._dtype, self._storage, table, True)

    def _logical(self) -> np.ndarray:
        """Elements in row-major logical order, as a new 1-D array."""
        return self._storage.gather(self._table)

    def _check_dimension(self, dimension: int) -> None:
        """
        Raises
        ------
        InvalidArgumentError
            If ``dimension`` is not in ``[0, rank)``.
        """
        if not isinstance(dimension, (int, np.integer)) or not 0 <= dimension < self.rank:
            raise InvalidArgumentError(
                f"invalid dimension {dimension!r} for rank {self.rank}"
            )

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """Dimension sizes; empty for the rank-0 tensor."""
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        """Row-major strides of `shape`."""
        return self._strides

    @property
    def size(self) -> int:
        """Number of logical elements (0 for the rank-0 tensor)."""
        return self._size

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def dtype(self) -> DataType:
        return self._dtype

    @property
    def kind(self) -> ElementKind:
        """Element kind; the state used for operator dispatch."""
        return self._dtype.kind

    @property
    def traits(self) -> NumericTraits:
        """Numeric capabilities of the element type."""
        return numeric_traits(self._dtype)

    @property
    def is_view(self) -> bool:
        """
        Whether the storage is (potentially) shared with another tensor.

        Views are produced by the view operators; tensors built by factories,
        copies and element-wise operations are never views.
        """
        return self._is_view

    @property
    def storage(self) -> Storage:
        """The shared physical storage."""
        return self._storage

    @property
    def indices_table(self) -> np.ndarray:
        """Read-only array mapping canonical flat positions to storage offsets."""
        return self._table

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _offset(self, indices: Sequence[int]) -> int:
        flat = resolve_flat_position(indices, self._shape, self._strides)
        return int(self._table[flat])

    def get_item(self, indices: Sequence[int]) -> Any:
        """
        Read the element at a multi-index.

        Parameters
        ----------
        indices : Sequence[int]
            One non-negative index per dimension.

        Returns
        -------
        Any
            The element as a Python scalar (bool, int or float).

        Raises
        ------
        InvalidArgumentError
            If the tensor has rank 0 or the number of indices is wrong.
        IndexOutOfBoundsError
            If an index is negative or past its dimension.
        """
        return self._storage.read(self._offset(tuple(indices)))

    def set_item(self, indices: Sequence[int], value: Any) -> None:
        """
        Write the element at a multi-index.

        The value is converted to the element type. The write goes to the
        shared storage, so every view addressing the same slot observes it.

        Raises
        ------
        InvalidArgumentError
            If the tensor has rank 0 or the number of indices is wrong.
        IndexOutOfBoundsError
            If an index is negative or past its dimension.
        """
        if isinstance(value, np.generic):
            value = value.item()
        self._storage.write(self._offset(tuple(indices)), value)

    @staticmethod
    def _as_index(key: Index) -> tuple[int, ...]:
        if isinstance(key, (int, np.integer)):
            return (int(key),)
        return tuple(int(k) for k in key)

    def __getitem__(self, key: Index) -> Any:
        return self.get_item(self._as_index(key))

    def __setitem__(self, key: Index, value: Any) -> None:
        self.set_item(self._as_index(key), value)

    def indices(self) -> Iterator[tuple[int, ...]]:
        """Return a fresh iterator over every multi-index in row-major order."""
        return IndexIterator(self._shape)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"Tensor(shape={self._shape}, dtype={self._dtype!r}, "
            f"is_view={self._is_view})"
        )

    def __str__(self) -> str:
        if self.rank == 0:
            return "[]"
        return np.array2string(self.to_numpy(), separator=", ")
