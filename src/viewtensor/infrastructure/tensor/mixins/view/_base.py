"""
View transform operators.

This module defines `TensorMixinView`, the zero-copy view family of the
concrete Tensor. Every operator here returns a new tensor that shares the
receiver's storage and differs only in shape and indirection table:

- `reshape`, `ravel`, `squeeze`, `expand`
- `transpose`, `swap_dimensions`
- `slice`, `reverse`

A few structural operators are defined alongside because they are expressed
through the views above but produce copies: `flatten`, `resize` (copies when
the reshaped source is not compact) and `concatenate`.

Table rebuilding
----------------
Strides are always the canonical row-major strides of the tensor's own shape;
all redirection lives in the indirection table. A view operator therefore
only has to answer one question: *which multi-index of the source does each
multi-index of the result read?* `_remap` evaluates that mapping for every
result index at once and composes it with the source table:

    new_table[flat_new(n)] = old_table[flat_old(source_index(n))]

Because composition goes through the source's table, chains of views
(e.g. a slice of a transpose of a reverse) address storage correctly.
"""

from __future__ import annotations

import warnings
from typing import Callable, Sequence

import numpy as np

from .....domain._errors import (
    InvalidArgumentError,
    InvalidTypeError,
    TruncationWarning,
)
from .....domain._tensor import ITensor
from .....domain.utils._shape import compute_size, normalize_shape
from ..._indices import row_major_indices


class TensorMixinView:
    """
    Zero-copy structural operators for the concrete Tensor.

    Notes
    -----
    The host class must provide ``_derive(shape, table)`` (a view sharing
    storage), ``_from_logical(...)``, ``_logical()`` and
    ``_check_dimension(...)``.
    """

    # ----------------------------
    # Helpers
    # ----------------------------
    def _remap(
        self: ITensor,
        shape: Sequence[int],
        source_index: Callable[[np.ndarray], np.ndarray],
    ) -> ITensor:
        """
        Build a view of `shape` whose elements read ``source_index(n)``.

        Parameters
        ----------
        shape : Sequence[int]
            Shape of the view.
        source_index : Callable[[np.ndarray], np.ndarray]
            Maps the ``(size, rank_new)`` grid of result indices to a
            ``(size, rank_old)`` grid of source indices.
        """
        grid = row_major_indices(shape)
        source = source_index(grid)
        strides = np.asarray(self.strides, dtype=np.int64)
        positions = source @ strides if self.rank else np.zeros(0, dtype=np.int64)
        return self._derive(tuple(shape), self.indices_table[positions])

    # ----------------------------
    # Reshaping
    # ----------------------------
    def reshape(self: ITensor, shape: Sequence[int]) -> ITensor:
        """
        Return a tensor with the same elements and a new shape.

        Parameters
        ----------
        shape : Sequence[int]
            New shape; its size must equal ``self.size``.

        Returns
        -------
        ITensor
            - If the receiver is a view whose storage is larger than its size
              (e.g. a slice), a compact copy in logical order (not a view).
            - Otherwise a view sharing storage; the indirection table carries
              over unchanged, so the row-major element order is preserved.

        Raises
        ------
        InvalidShapeError
            If a dimension of `shape` is not strictly positive.
        InvalidArgumentError
            If the new size differs from the current size.
        """
        shape = normalize_shape(shape)
        if compute_size(shape) != self.size:
            raise InvalidArgumentError(
                f"cannot reshape a tensor of size {self.size} into shape {shape}"
            )

        if self.is_view and len(self.storage) != self.size:
            return self._from_logical(shape, self.dtype, self._logical())
        return self._derive(shape, self.indices_table)

    def ravel(self: ITensor) -> ITensor:
        """Reshape to one dimension of length ``size`` (a view where possible)."""
        if self.rank == 0:
            return self._derive((), self.indices_table)
        return self.reshape((self.size,))

    def flatten(self: ITensor) -> ITensor:
        """One-dimensional deep copy of the tensor."""
        if self.rank == 0:
            return self.clone()
        return self._from_logical((self.size,), self.dtype, self._logical())

    def squeeze(self: ITensor, dimension: int) -> ITensor:
        """
        Remove a dimension of size 1.

        Raises
        ------
        InvalidArgumentError
            If `dimension` is out of range or ``shape[dimension] != 1``.
        """
        self._check_dimension(dimension)
        if self.shape[dimension] != 1:
            raise InvalidArgumentError(
                f"cannot squeeze dimension {dimension} of size {self.shape[dimension]}"
            )
        return self.reshape(self.shape[:dimension] + self.shape[dimension + 1 :])

    def expand(self: ITensor, dimension: int) -> ITensor:
        """
        Insert a dimension of size 1 before position `dimension`.

        `dimension` may equal the rank, which appends a trailing axis.
        """
        if dimension < 0 or dimension > self.rank:
            raise InvalidArgumentError(
                f"invalid dimension {dimension} for rank {self.rank}"
            )
        return self.reshape(self.shape[:dimension] + (1,) + self.shape[dimension:])

    def resize(self: ITensor, shape: Sequence[int]) -> ITensor:
        """
        Reshape to a shape whose size may be smaller than the current size.

        Elements are taken in row-major order up to the new size; the rest are
        discarded and a `TruncationWarning` is emitted.

        Raises
        ------
        InvalidArgumentError
            If the new size is larger than the current size.
        """
        shape = normalize_shape(shape)
        size = compute_size(shape)
        if size == self.size:
            return self.reshape(shape)
        if size < self.size:
            warnings.warn(
                f"resize to {shape} discards {self.size - size} trailing elements",
                TruncationWarning,
                stacklevel=2,
            )
        return self.ravel().slice([(0, size)]).reshape(shape)

    # ----------------------------
    # Axis permutations
    # ----------------------------
    def transpose(self: ITensor) -> ITensor:
        """
        Reverse the order of all dimensions.

        Returns
        -------
        ITensor
            A view with shape ``reversed(self.shape)`` whose element at ``n``
            is the receiver's element at ``reversed(n)``.
        """
        return self._remap(self.shape[::-1], lambda grid: grid[:, ::-1])

    def swap_dimensions(self: ITensor, dimension1: int, dimension2: int) -> ITensor:
        """
        Exchange two dimensions.

        Raises
        ------
        InvalidArgumentError
            If either dimension is out of range.
        """
        self._check_dimension(dimension1)
        self._check_dimension(dimension2)

        order = list(range(self.rank))
        order[dimension1], order[dimension2] = order[dimension2], order[dimension1]
        shape = tuple(self.shape[i] for i in order)
        return self._remap(shape, lambda grid: grid[:, order])

    # ----------------------------
    # Sub-ranges
    # ----------------------------
    def slice(self: ITensor, intervals: Sequence[Sequence[int]]) -> ITensor:
        """
        Restrict every dimension to a half-open interval.

        Parameters
        ----------
        intervals : Sequence[Sequence[int]]
            One ``(start, end)`` pair per dimension.

        Returns
        -------
        ITensor
            A view of shape ``(end - start for each dimension)``.

        Raises
        ------
        InvalidArgumentError
            If the number of intervals differs from the rank, or an interval
            has ``start < 0``, ``end > shape[i]`` or ``end <= start``.
        """
        if len(intervals) != self.rank:
            raise InvalidArgumentError(
                f"expected {self.rank} intervals, got {len(intervals)}"
            )

        starts: list[int] = []
        shape: list[int] = []
        for i, interval in enumerate(intervals):
            if len(interval) != 2:
                raise InvalidArgumentError(f"interval {i} must be a (start, end) pair")
            start, end = int(interval[0]), int(interval[1])
            if start < 0:
                raise InvalidArgumentError(f"interval {i} starts below 0")
            if end > self.shape[i]:
                raise InvalidArgumentError(
                    f"interval {i} ends past dimension size {self.shape[i]}"
                )
            if end <= start:
                raise InvalidArgumentError(f"interval {i} is empty")
            starts.append(start)
            shape.append(end - start)

        offset = np.asarray(starts, dtype=np.int64)
        return self._remap(shape, lambda grid: grid + offset)

    def reverse(self: ITensor, dimension: int) -> ITensor:
        """Reverse the order of elements along one dimension (a view)."""
        self._check_dimension(dimension)
        last = self.shape[dimension] - 1

        def source_index(grid: np.ndarray) -> np.ndarray:
            source = grid.copy()
            source[:, dimension] = last - grid[:, dimension]
            return source

        return self._remap(self.shape, source_index)

    # ----------------------------
    # Joining
    # ----------------------------
    def concatenate(self: ITensor, other: ITensor, dimension: int) -> ITensor:
        """
        Join two tensors along an existing dimension.

        Usable as ``a.concatenate(b, d)`` or ``Tensor.concatenate(a, b, d)``.

        Returns
        -------
        ITensor
            A new, non-view tensor.

        Raises
        ------
        InvalidTypeError
            If the element types differ.
        InvalidArgumentError
            If the ranks differ, `dimension` is out of range, or any other
            dimension has a different size.
        """
        if self.dtype is not other.dtype:
            raise InvalidTypeError(
                f"cannot concatenate {self.dtype.name} and {other.dtype.name} tensors"
            )
        if self.rank != other.rank:
            raise InvalidArgumentError("tensors must have the same number of dimensions")
        self._check_dimension(dimension)

        for i, (d1, d2) in enumerate(zip(self.shape, other.shape)):
            if i != dimension and d1 != d2:
                raise InvalidArgumentError(
                    "tensors must have the same shape except on the given dimension"
                )

        joined = np.concatenate([self.to_numpy(), other.to_numpy()], axis=dimension)
        return self._from_logical(joined.shape, self.dtype, joined.ravel())
