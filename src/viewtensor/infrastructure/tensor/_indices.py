"""
Multi-index enumeration and resolution.

This module provides the two primitives every tensor traversal is built on:

- `IndexIterator`: a cursor yielding every multi-index of a shape in
  row-major order (last dimension fastest).
- `resolve_flat_position`: validates a multi-index against a shape and returns
  its canonical flat position.

`row_major_indices` is the vectorized companion of `IndexIterator`: it
returns the same sequence as one integer array, which the view operators use
to rebuild indirection tables without a Python-level loop.
"""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

from ...domain._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NoNextElementError,
)
from ...domain.utils._shape import compute_size


class IndexIterator(Iterator[tuple[int, ...]]):
    """
    Row-major iterator over every multi-index of a shape.

    Parameters
    ----------
    shape : Sequence[int]
        Shape to enumerate. Entries must be strictly positive.

    Notes
    -----
    - Every instance is independent: iterating one never advances another.
    - For a rank-0 shape exactly one empty tuple is produced.
    - Advancing past the end raises `NoNextElementError`, which is a
      `StopIteration`, so ``for`` loops terminate normally.

    Examples
    --------
    >>> list(IndexIterator((2, 2)))
    [(0, 0), (0, 1), (1, 0), (1, 1)]
    """

    def __init__(self, shape: Sequence[int]) -> None:
        self._shape = tuple(int(d) for d in shape)
        self._current: list[int] = [0] * len(self._shape)
        self._remaining = max(compute_size(self._shape), 1)

    def __iter__(self) -> "IndexIterator":
        return self

    def has_next(self) -> bool:
        """Return True while at least one multi-index remains."""
        return self._remaining > 0

    def __next__(self) -> tuple[int, ...]:
        if self._remaining <= 0:
            raise NoNextElementError("index iterator is exhausted")

        result = tuple(self._current)
        self._remaining -= 1

        # odometer increment, last dimension fastest
        for i in range(len(self._shape) - 1, -1, -1):
            self._current[i] += 1
            if self._current[i] < self._shape[i]:
                break
            self._current[i] = 0

        return result


def row_major_indices(shape: Sequence[int]) -> np.ndarray:
    """
    Return every multi-index of `shape` as rows of an integer array.

    Parameters
    ----------
    shape : Sequence[int]
        Shape to enumerate.

    Returns
    -------
    np.ndarray
        Array of shape ``(size, rank)`` (dtype int64), rows ordered exactly
        like `IndexIterator`.
    """
    shape = tuple(shape)
    if len(shape) == 0:
        return np.zeros((0, 0), dtype=np.int64)
    grid = np.indices(shape, dtype=np.int64)
    return grid.reshape(len(shape), -1).T


def resolve_flat_position(
    indices: Sequence[int],
    shape: Sequence[int],
    strides: Sequence[int],
) -> int:
    """
    Validate a multi-index and compute its canonical flat position.

    Parameters
    ----------
    indices : Sequence[int]
        One index per dimension.
    shape : Sequence[int]
        Shape the index addresses.
    strides : Sequence[int]
        Row-major strides of `shape`.

    Returns
    -------
    int
        ``sum(strides[i] * indices[i])``.

    Raises
    ------
    InvalidArgumentError
        If the tensor has rank 0, the index is empty, or its length differs
        from the rank.
    IndexOutOfBoundsError
        If any component is negative or not smaller than its dimension.
    """
    if len(shape) == 0:
        raise InvalidArgumentError("cannot index a rank-0 tensor")
    if len(indices) == 0:
        raise InvalidArgumentError("index must not be empty")
    if len(indices) != len(shape):
        raise InvalidArgumentError(
            f"expected {len(shape)} indices, got {len(indices)}"
        )

    flat = 0
    for index, dimension, stride in zip(indices, shape, strides):
        if index < 0 or index >= dimension:
            raise IndexOutOfBoundsError(tuple(indices), tuple(shape))
        flat += stride * index
    return flat
