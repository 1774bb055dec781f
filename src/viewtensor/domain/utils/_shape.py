"""
Shape and stride arithmetic.

This module holds the pure-Python shape calculations every tensor relies on:

- `compute_size`: number of elements implied by a shape,
- `compute_strides`: row-major strides of a shape,
- `flat_position`: the canonical flat position of a multi-index,
- `normalize_shape`: coercion of user input into a validated shape tuple,
- `are_shapes_compatible`: the NumPy broadcasting compatibility test.

Row-major convention
--------------------
The stride of a dimension is the product of all dimension sizes to its right.
For shape ``(2, 3, 4)`` the strides are ``(12, 4, 1)``, and the multi-index
``(1, 1, 1)`` sits at flat position ``1 * 12 + 1 * 4 + 1 = 17``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .._errors import InvalidShapeError


def compute_size(shape: Sequence[int]) -> int:
    """
    Compute the number of elements of a shape.

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes.

    Returns
    -------
    int
        Product of all dimensions, or 0 for the empty shape.

    Raises
    ------
    InvalidShapeError
        If any dimension is zero or negative.
    """
    if len(shape) == 0:
        return 0

    size = 1
    for dimension in shape:
        if dimension <= 0:
            raise InvalidShapeError(tuple(shape))
        size *= dimension
    return size


def compute_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """
    Compute row-major strides for a shape.

    Strides are accumulated right to left, starting from 1.

    Parameters
    ----------
    shape : Sequence[int]
        Dimension sizes.

    Returns
    -------
    tuple[int, ...]
        One stride per dimension.
    """
    strides = [0] * len(shape)
    stride = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = stride
        stride *= shape[i]
    return tuple(strides)


def flat_position(indices: Sequence[int], strides: Sequence[int]) -> int:
    """Sum of ``strides[i] * indices[i]`` over all dimensions."""
    return sum(s * i for s, i in zip(strides, indices))


def normalize_shape(shape: Iterable[int]) -> tuple[int, ...]:
    """
    Coerce a user-supplied shape into a validated tuple of ints.

    Parameters
    ----------
    shape : Iterable[int]
        Any iterable of integers (list, tuple, NumPy shape, ...).

    Returns
    -------
    tuple[int, ...]
        The shape as a tuple of Python ints.

    Raises
    ------
    InvalidShapeError
        If any dimension is zero or negative.
    """
    normalized = tuple(int(d) for d in shape)
    compute_size(normalized)
    return normalized


def are_shapes_compatible(shape1: Sequence[int], shape2: Sequence[int]) -> bool:
    """
    Check whether two shapes can be broadcast together.

    Shapes are aligned on their trailing dimensions; each aligned pair must
    be equal or contain a 1. Leading dimensions of the longer shape are
    unconstrained.

    Returns
    -------
    bool
        True if the shapes are broadcast-compatible.
    """
    for d1, d2 in zip(reversed(shape1), reversed(shape2)):
        if d1 != d2 and d1 != 1 and d2 != 1:
            return False
    return True
