"""
Tensor construction helpers.

This module defines `TensorMixinFactories`, the family of classmethod
constructors available on the concrete `Tensor`:

- from flat row-major data (`from_data`),
- from an index-driven initializer (`from_function`),
- from rectangular nested sequences of any depth (`from_nested`),
- from a NumPy array (`from_numpy`),
- filled tensors (`repeat`, `full`, `zeros`, `ones`, `single_value`),
- the rank-0 tensor (`empty`) and the identity matrix (`identity`).

Every factory returns a fresh, non-view tensor owning newly allocated
storage. New tensors are built through ``cls._from_logical`` so the concrete
class is never imported here.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from ....numeric._traits import data_type_of, numeric_traits
from .....domain._errors import (
    DataSizeMismatchError,
    InvalidArgumentError,
    InvalidTypeError,
)
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType
from .....domain.utils._shape import compute_size, normalize_shape
from ..._indices import IndexIterator


def _scalar(value: Any) -> Any:
    """Unwrap NumPy scalars into their Python equivalent."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _resolve_dtype(value: Any, dtype: Optional[DataType]) -> DataType:
    if dtype is not None:
        return dtype
    return DataType.infer(_scalar(value))


class TensorMixinFactories:
    """
    Classmethod constructors for the concrete Tensor.

    Notes
    -----
    - The host class must provide ``_from_logical(shape, dtype, flat)``.
    - Values are converted to the element type on the way in: integral
      values wrap to the type's width and floats are truncated toward zero
      when stored into an integral tensor.
    """

    @classmethod
    def from_data(
        cls,
        data: Sequence[Any],
        shape: Sequence[int],
        dtype: DataType = DataType.FLOAT,
    ) -> ITensor:
        """
        Build a tensor from flat data in row-major order.

        Parameters
        ----------
        data : Sequence[Any]
            Exactly ``prod(shape)`` values. An ndarray of any shape is read
            in row-major order.
        shape : Sequence[int]
            Target shape.
        dtype : DataType, optional
            Element type. Defaults to FLOAT.

        Returns
        -------
        ITensor
            New tensor holding a copy of `data`.

        Raises
        ------
        InvalidShapeError
            If a dimension of `shape` is not strictly positive.
        DataSizeMismatchError
            If the number of values differs from the size implied by `shape`.
        """
        shape = normalize_shape(shape)
        size = compute_size(shape)
        count = int(np.size(data)) if isinstance(data, np.ndarray) else len(data)
        if count != size:
            raise DataSizeMismatchError(size, count)

        if isinstance(data, np.ndarray):
            flat = numeric_traits(dtype).as_array(np.ravel(data))
        else:
            traits = numeric_traits(dtype)
            flat = np.fromiter(
                (traits.coerce(_scalar(v)) for v in data),
                dtype=traits.np_dtype,
                count=size,
            )
        return cls._from_logical(shape, dtype, flat)

    @classmethod
    def from_function(
        cls,
        shape: Sequence[int],
        initializer: Callable[[tuple[int, ...]], Any],
        dtype: DataType = DataType.FLOAT,
    ) -> ITensor:
        """
        Build a tensor by calling `initializer` once per multi-index.

        The initializer receives each index tuple in row-major order and its
        result is stored at that position.

        Examples
        --------
        >>> Tensor.from_function((2, 2), lambda i: i[0] * 2 + i[1], DataType.INT).to_list()
        [0, 1, 2, 3]
        """
        shape = normalize_shape(shape)
        traits = numeric_traits(dtype)
        size = compute_size(shape)
        flat = np.fromiter(
            (traits.coerce(_scalar(initializer(index))) for index in IndexIterator(shape)),
            dtype=traits.np_dtype,
            count=size,
        )
        return cls._from_logical(shape, dtype, flat)

    @classmethod
    def from_nested(
        cls,
        array: Sequence[Any],
        dtype: DataType = DataType.FLOAT,
    ) -> ITensor:
        """
        Build a tensor from rectangular nested sequences.

        Parameters
        ----------
        array : Sequence[Any]
            A (possibly nested) list or tuple of scalars. Every sub-sequence of
            one nesting level must have the same length.
        dtype : DataType, optional
            Element type. Defaults to FLOAT.

        Raises
        ------
        InvalidArgumentError
            If the nesting is ragged or a level is empty.
        """
        if not isinstance(array, (list, tuple)):
            raise InvalidArgumentError(
                f"expected a nested list or tuple, got {type(array).__name__}"
            )

        shape: list[int] = []
        level: list[Any] = [array]
        while level and isinstance(level[0], (list, tuple)):
            lengths = {len(item) if isinstance(item, (list, tuple)) else -1 for item in level}
            if len(lengths) != 1:
                raise InvalidArgumentError(
                    "arrays do not all have the same length in each dimension"
                )
            length = lengths.pop()
            if length <= 0:
                raise InvalidArgumentError("nested sequences must not be empty")
            shape.append(length)
            level = [element for item in level for element in item]

        if any(isinstance(item, (list, tuple)) for item in level):
            raise InvalidArgumentError(
                "arrays do not all have the same length in each dimension"
            )
        return cls.from_data(level, shape, dtype)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> ITensor:
        """
        Build a tensor holding a copy of a NumPy array.

        The element type follows the array's dtype; a 0-d array becomes a
        tensor of shape ``(1,)``.

        Raises
        ------
        InvalidTypeError
            If the dtype has no matching `DataType`.
        InvalidShapeError
            If the array has a zero-length dimension.
        """
        array = np.asarray(array)
        dtype = data_type_of(array.dtype)
        shape = array.shape if array.ndim > 0 else (1,)
        return cls._from_logical(normalize_shape(shape), dtype, np.ravel(array))

    @classmethod
    def empty(cls, dtype: DataType = DataType.FLOAT) -> ITensor:
        """Return the rank-0 tensor (shape ``()``, size 0)."""
        return cls._from_logical((), dtype, np.empty(0, dtype=numeric_traits(dtype).np_dtype))

    @classmethod
    def repeat(
        cls,
        shape: Sequence[int],
        value: Any,
        dtype: Optional[DataType] = None,
    ) -> ITensor:
        """
        Build a tensor with every element equal to `value`.

        When `dtype` is None the element type is inferred from `value`
        (bool -> BOOLEAN, int -> INT, float -> DOUBLE).
        """
        dtype = _resolve_dtype(value, dtype)
        shape = normalize_shape(shape)
        traits = numeric_traits(dtype)
        flat = np.full(compute_size(shape), traits.coerce(_scalar(value)), dtype=traits.np_dtype)
        return cls._from_logical(shape, dtype, flat)

    @classmethod
    def full(cls, shape: Sequence[int], value: Any, dtype: DataType = DataType.FLOAT) -> ITensor:
        """Alias of `repeat` with an explicit element type."""
        return cls.repeat(shape, value, dtype)

    @classmethod
    def single_value(cls, value: Any, dtype: Optional[DataType] = None) -> ITensor:
        """Return a tensor of shape ``(1,)`` holding `value`."""
        return cls.repeat((1,), value, dtype)

    @classmethod
    def zeros(cls, shape: Sequence[int], dtype: DataType = DataType.FLOAT) -> ITensor:
        """
        Return a tensor filled with the type's zero.

        Raises
        ------
        InvalidTypeError
            If `dtype` is not numeric.
        """
        if not dtype.is_numeric():
            raise InvalidTypeError(f"zeros: {dtype.name} type not supported")
        return cls.repeat(shape, numeric_traits(dtype).zero, dtype)

    @classmethod
    def ones(cls, shape: Sequence[int], dtype: DataType = DataType.FLOAT) -> ITensor:
        """Return a tensor filled with the type's one (numeric types only)."""
        if not dtype.is_numeric():
            raise InvalidTypeError(f"ones: {dtype.name} type not supported")
        return cls.repeat(shape, numeric_traits(dtype).one, dtype)

    @classmethod
    def identity(cls, n: int, dtype: DataType = DataType.FLOAT) -> ITensor:
        """
        Return the ``n x n`` identity matrix.

        Raises
        ------
        InvalidTypeError
            If `dtype` is not numeric.
        InvalidShapeError
            If `n` is not strictly positive.
        """
        if not dtype.is_numeric():
            raise InvalidTypeError(f"identity: {dtype.name} type not supported")
        traits = numeric_traits(dtype)
        one, zero = traits.one, traits.zero
        return cls.from_function((n, n), lambda index: one if index[0] == index[1] else zero, dtype)
