"""
Per-type numeric capabilities (NumPy backend).

This module is the single place where element-level arithmetic is defined.
`numeric_traits(dtype)` returns a capability object for a `DataType` that
provides:

- identities and sentinels: `zero`, `one`, `min_value`, `max_value`,
- arithmetic: `add`, `subtract`, `multiply`, `divide`, `mod`, `power`,
  `sqrt`, `negative`, `maximum`, `minimum`,
- bitwise ops (integral; and/or/xor/not also for booleans),
- comparisons: `compare`, `equals`, `not_equals`, `less_than`,
  `greater_than`, `less_equal`, `greater_equal`,
- conversions: `coerce` (any Python scalar into this type), `cast_array`
  (array into another type) and `boolean_value`.

Every operation accepts either Python scalars or NumPy arrays. Scalars come
back as Python scalars, arrays as arrays of the type's storage dtype, so the
same kernel serves reduction folds (scalar at a time) and elementwise tensor
operators (whole arrays at once).

Semantics
---------
- Integral results wrap to the type's width (two's complement).
- Integral division truncates toward zero; `mod` takes the sign of the
  dividend. Division or modulo by zero raises `ZeroDivisionError`.
- Floating results are rounded to the type's precision; overflow produces
  infinities without warnings.
- Unsupported type/operation combinations raise `InvalidTypeError`.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Union

import numpy as np

from ...domain._errors import InvalidTypeError
from ...domain.types._dtype import DataType, ElementKind

Scalar = Union[bool, int, float]
ArrayOrScalar = Union[np.ndarray, Scalar]

_NUMPY_DTYPES: dict[DataType, np.dtype] = {
    DataType.BOOLEAN: np.dtype(np.bool_),
    DataType.BYTE: np.dtype(np.int8),
    DataType.SHORT: np.dtype(np.int16),
    DataType.INT: np.dtype(np.int32),
    DataType.FLOAT: np.dtype(np.float32),
    DataType.LONG: np.dtype(np.int64),
    DataType.DOUBLE: np.dtype(np.float64),
}


def numpy_dtype(dtype: DataType) -> np.dtype:
    """Return the NumPy storage dtype of an element type."""
    return _NUMPY_DTYPES[dtype]


def data_type_of(np_dtype: Any) -> DataType:
    """
    Map a NumPy dtype back to its `DataType`.

    Raises
    ------
    InvalidTypeError
        If the dtype has no matching element type (e.g. unsigned or complex).
    """
    candidate = np.dtype(np_dtype)
    for dtype, mapped in _NUMPY_DTYPES.items():
        if mapped == candidate:
            return dtype
    raise InvalidTypeError(f"numpy dtype {candidate} is not supported")


class NumericTraits:
    """
    Capability object describing how one element type computes.

    The base class implements the operations shared by every type and
    rejects everything else with `InvalidTypeError`; subclasses override the
    operations their kind supports.

    Parameters
    ----------
    dtype : DataType
        Element type described by this object.
    """

    def __init__(self, dtype: DataType) -> None:
        self.dtype = dtype
        self.np_dtype = numpy_dtype(dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dtype!r})"

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _unsupported(self, op: str) -> InvalidTypeError:
        return InvalidTypeError(f"{op}: type {self.dtype.name} is not supported")

    def as_array(self, value: ArrayOrScalar) -> np.ndarray:
        """Convert a scalar or array into an array of the storage dtype."""
        if isinstance(value, np.ndarray):
            if value.dtype == self.np_dtype:
                return value
            return self.cast_array(value)
        return np.asarray(self.coerce(value), dtype=self.np_dtype)

    def _unary(self, kernel: Callable[[np.ndarray], np.ndarray], a: ArrayOrScalar):
        scalar = not isinstance(a, np.ndarray)
        with np.errstate(all="ignore"):
            out = kernel(self.as_array(a))
        return out.item() if scalar else out

    def _binary(
        self,
        kernel: Callable[[np.ndarray, np.ndarray], np.ndarray],
        a: ArrayOrScalar,
        b: ArrayOrScalar,
    ):
        scalar = not isinstance(a, np.ndarray) and not isinstance(b, np.ndarray)
        with np.errstate(all="ignore"):
            out = kernel(self.as_array(a), self.as_array(b))
        return out.item() if scalar else out

    # ------------------------------------------------------------------
    # Identities and sentinels
    # ------------------------------------------------------------------
    @property
    def zero(self) -> Scalar:
        raise self._unsupported("zero")

    @property
    def one(self) -> Scalar:
        raise self._unsupported("one")

    @property
    def min_value(self) -> Scalar:
        raise self._unsupported("min_value")

    @property
    def max_value(self) -> Scalar:
        raise self._unsupported("max_value")

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    def coerce(self, value: Any) -> Scalar:
        """
        Convert any Python or NumPy scalar into a Python value of this type.
        """
        raise self._unsupported("coerce")

    def cast_array(self, array: np.ndarray) -> np.ndarray:
        """
        Convert an array of any supported dtype into this type's dtype.
        """
        raise self._unsupported("cast")

    def cast(self, value: Any) -> Scalar:
        """Alias of `coerce`."""
        return self.coerce(value)

    def boolean_value(self, value: ArrayOrScalar):
        """Truth value of an element: non-zero is True."""
        if isinstance(value, np.ndarray):
            return value != 0
        return bool(value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, a, b):
        raise self._unsupported("add")

    def subtract(self, a, b):
        raise self._unsupported("subtract")

    def multiply(self, a, b):
        raise self._unsupported("multiply")

    def divide(self, a, b):
        raise self._unsupported("divide")

    def mod(self, a, b):
        raise self._unsupported("mod")

    def power(self, a, b):
        raise self._unsupported("power")

    def sqrt(self, a):
        raise self._unsupported("sqrt")

    def negative(self, a):
        raise self._unsupported("negative")

    def maximum(self, a, b):
        raise self._unsupported("max")

    def minimum(self, a, b):
        raise self._unsupported("min")

    def max(self, a, b):
        return self.maximum(a, b)

    def min(self, a, b):
        return self.minimum(a, b)

    # ------------------------------------------------------------------
    # Bitwise
    # ------------------------------------------------------------------
    def bitwise_and(self, a, b):
        raise self._unsupported("and")

    def bitwise_or(self, a, b):
        raise self._unsupported("or")

    def bitwise_xor(self, a, b):
        raise self._unsupported("xor")

    def bitwise_not(self, a):
        raise self._unsupported("not")

    def left_shift(self, a, b):
        raise self._unsupported("shift left")

    def right_shift(self, a, b):
        raise self._unsupported("shift right")

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------
    def equals(self, a, b):
        return self._binary(np.equal, a, b)

    def not_equals(self, a, b):
        return self._binary(np.not_equal, a, b)

    def compare(self, a, b):
        raise self._unsupported("compare")

    def less_than(self, a, b):
        raise self._unsupported("less than")

    def greater_than(self, a, b):
        raise self._unsupported("greater than")

    def less_equal(self, a, b):
        raise self._unsupported("less than or equal")

    def greater_equal(self, a, b):
        raise self._unsupported("greater than or equal")


class BooleanTraits(NumericTraits):
    """Capabilities of BOOLEAN: logical and/or/xor/not and equality only."""

    @property
    def zero(self) -> bool:
        return False

    @property
    def one(self) -> bool:
        return True

    def coerce(self, value: Any) -> bool:
        return bool(value)

    def cast_array(self, array: np.ndarray) -> np.ndarray:
        return np.asarray(array) != 0

    def bitwise_and(self, a, b):
        return self._binary(np.logical_and, a, b)

    def bitwise_or(self, a, b):
        return self._binary(np.logical_or, a, b)

    def bitwise_xor(self, a, b):
        return self._binary(np.logical_xor, a, b)

    def bitwise_not(self, a):
        return self._unary(np.logical_not, a)


class _OrderedTraits(NumericTraits):
    """Operations shared by every numeric (integral or floating) type."""

    @property
    def zero(self):
        return self.coerce(0)

    @property
    def one(self):
        return self.coerce(1)

    def add(self, a, b):
        return self._binary(np.add, a, b)

    def subtract(self, a, b):
        return self._binary(np.subtract, a, b)

    def multiply(self, a, b):
        return self._binary(np.multiply, a, b)

    def negative(self, a):
        return self._unary(np.negative, a)

    def maximum(self, a, b):
        return self._binary(np.maximum, a, b)

    def minimum(self, a, b):
        return self._binary(np.minimum, a, b)

    def power(self, a, b):
        def kernel(x: np.ndarray, y: np.ndarray) -> np.ndarray:
            raised = np.power(x.astype(np.float64), y.astype(np.float64))
            return self.cast_array(raised)

        return self._binary(kernel, a, b)

    def sqrt(self, a):
        return self._unary(
            lambda x: self.cast_array(np.sqrt(x.astype(np.float64))), a
        )

    def compare(self, a, b):
        def kernel(x: np.ndarray, y: np.ndarray) -> np.ndarray:
            return np.greater(x, y).astype(np.int32) - np.less(x, y).astype(np.int32)

        return self._binary(kernel, a, b)

    def less_than(self, a, b):
        return self._binary(np.less, a, b)

    def greater_than(self, a, b):
        return self._binary(np.greater, a, b)

    def less_equal(self, a, b):
        return self._binary(np.less_equal, a, b)

    def greater_equal(self, a, b):
        return self._binary(np.greater_equal, a, b)


class IntegralTraits(_OrderedTraits):
    """
    Capabilities of BYTE, SHORT, INT and LONG.

    Results wrap to the type's width. Shift counts are taken modulo the
    type's bit width.
    """

    def __init__(self, dtype: DataType) -> None:
        super().__init__(dtype)
        info = np.iinfo(self.np_dtype)
        self._lo = int(info.min)
        self._hi = int(info.max)
        self._span = 1 << dtype.bits

    @property
    def min_value(self) -> int:
        return self._lo

    @property
    def max_value(self) -> int:
        return self._hi

    def _wrap(self, value: int) -> int:
        return (value - self._lo) % self._span + self._lo

    def coerce(self, value: Any) -> int:
        if isinstance(value, (float, np.floating)):
            value = float(value)
            if math.isnan(value):
                return 0
            if math.isinf(value):
                return self._hi if value > 0 else self._lo
            return self._wrap(math.trunc(value))
        return self._wrap(int(value))

    def cast_array(self, array: np.ndarray) -> np.ndarray:
        array = np.asarray(array)
        if array.dtype.kind == "f":
            with np.errstate(all="ignore"):
                info = np.iinfo(np.int64)
                truncated = np.nan_to_num(np.trunc(array), nan=0.0)
                clipped = np.clip(truncated, float(info.min), float(info.max))
                array = clipped.astype(np.int64)
        return array.astype(self.np_dtype)

    def _check_divisor(self, b: np.ndarray) -> None:
        if np.any(b == 0):
            raise ZeroDivisionError("integer division by zero")

    def divide(self, a, b):
        def kernel(x: np.ndarray, y: np.ndarray) -> np.ndarray:
            self._check_divisor(y)
            quotient = np.floor_divide(x, y)
            # floor -> truncation toward zero for inexact quotients of mixed sign
            adjust = (np.fmod(x, y) != 0) & ((x < 0) != (y < 0))
            return (quotient + adjust.astype(self.np_dtype)).astype(self.np_dtype)

        return self._binary(kernel, a, b)

    def mod(self, a, b):
        def kernel(x: np.ndarray, y: np.ndarray) -> np.ndarray:
            self._check_divisor(y)
            return np.fmod(x, y)

        return self._binary(kernel, a, b)

    def bitwise_and(self, a, b):
        return self._binary(np.bitwise_and, a, b)

    def bitwise_or(self, a, b):
        return self._binary(np.bitwise_or, a, b)

    def bitwise_xor(self, a, b):
        return self._binary(np.bitwise_xor, a, b)

    def bitwise_not(self, a):
        return self._unary(np.invert, a)

    def left_shift(self, a, b):
        mask = self.dtype.bits - 1
        return self._binary(lambda x, y: np.left_shift(x, y & mask), a, b)

    def right_shift(self, a, b):
        mask = self.dtype.bits - 1
        return self._binary(lambda x, y: np.right_shift(x, y & mask), a, b)


class FloatingTraits(_OrderedTraits):
    """
    Capabilities of FLOAT and DOUBLE.

    ``min_value`` and ``max_value`` are the infinities, so extremum folds
    starting from them return a value taken from the data.
    """

    @property
    def min_value(self) -> float:
        return float("-inf")

    @property
    def max_value(self) -> float:
        return float("inf")

    def coerce(self, value: Any) -> float:
        with np.errstate(all="ignore"):
            return float(self.np_dtype.type(float(value)))

    def cast_array(self, array: np.ndarray) -> np.ndarray:
        with np.errstate(all="ignore"):
            return np.asarray(array).astype(self.np_dtype)

    def divide(self, a, b):
        return self._binary(np.true_divide, a, b)

    def mod(self, a, b):
        return self._binary(np.fmod, a, b)


def _build_traits() -> dict[DataType, NumericTraits]:
    traits: dict[DataType, NumericTraits] = {}
    for dtype in DataType:
        if dtype.kind is ElementKind.BOOLEAN:
            traits[dtype] = BooleanTraits(dtype)
        elif dtype.kind is ElementKind.INTEGRAL:
            traits[dtype] = IntegralTraits(dtype)
        else:
            traits[dtype] = FloatingTraits(dtype)
    return traits


_TRAITS = _build_traits()


def numeric_traits(dtype: DataType) -> NumericTraits:
    """
    Return the capability object of an element type.

    Parameters
    ----------
    dtype : DataType
        Element type.

    Returns
    -------
    NumericTraits
        Shared, stateless traits instance for `dtype`.

    Raises
    ------
    InvalidTypeError
        If `dtype` is not a `DataType`.
    """
    try:
        return _TRAITS[dtype]
    except KeyError:
        raise InvalidTypeError(f"type {dtype!r} is not supported") from None
