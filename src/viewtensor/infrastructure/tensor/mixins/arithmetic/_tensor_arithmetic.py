"""
Kind-specific implementations of Tensor arithmetic via control-path dispatch.

This module registers the INTEGRAL and FLOATING implementations of
`add`, `subtract`, `multiply`, `divide`, `mod` and `pow`. BOOLEAN tensors
have no registered path, so calling these operators on them raises
`InvalidTypeError`.

Both kinds share one implementation per operator: the element semantics
(wrapping, truncating division, float rounding) are owned by the type's
`NumericTraits`, and the vectorized kernel is applied to the broadcast
logical element arrays of both operands.
"""

from typing import Union

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinArithmetic as TMA


Number = Union[bool, int, float]
"""Scalar types accepted by Tensor arithmetic operators."""


@tensor_control_path_manager(TMA, TMA.add, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.add, ElementKind.FLOATING, type_not_supported)
def tensor_add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Numeric control path for elementwise addition."""
    return self._binary_elementwise(other, self.traits.add)


@tensor_control_path_manager(TMA, TMA.subtract, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.subtract, ElementKind.FLOATING, type_not_supported)
def tensor_subtract(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Numeric control path for elementwise subtraction."""
    return self._binary_elementwise(other, self.traits.subtract)


@tensor_control_path_manager(TMA, TMA.multiply, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.multiply, ElementKind.FLOATING, type_not_supported)
def tensor_multiply(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Numeric control path for elementwise multiplication."""
    return self._binary_elementwise(other, self.traits.multiply)


@tensor_control_path_manager(TMA, TMA.divide, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.divide, ElementKind.FLOATING, type_not_supported)
def tensor_divide(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """
    Numeric control path for elementwise division.

    Integral division truncates toward zero and raises `ZeroDivisionError`
    before producing any output when a divisor is zero. Floating division
    yields infinities or NaN for zero divisors.
    """
    return self._binary_elementwise(other, self.traits.divide)


@tensor_control_path_manager(TMA, TMA.mod, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.mod, ElementKind.FLOATING, type_not_supported)
def tensor_mod(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Numeric control path for the elementwise remainder (sign of the dividend)."""
    return self._binary_elementwise(other, self.traits.mod)


@tensor_control_path_manager(TMA, TMA.pow, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.pow, ElementKind.FLOATING, type_not_supported)
def tensor_pow(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Numeric control path for elementwise power."""
    return self._binary_elementwise(other, self.traits.power)
