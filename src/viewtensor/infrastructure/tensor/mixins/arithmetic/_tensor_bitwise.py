"""
Kind-specific implementations of bitwise Tensor operators.

Registered control paths:

- INTEGRAL: `bitwise_and`, `bitwise_or`, `bitwise_xor`, `left_shift`,
  `right_shift`
- BOOLEAN: `bitwise_and`, `bitwise_or`, `bitwise_xor` (logical semantics)

FLOATING tensors have no registered path and raise `InvalidTypeError`.
"""

from typing import Union

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinArithmetic as TMA


Number = Union[bool, int, float]


@tensor_control_path_manager(TMA, TMA.bitwise_and, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.bitwise_and, ElementKind.BOOLEAN, type_not_supported)
def tensor_bitwise_and(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.bitwise_and)


@tensor_control_path_manager(TMA, TMA.bitwise_or, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.bitwise_or, ElementKind.BOOLEAN, type_not_supported)
def tensor_bitwise_or(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.bitwise_or)


@tensor_control_path_manager(TMA, TMA.bitwise_xor, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMA, TMA.bitwise_xor, ElementKind.BOOLEAN, type_not_supported)
def tensor_bitwise_xor(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.bitwise_xor)


@tensor_control_path_manager(TMA, TMA.left_shift, ElementKind.INTEGRAL, type_not_supported)
def tensor_left_shift(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Integral control path for the left shift (count taken modulo the bit width)."""
    return self._binary_elementwise(other, self.traits.left_shift)


@tensor_control_path_manager(TMA, TMA.right_shift, ElementKind.INTEGRAL, type_not_supported)
def tensor_right_shift(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Integral control path for the sign-preserving right shift."""
    return self._binary_elementwise(other, self.traits.right_shift)
