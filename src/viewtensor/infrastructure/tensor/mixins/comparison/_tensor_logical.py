"""
BOOLEAN-only implementations of the logical Tensor operators.

Numeric tensors have no registered path and raise `InvalidTypeError`; use
`cast_to_boolean` first.
"""

from typing import Union

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinComparison as TMC


Number = Union[bool, int, float]


@tensor_control_path_manager(TMC, TMC.logical_and, ElementKind.BOOLEAN, type_not_supported)
def tensor_logical_and(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.bitwise_and)


@tensor_control_path_manager(TMC, TMC.logical_or, ElementKind.BOOLEAN, type_not_supported)
def tensor_logical_or(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.bitwise_or)


@tensor_control_path_manager(TMC, TMC.logical_xor, ElementKind.BOOLEAN, type_not_supported)
def tensor_logical_xor(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.bitwise_xor)


@tensor_control_path_manager(TMC, TMC.logical_not, ElementKind.BOOLEAN, type_not_supported)
def tensor_logical_not(self: ITensor) -> "ITensor":
    return self._unary_elementwise(self.traits.bitwise_not)
