"""
Kind-specific implementations of Tensor comparisons via control-path dispatch.

Ordering comparisons and `compare` are registered for the INTEGRAL and
FLOATING kinds; `equal` and `not_equal` for every kind. Each path runs the
traits kernel over the broadcast logical element arrays and stores the
result as BOOLEAN (or INT for `compare`).
"""

from typing import Union

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType, ElementKind

from ._base import TensorMixinComparison as TMC


Number = Union[bool, int, float]


@tensor_control_path_manager(TMC, TMC.greater_than, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.greater_than, ElementKind.FLOATING, type_not_supported)
def tensor_gt(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.greater_than, DataType.BOOLEAN)


@tensor_control_path_manager(TMC, TMC.less_than, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.less_than, ElementKind.FLOATING, type_not_supported)
def tensor_lt(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.less_than, DataType.BOOLEAN)


@tensor_control_path_manager(TMC, TMC.greater_equal, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.greater_equal, ElementKind.FLOATING, type_not_supported)
def tensor_ge(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.greater_equal, DataType.BOOLEAN)


@tensor_control_path_manager(TMC, TMC.less_equal, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.less_equal, ElementKind.FLOATING, type_not_supported)
def tensor_le(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.less_equal, DataType.BOOLEAN)


@tensor_control_path_manager(TMC, TMC.equal, ElementKind.BOOLEAN, type_not_supported)
@tensor_control_path_manager(TMC, TMC.equal, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.equal, ElementKind.FLOATING, type_not_supported)
def tensor_equal(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.equals, DataType.BOOLEAN)


@tensor_control_path_manager(TMC, TMC.not_equal, ElementKind.BOOLEAN, type_not_supported)
@tensor_control_path_manager(TMC, TMC.not_equal, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.not_equal, ElementKind.FLOATING, type_not_supported)
def tensor_not_equal(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    return self._binary_elementwise(other, self.traits.not_equals, DataType.BOOLEAN)


@tensor_control_path_manager(TMC, TMC.compare, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMC, TMC.compare, ElementKind.FLOATING, type_not_supported)
def tensor_compare(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
    """Numeric control path for the three-way comparison (INT result)."""
    return self._binary_elementwise(other, self.traits.compare, DataType.INT)
