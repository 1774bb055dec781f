"""
Kind-specific implementations of negation and bitwise NOT.

- `negative`: INTEGRAL and FLOATING
- `bitwise_not`: INTEGRAL (bit inversion) and BOOLEAN (logical NOT)
"""

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinUnary as TMU


@tensor_control_path_manager(TMU, TMU.negative, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMU, TMU.negative, ElementKind.FLOATING, type_not_supported)
def tensor_negative(self: ITensor) -> "ITensor":
    return self._unary_elementwise(self.traits.negative)


@tensor_control_path_manager(TMU, TMU.bitwise_not, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMU, TMU.bitwise_not, ElementKind.BOOLEAN, type_not_supported)
def tensor_bitwise_not(self: ITensor) -> "ITensor":
    return self._unary_elementwise(self.traits.bitwise_not)
