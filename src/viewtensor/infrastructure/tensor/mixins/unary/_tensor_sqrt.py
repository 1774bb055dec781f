"""
Kind-specific implementation of Tensor.sqrt via control-path dispatch.

The square root is registered for the INTEGRAL and FLOATING kinds; BOOLEAN
tensors raise `InvalidTypeError`.
"""

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinUnary as TMU


@tensor_control_path_manager(TMU, TMU.sqrt, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMU, TMU.sqrt, ElementKind.FLOATING, type_not_supported)
def tensor_sqrt(self: ITensor) -> "ITensor":
    """
    Numeric control path for the elementwise square root.

    The kernel promotes to double precision before taking the root and
    converts back with the type's cast rules.
    """
    return self._unary_elementwise(self.traits.sqrt)
