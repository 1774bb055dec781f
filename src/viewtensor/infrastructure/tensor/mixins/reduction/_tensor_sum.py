"""
Kind-specific implementations of Tensor.sum and Tensor.product.

Both are registered for the INTEGRAL and FLOATING kinds and instantiate the
generic `reduce_along` engine with the type's identity and scalar operation
from `NumericTraits`.
"""

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinReduction as TMR


@tensor_control_path_manager(TMR, TMR.sum, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.sum, ElementKind.FLOATING, type_not_supported)
def tensor_sum(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    traits = self.traits
    return self.reduce_along(traits.zero, traits.add, dimension, keep_dimensions)


@tensor_control_path_manager(TMR, TMR.product, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.product, ElementKind.FLOATING, type_not_supported)
def tensor_product(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    traits = self.traits
    return self.reduce_along(traits.one, traits.multiply, dimension, keep_dimensions)
