"""
Kind-specific implementations of the statistical reductions.

Registers `mean`, `var` and `std` for the INTEGRAL and FLOATING kinds. All
three are composed from `sum` and the elementwise operators, so they inherit
the receiver's arithmetic: integral means and variances use truncating
division.
"""

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import ElementKind

from ._base import TensorMixinReduction as TMR


@tensor_control_path_manager(TMR, TMR.mean, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.mean, ElementKind.FLOATING, type_not_supported)
def tensor_mean(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    """Sum along `dimension` divided by the length of that dimension."""
    return self.sum(dimension, keep_dimensions).divide(self.shape[dimension])


@tensor_control_path_manager(TMR, TMR.var, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.var, ElementKind.FLOATING, type_not_supported)
def tensor_var(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    """
    Population variance along `dimension`.

    The mean is computed with the reduced dimension kept, so it broadcasts
    against the receiver when the deviations are formed.
    """
    shape = self._reduced_shape(dimension, keep_dimensions)
    if self.shape[dimension] == 1:
        return self.zeros(shape, self.dtype)

    deviations = self.subtract(self.mean(dimension, keep_dimensions=True))
    squared = deviations.multiply(deviations)
    return squared.sum(dimension, keep_dimensions).divide(self.shape[dimension])


@tensor_control_path_manager(TMR, TMR.std, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.std, ElementKind.FLOATING, type_not_supported)
def tensor_std(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    return self.var(dimension, keep_dimensions).sqrt()
