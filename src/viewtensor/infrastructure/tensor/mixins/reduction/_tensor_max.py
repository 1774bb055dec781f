"""
Kind-specific implementations of the extremum reductions.

Registers `max`, `min`, `argmax` and `argmin` for the INTEGRAL and FLOATING
kinds.

Arg-reductions fold over ``(index, value)`` pairs starting from
``(-1, sentinel)``. The running best is kept while it compares ``>=`` (or
``<=``) to the next pair, so the first occurrence of the extremum wins ties,
and the sentinel pair is always replaced by the lane's first element.
"""

from functools import reduce
from typing import Any, Callable

from ..._tensor_builder import tensor_control_path_manager, type_not_supported

from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType, ElementKind

from ._base import TensorMixinReduction as TMR


@tensor_control_path_manager(TMR, TMR.max, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.max, ElementKind.FLOATING, type_not_supported)
def tensor_max(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    traits = self.traits
    return self.reduce_along(traits.min_value, traits.max, dimension, keep_dimensions)


@tensor_control_path_manager(TMR, TMR.min, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.min, ElementKind.FLOATING, type_not_supported)
def tensor_min(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    traits = self.traits
    return self.reduce_along(traits.max_value, traits.min, dimension, keep_dimensions)


def _arg_reduce(
    self: ITensor,
    dimension: int,
    keep_dimensions: bool,
    sentinel: Any,
    keeps: Callable[[Any, Any], bool],
) -> "ITensor":
    """
    Fold ``(index, value)`` pairs of every lane and keep the index.

    Parameters
    ----------
    sentinel : Any
        Value paired with index -1 as the starting accumulator.
    keeps : Callable[[Any, Any], bool]
        ``keeps(best, candidate)`` is True when the running best survives.
    """

    def accumulate(best: tuple[int, Any], pair: tuple[int, Any]) -> tuple[int, Any]:
        return best if best[0] >= 0 and keeps(best[1], pair[1]) else pair

    return self._fold_along(
        dimension,
        keep_dimensions,
        lambda lane: reduce(accumulate, enumerate(lane), (-1, sentinel))[0],
        DataType.INT,
    )


@tensor_control_path_manager(TMR, TMR.argmax, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.argmax, ElementKind.FLOATING, type_not_supported)
def tensor_argmax(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    traits = self.traits
    return _arg_reduce(self, dimension, keep_dimensions, traits.min_value, traits.greater_equal)


@tensor_control_path_manager(TMR, TMR.argmin, ElementKind.INTEGRAL, type_not_supported)
@tensor_control_path_manager(TMR, TMR.argmin, ElementKind.FLOATING, type_not_supported)
def tensor_argmin(self: ITensor, dimension: int, keep_dimensions: bool = False) -> "ITensor":
    traits = self.traits
    return _arg_reduce(self, dimension, keep_dimensions, traits.max_value, traits.less_equal)
