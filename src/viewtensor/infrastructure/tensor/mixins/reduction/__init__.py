"""
Reduction mixins and kind-specific implementations for Tensor operations.

This package aggregates the reduction engine (`reduce_along`, `reduce_all`)
and the control paths of the built-in reductions:

- ``sum`` / ``product``
- ``max`` / ``min`` / ``argmax`` / ``argmin``
- ``mean`` / ``var`` / ``std``

Implementation modules are imported for their side effects (control-path
registration). Only the base mixin is public.
"""

from ._tensor_sum import *
from ._tensor_max import *
from ._tensor_mean import *
from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
