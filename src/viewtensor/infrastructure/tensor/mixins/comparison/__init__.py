"""
Comparison mixins and kind-specific implementations for Tensor operations.

This package aggregates comparison-related Tensor operations and their
control paths:

- ordering comparisons (``>``, ``<``, ``>=``, ``<=``) and ``compare``
- elementwise ``equal`` / ``not_equal``
- logical and/or/xor/not on BOOLEAN tensors

Implementation modules are imported for their side effects (control-path
registration). Only the base mixin is public.
"""

from ._tensor_compare import *
from ._tensor_logical import *
from ._base import TensorMixinComparison

__all__ = [
    TensorMixinComparison.__name__,
]
