"""
Unary mixins and kind-specific implementations for Tensor operations.

This package aggregates unary Tensor operations and their control paths:

- ``sqrt``
- ``negative`` (``-t``) and ``bitwise_not`` (``~t``)
- ``cast``, ``cast_to_boolean`` and ``cast_from_boolean``

Implementation modules are imported for their side effects (control-path
registration). Only the base mixin is public.
"""

from ._tensor_sqrt import *
from ._tensor_neg import *
from ._tensor_cast import *
from ._base import TensorMixinUnary

__all__ = [
    TensorMixinUnary.__name__,
]
