"""
Arithmetic mixins and kind-specific implementations for Tensor operations.

This package aggregates arithmetic-related Tensor mixins and their concrete
control-path implementations, including:

- addition, subtraction, multiplication   (``+``, ``-``, ``*``)
- division and remainder                  (``/``, ``%``)
- power                                   (``**``)
- bitwise and/or/xor and shifts           (``&``, ``|``, ``^``, ``<<``, ``>>``)

Design notes
------------
- Concrete implementation modules are imported for their *side effects*:
  registering control paths with the tensor control-path manager.
- These implementation modules are not part of the public API and should not
  be imported directly by users.

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``TensorMixinArithmetic``
"""

from ._tensor_arithmetic import *
from ._tensor_bitwise import *
from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
