"""
View transform operators.

Exports `TensorMixinView`, which implements reshape, transpose, swap, slice,
reverse and the structural helpers built on them. These operators are
defined identically for every element type and are not kind-dispatched.
"""

from ._base import TensorMixinView

__all__ = [
    TensorMixinView.__name__,
]
