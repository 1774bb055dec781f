"""
Broadcasting engine.

Exports `TensorMixinBroadcast`: `Tensor.broadcast`, `broadcast_to`,
`broadcast_shape` and the operand helpers used by every binary operator.
"""

from ._base import TensorMixinBroadcast

__all__ = [
    TensorMixinBroadcast.__name__,
]
