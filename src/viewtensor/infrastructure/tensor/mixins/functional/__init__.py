"""
Elementwise engine.

Exports `TensorMixinFunctional`: `map`, `apply_function`,
`apply_binary_operation`, `apply_mask`, `filter` and `replace`.
"""

from ._base import TensorMixinFunctional

__all__ = [
    TensorMixinFunctional.__name__,
]
