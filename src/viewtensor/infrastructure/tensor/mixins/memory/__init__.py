"""
Tensor construction and memory helpers.

This package aggregates the operations that create tensors or copy their
elements without changing structure:

- `TensorMixinFactories`: classmethod constructors (`from_data`,
  `from_function`, `from_nested`, `from_numpy`, `repeat`, `zeros`, ...)
- `TensorMixinMemory`: copies, conversions, codec entrypoints and equality

Neither mixin is dispatched by element kind: these operations are defined
identically for every `DataType`.
"""

from ._base import TensorMixinMemory
from ._factories import TensorMixinFactories

__all__ = [
    TensorMixinFactories.__name__,
    TensorMixinMemory.__name__,
]
