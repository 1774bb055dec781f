"""
Tensor operation mixins.

Each subpackage contributes one cohesive group of `Tensor` methods. Packages
whose operators depend on the element kind register their implementations
through the tensor control-path manager when imported.
"""

from .arithmetic import TensorMixinArithmetic
from .broadcast import TensorMixinBroadcast
from .comparison import TensorMixinComparison
from .functional import TensorMixinFunctional
from .memory import TensorMixinFactories, TensorMixinMemory
from .reduction import TensorMixinReduction
from .unary import TensorMixinUnary
from .view import TensorMixinView

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinBroadcast.__name__,
    TensorMixinComparison.__name__,
    TensorMixinFactories.__name__,
    TensorMixinFunctional.__name__,
    TensorMixinMemory.__name__,
    TensorMixinReduction.__name__,
    TensorMixinUnary.__name__,
    TensorMixinView.__name__,
]
