"""
Unary operation mixin defining elementwise Tensor unary APIs.

This module declares :class:`TensorMixinUnary`, an abstract mixin that
specifies the public interface and semantics of elementwise unary tensor
operations: square root, negation, bitwise NOT and element type casts.

Kind-specific implementations are registered elsewhere via control-path
dispatch on the tensor's element kind. `cast` is the exception: converting
between element types is defined for every kind, so it is implemented here
directly.
"""

from abc import ABC

from ....numeric._traits import numeric_traits
from .....domain._tensor import ITensor
from .....domain.types._dtype import DataType


class TensorMixinUnary(ABC):
    """
    Abstract mixin defining unary tensor operations.

    Notes
    -----
    - Kind-dispatched methods are interface declarations; their bodies are
      replaced by dispatchers when control paths are registered.
    - Every operation returns a new, non-view tensor of the receiver's shape.
    """

    def sqrt(self: ITensor) -> "ITensor":
        """
        Compute the elementwise square root of the tensor.

        Returns
        -------
        ITensor
            A tensor of the receiver's type. The root is evaluated in double
            precision; integral types truncate the result, and negative
            inputs yield NaN for floating types (0 for integral types).

        Raises
        ------
        InvalidTypeError
            If the receiver is BOOLEAN.
        """
        ...

    def negative(self: ITensor) -> "ITensor":
        """
        Elementwise negation (numeric kinds).

        Integral negation wraps: the most negative value maps to itself.
        """
        ...

    def bitwise_not(self: ITensor) -> "ITensor":
        """Elementwise bitwise NOT (integral) or logical NOT (BOOLEAN)."""
        ...

    def cast(self: ITensor, dtype: DataType) -> "ITensor":
        """
        Convert every element to another element type.

        Parameters
        ----------
        dtype : DataType
            Target element type.

        Returns
        -------
        ITensor
            A new tensor of the same shape.

        Notes
        -----
        - numeric -> BOOLEAN: non-zero becomes True.
        - BOOLEAN -> numeric: True becomes one, False zero.
        - floating -> integral: truncation toward zero, then wrapping to the
          target width; NaN becomes 0.
        - integral -> narrower integral: wraps (two's complement).
        """
        target = numeric_traits(dtype)
        return self._unary_elementwise(target.cast_array, dtype)

    def cast_to_boolean(self: ITensor) -> "ITensor":
        """Convert a numeric tensor to BOOLEAN (non-zero is True)."""
        ...

    def cast_from_boolean(self: ITensor, dtype: DataType) -> "ITensor":
        """Convert a BOOLEAN tensor to `dtype` (True is one, False zero)."""
        ...

    def __neg__(self: ITensor) -> "ITensor":
        return self.negative()

    def __invert__(self: ITensor) -> "ITensor":
        return self.bitwise_not()
