"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, an abstract mixin that
specifies the public API and semantics for elementwise arithmetic and bitwise
operations on tensors.

The mixin itself does not implement numerical kernels. Kind-specific
implementations are registered elsewhere via the control-path dispatch
mechanism, keyed on the tensor's element kind (BOOLEAN, INTEGRAL, FLOATING).
Calling an operator on a kind with no registered path raises
`InvalidTypeError`.
"""

from typing import Union
from abc import ABC

from .....domain._tensor import ITensor

Number = Union[bool, int, float]


class TensorMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic operations for tensors.

    Notes
    -----
    - Methods defined here serve as interface declarations; the bodies are
      replaced by dispatchers when control paths are registered.
    - Binary operators accept a tensor of the same element type or a scalar.
      Scalars are lifted to a single-value tensor of the receiver's type, and
      both operands are broadcast to a common shape.
    - Integral results wrap to the type's width; floating results are
      rounded to the type's precision.
    """

    # ----------------------------
    # Arithmetic (numeric kinds)
    # ----------------------------
    def add(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand. Scalars are lifted to the receiver's type.

        Returns
        -------
        ITensor
            Tensor containing the elementwise result of ``self + other`` with
            the broadcast shape of both operands.

        Raises
        ------
        InvalidTypeError
            If the receiver is BOOLEAN or the operand types differ.
        InvalidArgumentError
            If the shapes can not be broadcast together.
        """
        ...

    def subtract(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise ``self - other`` (see `add`)."""
        ...

    def multiply(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise ``self * other`` (see `add`)."""
        ...

    def divide(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise division.

        Returns
        -------
        ITensor
            Integral types truncate the quotient toward zero; floating types
            follow IEEE division (infinities and NaN instead of errors).

        Raises
        ------
        ZeroDivisionError
            If the type is integral and any divisor is zero.
        """
        ...

    def mod(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise remainder of truncated division.

        The result takes the sign of the dividend (``-7 mod 3 == -1``).

        Raises
        ------
        ZeroDivisionError
            If the type is integral and any divisor is zero.
        """
        ...

    def pow(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise power.

        The power is evaluated in double precision and converted back to the
        receiver's type (truncating for integral types).
        """
        ...

    # ----------------------------
    # Bitwise (integral; and/or/xor/not also boolean)
    # ----------------------------
    def bitwise_and(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise bitwise AND.

        Defined for integral types and, as logical AND, for BOOLEAN.
        """
        ...

    def bitwise_or(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise bitwise OR (integral and BOOLEAN)."""
        ...

    def bitwise_xor(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise bitwise XOR (integral and BOOLEAN)."""
        ...

    def left_shift(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise left shift (integral types only).

        The shift count is taken modulo the type's bit width and the result
        wraps to the type's width.
        """
        ...

    def right_shift(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise arithmetic (sign-preserving) right shift (integral only).
        """
        ...

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.add(other)

    def __radd__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).add(self)

    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.subtract(other)

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        """
        Right-hand subtraction to support ``scalar - Tensor``.

        The scalar is promoted to a single-value tensor of the receiver's type
        and broadcast before subtracting.
        """
        return self._as_tensor_like(other).subtract(self)

    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.multiply(other)

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).multiply(self)

    def __truediv__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.divide(other)

    def __rtruediv__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).divide(self)

    def __mod__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.mod(other)

    def __rmod__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).mod(self)

    def __pow__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.pow(other)

    def __rpow__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).pow(self)

    def __and__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.bitwise_and(other)

    def __rand__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).bitwise_and(self)

    def __or__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.bitwise_or(other)

    def __ror__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).bitwise_or(self)

    def __xor__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.bitwise_xor(other)

    def __rxor__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).bitwise_xor(self)

    def __lshift__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.left_shift(other)

    def __rlshift__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).left_shift(self)

    def __rshift__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.right_shift(other)

    def __rrshift__(self: ITensor, other: Number) -> "ITensor":
        return self._as_tensor_like(other).right_shift(self)
