"""
Comparison mixin defining elementwise Tensor comparison and logical APIs.

This module declares :class:`TensorMixinComparison`, an abstract mixin that
specifies comparison operators returning BOOLEAN tensors (``>``, ``<``,
``>=``, ``<=``, `equal`, `not_equal`), the three-way `compare` returning an
INT tensor of -1/0/1, and the logical operators on BOOLEAN tensors.

Concrete implementations are registered elsewhere via control-path dispatch
on the tensor's element kind.

Notes
-----
``==`` is *not* elementwise: it is structural equality (see
`TensorMixinMemory.equals`) and returns a plain ``bool``. Use `equal` for
the elementwise comparison.
"""

from typing import Union
from abc import ABC

from .....domain._tensor import ITensor

Number = Union[bool, int, float]


class TensorMixinComparison(ABC):
    """
    Abstract mixin defining elementwise comparison operations for tensors.

    Notes
    -----
    - Operands follow the binary-operator rules: same element type or a
      scalar lifted to it, then broadcasting.
    - Ordering comparisons are defined for numeric kinds only; `equal` and
      `not_equal` are defined for every kind.
    """

    def greater_than(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise ``self > other``.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            BOOLEAN tensor with the broadcast shape of both operands.

        Raises
        ------
        InvalidTypeError
            If the receiver is BOOLEAN or the operand types differ.
        """
        ...

    def less_than(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise ``self < other`` (see `greater_than`)."""
        ...

    def greater_equal(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise ``self >= other`` (see `greater_than`)."""
        ...

    def less_equal(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise ``self <= other`` (see `greater_than`)."""
        ...

    def equal(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise equality, defined for every kind; returns BOOLEAN."""
        ...

    def not_equal(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise inequality, defined for every kind; returns BOOLEAN."""
        ...

    def compare(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise three-way comparison.

        Returns
        -------
        ITensor
            INT tensor holding -1 where ``self < other``, 0 where equal and
            1 where ``self > other``.
        """
        ...

    # ----------------------------
    # Logical (BOOLEAN only)
    # ----------------------------
    def logical_and(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise logical AND of two BOOLEAN tensors."""
        ...

    def logical_or(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise logical OR of two BOOLEAN tensors."""
        ...

    def logical_xor(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """Elementwise logical XOR of two BOOLEAN tensors."""
        ...

    def logical_not(self: ITensor) -> "ITensor":
        """Elementwise logical NOT of a BOOLEAN tensor."""
        ...

    # ----------------------------
    # Operators
    # ----------------------------
    def __gt__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.greater_than(other)

    def __lt__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.less_than(other)

    def __ge__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.greater_equal(other)

    def __le__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        return self.less_equal(other)
