"""
Element type enumeration for viewtensor.

This module defines the closed set of element types a tensor may hold, in a
framework-agnostic way:

- `ElementKind`: the broad category of an element type (boolean, integral,
  floating). Operator dispatch is keyed on the kind.
- `DataType`: the concrete element types, each carrying its wire tag (used by
  the binary codec) and its width in bits.

The domain layer intentionally does not import NumPy; the mapping from a
`DataType` to a storage dtype lives in the infrastructure layer.
"""

from enum import Enum

from .._errors import InvalidTypeError


class ElementKind(Enum):
    """
    Enumeration of element type categories.

    Attributes
    ----------
    BOOLEAN : ElementKind
        Truth values.
    INTEGRAL : ElementKind
        Signed fixed-width integers.
    FLOATING : ElementKind
        IEEE-754 binary floating point numbers.
    """

    BOOLEAN = "boolean"
    INTEGRAL = "integral"
    FLOATING = "floating"


class DataType(Enum):
    """
    Concrete element types supported by tensors.

    Each member's value is a ``(tag, bits, kind)`` triple:

    - ``tag`` is the single byte written by the binary codec,
    - ``bits`` is the storage width of one element,
    - ``kind`` is the `ElementKind` used for operator dispatch.

    Notes
    -----
    - The tag values are part of the binary format and must never change.
    - ``BOOLEAN`` is one bit wide on the wire (bit-packed payload).
    """

    BOOLEAN = (1, 1, ElementKind.BOOLEAN)
    BYTE = (2, 8, ElementKind.INTEGRAL)
    SHORT = (3, 16, ElementKind.INTEGRAL)
    INT = (4, 32, ElementKind.INTEGRAL)
    FLOAT = (5, 32, ElementKind.FLOATING)
    LONG = (6, 64, ElementKind.INTEGRAL)
    DOUBLE = (7, 64, ElementKind.FLOATING)

    @property
    def tag(self) -> int:
        """Wire tag of this type (one unsigned byte)."""
        return self.value[0]

    @property
    def bits(self) -> int:
        """Width of one element in bits."""
        return self.value[1]

    @property
    def kind(self) -> ElementKind:
        """Element kind used for operator dispatch."""
        return self.value[2]

    def is_boolean(self) -> bool:
        return self.kind is ElementKind.BOOLEAN

    def is_integral(self) -> bool:
        return self.kind is ElementKind.INTEGRAL

    def is_floating(self) -> bool:
        return self.kind is ElementKind.FLOATING

    def is_numeric(self) -> bool:
        """
        Check whether arithmetic is defined for this type.

        Returns
        -------
        bool
            True for integral and floating types, False for BOOLEAN.
        """
        return self.kind is not ElementKind.BOOLEAN

    @classmethod
    def from_tag(cls, tag: int) -> "DataType":
        """
        Resolve a wire tag back to its `DataType`.

        Parameters
        ----------
        tag : int
            Tag byte read from an encoded tensor.

        Returns
        -------
        DataType
            The matching element type.

        Raises
        ------
        ValueError
            If no element type uses the given tag.
        """
        for member in cls:
            if member.tag == tag:
                return member
        raise ValueError(f"invalid element type tag: {tag!r}")

    @classmethod
    def infer(cls, value: object) -> "DataType":
        """
        Infer an element type from a Python scalar.

        ``bool`` maps to BOOLEAN, ``int`` to INT and ``float`` to DOUBLE.

        Raises
        ------
        InvalidTypeError
            If the value is not a bool, int or float.
        """
        # bool must be tested first: it is a subclass of int
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.DOUBLE
        raise InvalidTypeError(f"cannot infer an element type from {type(value).__name__}")

    def __repr__(self) -> str:
        return f"DataType.{self.name}"
