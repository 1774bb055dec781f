"""
Error taxonomy for viewtensor.

Every failure raised by the library is a local, synchronous, fail-fast error:
operations either complete with a well-formed result or raise before any
caller-visible state is mutated.

Each error derives from `TensorError` (so callers can catch everything the
library raises with a single clause) and from the closest builtin exception
(so generic handlers such as ``except ValueError`` keep working).
"""


class TensorError(Exception):
    """Base class of every error raised by viewtensor."""


class InvalidShapeError(TensorError, ValueError):
    """
    Raised when a shape contains a zero or negative dimension.

    Attributes
    ----------
    shape : tuple[int, ...]
        The rejected shape.
    """

    def __init__(self, shape: tuple, message: str = "") -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        shape : tuple
            The shape that failed validation.
        message : str, optional
            Additional detail. A default message naming the shape is used
            when omitted.
        """
        super().__init__(message or f"given non-positive dimension in shape {shape}")
        self.shape = tuple(shape)


class DataSizeMismatchError(TensorError, ValueError):
    """
    Raised when flat input data does not match the size implied by a shape.

    Attributes
    ----------
    expected : int
        Size computed from the shape.
    actual : int
        Length of the supplied data.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"given data size: {actual}, but should be {expected}")
        self.expected = expected
        self.actual = actual


class InvalidArgumentError(TensorError, ValueError):
    """
    Raised for semantically invalid arguments.

    Typical causes are bad slice intervals, incompatible broadcast shapes,
    an out-of-range dimension, an empty index, squeezing a non-unit axis,
    mismatched concatenation shapes, or an undecodable byte stream.
    """


class IndexOutOfBoundsError(TensorError, IndexError):
    """
    Raised when an index falls outside ``[0, shape[i])`` for some dimension.

    Attributes
    ----------
    indices : tuple[int, ...]
        The offending multi-index.
    shape : tuple[int, ...]
        Shape of the tensor that was indexed.
    """

    def __init__(self, indices: tuple, shape: tuple) -> None:
        super().__init__(f"index {tuple(indices)} out of bounds for shape {tuple(shape)}")
        self.indices = tuple(indices)
        self.shape = tuple(shape)


class NoNextElementError(TensorError, StopIteration):
    """
    Raised when an index iterator is advanced past its end.

    Deriving from `StopIteration` keeps the iterator protocol intact: ``for``
    loops and ``list(...)`` terminate normally, while explicit ``next`` calls
    can catch the more specific type.
    """


class InvalidTypeError(TensorError, TypeError):
    """
    Raised when an operation is not supported for an element type.

    This covers operator dispatch on an unsupported element kind (e.g. a
    shift on floating point data), mixing operands of different element
    types, and buffer requests for a mismatched type.
    """


class TruncationWarning(UserWarning):
    """Emitted when an operation silently discards elements (e.g. ``resize``)."""
