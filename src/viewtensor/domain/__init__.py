"""
Domain layer of viewtensor.

Backend-agnostic contracts: element types, the error taxonomy, shape
arithmetic, control-path dispatch and the tensor protocol. Nothing in this
package imports NumPy.
"""

from ._errors import (
    DataSizeMismatchError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidShapeError,
    InvalidTypeError,
    NoNextElementError,
    TensorError,
    TruncationWarning,
)
from ._tensor import ITensor
from .types import DataType, ElementKind

__all__ = [
    "DataSizeMismatchError",
    "DataType",
    "ElementKind",
    "ITensor",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "InvalidShapeError",
    "InvalidTypeError",
    "NoNextElementError",
    "TensorError",
    "TruncationWarning",
]
