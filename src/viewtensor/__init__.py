"""
viewtensor: dense N-dimensional tensors with a zero-copy view engine.

Quick start
-----------
>>> from viewtensor import Tensor, DataType
>>> t = Tensor.from_nested([[5, 6, 1], [-1, 0, 2]], DataType.INT)
>>> t.max(1).to_list()
[6, 2]
>>> t.slice([(0, 2), (1, 3)]).to_list()
[6, 1, 0, 2]
"""

from .domain import (
    DataSizeMismatchError,
    DataType,
    ElementKind,
    ITensor,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidShapeError,
    InvalidTypeError,
    NoNextElementError,
    TensorError,
    TruncationWarning,
)
from .infrastructure import (
    IndexIterator,
    NumericTraits,
    Storage,
    Tensor,
    decode,
    encode,
    numeric_traits,
    payload_to_tensor,
    tensor_to_payload,
)

__version__ = "0.1.0"

__all__ = [
    "DataSizeMismatchError",
    "DataType",
    "ElementKind",
    "ITensor",
    "IndexIterator",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "InvalidShapeError",
    "InvalidTypeError",
    "NoNextElementError",
    "NumericTraits",
    "Storage",
    "Tensor",
    "TensorError",
    "TruncationWarning",
    "decode",
    "encode",
    "numeric_traits",
    "payload_to_tensor",
    "tensor_to_payload",
]
