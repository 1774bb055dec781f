"""
Infrastructure layer of viewtensor.

Concrete, NumPy-backed implementations of the domain contracts: numeric
traits per element type, the `Tensor` and its view engine, and the codecs.
"""

from .encoding import decode, encode, payload_to_tensor, tensor_to_payload
from .numeric import NumericTraits, numeric_traits
from .tensor import IndexIterator, Storage, Tensor

__all__ = [
    "IndexIterator",
    "NumericTraits",
    "Storage",
    "Tensor",
    "decode",
    "encode",
    "numeric_traits",
    "payload_to_tensor",
    "tensor_to_payload",
]
