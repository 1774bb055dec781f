"""
Tensor serialization.

- `encode` / `decode`: the flat big-endian binary codec.
- `tensor_to_payload` / `payload_to_tensor`: a JSON-safe base64 wrapper
  around the binary codec.
"""

from ._b64 import (
    b64_str_to_bytes,
    bytes_to_b64_str,
    payload_to_tensor,
    tensor_to_payload,
)
from ._binary import decode, encode

__all__ = [
    "b64_str_to_bytes",
    "bytes_to_b64_str",
    "decode",
    "encode",
    "payload_to_tensor",
    "tensor_to_payload",
]
