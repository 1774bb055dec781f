from __future__ import annotations

import base64
from typing import Any, Dict

from ...domain._errors import InvalidArgumentError
from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor
from ._binary import decode, encode


def bytes_to_b64_str(b: bytes) -> str:
    """
    Encode raw bytes into a base64 ASCII string (JSON-safe).
    """
    return base64.b64encode(b).decode("ascii")


def b64_str_to_bytes(s: str) -> bytes:
    """
    Decode a base64 ASCII string back into raw bytes.
    """
    return base64.b64decode(s.encode("ascii"), validate=True)


def tensor_to_payload(tensor: ITensor) -> Dict[str, Any]:
    """
    Serialize a tensor into a JSON-safe payload.

    Returns
    -------
    dict
        {
          "b64": "<base64 of the binary codec>",
          "dtype": "<DataType name>",
          "shape": [...]
        }

    Notes
    -----
    ``dtype`` and ``shape`` duplicate the codec header so payloads stay
    readable; `payload_to_tensor` checks them against the decoded tensor.
    """
    return {
        "b64": bytes_to_b64_str(encode(tensor)),
        "dtype": tensor.dtype.name,
        "shape": list(tensor.shape),
    }


def payload_to_tensor(payload: Dict[str, Any]) -> Tensor:
    """
    Deserialize a JSON payload back into a tensor.

    Raises
    ------
    InvalidArgumentError
        If a key is missing, the base64 text is malformed, the encoded bytes
        are invalid, or ``dtype`` / ``shape`` disagree with the decoded tensor.
    """
    try:
        raw = b64_str_to_bytes(str(payload["b64"]))
        dtype_name = str(payload["dtype"])
        shape = tuple(int(x) for x in payload["shape"])
    except KeyError as e:
        raise InvalidArgumentError(f"payload is missing key {e.args[0]!r}") from e
    except ValueError as e:
        raise InvalidArgumentError("malformed tensor payload") from e

    tensor = decode(raw)
    if tensor.dtype.name != dtype_name or tensor.shape != shape:
        raise InvalidArgumentError(
            f"payload metadata ({dtype_name}, {shape}) does not match the encoded "
            f"tensor ({tensor.dtype.name}, {tensor.shape})"
        )
    return tensor
