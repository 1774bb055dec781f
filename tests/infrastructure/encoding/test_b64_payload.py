import json
import unittest

from src.viewtensor.domain._errors import InvalidArgumentError
from src.viewtensor.domain.types._dtype import DataType
from src.viewtensor.infrastructure.encoding._b64 import (
    b64_str_to_bytes,
    bytes_to_b64_str,
    payload_to_tensor,
    tensor_to_payload,
)
from src.viewtensor.infrastructure.tensor._tensor import Tensor


class TestB64Helpers(unittest.TestCase):
    def test_round_trip_bytes(self) -> None:
        raw = bytes(range(256))
        self.assertEqual(b64_str_to_bytes(bytes_to_b64_str(raw)), raw)

    def test_invalid_base64_raises(self) -> None:
        with self.assertRaises(ValueError):
            b64_str_to_bytes("not base64!")


class TestTensorPayload(unittest.TestCase):
    def test_payload_is_json_safe(self) -> None:
        t = Tensor.from_nested([[1.0, 2.0], [3.0, 4.0]], DataType.DOUBLE)
        payload = json.loads(json.dumps(tensor_to_payload(t)))
        self.assertEqual(payload["dtype"], "DOUBLE")
        self.assertEqual(payload["shape"], [2, 2])
        self.assertTrue(payload_to_tensor(payload) == t)

    def test_missing_key(self) -> None:
        payload = tensor_to_payload(Tensor((2,), DataType.INT))
        del payload["shape"]
        with self.assertRaises(InvalidArgumentError):
            payload_to_tensor(payload)

    def test_malformed_base64(self) -> None:
        payload = tensor_to_payload(Tensor((2,), DataType.INT))
        payload["b64"] = "%%%"
        with self.assertRaises(InvalidArgumentError):
            payload_to_tensor(payload)

    def test_metadata_mismatch(self) -> None:
        payload = tensor_to_payload(Tensor((2,), DataType.INT))
        payload["dtype"] = "LONG"
        with self.assertRaises(InvalidArgumentError):
            payload_to_tensor(payload)
        payload = tensor_to_payload(Tensor((2,), DataType.INT))
        payload["shape"] = [1, 2]
        with self.assertRaises(InvalidArgumentError):
            payload_to_tensor(payload)


if __name__ == "__main__":
    unittest.main()
