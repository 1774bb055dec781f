import unittest

import numpy as np

from src.viewtensor.domain._errors import InvalidTypeError
from src.viewtensor.domain.types._dtype import DataType
from src.viewtensor.infrastructure.tensor._tensor import Tensor


class TestTensorComparisons(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.a = rng.standard_normal((4, 5)).astype(np.float32)
        self.b = rng.standard_normal((4, 5)).astype(np.float32)
        self.ta = Tensor.from_numpy(self.a)
        self.tb = Tensor.from_numpy(self.b)

    def _assert_mask(self, y: Tensor, ref: np.ndarray) -> None:
        self.assertIs(y.dtype, DataType.BOOLEAN)
        self.assertEqual(y.shape, ref.shape)
        np.testing.assert_array_equal(y.to_numpy(), ref)

    def test_ordering_matches_numpy(self) -> None:
        self._assert_mask(self.ta > self.tb, self.a > self.b)
        self._assert_mask(self.ta < self.tb, self.a < self.b)
        self._assert_mask(self.ta >= self.tb, self.a >= self.b)
        self._assert_mask(self.ta <= self.tb, self.a <= self.b)

    def test_scalar_comparison(self) -> None:
        t = Tensor.from_nested([[5, 6, 1], [-1, 0, 2]], DataType.INT)
        self._assert_mask(t > 0, np.array([[True, True, True], [False, False, True]]))

    def test_equal_is_elementwise(self) -> None:
        t = Tensor.from_nested([1, 2, 3], DataType.INT)
        self.assertEqual(t.equal(2).to_list(), [False, True, False])
        self.assertEqual(t.not_equal(2).to_list(), [True, False, True])

    def test_double_equals_is_structural(self) -> None:
        t = Tensor.from_nested([1, 2, 3], DataType.INT)
        self.assertIs(t == t.clone(), True)

    def test_boolean_equality(self) -> None:
        a = Tensor.from_nested([True, False], DataType.BOOLEAN)
        b = Tensor.from_nested([True, True], DataType.BOOLEAN)
        self.assertEqual(a.equal(b).to_list(), [True, False])

    def test_boolean_ordering_not_supported(self) -> None:
        a = Tensor.from_nested([True, False], DataType.BOOLEAN)
        with self.assertRaises(InvalidTypeError):
            a > a
        with self.assertRaises(InvalidTypeError):
            a.compare(a)

    def test_compare_is_three_way(self) -> None:
        a = Tensor.from_nested([1.0, 2.0, 3.0], DataType.DOUBLE)
        b = Tensor.from_nested([2.0, 2.0, 2.0], DataType.DOUBLE)
        y = a.compare(b)
        self.assertIs(y.dtype, DataType.INT)
        self.assertEqual(y.to_list(), [-1, 0, 1])

    def test_comparison_broadcasts(self) -> None:
        col = Tensor.from_nested([[1], [3]], DataType.INT)
        row = Tensor.from_nested([2, 3], DataType.INT)
        self._assert_mask(col >= row, np.array([[False, False], [True, True]]))


class TestTensorLogical(unittest.TestCase):
    def test_logical_ops(self) -> None:
        a = Tensor.from_nested([True, True, False, False], DataType.BOOLEAN)
        b = Tensor.from_nested([True, False, True, False], DataType.BOOLEAN)
        self.assertEqual(a.logical_and(b).to_list(), [True, False, False, False])
        self.assertEqual(a.logical_or(b).to_list(), [True, True, True, False])
        self.assertEqual(a.logical_xor(b).to_list(), [False, True, True, False])
        self.assertEqual(a.logical_not().to_list(), [False, False, True, True])

    def test_logical_scalar_operand(self) -> None:
        a = Tensor.from_nested([True, False], DataType.BOOLEAN)
        self.assertEqual(a.logical_and(True).to_list(), [True, False])

    def test_logical_ops_require_boolean(self) -> None:
        t = Tensor.from_nested([1, 0], DataType.INT)
        with self.assertRaises(InvalidTypeError):
            t.logical_and(t)
        with self.assertRaises(InvalidTypeError):
            t.logical_not()


if __name__ == "__main__":
    unittest.main()
