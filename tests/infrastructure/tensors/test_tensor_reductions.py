import unittest

import numpy as np

from src.viewtensor.domain._errors import InvalidArgumentError, InvalidTypeError
from src.viewtensor.domain.types._dtype import DataType
from src.viewtensor.infrastructure.tensor._tensor import Tensor


class TestTensorReductions(unittest.TestCase):
    def setUp(self) -> None:
        self.t = Tensor.from_nested([[5, 6, 1], [-1, 0, 2]], DataType.INT)

    def test_max_and_argmax(self) -> None:
        self.assertEqual(self.t.max(1).to_list(), [6, 2])
        y = self.t.argmax(1)
        self.assertIs(y.dtype, DataType.INT)
        self.assertEqual(y.to_list(), [1, 2])

    def test_min_and_argmin(self) -> None:
        self.assertEqual(self.t.min(0).to_list(), [-1, 0, 1])
        self.assertEqual(self.t.argmin(0).to_list(), [1, 1, 0])

    def test_arg_reductions_keep_first_occurrence(self) -> None:
        t = Tensor.from_nested([[3, 7, 7, 1], [2, 2, 0, 0]], DataType.INT)
        self.assertEqual(t.argmax(1).to_list(), [1, 0])
        self.assertEqual(t.argmin(1).to_list(), [3, 2])

    def test_argmax_of_constant_lane(self) -> None:
        t = Tensor.full((2, 3), np.finfo(np.float32).min, DataType.FLOAT)
        self.assertEqual(t.argmax(1).to_list(), [0, 0])

    def test_extrema_of_infinite_lanes_match_numpy(self) -> None:
        x = np.array([[-np.inf, -np.inf], [1.0, 2.0], [np.inf, np.inf]], dtype=np.float32)
        t = Tensor.from_numpy(x)
        np.testing.assert_array_equal(t.max(1).to_numpy(), np.max(x, axis=1))
        np.testing.assert_array_equal(t.min(1).to_numpy(), np.min(x, axis=1))
        self.assertEqual(t.max(1).to_list(), [-np.inf, 2.0, np.inf])

        y = Tensor.from_nested([[np.inf, np.inf]], DataType.DOUBLE).min(1, True)
        self.assertEqual(y.shape, (1, 1))
        self.assertEqual(y.to_list(), [np.inf])
        self.assertEqual(t.argmax(1).to_list(), [0, 1, 0])

    def test_sum_and_product(self) -> None:
        self.assertEqual(self.t.sum(0).to_list(), [4, 6, 3])
        self.assertEqual(self.t.product(1).to_list(), [30, 0])

    def test_keep_dimensions(self) -> None:
        y = self.t.sum(1, keep_dimensions=True)
        self.assertEqual(y.shape, (2, 1))
        self.assertEqual(y.to_list(), [12, 1])

    def test_rank_one_requires_keep_dimensions(self) -> None:
        v = Tensor.from_nested([1, 2, 3], DataType.INT)
        with self.assertRaises(InvalidArgumentError):
            v.sum(0)
        self.assertEqual(v.sum(0, keep_dimensions=True).to_list(), [6])

    def test_invalid_dimension(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self.t.max(2)

    def test_reductions_match_numpy(self) -> None:
        rng = np.random.default_rng(0)
        x = rng.standard_normal((3, 4, 5))
        t = Tensor.from_numpy(x)
        for d in range(3):
            with self.subTest(dimension=d):
                np.testing.assert_allclose(t.sum(d).to_numpy(), x.sum(axis=d))
                np.testing.assert_allclose(t.max(d).to_numpy(), x.max(axis=d))
                np.testing.assert_allclose(t.min(d).to_numpy(), x.min(axis=d))
                np.testing.assert_array_equal(t.argmax(d).to_numpy(), x.argmax(axis=d))
                np.testing.assert_allclose(t.mean(d).to_numpy(), x.mean(axis=d))
                np.testing.assert_allclose(t.var(d).to_numpy(), x.var(axis=d), atol=1e-12)
                np.testing.assert_allclose(t.std(d).to_numpy(), x.std(axis=d), atol=1e-12)

    def test_reduction_of_a_view(self) -> None:
        x = np.arange(12, dtype=np.float64).reshape(3, 4)
        t = Tensor.from_numpy(x).transpose()
        np.testing.assert_allclose(t.sum(1).to_numpy(), x.T.sum(axis=1))

    def test_integral_mean_truncates(self) -> None:
        t = Tensor.from_nested([[1, 2], [3, 4]], DataType.INT)
        self.assertEqual(t.mean(1).to_list(), [1, 3])

    def test_mean_keep_dimensions(self) -> None:
        t = Tensor.from_nested([[1.0, 3.0], [5.0, 7.0]], DataType.DOUBLE)
        y = t.mean(0, keep_dimensions=True)
        self.assertEqual(y.shape, (1, 2))
        self.assertEqual(y.to_list(), [3.0, 5.0])

    def test_var_with_keep_dimensions_false(self) -> None:
        t = Tensor.from_nested([[1.0, 3.0], [5.0, 9.0]], DataType.DOUBLE)
        self.assertEqual(t.var(1).to_list(), [1.0, 4.0])
        self.assertEqual(t.var(0).to_list(), [4.0, 9.0])

    def test_var_of_unit_dimension_is_zero(self) -> None:
        t = Tensor.from_nested([[1.0, 3.0]], DataType.DOUBLE)
        y = t.var(0)
        self.assertEqual(y.shape, (2,))
        self.assertEqual(y.to_list(), [0.0, 0.0])

    def test_boolean_reductions_not_supported(self) -> None:
        b = Tensor.from_nested([[True, False]], DataType.BOOLEAN)
        with self.assertRaises(InvalidTypeError):
            b.sum(1, keep_dimensions=True)
        with self.assertRaises(InvalidTypeError):
            b.argmax(1, keep_dimensions=True)


class TestGenericReductions(unittest.TestCase):
    def test_reduce_along_custom_accumulator(self) -> None:
        t = Tensor.from_nested([[1, 2, 3], [4, 5, 6]], DataType.INT)
        y = t.reduce_along(0, lambda acc, x: acc * 10 + x, 1)
        self.assertEqual(y.to_list(), [123, 456])

    def test_reduce_along_boolean(self) -> None:
        t = Tensor.from_nested([[True, False], [True, True]], DataType.BOOLEAN)
        y = t.reduce_along(True, lambda acc, x: acc and x, 1)
        self.assertEqual(y.to_list(), [False, True])

    def test_reduce_all_collapses_trailing_dimensions(self) -> None:
        t = Tensor.from_data(list(range(24)), (2, 3, 4), DataType.LONG)
        add = lambda a, b: a + b

        y = t.reduce_all(0, add, 1)
        self.assertEqual(y.shape, (2,))
        self.assertEqual(y.to_list(), [sum(range(12)), sum(range(12, 24))])

        kept = t.reduce_all(0, add, 1, keep_dimensions=True)
        self.assertEqual(kept.shape, (2, 1, 1))

        total = t.reduce_all(0, add, 0)
        self.assertEqual(total.shape, (1,))
        self.assertEqual(total.to_list(), [sum(range(24))])

        total_kept = t.reduce_all(0, add, 0, keep_dimensions=True)
        self.assertEqual(total_kept.shape, (1, 1, 1))

    def test_reduce_all_last_dimension_equals_reduce_along(self) -> None:
        t = Tensor.from_data(list(range(6)), (2, 3), DataType.INT)
        add = lambda a, b: a + b
        self.assertTrue(t.reduce_all(0, add, 1) == t.reduce_along(0, add, 1))

    def test_reduce_all_rank_one_requires_keep_dimensions(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Tensor.from_nested([1, 2], DataType.INT).reduce_all(0, max, 0)


if __name__ == "__main__":
    unittest.main()
