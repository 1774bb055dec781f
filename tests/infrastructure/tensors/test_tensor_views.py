import unittest

import numpy as np

from src.viewtensor.domain._errors import (
    InvalidArgumentError,
    InvalidShapeError,
    InvalidTypeError,
    TruncationWarning,
)
from src.viewtensor.domain.types._dtype import DataType
from src.viewtensor.infrastructure.tensor._tensor import Tensor


def _arange(shape, dtype=DataType.INT) -> Tensor:
    size = int(np.prod(shape))
    return Tensor.from_data(list(range(size)), shape, dtype)


class TestTensorReshape(unittest.TestCase):
    def test_reshape_shares_storage(self) -> None:
        t = _arange((2, 3))
        r = t.reshape((3, 2))
        self.assertTrue(r.is_view)
        self.assertIs(r.storage, t.storage)
        r[2, 1] = 50
        self.assertEqual(t[1, 2], 50)

    def test_reshape_round_trip(self) -> None:
        t = _arange((2, 3, 4))
        self.assertTrue(t.reshape((4, 6)).reshape((2, 3, 4)) == t)

    def test_reshape_size_mismatch(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            _arange((2, 3)).reshape((4, 2))
        with self.assertRaises(InvalidShapeError):
            _arange((2, 3)).reshape((6, 0))

    def test_reshape_of_transpose_keeps_logical_order(self) -> None:
        t = _arange((2, 3))
        r = t.transpose().reshape((6,))
        self.assertEqual(r.to_list(), [0, 3, 1, 4, 2, 5])
        self.assertIs(r.storage, t.storage)

    def test_reshape_of_slice_copies(self) -> None:
        t = _arange((3, 3))
        s = t.slice([(0, 2), (0, 2)])
        r = s.reshape((4,))
        self.assertFalse(r.is_view)
        self.assertEqual(r.to_list(), [0, 1, 3, 4])
        r[0] = 99
        self.assertEqual(t[0, 0], 0)

    def test_ravel_and_flatten(self) -> None:
        t = _arange((2, 2))
        raveled = t.ravel()
        self.assertEqual(raveled.shape, (4,))
        self.assertIs(raveled.storage, t.storage)

        flat = t.flatten()
        self.assertEqual(flat.shape, (4,))
        self.assertFalse(flat.is_view)
        flat[0] = 42
        self.assertEqual(t[0, 0], 0)

    def test_ravel_of_rank_zero(self) -> None:
        r = Tensor.empty(DataType.INT).ravel()
        self.assertEqual(r.shape, ())

    def test_squeeze_and_expand(self) -> None:
        t = _arange((2, 1, 3))
        s = t.squeeze(1)
        self.assertEqual(s.shape, (2, 3))
        self.assertEqual(s.to_list(), t.to_list())
        self.assertEqual(s.expand(0).shape, (1, 2, 3))
        self.assertEqual(s.expand(2).shape, (2, 3, 1))
        with self.assertRaises(InvalidArgumentError):
            t.squeeze(0)
        with self.assertRaises(InvalidArgumentError):
            t.squeeze(3)
        with self.assertRaises(InvalidArgumentError):
            s.expand(3)

    def test_resize_truncates_with_warning(self) -> None:
        t = _arange((2, 3))
        with self.assertWarns(TruncationWarning):
            r = t.resize((2, 2))
        self.assertEqual(r.to_list(), [0, 1, 2, 3])

    def test_resize_same_size_is_reshape(self) -> None:
        r = _arange((2, 3)).resize((3, 2))
        self.assertEqual(r.shape, (3, 2))
        self.assertTrue(r.is_view)

    def test_resize_growing_raises(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            _arange((2, 2)).resize((3, 2))


class TestTensorPermutations(unittest.TestCase):
    def test_transpose_matches_numpy(self) -> None:
        t = _arange((2, 3, 4))
        ref = np.arange(24).reshape(2, 3, 4).transpose()
        tt = t.transpose()
        self.assertEqual(tt.shape, (4, 3, 2))
        self.assertEqual(tt.strides, (6, 2, 1))
        np.testing.assert_array_equal(tt.to_numpy(), ref)

    def test_transpose_twice_is_identity(self) -> None:
        t = _arange((3, 5))
        self.assertTrue(t.transpose().transpose() == t)

    def test_transpose_aliases(self) -> None:
        t = _arange((2, 3))
        tt = t.transpose()
        tt[2, 1] = -5
        self.assertEqual(t[1, 2], -5)

    def test_swap_dimensions_matches_numpy(self) -> None:
        t = _arange((2, 3, 4))
        ref = np.swapaxes(np.arange(24).reshape(2, 3, 4), 0, 2)
        np.testing.assert_array_equal(t.swap_dimensions(0, 2).to_numpy(), ref)
        s = t.swap_dimensions(0, 2)
        s[3, 1, 0] = -7
        self.assertEqual(t[0, 1, 3], -7)
        t[1, 2, 0] = 77
        self.assertEqual(s[0, 2, 1], 77)
        self.assertTrue(t.swap_dimensions(1, 1) == t)
        with self.assertRaises(InvalidArgumentError):
            t.swap_dimensions(0, 3)


class TestTensorSlice(unittest.TestCase):
    def test_slice_example(self) -> None:
        t = Tensor.from_nested([[5, 6, 1], [-1, 0, 2]], DataType.INT)
        s = t.slice([(0, 2), (1, 3)])
        self.assertEqual(s.shape, (2, 2))
        np.testing.assert_array_equal(s.to_numpy(), [[6, 1], [0, 2]])
        self.assertTrue(s.is_view)

    def test_slice_writes_through(self) -> None:
        t = _arange((3, 4))
        s = t.slice([(1, 3), (2, 4)])
        s[0, 0] = 100
        self.assertEqual(t[1, 2], 100)

    def test_slice_of_transpose(self) -> None:
        t = _arange((3, 4))
        ref = np.arange(12).reshape(3, 4).T[1:3, 0:2]
        s = t.transpose().slice([(1, 3), (0, 2)])
        np.testing.assert_array_equal(s.to_numpy(), ref)

    def test_slice_errors(self) -> None:
        t = _arange((2, 3))
        with self.assertRaises(InvalidArgumentError):
            t.slice([(0, 1)])
        with self.assertRaises(InvalidArgumentError):
            t.slice([(-1, 1), (0, 1)])
        with self.assertRaises(InvalidArgumentError):
            t.slice([(0, 3), (0, 1)])
        with self.assertRaises(InvalidArgumentError):
            t.slice([(1, 1), (0, 1)])
        with self.assertRaises(InvalidArgumentError):
            t.slice([(0, 1, 2), (0, 1)])

    def test_reverse(self) -> None:
        t = _arange((2, 3))
        ref = np.flip(np.arange(6).reshape(2, 3), axis=1)
        r = t.reverse(1)
        np.testing.assert_array_equal(r.to_numpy(), ref)
        r[0, 0] = 77
        self.assertEqual(t[0, 2], 77)
        self.assertTrue(r.reverse(1) == t)
        with self.assertRaises(InvalidArgumentError):
            t.reverse(2)


class TestTensorConcatenate(unittest.TestCase):
    def test_concatenate_matches_numpy(self) -> None:
        a = _arange((2, 3))
        b = Tensor.from_data([6, 7, 8], (1, 3), DataType.INT)
        y = a.concatenate(b, 0)
        self.assertFalse(y.is_view)
        ref = np.concatenate([a.to_numpy(), b.to_numpy()], axis=0)
        np.testing.assert_array_equal(y.to_numpy(), ref)

        z = Tensor.concatenate(a, _arange((2, 1)), 1)
        self.assertEqual(z.shape, (2, 4))
        np.testing.assert_array_equal(z.to_numpy(), [[0, 1, 2, 0], [3, 4, 5, 1]])

    def test_concatenate_errors(self) -> None:
        a = _arange((2, 3))
        with self.assertRaises(InvalidTypeError):
            a.concatenate(_arange((2, 3), DataType.LONG), 0)
        with self.assertRaises(InvalidArgumentError):
            a.concatenate(_arange((6,)), 0)
        with self.assertRaises(InvalidArgumentError):
            a.concatenate(_arange((2, 2)), 0)
        with self.assertRaises(InvalidArgumentError):
            a.concatenate(_arange((2, 3)), 2)


if __name__ == "__main__":
    unittest.main()
