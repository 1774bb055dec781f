import unittest

from src.viewtensor.domain._errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    NoNextElementError,
)
from src.viewtensor.domain.types._dtype import DataType
from src.viewtensor.infrastructure.tensor._indices import (
    IndexIterator,
    resolve_flat_position,
    row_major_indices,
)
from src.viewtensor.infrastructure.tensor._tensor import Tensor


class TestIndexIterator(unittest.TestCase):
    def test_row_major_order(self) -> None:
        self.assertEqual(
            list(IndexIterator((2, 3))),
            [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)],
        )

    def test_rank_zero_yields_empty_index_once(self) -> None:
        it = IndexIterator(())
        self.assertTrue(it.has_next())
        self.assertEqual(next(it), ())
        self.assertFalse(it.has_next())

    def test_exhausted_iterator_raises(self) -> None:
        it = IndexIterator((1,))
        next(it)
        with self.assertRaises(NoNextElementError):
            next(it)

    def test_exhaustion_is_a_stop_iteration(self) -> None:
        self.assertTrue(issubclass(NoNextElementError, StopIteration))
        self.assertEqual(len(list(IndexIterator((2, 2, 2)))), 8)

    def test_iterators_are_independent(self) -> None:
        t = Tensor((2, 2))
        first = t.indices()
        second = t.indices()
        next(first)
        next(first)
        self.assertEqual(next(second), (0, 0))
        self.assertEqual(next(first), (1, 0))

    def test_row_major_indices_matches_iterator(self) -> None:
        grid = row_major_indices((3, 1, 2))
        self.assertEqual([tuple(row) for row in grid.tolist()], list(IndexIterator((3, 1, 2))))


class TestResolveFlatPosition(unittest.TestCase):
    def test_flat_position(self) -> None:
        self.assertEqual(resolve_flat_position((1, 2), (2, 3), (3, 1)), 5)

    def test_rank_zero_raises(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            resolve_flat_position((), (), ())

    def test_wrong_length_raises(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            resolve_flat_position((), (2,), (1,))
        with self.assertRaises(InvalidArgumentError):
            resolve_flat_position((0,), (2, 2), (2, 1))

    def test_out_of_bounds_raises(self) -> None:
        with self.assertRaises(IndexOutOfBoundsError) as ctx:
            resolve_flat_position((0, 3), (2, 3), (3, 1))
        self.assertEqual(ctx.exception.indices, (0, 3))
        self.assertEqual(ctx.exception.shape, (2, 3))
        with self.assertRaises(IndexOutOfBoundsError):
            resolve_flat_position((-1, 0), (2, 3), (3, 1))


class TestTensorElementAccess(unittest.TestCase):
    def test_get_and_set(self) -> None:
        t = Tensor((2, 2), DataType.INT)
        t.set_item((1, 0), 7)
        self.assertEqual(t.get_item((1, 0)), 7)
        t[0, 1] = 3
        self.assertEqual(t[0, 1], 3)

    def test_single_int_key_on_rank_one(self) -> None:
        t = Tensor.from_nested([4, 5, 6], DataType.INT)
        self.assertEqual(t[2], 6)
        t[2] = 9
        self.assertEqual(t.to_list(), [4, 5, 9])

    def test_set_converts_to_element_type(self) -> None:
        t = Tensor((1,), DataType.INT)
        t[0] = 3.9
        self.assertEqual(t[0], 3)
        b = Tensor((1,), DataType.BOOLEAN)
        b[0] = 1
        self.assertIs(b[0], True)

    def test_values_are_python_scalars(self) -> None:
        t = Tensor.from_nested([1.5], DataType.DOUBLE)
        self.assertIsInstance(t[0], float)
        i = Tensor.from_nested([1], DataType.LONG)
        self.assertIsInstance(i[0], int)

    def test_bad_indices(self) -> None:
        t = Tensor((2, 2), DataType.INT)
        with self.assertRaises(IndexOutOfBoundsError):
            t[2, 0]
        with self.assertRaises(InvalidArgumentError):
            t[0]
        with self.assertRaises(InvalidArgumentError):
            Tensor.empty(DataType.INT).get_item(())


if __name__ == "__main__":
    unittest.main()
