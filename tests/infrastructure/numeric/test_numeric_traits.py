import math
import unittest

import numpy as np

from src.viewtensor.domain._errors import InvalidTypeError
from src.viewtensor.domain.types._dtype import DataType
from src.viewtensor.infrastructure.numeric._traits import (
    data_type_of,
    numeric_traits,
    numpy_dtype,
)


class TestNumpyMapping(unittest.TestCase):
    def test_storage_dtypes(self) -> None:
        self.assertEqual(numpy_dtype(DataType.BOOLEAN), np.dtype(np.bool_))
        self.assertEqual(numpy_dtype(DataType.BYTE), np.dtype(np.int8))
        self.assertEqual(numpy_dtype(DataType.SHORT), np.dtype(np.int16))
        self.assertEqual(numpy_dtype(DataType.INT), np.dtype(np.int32))
        self.assertEqual(numpy_dtype(DataType.FLOAT), np.dtype(np.float32))
        self.assertEqual(numpy_dtype(DataType.LONG), np.dtype(np.int64))
        self.assertEqual(numpy_dtype(DataType.DOUBLE), np.dtype(np.float64))

    def test_round_trip_of_mapping(self) -> None:
        for dtype in DataType:
            with self.subTest(dtype=dtype):
                self.assertIs(data_type_of(numpy_dtype(dtype)), dtype)

    def test_unsupported_numpy_dtype_raises(self) -> None:
        with self.assertRaises(InvalidTypeError):
            data_type_of(np.uint8)
        with self.assertRaises(InvalidTypeError):
            data_type_of(np.complex64)


class TestIdentitiesAndSentinels(unittest.TestCase):
    def test_integral_limits(self) -> None:
        self.assertEqual(numeric_traits(DataType.BYTE).min_value, -128)
        self.assertEqual(numeric_traits(DataType.BYTE).max_value, 127)
        self.assertEqual(numeric_traits(DataType.INT).min_value, -(2**31))
        self.assertEqual(numeric_traits(DataType.LONG).max_value, 2**63 - 1)

    def test_floating_limits_are_infinite(self) -> None:
        for dtype in (DataType.FLOAT, DataType.DOUBLE):
            with self.subTest(dtype=dtype):
                traits = numeric_traits(dtype)
                self.assertEqual(traits.min_value, -np.inf)
                self.assertEqual(traits.max_value, np.inf)

    def test_zero_and_one(self) -> None:
        self.assertEqual(numeric_traits(DataType.SHORT).zero, 0)
        self.assertEqual(numeric_traits(DataType.DOUBLE).one, 1.0)
        self.assertIsInstance(numeric_traits(DataType.DOUBLE).one, float)
        self.assertIs(numeric_traits(DataType.BOOLEAN).zero, False)

    def test_boolean_has_no_ordering_sentinels(self) -> None:
        with self.assertRaises(InvalidTypeError):
            numeric_traits(DataType.BOOLEAN).min_value


class TestScalarArithmetic(unittest.TestCase):
    def test_integral_results_wrap(self) -> None:
        byte = numeric_traits(DataType.BYTE)
        self.assertEqual(byte.add(127, 1), -128)
        self.assertEqual(byte.multiply(64, 4), 0)
        integer = numeric_traits(DataType.INT)
        self.assertEqual(integer.add(2**31 - 1, 1), -(2**31))

    def test_integral_division_truncates_toward_zero(self) -> None:
        integer = numeric_traits(DataType.INT)
        self.assertEqual(integer.divide(7, 2), 3)
        self.assertEqual(integer.divide(-7, 2), -3)
        self.assertEqual(integer.divide(7, -2), -3)
        self.assertEqual(integer.divide(-8, 2), -4)

    def test_integral_mod_follows_dividend_sign(self) -> None:
        integer = numeric_traits(DataType.INT)
        self.assertEqual(integer.mod(-7, 3), -1)
        self.assertEqual(integer.mod(7, -3), 1)

    def test_integral_division_by_zero_raises(self) -> None:
        with self.assertRaises(ZeroDivisionError):
            numeric_traits(DataType.LONG).divide(1, 0)
        with self.assertRaises(ZeroDivisionError):
            numeric_traits(DataType.LONG).mod(1, 0)

    def test_float_results_are_rounded_to_single_precision(self) -> None:
        single = numeric_traits(DataType.FLOAT)
        self.assertEqual(single.add(0.1, 0.2), float(np.float32(0.1) + np.float32(0.2)))
        self.assertEqual(single.coerce(0.1), float(np.float32(0.1)))

    def test_float_division_by_zero_gives_infinity(self) -> None:
        self.assertTrue(math.isinf(numeric_traits(DataType.DOUBLE).divide(1.0, 0.0)))

    def test_shifts(self) -> None:
        integer = numeric_traits(DataType.INT)
        self.assertEqual(integer.left_shift(1, 4), 16)
        self.assertEqual(integer.right_shift(-16, 2), -4)
        # count is taken modulo the bit width
        self.assertEqual(integer.left_shift(1, 33), 2)

    def test_bitwise(self) -> None:
        short = numeric_traits(DataType.SHORT)
        self.assertEqual(short.bitwise_and(0b1100, 0b1010), 0b1000)
        self.assertEqual(short.bitwise_or(0b1100, 0b1010), 0b1110)
        self.assertEqual(short.bitwise_xor(0b1100, 0b1010), 0b0110)
        self.assertEqual(short.bitwise_not(0), -1)

    def test_comparisons(self) -> None:
        double = numeric_traits(DataType.DOUBLE)
        self.assertEqual(double.compare(1.0, 2.0), -1)
        self.assertEqual(double.compare(2.0, 2.0), 0)
        self.assertEqual(double.compare(3.0, 2.0), 1)
        self.assertIs(double.less_than(1.0, 2.0), True)
        self.assertIs(double.greater_equal(1.0, 2.0), False)
        self.assertIs(double.equals(2.0, 2.0), True)
        self.assertEqual(double.max(1.5, -2.0), 1.5)
        self.assertEqual(double.min(1.5, -2.0), -2.0)

    def test_boolean_logic(self) -> None:
        boolean = numeric_traits(DataType.BOOLEAN)
        self.assertIs(boolean.bitwise_and(True, False), False)
        self.assertIs(boolean.bitwise_or(True, False), True)
        self.assertIs(boolean.bitwise_xor(True, True), False)
        self.assertIs(boolean.bitwise_not(False), True)

    def test_unsupported_operations_raise(self) -> None:
        with self.assertRaises(InvalidTypeError):
            numeric_traits(DataType.BOOLEAN).add(True, True)
        with self.assertRaises(InvalidTypeError):
            numeric_traits(DataType.FLOAT).left_shift(1.0, 1.0)
        with self.assertRaises(InvalidTypeError):
            numeric_traits(DataType.DOUBLE).bitwise_and(1.0, 1.0)


class TestConversions(unittest.TestCase):
    def test_coerce_float_into_integral_truncates_and_wraps(self) -> None:
        byte = numeric_traits(DataType.BYTE)
        self.assertEqual(byte.cast(2.9), 2)
        self.assertEqual(byte.cast(-2.9), -2)
        self.assertEqual(byte.cast(300), 44)
        self.assertEqual(byte.cast(float("nan")), 0)

    def test_boolean_value(self) -> None:
        integer = numeric_traits(DataType.INT)
        self.assertIs(integer.boolean_value(3), True)
        self.assertIs(integer.boolean_value(0), False)

    def test_cast_array_between_types(self) -> None:
        ints = numeric_traits(DataType.INT).cast_array(np.array([1.9, -1.9, np.nan]))
        np.testing.assert_array_equal(ints, np.array([1, -1, 0], dtype=np.int32))

        bools = numeric_traits(DataType.BOOLEAN).cast_array(np.array([0, 2, -1]))
        np.testing.assert_array_equal(bools, np.array([False, True, True]))

    def test_array_operands_return_arrays(self) -> None:
        integer = numeric_traits(DataType.INT)
        out = integer.add(np.array([1, 2], dtype=np.int32), np.array([3, 4], dtype=np.int32))
        self.assertIsInstance(out, np.ndarray)
        np.testing.assert_array_equal(out, [4, 6])

    def test_traits_are_shared_per_type(self) -> None:
        self.assertIs(numeric_traits(DataType.INT), numeric_traits(DataType.INT))

    def test_unknown_type_raises(self) -> None:
        with self.assertRaises(InvalidTypeError):
            numeric_traits("int")


if __name__ == "__main__":
    unittest.main()
