import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from numru import arr, reduce
from numru.domain._errors import (
    EmptyArrayError,
    InvalidAxisError,
    UnimplementedDimensionError,
)
from numru.infrastructure.array import Array
from numru.infrastructure.array.mixins.reduction import ReduceOp
from numru.infrastructure.dimension import Axis, IxDyn

BACKENDS = ("numpy", "python")

SCENARIO_C = [
    [[101, 202, 303], [404, 505, 606]],
    [[-707, -808, -909], [111, 222, 333]],
]


class TestReduceRankOne(unittest.TestCase):
    def test_full_reductions(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr([42, -17, 256, 3, 99, -8], backend=backend)
                self.assertEqual(reduce(a, "max").tolist(), [256])
                self.assertEqual(reduce(a, "min").tolist(), [-17])
                self.assertEqual(reduce(a, "mean").tolist(), [62.5])

    def test_axis_zero_matches_full_reduction(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr([42, -17, 256, 3, 99, -8], backend=backend)
                for op in ReduceOp:
                    assert_array_equal(reduce(a, op, 0), reduce(a, op))

    def test_single_element(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr([7], backend=backend)
                self.assertEqual(reduce(a, "max").tolist(), [7])
                self.assertEqual(reduce(a, "mean").tolist(), [7.0])


class TestReduceRankTwo(unittest.TestCase):
    def setUp(self):
        self.values = [[1, 5, 3], [4, 2, 6], [0, 9, 8]]

    def test_max_per_axis(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr(self.values, backend=backend)
                self.assertEqual(reduce(a, "max", 0).tolist(), [4, 9, 8])
                self.assertEqual(reduce(a, "max", 1).tolist(), [5, 6, 9])
                self.assertEqual(reduce(a, "max").tolist(), [9])

    def test_min_per_axis(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr(self.values, backend=backend)
                self.assertEqual(reduce(a, "min", 0).tolist(), [0, 2, 3])
                self.assertEqual(reduce(a, "min", 1).tolist(), [1, 2, 0])

    def test_mean_axis_zero(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr(self.values, backend=backend)
                assert_allclose(
                    reduce(a, "mean", 0), [5 / 3, 16 / 3, 17 / 3], rtol=1e-12
                )

    def test_non_square(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr([[1, 2, 3], [4, 5, 6]], backend=backend)
                self.assertEqual(reduce(a, "max", 0).tolist(), [4, 5, 6])
                self.assertEqual(reduce(a, "max", 1).tolist(), [3, 6])

    def test_axis_value_object(self):
        a = arr(self.values)
        assert_array_equal(reduce(a, "max", Axis(1)), [5, 6, 9])


class TestReduceRankThree(unittest.TestCase):
    def test_max_along_last_axis(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr(SCENARIO_C, backend=backend)
                self.assertEqual(
                    reduce(a, "max", 2).tolist(), [303, 606, -707, 333]
                )
                self.assertEqual(reduce(a, "max").tolist(), [606])

    def test_max_along_outer_axes(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr(SCENARIO_C, backend=backend)
                # axis 0: one value per (row, col)
                self.assertEqual(
                    reduce(a, "max", 0).tolist(), [101, 202, 303, 404, 505, 606]
                )
                # axis 1: one value per (depth, col)
                self.assertEqual(
                    reduce(a, "max", 1).tolist(), [404, 505, 606, 111, 222, 333]
                )

    def test_min_along_each_axis(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr(SCENARIO_C, backend=backend)
                self.assertEqual(
                    reduce(a, "min", 0).tolist(),
                    [-707, -808, -909, 111, 222, 333],
                )
                self.assertEqual(
                    reduce(a, "min", 2).tolist(), [101, 404, -909, 111]
                )


class TestReduceResultTypes(unittest.TestCase):
    def test_max_min_keep_dtype(self):
        for backend in BACKENDS:
            for dtype in (np.int32, np.int64, np.float32, np.float64):
                with self.subTest(backend=backend, dtype=dtype):
                    a = Array(np.arange(6, dtype=dtype), (2, 3), backend=backend)
                    self.assertEqual(reduce(a, "max", 0).dtype, np.dtype(dtype))
                    self.assertEqual(reduce(a, "min").dtype, np.dtype(dtype))

    def test_mean_is_always_float64(self):
        for backend in BACKENDS:
            for dtype in (np.int32, np.int64, np.float32):
                with self.subTest(backend=backend, dtype=dtype):
                    a = Array(np.arange(6, dtype=dtype), (2, 3), backend=backend)
                    self.assertEqual(reduce(a, "mean", 1).dtype, np.float64)

    def test_integer_mean_is_not_truncated(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr([1, 2], backend=backend)
                self.assertEqual(reduce(a, "mean").tolist(), [1.5])

    def test_nan_propagates_through_max_and_min(self):
        for backend in BACKENDS:
            with self.subTest(backend=backend):
                a = arr([[1.0, float("nan")], [3.0, 4.0]], backend=backend)
                out = reduce(a, "max", 1)
                self.assertTrue(np.isnan(out[0]))
                self.assertEqual(out[1], 4.0)
                self.assertTrue(np.isnan(reduce(a, "min")[0]))

    def test_result_is_fresh_and_source_untouched(self):
        a = arr([[1, 5], [4, 2]])
        before = a.data().copy()
        out = reduce(a, "max", 0)
        self.assertFalse(np.shares_memory(out, a.data()))
        assert_array_equal(a.data(), before)


class TestReduceErrors(unittest.TestCase):
    def test_empty_array_raises_for_every_axis(self):
        for backend in BACKENDS:
            a = arr([], backend=backend)
            for axis in (None, 0, 5):
                with self.subTest(backend=backend, axis=axis):
                    with self.assertRaises(EmptyArrayError):
                        reduce(a, "max", axis)

    def test_empty_checked_before_rank(self):
        a = Array([], IxDyn([0, 1, 1, 1]))
        with self.assertRaises(EmptyArrayError):
            reduce(a, "min")

    def test_axis_out_of_range(self):
        a = arr([[1, 2], [3, 4]])
        with self.assertRaises(InvalidAxisError) as ctx:
            reduce(a, "max", 2)
        self.assertEqual(ctx.exception.axis, 2)
        self.assertEqual(ctx.exception.ndim, 2)

    def test_negative_and_non_integer_axes(self):
        a = arr([[1, 2], [3, 4]])
        for axis in (-1, 1.0, "0", True):
            with self.subTest(axis=axis):
                with self.assertRaises(InvalidAxisError):
                    reduce(a, "max", axis)

    def test_rank_four_is_unimplemented(self):
        a = Array(list(range(16)), IxDyn([2, 2, 2, 2]))
        for axis in (None, 0, 3):
            with self.subTest(axis=axis):
                with self.assertRaises(UnimplementedDimensionError) as ctx:
                    reduce(a, "max", axis)
                self.assertEqual(ctx.exception.ndim, 4)

    def test_axis_checked_before_rank(self):
        a = Array(list(range(16)), IxDyn([2, 2, 2, 2]))
        with self.assertRaises(InvalidAxisError):
            reduce(a, "max", 4)

    def test_unknown_operation(self):
        with self.assertRaises(ValueError):
            reduce(arr([1, 2]), "sum")


if __name__ == "__main__":
    unittest.main()
