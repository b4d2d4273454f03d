import unittest

import numpy as np

from numru.domain._errors import DataTypeMismatchError, DimensionMismatchError
from numru.infrastructure.array import DimensionType, arr
from numru.infrastructure.dimension import Ix1, Ix2, Ix3, IxDyn


class TestArr(unittest.TestCase):
    def test_infers_rank_from_nesting(self):
        self.assertEqual(arr([1, 2, 3]).shape().dims(), (3,))
        self.assertEqual(arr([[1, 2], [3, 4], [5, 6]]).shape().dims(), (3, 2))
        self.assertEqual(
            arr([[[1, 2, 3], [4, 5, 6]], [[7, 8, 9], [1, 2, 3]]]).shape().dims(),
            (2, 2, 3),
        )

    def test_flattens_row_major(self):
        a = arr([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(a.data().tolist(), [1, 2, 3, 4, 5, 6])

    def test_default_uses_dynamic_rank(self):
        self.assertIsInstance(arr([[1, 2]]).shape().raw_dim(), IxDyn)

    def test_dim_type_selects_fixed_rank_class(self):
        self.assertIsInstance(arr([1, 2], DimensionType.D1).shape().raw_dim(), Ix1)
        self.assertIsInstance(
            arr([[1, 2]], DimensionType.D2).shape().raw_dim(), Ix2
        )
        self.assertIsInstance(
            arr([[[1]]], DimensionType.D3).shape().raw_dim(), Ix3
        )

    def test_dim_type_depth_mismatch_raises_value_error(self):
        with self.assertRaises(ValueError):
            arr([1, 2, 3], DimensionType.D2)

    def test_dimension_type_properties(self):
        self.assertEqual(DimensionType.D3.ndim, 3)
        self.assertIs(DimensionType.D2.dimension_class, Ix2)

    def test_ragged_input_raises(self):
        with self.assertRaises(DimensionMismatchError):
            arr([[1, 2], [3]])
        with self.assertRaises(DimensionMismatchError):
            arr([[1, 2], 3])
        with self.assertRaises(DimensionMismatchError):
            arr([1, [2, 3]])

    def test_empty_list_gives_empty_rank_one(self):
        a = arr([])
        self.assertEqual(a.shape().dims(), (0,))
        self.assertEqual(a.numel(), 0)

    def test_accepts_ndarray(self):
        src = np.arange(6, dtype=np.float32).reshape(2, 3)
        a = arr(src)
        self.assertEqual(a.shape().dims(), (2, 3))
        self.assertEqual(a.dtype, np.dtype(np.float32))
        self.assertEqual(a.to_nested(), src.tolist())

    def test_rejects_scalars_and_non_numeric_leaves(self):
        with self.assertRaises(DataTypeMismatchError):
            arr(5)
        with self.assertRaises(DataTypeMismatchError):
            arr(np.array(5))
        with self.assertRaises(DataTypeMismatchError):
            arr([["a", "b"]])

    def test_backend_is_forwarded(self):
        self.assertEqual(str(arr([1], backend="python").backend), "python")


if __name__ == "__main__":
    unittest.main()
