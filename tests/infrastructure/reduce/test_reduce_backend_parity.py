import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from numru import reduce
from numru.infrastructure.array import Array
from numru.infrastructure.array.mixins.reduction import ReduceOp

_NUMPY_OPS = {
    ReduceOp.MAX: np.max,
    ReduceOp.MIN: np.min,
    ReduceOp.MEAN: np.mean,
}


class TestBackendParity(unittest.TestCase):
    """
    Both kernels must agree with each other and with NumPy's own
    reductions for every supported rank and axis.
    """

    def setUp(self):
        self.rng = np.random.default_rng(0)

    def _cases(self):
        for dims in [(7,), (3, 5), (1, 4), (4, 1), (2, 3, 4), (3, 1, 2)]:
            ints = self.rng.integers(-1000, 1000, size=dims)
            floats = self.rng.standard_normal(size=dims)
            yield ints
            yield floats

    def test_kernels_match_numpy(self):
        for ref in self._cases():
            flat = ref.reshape(-1)
            axes = [None] + list(range(ref.ndim))
            for op, np_op in _NUMPY_OPS.items():
                for axis in axes:
                    expected = np.asarray(np_op(ref, axis=axis)).reshape(-1)
                    for backend in ("numpy", "python"):
                        with self.subTest(
                            dims=ref.shape, op=op, axis=axis, backend=backend
                        ):
                            a = Array(flat, ref.shape, backend=backend)
                            got = reduce(a, op, axis)
                            self.assertEqual(got.ndim, 1)
                            if op is ReduceOp.MEAN:
                                assert_allclose(got, expected, rtol=1e-12, atol=1e-12)
                            else:
                                assert_array_equal(got, expected)

    def test_kernels_match_each_other(self):
        for ref in self._cases():
            flat = ref.reshape(-1)
            for axis in [None] + list(range(ref.ndim)):
                for op in ReduceOp:
                    with self.subTest(dims=ref.shape, op=op, axis=axis):
                        fast = reduce(Array(flat, ref.shape, backend="numpy"), op, axis)
                        slow = reduce(Array(flat, ref.shape, backend="python"), op, axis)
                        self.assertEqual(fast.dtype, slow.dtype)
                        assert_allclose(fast, slow, rtol=1e-12, atol=1e-12)


if __name__ == "__main__":
    unittest.main()
