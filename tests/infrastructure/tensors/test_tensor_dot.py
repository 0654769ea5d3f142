import unittest

import numpy as np

from src.tensorlite.domain._errors import (
    DimensionMismatchError,
    UnsupportedRankError,
)
from src.tensorlite.infrastructure._tensor import Tensor


def _t(arr, dtype=np.float64):
    arr = np.asarray(arr, dtype=dtype)
    return Tensor(arr.shape, arr)


class TestTensorDot(unittest.TestCase):
    def test_vector_dot_vector_is_size_one(self):
        out = _t([1, 2, 3]).dot(_t([4, 5, 6]))
        self.assertEqual(out.shape, (1,))
        self.assertEqual(out[0], 32.0)

    def test_matrix_dot_matrix(self):
        a = _t([[1, 2, 3], [4, 5, 6]])
        b = _t([[7, 8], [9, 10], [11, 12]])
        out = a.dot(b)
        self.assertEqual(out.shape, (2, 2))
        np.testing.assert_array_equal(out.to_numpy(), [[58, 64], [139, 154]])

    def test_matrix_dot_vector(self):
        out = _t([[1, 2], [3, 4]]).dot(_t([1, 1]))
        self.assertEqual(out.shape, (2,))
        np.testing.assert_array_equal(out.data, [3, 7])

    def test_vector_dot_matrix(self):
        out = _t([1, 1]).dot(_t([[1, 2], [3, 4]]))
        self.assertEqual(out.shape, (2,))
        np.testing.assert_array_equal(out.data, [4, 6])

    def test_matmul_operator_and_alias(self):
        a = _t([[1, 0], [0, 1]])
        b = _t([[5, 6], [7, 8]])
        np.testing.assert_array_equal((a @ b).data, b.data)
        np.testing.assert_array_equal(a.matmul(b).data, b.data)

    def test_scalar_convention_feeds_back_into_arithmetic(self):
        s = _t([1, 2]).dot(_t([3, 4]))
        out = _t([[1, 2], [3, 4]]) * s
        np.testing.assert_array_equal(out.data, [11, 22, 33, 44])

    def test_unsupported_rank(self):
        a = Tensor((2, 2, 2))
        with self.assertRaises(UnsupportedRankError) as ctx:
            a.dot(a)
        self.assertEqual((ctx.exception.ndim_a, ctx.exception.ndim_b), (3, 3))

        with self.assertRaises(UnsupportedRankError):
            Tensor((2, 2)).dot(Tensor((2, 2, 2)))

    def test_empty_shape_operand_is_unsupported_rank(self):
        with self.assertRaises(UnsupportedRankError):
            Tensor(()).dot(Tensor((3,)))

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatchError) as ctx:
            Tensor((2, 3)).dot(Tensor((2, 2)))
        self.assertEqual((ctx.exception.dim_a, ctx.exception.dim_b), (3, 2))

    def test_non_tensor_operand(self):
        with self.assertRaises(TypeError):
            _t([1, 2]).dot([1, 2])
        with self.assertRaises(TypeError):
            _t([1, 2]) @ 3

    def test_operands_unchanged(self):
        a = _t([[1, 2], [3, 4]])
        b = _t([[5, 6], [7, 8]])
        _ = a.dot(b)
        np.testing.assert_array_equal(a.data, [1, 2, 3, 4])
        np.testing.assert_array_equal(b.data, [5, 6, 7, 8])


if __name__ == "__main__":
    unittest.main()
