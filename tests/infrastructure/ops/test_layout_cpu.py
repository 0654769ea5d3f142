import unittest

import numpy as np

from src.tensorlite.infrastructure.ops.layout_cpu import (
    compute_strides,
    normalize_shape,
    numel,
)


class TestNumel(unittest.TestCase):
    def test_product_of_dims(self):
        self.assertEqual(numel((2, 3, 4)), 24)
        self.assertEqual(numel((7,)), 7)

    def test_zero_sized_dim(self):
        self.assertEqual(numel((2, 0, 3)), 0)

    def test_empty_shape_has_no_elements(self):
        self.assertEqual(numel(()), 0)


class TestComputeStrides(unittest.TestCase):
    def test_c_order_strides(self):
        self.assertEqual(compute_strides((2, 3, 4)), (12, 4, 1))
        self.assertEqual(compute_strides((5,)), (1,))
        self.assertEqual(compute_strides((3, 1, 2)), (2, 2, 1))

    def test_empty_shape(self):
        self.assertEqual(compute_strides(()), ())

    def test_matches_numpy_element_strides(self):
        for shape in [(2, 3), (4, 1, 5), (1,), (3, 2, 2, 2)]:
            arr = np.zeros(shape, dtype=np.float64)
            expected = tuple(s // arr.itemsize for s in arr.strides)
            self.assertEqual(compute_strides(shape), expected)


class TestNormalizeShape(unittest.TestCase):
    def test_accepts_lists_and_numpy_ints(self):
        self.assertEqual(normalize_shape([2, np.int64(3)]), (2, 3))

    def test_accepts_bare_int(self):
        self.assertEqual(normalize_shape(4), (4,))

    def test_rejects_negative(self):
        with self.assertRaises(ValueError):
            normalize_shape((2, -1))

    def test_rejects_non_integer(self):
        with self.assertRaises(TypeError):
            normalize_shape((2.5, 3))


if __name__ == "__main__":
    unittest.main()
