import unittest

import numpy as np

from src.tensorlite.domain._errors import BroadcastIncompatibleError
from src.tensorlite.infrastructure.ops.broadcast_cpu import align_to, broadcast_shapes


class TestBroadcastShapes(unittest.TestCase):
    def test_row_vector_against_matrix(self):
        self.assertEqual(broadcast_shapes((2, 3), (3,)), (2, 3))

    def test_scalar_shape_against_anything(self):
        self.assertEqual(broadcast_shapes((1,), (4, 5, 6)), (4, 5, 6))
        self.assertEqual(broadcast_shapes((4, 5, 6), (1,)), (4, 5, 6))

    def test_both_sides_expand(self):
        self.assertEqual(broadcast_shapes((3, 1), (1, 4)), (3, 4))
        self.assertEqual(broadcast_shapes((2, 1, 5), (7, 1)), (2, 7, 5))

    def test_empty_shape_pads_to_other(self):
        self.assertEqual(broadcast_shapes((), (2, 3)), (2, 3))

    def test_zero_sized_dim_against_one(self):
        self.assertEqual(broadcast_shapes((0, 3), (1, 3)), (0, 3))

    def test_matches_numpy(self):
        cases = [((2, 3), (3,)), ((5, 1, 4), (3, 1)), ((1,), (1,)), ((8, 1), (1, 8))]
        for a, b in cases:
            self.assertEqual(broadcast_shapes(a, b), np.broadcast_shapes(a, b))

    def test_incompatible_raises_with_both_shapes(self):
        with self.assertRaises(BroadcastIncompatibleError) as ctx:
            broadcast_shapes((2, 3), (4,))
        self.assertEqual(ctx.exception.shape_a, (2, 3))
        self.assertEqual(ctx.exception.shape_b, (4,))

    def test_incompatible_is_value_error(self):
        with self.assertRaises(ValueError):
            broadcast_shapes((3, 2), (2, 3))


class TestAlignTo(unittest.TestCase):
    def test_pads_leading_dims_with_zero_stride(self):
        shape, strides = align_to((3,), (1,), 3)
        self.assertEqual(shape, (1, 1, 3))
        self.assertEqual(strides, (0, 0, 1))

    def test_size_one_dims_get_zero_stride(self):
        # shape (2, 1, 4) has stored strides (4, 4, 1)
        shape, strides = align_to((2, 1, 4), (4, 4, 1), 3)
        self.assertEqual(shape, (2, 1, 4))
        self.assertEqual(strides, (4, 0, 1))

    def test_same_rank_keeps_strides(self):
        self.assertEqual(align_to((2, 3), (3, 1), 2), ((2, 3), (3, 1)))

    def test_rank_too_large_raises(self):
        with self.assertRaises(ValueError):
            align_to((2, 3, 4), (12, 4, 1), 2)


if __name__ == "__main__":
    unittest.main()
