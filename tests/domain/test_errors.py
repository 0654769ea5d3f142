import unittest

from src.tensorlite.domain._errors import (
    TensorError,
    ShapeMismatchError,
    BroadcastIncompatibleError,
    SizeMismatchError,
    DimensionMismatchError,
    UnsupportedRankError,
)


class TestErrorTaxonomy(unittest.TestCase):
    def test_all_errors_share_tensor_error_base(self):
        errors = [
            ShapeMismatchError((2, 3), 5, 6),
            BroadcastIncompatibleError((2, 3), (4,)),
            SizeMismatchError("apply_binary", 3, 4),
            DimensionMismatchError("dot 2D·2D", 3, 2),
            UnsupportedRankError("dot", 3, 3),
        ]
        for err in errors:
            self.assertIsInstance(err, TensorError)

    def test_builtin_bases(self):
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        self.assertTrue(issubclass(BroadcastIncompatibleError, ValueError))
        self.assertTrue(issubclass(SizeMismatchError, RuntimeError))
        self.assertTrue(issubclass(DimensionMismatchError, ValueError))
        self.assertTrue(issubclass(UnsupportedRankError, ValueError))

    def test_shape_mismatch_message_has_both_counts(self):
        err = ShapeMismatchError((2, 3), 5, 6)
        self.assertIn("5", str(err))
        self.assertIn("6", str(err))
        self.assertEqual(err.shape, (2, 3))
        self.assertEqual(err.actual, 5)
        self.assertEqual(err.expected, 6)

    def test_shape_mismatch_empty_shape_message(self):
        err = ShapeMismatchError((), 3, 1)
        self.assertIn("single element", str(err))
        self.assertIn("3", str(err))

    def test_broadcast_incompatible_keeps_both_shapes(self):
        err = BroadcastIncompatibleError([2, 3], [4])
        self.assertEqual(err.shape_a, (2, 3))
        self.assertEqual(err.shape_b, (4,))
        self.assertIn("(2, 3)", str(err))
        self.assertIn("(4,)", str(err))

    def test_dimension_mismatch_names_both_dims(self):
        err = DimensionMismatchError("dot 2D·2D", 3, 2)
        self.assertEqual((err.dim_a, err.dim_b), (3, 2))
        self.assertIn("3 vs 2", str(err))
        self.assertIn("dot 2D·2D", str(err))

    def test_unsupported_rank_names_both_ranks(self):
        err = UnsupportedRankError("dot", 3, 1)
        self.assertEqual((err.ndim_a, err.ndim_b), (3, 1))
        self.assertIn("3D·1D", str(err))

    def test_size_mismatch_attributes(self):
        err = SizeMismatchError("apply_binary", 3, 4)
        self.assertEqual(err.op, "apply_binary")
        self.assertEqual((err.actual, err.expected), (3, 4))


if __name__ == "__main__":
    unittest.main()
