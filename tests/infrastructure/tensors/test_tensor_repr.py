import unittest

import numpy as np

from src.tensorlite.infrastructure._tensor import DEFAULT_MAX_ELEMS, Tensor


class TestTensorRendering(unittest.TestCase):
    def test_repr_has_shape_and_dtype(self):
        self.assertEqual(repr(Tensor((2, 3))), "Tensor(shape=[2, 3], dtype=float64)")

    def test_to_string_lists_all_elements(self):
        t = Tensor((2, 2), [1, 2, 3, 4])
        text = t.to_string()
        lines = text.splitlines()
        self.assertEqual(lines[0], "Tensor(shape=[2, 2], dtype=float64)")
        self.assertEqual(lines[1], "data(4) [1.0, 2.0, 3.0, 4.0]")
        self.assertNotIn("...", text)

    def test_to_string_is_bounded(self):
        t = Tensor((1000,), np.arange(1000, dtype=np.float64))
        text = t.to_string(max_elems=5)
        self.assertIn("data(1000)", text)
        self.assertIn("[0.0, 1.0, 2.0, 3.0, 4.0, ...]", text)
        self.assertNotIn("5.0", text)

    def test_default_bound(self):
        t = Tensor((DEFAULT_MAX_ELEMS + 10,))
        items = t.to_string().splitlines()[1]
        self.assertEqual(items.count("0.0"), DEFAULT_MAX_ELEMS)
        self.assertTrue(items.endswith(", ...]"))

    def test_zero_bound(self):
        text = Tensor((3,)).to_string(max_elems=0)
        self.assertIn("data(3) [...]", text)

    def test_empty_tensor(self):
        text = Tensor(()).to_string()
        self.assertIn("Tensor(shape=[], dtype=float64)", text)
        self.assertIn("data(0) []", text)

    def test_str_matches_to_string(self):
        t = Tensor((2,), [1, 2])
        self.assertEqual(str(t), t.to_string())


if __name__ == "__main__":
    unittest.main()
