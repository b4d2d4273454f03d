import io
import unittest

from numru import NumruConfig, set_config
from numru.infrastructure._visualization import VisualizeBuilder, format_value
from numru.infrastructure.array import Array, arr
from numru.infrastructure.dimension import IxDyn


class TestFormatValue(unittest.TestCase):
    def test_integers_ignore_precision(self):
        self.assertEqual(format_value(42, 3), "42")

    def test_floats_use_precision(self):
        self.assertEqual(format_value(1.0 / 3.0, 2), "0.33")
        self.assertEqual(format_value(2.5, 0), "2")


class TestVisualizeBuilder(unittest.TestCase):
    def test_rank_one(self):
        self.assertEqual(arr([1, 2, 3]).visualize().render(), "[1, 2, 3]")

    def test_rank_two_pads_columns(self):
        text = arr([[1, 20], [300, 4]]).visualize().render()
        self.assertEqual(text, "[\n   [1  , 20]\n   [300, 4 ]\n]")

    def test_rank_three_nests_blocks(self):
        text = arr([[[1, 2], [3, 4]], [[5, 6], [7, 8]]]).visualize().render()
        expected = "\n".join(
            [
                "[",
                "   [",
                "      [1, 2]",
                "      [3, 4]",
                "   ]",
                "   [",
                "      [5, 6]",
                "      [7, 8]",
                "   ]",
                "]",
            ]
        )
        self.assertEqual(text, expected)

    def test_decimal_points(self):
        a = arr([1.0, 2.25])
        self.assertEqual(a.visualize().decimal_points(2).render(), "[1.00, 2.25]")
        self.assertEqual(a.visualize().decimal_points(0).render(), "[1, 2]")

    def test_decimal_points_validation(self):
        b = arr([1.0]).visualize()
        with self.assertRaises(ValueError):
            b.decimal_points(-1)
        with self.assertRaises(ValueError):
            b.decimal_points(1.5)

    def test_default_precision_comes_from_config(self):
        previous = set_config(NumruConfig(decimal_points=3))
        try:
            self.assertEqual(arr([0.5]).visualize().render(), "[0.500]")
        finally:
            set_config(previous)

    def test_unsupported_rank(self):
        a = Array([1] * 16, IxDyn([2, 2, 2, 2]))
        self.assertEqual(a.visualize().render(), "Unsupported dimension: 4")

    def test_execute_prints_and_returns(self):
        buf = io.StringIO()
        text = arr([1, 2]).visualize().execute(file=buf)
        self.assertEqual(text, "[1, 2]")
        self.assertEqual(buf.getvalue(), "[1, 2]\n")

    def test_builder_type(self):
        self.assertIsInstance(arr([1]).visualize(), VisualizeBuilder)


if __name__ == "__main__":
    unittest.main()
