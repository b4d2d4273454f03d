import unittest

from numru.infrastructure.dimension import Axis


class TestAxis(unittest.TestCase):
    def test_index(self):
        self.assertEqual(Axis(0).index(), 0)
        self.assertEqual(Axis(2).index(), 2)

    def test_rejects_negative(self):
        with self.assertRaises(ValueError):
            Axis(-1)

    def test_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            Axis(1.0)
        with self.assertRaises(TypeError):
            Axis(False)

    def test_is_immutable_and_hashable(self):
        a = Axis(1)
        with self.assertRaises(Exception):
            a.value = 2
        self.assertEqual({Axis(1), Axis(1)}, {Axis(1)})

    def test_ordering(self):
        self.assertLess(Axis(0), Axis(1))


if __name__ == "__main__":
    unittest.main()
