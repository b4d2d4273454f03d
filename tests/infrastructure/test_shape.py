import unittest

from numru.infrastructure._shape import Shape
from numru.infrastructure.dimension import Ix1, Ix2, Ix3, IxDyn


class TestShape(unittest.TestCase):
    def test_delegates_to_dimension(self):
        for dim in (Ix1(6), Ix2(3, 4), Ix3(2, 2, 3), IxDyn([2, 5])):
            shape = Shape(dim)
            self.assertIs(shape.raw_dim(), dim)
            self.assertEqual(shape.ndim(), dim.ndim())
            self.assertEqual(shape.size(), dim.size())
            self.assertEqual(shape.dims(), dim.dims())

    def test_rejects_non_dimensions(self):
        with self.assertRaises(TypeError):
            Shape([2, 3])
        with self.assertRaises(TypeError):
            Shape(None)

    def test_wrapping_a_shape_unwraps_it(self):
        inner = Shape(Ix2(2, 3))
        self.assertIs(Shape(inner).raw_dim(), inner.raw_dim())

    def test_from_dims_uses_dynamic_rank(self):
        shape = Shape.from_dims([2, 3])
        self.assertIsInstance(shape.raw_dim(), IxDyn)
        self.assertEqual(shape.dims(), (2, 3))

    def test_coerce(self):
        s = Shape(Ix1(3))
        self.assertIs(Shape.coerce(s), s)
        self.assertEqual(Shape.coerce(Ix1(3)), s)
        self.assertEqual(Shape.coerce((4, 5)).dims(), (4, 5))

    def test_row_major_strides(self):
        self.assertEqual(Shape(Ix1(6)).strides(), (1,))
        self.assertEqual(Shape(Ix2(3, 4)).strides(), (4, 1))
        self.assertEqual(Shape(Ix3(2, 2, 3)).strides(), (6, 3, 1))
        self.assertEqual(Shape(IxDyn([2, 3, 4, 5])).strides(), (60, 20, 5, 1))

    def test_equality_and_hash(self):
        self.assertEqual(Shape(Ix2(2, 3)), Shape(Ix2(2, 3)))
        self.assertEqual(hash(Shape(Ix2(2, 3))), hash(Shape(Ix2(2, 3))))
        self.assertNotEqual(Shape(Ix2(2, 3)), Shape(Ix2(3, 2)))

    def test_repr(self):
        self.assertEqual(repr(Shape(IxDyn([2, 3]))), "Shape=IxDyn([2, 3])")
        self.assertEqual(repr(Shape(Ix2(2, 3))), "Shape=Ix2(2, 3)")


if __name__ == "__main__":
    unittest.main()
