import unittest

from polycurve.engine import algebra
from polycurve.engine.errors import PolynomialSemanticError


class AlgebraTestCase(unittest.TestCase):
    def test_add_pads_shorter_operand(self) -> None:
        self.assertEqual(algebra.add([1, 2], [3, 4, 5]), (4.0, 6.0, 5.0))

    def test_subtract_keeps_full_length(self) -> None:
        self.assertEqual(algebra.subtract([0, 0, 1], [0, 0, 1]), (0.0, 0.0, 0.0))

    def test_multiply_is_convolution(self) -> None:
        # (x+1)(x-2) = x^2 - x - 2
        self.assertEqual(algebra.multiply([1, 1], [-2, 1]), (-2.0, -1.0, 1.0))
        self.assertEqual(len(algebra.multiply([1, 2, 3], [4, 5])), 4)

    def test_divide_by_scalar(self) -> None:
        self.assertEqual(algebra.divide_by_scalar([2, 4], 2), (1.0, 2.0))
        self.assertIsNone(algebra.divide_by_scalar([2, 4], 0))

    def test_power_edges(self) -> None:
        self.assertEqual(algebra.power([3, 7], 0), (1.0,))
        self.assertEqual(algebra.power([3, 7], 1), (3, 7))
        self.assertEqual(algebra.power([1, 1], 2), (1.0, 2.0, 1.0))
        self.assertEqual(len(algebra.power([0, 1], 50)), 51)

    def test_power_rejects_out_of_range(self) -> None:
        for exponent in (-1, 51):
            with self.subTest(exponent=exponent):
                with self.assertRaises(PolynomialSemanticError):
                    algebra.power([0, 1], exponent)

    def test_inputs_are_not_mutated(self) -> None:
        left = [1.0, 2.0]
        right = [3.0]
        algebra.add(left, right)
        algebra.multiply(left, right)
        algebra.power(left, 3)
        self.assertEqual(left, [1.0, 2.0])
        self.assertEqual(right, [3.0])


if __name__ == "__main__":
    unittest.main()
