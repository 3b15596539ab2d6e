import math
import unittest

from polycurve.engine import EPSILON, degree, derivative, evaluate_at, integral, roots
from polycurve.engine.canonical import coefficients_equal


class AnalysisTestCase(unittest.TestCase):
    def test_evaluate_at_uses_all_coefficients(self) -> None:
        self.assertEqual(evaluate_at([1, 2, 3], 2), 17.0)
        self.assertEqual(evaluate_at([5], 100), 5.0)
        self.assertEqual(evaluate_at([], 3), 0.0)

    def test_evaluate_at_can_overflow(self) -> None:
        value = evaluate_at([0] * 50 + [1], 1e300)
        self.assertFalse(math.isfinite(value))

    def test_degree(self) -> None:
        self.assertEqual(degree([0]), 0)
        self.assertEqual(degree([1, 2, 3]), 2)
        self.assertEqual(degree([1, 2, 0, 0]), 1)
        self.assertEqual(degree([0, 0, EPSILON / 2]), 0)

    def test_derivative(self) -> None:
        self.assertEqual(derivative([1, 2, 3]), (2.0, 6.0))
        self.assertEqual(derivative([7]), (0.0,))
        self.assertEqual(derivative([]), (0.0,))

    def test_integral(self) -> None:
        self.assertEqual(integral([2, 6], 0), (0.0, 2.0, 3.0))
        self.assertEqual(integral([2, 6], 5), (5.0, 2.0, 3.0))
        self.assertEqual(integral([0]), (0.0,))

    def test_derivative_inverts_integral(self) -> None:
        original = (1.5, -2.0, 0.25, 4.0)
        self.assertTrue(coefficients_equal(derivative(integral(original, 3.0)), original))

    def test_linear_root(self) -> None:
        self.assertEqual(roots([-6, 2]), [3.0])

    def test_quadratic_two_roots(self) -> None:
        found = roots([-4, 0, 1])
        self.assertEqual(len(found), 2)
        self.assertAlmostEqual(found[0], -2.0)
        self.assertAlmostEqual(found[1], 2.0)

    def test_quadratic_repeated_root(self) -> None:
        found = roots([1, 2, 1])
        self.assertEqual(len(found), 1)
        self.assertAlmostEqual(found[0], -1.0)

    def test_quadratic_without_real_roots(self) -> None:
        self.assertEqual(roots([1, 0, 1]), [])

    def test_unsupported_degrees_return_empty(self) -> None:
        self.assertEqual(roots([5]), [])
        self.assertEqual(roots([0]), [])
        self.assertEqual(roots([-1, 0, 0, 1]), [])

    def test_roots_ignore_trailing_near_zero(self) -> None:
        self.assertEqual(roots([-6, 2, 0.0]), [3.0])


if __name__ == "__main__":
    unittest.main()
