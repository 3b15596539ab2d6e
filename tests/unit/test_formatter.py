import unittest

from polycurve.engine import coefficients_equal, format_polynomial, parse


class FormatterTestCase(unittest.TestCase):
    def test_descending_terms(self) -> None:
        self.assertEqual(format_polynomial([2, -3, 1]), "x^2 - 3x + 2")

    def test_unit_coefficients_omit_numeral(self) -> None:
        self.assertEqual(format_polynomial([0, 1]), "x")
        self.assertEqual(format_polynomial([0, -1, 0, 1]), "x^3 - x")

    def test_leading_negative(self) -> None:
        self.assertEqual(format_polynomial([-4]), "-4")
        self.assertEqual(format_polynomial([0, -1]), "-x")
        self.assertEqual(format_polynomial([1, 0, -3]), "-3x^2 + 1")
        self.assertEqual(format_polynomial([0, 0, -1]), "-(x^2)")

    def test_zero_and_empty(self) -> None:
        self.assertEqual(format_polynomial([0]), "0")
        self.assertEqual(format_polynomial([0, 0, 0]), "0")
        self.assertEqual(format_polynomial([]), "0")

    def test_rounding(self) -> None:
        self.assertEqual(format_polynomial([0.123456, 2.5]), "2.5x + 0.1235")
        self.assertEqual(format_polynomial([1e-12, 1]), "x")
        self.assertEqual(format_polynomial([0.00001, 1]), "x")

    def test_round_trip(self) -> None:
        samples = [
            (0.0,),
            (3.0,),
            (-7.5,),
            (0.0, 1.0),
            (2.0, -3.0, 1.0),
            (0.0, 0.0, -1.0),
            (1.5, -2.0, 0.0, 3.25),
            (-1.0, 0.0, 0.0, 0.0, -1.0),
            (0.0, 0.0, 0.0, 1.0),
            (-2.0, 0.5, -1.0, 1.0),
        ]
        for coefficients in samples:
            with self.subTest(coefficients=coefficients):
                parsed = parse(format_polynomial(coefficients))
                self.assertIsNotNone(parsed)
                self.assertEqual(len(parsed), len(coefficients))
                self.assertTrue(coefficients_equal(parsed, coefficients))


if __name__ == "__main__":
    unittest.main()
