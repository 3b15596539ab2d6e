import unittest

from polycurve.engine import (
    EPSILON,
    EmptyExpressionError,
    ExpressionSyntaxError,
    PolynomialSemanticError,
    canonicalize,
    coefficients_equal,
    compile_expression,
    parse,
)


class CompilerTestCase(unittest.TestCase):
    def assertCoefficients(self, actual, expected) -> None:  # noqa: N802 - unittest naming
        self.assertIsNotNone(actual)
        self.assertEqual(len(actual), len(expected), msg="{} != {}".format(actual, expected))
        self.assertTrue(coefficients_equal(actual, expected), msg="{} != {}".format(actual, expected))

    def test_reference_expressions(self) -> None:
        self.assertCoefficients(parse("x^2"), [0, 0, 1])
        self.assertCoefficients(parse("2x+3"), [3, 2])
        self.assertCoefficients(parse("(x+1)*(x-2)"), [-2, -1, 1])
        self.assertCoefficients(parse("(x+1)^2"), [1, 2, 1])

    def test_mixed_expression(self) -> None:
        # (x+1)^2 (x-1) - 3x = x^3 + x^2 - 4x - 1
        self.assertCoefficients(parse("(x+1)^2*(x-1) - 3x"), [-1, -4, 1, 1])

    def test_implicit_products(self) -> None:
        self.assertCoefficients(parse("2(x+1)(x-1)"), [-2, 0, 2])
        self.assertCoefficients(parse("x(x-1)"), [0, -1, 1])

    def test_unary_minus_squares_the_negated_primary(self) -> None:
        self.assertCoefficients(parse("-x^2"), [0, 0, 1])
        self.assertCoefficients(parse("0-x^2"), [0, 0, -1])
        self.assertCoefficients(parse("-2x"), [0, -2])

    def test_power_tower_reduces_to_constant(self) -> None:
        self.assertCoefficients(parse("2^3^2"), [512])
        self.assertCoefficients(parse("x^(1+1)"), [0, 0, 1])

    def test_division_by_constant(self) -> None:
        self.assertCoefficients(parse("(4x^2+2)/2"), [1, 0, 2])
        self.assertCoefficients(parse("x/(3-1)"), [0, 0.5])

    def test_divisor_and_exponent_must_reduce_to_one_coefficient(self) -> None:
        # x-x+2 reduces to [2, 0] before canonicalization, so it is not a constant
        self.assertIsNone(parse("x/(x-x+2)"))
        self.assertIsNone(parse("x^(x-x+2)"))
        with self.assertRaises(PolynomialSemanticError):
            compile_expression("x/(x-x+2)")

    def test_cancellation_collapses_to_zero(self) -> None:
        self.assertEqual(parse("x^3 - x^3"), (0.0,))
        self.assertEqual(parse("0"), (0.0,))

    def test_exponent_rounding(self) -> None:
        self.assertCoefficients(parse("x^2.4"), [0, 0, 1])
        self.assertCoefficients(parse("x^2.5"), [0, 0, 0, 1])

    def test_invalid_expressions_collapse_to_none(self) -> None:
        for text in ["", "   ", "x/(x+1)", "x^-1", "x^51", "x+*2", "x/0", "x^x", "(x", "y"]:
            with self.subTest(text=text):
                self.assertIsNone(parse(text))

    def test_structured_errors(self) -> None:
        with self.assertRaises(EmptyExpressionError):
            compile_expression(" ")
        with self.assertRaises(ExpressionSyntaxError):
            compile_expression("x+*2")
        with self.assertRaises(PolynomialSemanticError):
            compile_expression("x/(x+1)")
        with self.assertRaises(PolynomialSemanticError):
            compile_expression("1/0")
        with self.assertRaises(PolynomialSemanticError):
            compile_expression("x^51")

    def test_error_kinds(self) -> None:
        self.assertEqual(EmptyExpressionError("e").kind, "empty_input")
        self.assertEqual(ExpressionSyntaxError("e").kind, "syntax")
        self.assertEqual(PolynomialSemanticError("e").kind, "semantic")

    def test_non_finite_result_rejected(self) -> None:
        with self.assertRaises(PolynomialSemanticError):
            compile_expression("(100000000000000000000x+1)^50*(100000000000000000000x+1)^50")

    def test_long_input_is_unbounded_by_default(self) -> None:
        text = "x" + "+x" * 500
        self.assertGreater(len(text), 1000)
        self.assertCoefficients(parse(text), [0, 501])

    def test_length_limit_is_opt_in(self) -> None:
        with self.assertRaises(ExpressionSyntaxError):
            compile_expression("x+" * 20 + "1", max_length=10)

    def test_deep_nesting_is_a_syntax_error(self) -> None:
        with self.assertRaises(ExpressionSyntaxError):
            compile_expression("(" * 5000 + "x" + ")" * 5000)

    def test_custom_limits(self) -> None:
        self.assertIsNone(parse("x^3", max_exponent=2))
        self.assertCoefficients(parse("x^2", max_exponent=2), [0, 0, 1])

    def test_canonicalization(self) -> None:
        self.assertEqual(canonicalize([1, 2, 0, 0]), (1.0, 2.0))
        self.assertEqual(canonicalize([0, 0, 0]), (0.0,))
        self.assertEqual(canonicalize([1, EPSILON / 2]), (1.0,))
        self.assertEqual(canonicalize([]), (0.0,))

    def test_result_is_immutable_tuple(self) -> None:
        self.assertIsInstance(parse("x+1"), tuple)


if __name__ == "__main__":
    unittest.main()
