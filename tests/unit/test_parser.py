import unittest

from polycurve.engine.ast_nodes import BinaryOp, BinOp, Number, Power, Unary, UnaryOp, Variable
from polycurve.engine.errors import ExpressionSyntaxError
from polycurve.engine.parser import parse_ast


class ParserTestCase(unittest.TestCase):
    def test_precedence_of_multiplication_over_addition(self) -> None:
        tree = parse_ast("1+2*x")
        self.assertEqual(tree, BinOp(BinaryOp.ADD, Number(1.0), BinOp(BinaryOp.MUL, Number(2.0), Variable())))

    def test_left_associative_subtraction(self) -> None:
        tree = parse_ast("1-2-3")
        self.assertEqual(tree, BinOp(BinaryOp.SUB, BinOp(BinaryOp.SUB, Number(1.0), Number(2.0)), Number(3.0)))

    def test_power_is_right_associative(self) -> None:
        tree = parse_ast("2^3^2")
        self.assertEqual(tree, Power(Number(2.0), Power(Number(3.0), Number(2.0))))

    def test_unary_minus_binds_to_primary(self) -> None:
        self.assertEqual(parse_ast("-x^2"), Power(Unary(UnaryOp.NEGATE, Variable()), Number(2.0)))
        self.assertEqual(
            parse_ast("-2*x"),
            BinOp(BinaryOp.MUL, Unary(UnaryOp.NEGATE, Number(2.0)), Variable()),
        )

    def test_repeated_unary_operators_chain(self) -> None:
        self.assertEqual(parse_ast("--x"), Unary(UnaryOp.NEGATE, Unary(UnaryOp.NEGATE, Variable())))
        self.assertEqual(parse_ast("+-+x"), Unary(UnaryOp.NEGATE, Variable()))

    def test_parentheses_group(self) -> None:
        tree = parse_ast("(x+1)*2")
        self.assertEqual(tree, BinOp(BinaryOp.MUL, BinOp(BinaryOp.ADD, Variable(), Number(1.0)), Number(2.0)))

    def test_decimal_literal(self) -> None:
        self.assertEqual(parse_ast("12.25"), Number(12.25))

    def test_syntax_errors(self) -> None:
        for text in ["x+*2", "(x+1", "x+1)", "y", "2.", ".5", "1.2.3", "", "x^", "3$"]:
            with self.subTest(text=text):
                with self.assertRaises(ExpressionSyntaxError):
                    parse_ast(text)

    def test_error_reports_position(self) -> None:
        with self.assertRaises(ExpressionSyntaxError) as ctx:
            parse_ast("x+*2")
        self.assertEqual(ctx.exception.position, 2)

    def test_non_finite_literal_rejected(self) -> None:
        with self.assertRaises(ExpressionSyntaxError):
            parse_ast("9" * 400)


if __name__ == "__main__":
    unittest.main()
