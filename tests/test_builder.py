import pytest

from calctree import TreeBuilder, parse, tokenize
from calctree.ast_nodes import BinaryOp, BinaryOpNode, NumberNode, UnaryFunction, UnaryFunctionNode
from calctree.exceptions import (
    IncompleteExpression, InsufficientOperands, InvalidNumber, MissingParenAfterFunction,
    NestingTooDeep, ParseError, UnbalancedParentheses, UnexpectedToken,
)


def test_build_sum():
    assert parse("1 + 2") == BinaryOpNode(NumberNode(1.0), BinaryOp.ADD, NumberNode(2.0))


def test_build_from_tokens():
    root = TreeBuilder(tokenize("4 * 2")).build()
    assert root == BinaryOpNode(NumberNode(4.0), BinaryOp.MUL, NumberNode(2.0))


def test_operators_apply_left_to_right():
    # (2 + 3) * 4, not 2 + (3 * 4)
    assert parse("2 + 3 * 4") == BinaryOpNode(
        BinaryOpNode(NumberNode(2.0), BinaryOp.ADD, NumberNode(3.0)),
        BinaryOp.MUL,
        NumberNode(4.0),
    )
    assert parse("2 + 3 * 4").evaluate() == 20.0
    assert parse("2 * 3 + 4").evaluate() == 10.0


def test_parenthesized_right_operand():
    assert parse("2 + (3 * 4)").evaluate() == 14.0


def test_leading_group():
    assert parse("(3.5 + 3.2) * 2") == BinaryOpNode(
        BinaryOpNode(NumberNode(3.5), BinaryOp.ADD, NumberNode(3.2)),
        BinaryOp.MUL,
        NumberNode(2.0),
    )


def test_negative_literal():
    assert parse("-5 + 2") == BinaryOpNode(NumberNode(-5.0), BinaryOp.ADD, NumberNode(2.0))


def test_power_with_group_exponent():
    assert parse("2^(1 + 2)") == BinaryOpNode(
        NumberNode(2.0),
        BinaryOp.POW,
        BinaryOpNode(NumberNode(1.0), BinaryOp.ADD, NumberNode(2.0)),
    )


def test_factorial_wraps_previous_operand():
    assert parse("5!") == UnaryFunctionNode(UnaryFunction.FACTORIAL, NumberNode(5.0))
    # applies to everything reduced so far
    assert parse("2 + 1!") == UnaryFunctionNode(
        UnaryFunction.FACTORIAL,
        BinaryOpNode(NumberNode(2.0), BinaryOp.ADD, NumberNode(1.0)),
    )


def test_function_with_nested_argument():
    assert parse("sin((1 + 2) * 3)") == UnaryFunctionNode(
        UnaryFunction.SIN,
        BinaryOpNode(
            BinaryOpNode(NumberNode(1.0), BinaryOp.ADD, NumberNode(2.0)),
            BinaryOp.MUL,
            NumberNode(3.0),
        ),
    )


def test_hyperbolic_function():
    assert parse("csch(1)") == UnaryFunctionNode(UnaryFunction.CSCH, NumberNode(1.0))


def test_loose_function_takes_single_token():
    assert parse("ln5") == UnaryFunctionNode(UnaryFunction.LN, NumberNode(5.0))
    assert parse("sqrt 16 + 1") == BinaryOpNode(
        UnaryFunctionNode(UnaryFunction.SQRT, NumberNode(16.0)),
        BinaryOp.ADD,
        NumberNode(1.0),
    )


def test_loose_function_with_parens():
    assert parse("log(10 * 10)").evaluate() == 2.0


def test_function_result_as_left_operand():
    assert parse("cos(0) + 1").evaluate() == 2.0


@pytest.mark.parametrize(
    "expression",
    ["(1 + 2", "((1)", "2 + (3", "sin(0", "ln(5"],
)
def test_unbalanced_parentheses(expression):
    with pytest.raises(UnbalancedParentheses):
        parse(expression)


@pytest.mark.parametrize(
    "expression",
    ["+ 3", "3 +", "* 2", "2 ^", "!", "ln +", "- 3"],
)
def test_insufficient_operands(expression):
    with pytest.raises(InsufficientOperands):
        parse(expression)


@pytest.mark.parametrize("expression", ["sin 0", "cosh 1", "tan"])
def test_missing_paren_after_function(expression):
    with pytest.raises(MissingParenAfterFunction):
        parse(expression)


@pytest.mark.parametrize("expression", ["1)", "(1))", "2 + sin(0)", "3 * - 2"])
def test_unexpected_token(expression):
    with pytest.raises(UnexpectedToken):
        parse(expression)


@pytest.mark.parametrize("expression", ["", "1 2", "()", "2 (3)", "2sin(0)", "(1 2)"])
def test_incomplete_expression(expression):
    with pytest.raises(IncompleteExpression):
        parse(expression)


def test_malformed_number():
    with pytest.raises(InvalidNumber) as excinfo:
        parse("1.2.3 + 1")
    assert isinstance(excinfo.value, UnexpectedToken)
    assert excinfo.value.token.value == "1.2.3"


def test_overflowing_literal_is_rejected():
    with pytest.raises(InvalidNumber):
        parse("1" * 400)


def test_nesting_limit():
    expression = "((((1))))"
    assert parse(expression, {"max_depth": 4}).evaluate() == 1.0
    with pytest.raises(NestingTooDeep) as excinfo:
        parse(expression, {"max_depth": 3})
    assert excinfo.value.limit == 3


def test_errors_are_parse_errors():
    for expression in ("(1", "+", "sin 1", "1)", "1 2"):
        with pytest.raises(ParseError):
            parse(expression)
