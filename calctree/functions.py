"""
Numeric implementations behind each operator and function node.

Domain problems that the C maths library reports through its return value
(NaN, infinities) are reported the same way here instead of surfacing as
Python's ValueError/OverflowError. The cases that are real user errors
raise an EvalError subclass.
"""
import math
import operator

from .ast_nodes import BinaryOp, UnaryFunction
from .exceptions import CotUndefined, DivisionByZero, NegativeFactorial, NegativeSqrt


def _is_odd_integer(x):
    return math.isfinite(x) and float(x).is_integer() and int(x) % 2 == 1


def _domain(func):
    """Map ValueError from ``math`` to NaN, like the C library does."""
    def wrapper(x):
        try:
            return func(x)
        except ValueError:
            return math.nan
    return wrapper


def _divide(left, right):
    if right == 0.0:
        raise DivisionByZero()
    return left / right


def _power(base, exponent):
    try:
        return math.pow(base, exponent)
    except ValueError:
        # pow(0, negative) is a pole; anything else here is a negative base
        # with a fractional exponent
        if base == 0.0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _logarithm(func):
    def wrapper(x):
        if x > 0:
            return func(x)
        if x == 0:
            return -math.inf
        return math.nan
    return wrapper


_tan = _domain(math.tan)


def _cot(x):
    tan_value = _tan(x)
    if tan_value == 0.0:
        raise CotUndefined(x)
    return 1.0 / tan_value


def _sqrt(x):
    if x < 0:
        raise NegativeSqrt(x)
    return math.sqrt(x)


def _sinh(x):
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def _cosh(x):
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def _reciprocal(func):
    """1/func(x), with +inf where func(x) is zero."""
    def wrapper(x):
        value = func(x)
        if value == 0.0:
            return math.inf
        return 1.0 / value
    return wrapper


def _factorial(x):
    if math.isnan(x):
        return math.nan
    if x == math.inf:
        return math.inf
    if x == -math.inf or int(x) < 0:
        raise NegativeFactorial(x)

    result = 1.0
    for k in range(2, int(x) + 1):
        result *= k
        if math.isinf(result):
            break
    return result


BINARY_OPERATIONS = {
    BinaryOp.ADD: operator.add,
    BinaryOp.SUB: operator.sub,
    BinaryOp.MUL: operator.mul,
    BinaryOp.DIV: _divide,
    BinaryOp.POW: _power,
}

UNARY_FUNCTIONS = {
    UnaryFunction.SIN: _domain(math.sin),
    UnaryFunction.COS: _domain(math.cos),
    UnaryFunction.TAN: _tan,
    UnaryFunction.COT: _cot,
    UnaryFunction.LN: _logarithm(math.log),
    UnaryFunction.LOG: _logarithm(math.log10),
    UnaryFunction.SQRT: _sqrt,
    UnaryFunction.SINH: _sinh,
    UnaryFunction.COSH: _cosh,
    UnaryFunction.TANH: math.tanh,
    UnaryFunction.COTH: _reciprocal(math.tanh),
    UnaryFunction.SECH: _reciprocal(_cosh),
    UnaryFunction.CSCH: _reciprocal(_sinh),
    UnaryFunction.FACTORIAL: _factorial,
}
