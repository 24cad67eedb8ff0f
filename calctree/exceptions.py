"""
Error classes raised while tokenizing, building and evaluating expressions.

Every error carries a readable ``msg``; callers that only care about
"did it work" can catch ``ExpressionError``.
"""


class ExpressionError(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg


class LexError(ExpressionError):
    pass


class UnknownCharacter(LexError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Unknown character {char!r} at position {position}")


class ParseError(ExpressionError):
    pass


class InsufficientOperands(ParseError):
    def __init__(self, token=None):
        self.token = token
        if token is None:
            super().__init__("Not enough operands: expression ended where an operand was expected")
        else:
            super().__init__(f"Not enough operands for {token.value!r}")


class UnbalancedParentheses(ParseError):
    def __init__(self):
        super().__init__("Parentheses are not balanced")


class MissingParenAfterFunction(ParseError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Function {name!r} must be followed by '('")


class UnexpectedToken(ParseError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Unexpected token {token.value!r}")


class InvalidNumber(UnexpectedToken):
    def __init__(self, token):
        super().__init__(token)
        self.msg = f"Invalid number literal {token.value!r}"
        self.args = (self.msg,)


class IncompleteExpression(ParseError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"Expression does not reduce to a single value ({size} operands left)")


class NestingTooDeep(ParseError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"Expression is nested deeper than {limit} levels")


class EvalError(ExpressionError):
    pass


class DivisionByZero(EvalError):
    def __init__(self):
        super().__init__("Division by zero")


class CotUndefined(EvalError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"cot({value}) is undefined: tan is 0")


class NegativeSqrt(EvalError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Cannot take the square root of negative number {value}")


class NegativeFactorial(EvalError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Cannot take the factorial of negative number {value}")
