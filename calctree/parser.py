from . import settings
from .ast_nodes import BinaryOpNode, UnaryFunction, UnaryFunctionNode
from .builder import BINARY_OPERATORS, FUNCTIONS, make_constant
from .exceptions import (
    IncompleteExpression, InsufficientOperands, MissingParenAfterFunction,
    NestingTooDeep, UnbalancedParentheses, UnexpectedToken,
)
from .tokens import TokenType, LOOSE_FUNCTIONS, OPERATORS


class Parser:
    """
    Recursive descent parser with the usual precedence:
    ``+ -`` < ``* /`` < ``^`` (right associative) < postfix ``!``.
    """

    def __init__(self, tokens, max_depth=None):
        self.tokens = tokens
        self.index = 0
        self.current = tokens[0] if tokens else None
        self.max_depth = settings.MAX_NESTING_DEPTH if max_depth is None else max_depth
        self.depth = 0

    def advance(self):
        self.index += 1
        self.current = self.tokens[self.index] if self.index < len(self.tokens) else None

    def eat(self, type_):
        if self.current is None:
            if type_ == TokenType.RPAREN:
                raise UnbalancedParentheses()
            raise InsufficientOperands()
        if self.current.type != type_:
            raise UnexpectedToken(self.current)
        self.advance()

    def parse(self):
        if not self.tokens:
            raise IncompleteExpression(0)

        result = self.expression()
        self.reject_trailing_operand()
        if self.current is not None:
            raise UnexpectedToken(self.current)
        return result

    def reject_trailing_operand(self):
        # "1 2", "2 (3)", "2 sin(1)": no implicit multiplication
        if self.current and self.current.type in (TokenType.NUMBER, TokenType.LPAREN, TokenType.FUNCTION):
            raise IncompleteExpression(2)

    def expression(self):
        node = self.term()

        while self.current and self.current.type in (TokenType.PLUS, TokenType.MINUS):
            op = self.current
            self.eat(op.type)
            node = BinaryOpNode(node, BINARY_OPERATORS[op.type], self.term())

        return node

    def term(self):
        node = self.power()

        while self.current and self.current.type in (TokenType.MUL, TokenType.DIV):
            op = self.current
            self.eat(op.type)
            node = BinaryOpNode(node, BINARY_OPERATORS[op.type], self.power())

        return node

    def power(self):
        operands = [self.postfix()]

        while self.current and self.current.type == TokenType.POW:
            self.eat(TokenType.POW)
            operands.append(self.postfix())

        # Right associative: 2^3^2 is 2^(3^2)
        node = operands.pop()
        while operands:
            node = BinaryOpNode(operands.pop(), BINARY_OPERATORS[TokenType.POW], node)

        return node

    def postfix(self):
        node = self.factor()

        while self.current and self.current.type == TokenType.FACTORIAL:
            self.eat(TokenType.FACTORIAL)
            node = UnaryFunctionNode(UnaryFunction.FACTORIAL, node)

        return node

    def group(self):
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(self.max_depth)
        self.eat(TokenType.LPAREN)
        expr = self.expression()
        self.reject_trailing_operand()
        self.eat(TokenType.RPAREN)
        self.depth -= 1
        return expr

    def factor(self):
        token = self.current

        if token is None:
            raise InsufficientOperands()

        if token.type == TokenType.NUMBER:
            self.eat(TokenType.NUMBER)
            return make_constant(token)

        if token.type == TokenType.LPAREN:
            return self.group()

        if token.type == TokenType.FUNCTION:
            name = token.value
            self.eat(TokenType.FUNCTION)

            if self.current and self.current.type == TokenType.LPAREN:
                return UnaryFunctionNode(FUNCTIONS[name], self.group())
            if name not in LOOSE_FUNCTIONS:
                raise MissingParenAfterFunction(name)

            # Bare operand: "ln5", "sqrt 16"
            argument = self.current
            if argument is None:
                raise InsufficientOperands(token)
            if argument.type != TokenType.NUMBER:
                raise UnexpectedToken(argument)
            self.eat(TokenType.NUMBER)
            return UnaryFunctionNode(FUNCTIONS[name], make_constant(argument))

        if token.type in OPERATORS or token.type == TokenType.FACTORIAL:
            raise InsufficientOperands(token)

        raise UnexpectedToken(token)
