"""
Sequential tree builder.

Tokens are reduced strictly left to right on an operand stack. A binary
operator pops the operand before it and takes the token right after it (a
number or a parenthesized group) as its right operand, so ``2 + 3 * 4`` is
``(2 + 3) * 4``. Parenthesized groups and function arguments are built
recursively.
"""
import logging
import math

from . import settings
from .ast_nodes import BinaryOp, BinaryOpNode, NumberNode, UnaryFunction, UnaryFunctionNode
from .exceptions import (
    IncompleteExpression, InsufficientOperands, InvalidNumber, MissingParenAfterFunction,
    NestingTooDeep, UnbalancedParentheses, UnexpectedToken,
)
from .tokens import TokenType, LOOSE_FUNCTIONS, OPERATORS

logger = logging.getLogger(__name__)

BINARY_OPERATORS = {
    TokenType.PLUS: BinaryOp.ADD,
    TokenType.MINUS: BinaryOp.SUB,
    TokenType.MUL: BinaryOp.MUL,
    TokenType.DIV: BinaryOp.DIV,
    TokenType.POW: BinaryOp.POW,
}

FUNCTIONS = {function.value: function for function in UnaryFunction if function is not UnaryFunction.FACTORIAL}


def make_constant(token):
    """NumberNode for a NUMBER token; malformed or overflowing literals are rejected."""
    try:
        value = float(token.value)
    except ValueError:
        raise InvalidNumber(token) from None
    if not math.isfinite(value):
        raise InvalidNumber(token)
    return NumberNode(value)


class TreeBuilder:
    def __init__(self, tokens, max_depth=None, depth=0):
        self.tokens = tokens
        self.max_depth = settings.MAX_NESTING_DEPTH if max_depth is None else max_depth
        self.depth = depth

    def matching_paren(self, start):
        """Index of the ')' closing the '(' at ``start``."""
        balance = 0
        for index in range(start, len(self.tokens)):
            token_type = self.tokens[index].type
            if token_type == TokenType.LPAREN:
                balance += 1
            elif token_type == TokenType.RPAREN:
                balance -= 1
            if balance == 0:
                return index
        raise UnbalancedParentheses()

    def subtree(self, start, end):
        if self.depth + 1 > self.max_depth:
            raise NestingTooDeep(self.max_depth)
        builder = TreeBuilder(self.tokens[start:end], self.max_depth, self.depth + 1)
        return builder.build()

    def group(self, start):
        """Build the parenthesized group opening at ``start``; returns (node, next index)."""
        close = self.matching_paren(start)
        return self.subtree(start + 1, close), close + 1

    def operand(self, index):
        """Right-hand operand of a binary operator; returns (node, next index)."""
        token = self.tokens[index]
        if token.type == TokenType.NUMBER:
            return make_constant(token), index + 1
        if token.type == TokenType.LPAREN:
            return self.group(index)
        raise UnexpectedToken(token)

    def function_argument(self, index, name):
        """Argument of the function named at ``index``; returns (node, next index)."""
        last = index == len(self.tokens) - 1
        if not last and self.tokens[index + 1].type == TokenType.LPAREN:
            return self.group(index + 1)
        if name not in LOOSE_FUNCTIONS:
            raise MissingParenAfterFunction(name)
        if last:
            raise InsufficientOperands(self.tokens[index])
        return self.subtree(index + 1, index + 2), index + 2

    def build(self):
        stack = []
        index = 0

        while index < len(self.tokens):
            token = self.tokens[index]
            logger.debug(f"Token: {token}")

            if token.type == TokenType.NUMBER:
                stack.append(make_constant(token))
                index += 1

            elif token.type == TokenType.LPAREN:
                node, index = self.group(index)
                stack.append(node)

            elif token.type in OPERATORS:
                if not stack or index == len(self.tokens) - 1:
                    raise InsufficientOperands(token)
                left = stack.pop()
                right, index = self.operand(index + 1)
                stack.append(BinaryOpNode(left, BINARY_OPERATORS[token.type], right))

            elif token.type == TokenType.FUNCTION:
                operand, index = self.function_argument(index, token.value)
                stack.append(UnaryFunctionNode(FUNCTIONS[token.value], operand))

            elif token.type == TokenType.FACTORIAL:
                if not stack:
                    raise InsufficientOperands(token)
                stack.append(UnaryFunctionNode(UnaryFunction.FACTORIAL, stack.pop()))
                index += 1

            else:
                raise UnexpectedToken(token)

            logger.debug(f"Operand stack size: {len(stack)}")

        if len(stack) != 1:
            raise IncompleteExpression(len(stack))
        return stack[0]
