from dataclasses import dataclass
from enum import Enum


class BinaryOp(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'


class UnaryFunction(Enum):
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    COT = 'cot'
    LN = 'ln'
    LOG = 'log'
    SQRT = 'sqrt'
    SINH = 'sinh'
    COSH = 'cosh'
    TANH = 'tanh'
    COTH = 'coth'
    SECH = 'sech'
    CSCH = 'csch'
    FACTORIAL = '!'


class Node:
    def evaluate(self):
        from .evaluator import Evaluator
        return Evaluator().eval(self)


@dataclass(frozen=True)
class NumberNode(Node):
    value: float


@dataclass(frozen=True)
class BinaryOpNode(Node):
    left: Node
    op: BinaryOp
    right: Node


@dataclass(frozen=True)
class UnaryFunctionNode(Node):
    function: UnaryFunction
    operand: Node
