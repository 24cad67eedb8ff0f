"""
Arithmetic expression trees.

Parses infix expressions (+ - * / ^, unary minus, postfix factorial,
parentheses, trigonometric, hyperbolic, logarithmic and square root
functions) into a tree and evaluates it without using eval().
"""

from .tokenizer import Tokenizer
from .builder import TreeBuilder
from .parser import Parser
from .evaluator import Evaluator
from .utils import tokenize, build, parse, evaluate, evaluate_expression

__all__ = [
    'Tokenizer', 'TreeBuilder', 'Parser', 'Evaluator',
    'tokenize', 'build', 'parse', 'evaluate', 'evaluate_expression',
]
