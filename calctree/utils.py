"""
Entry points: tokenize, build and evaluate expressions in one call.
"""
from typing import Optional, Dict, Any, List
import logging

from . import settings
from .ast_nodes import Node
from .builder import TreeBuilder
from .exceptions import ExpressionError
from .parser import Parser
from .tokenizer import Tokenizer
from .tokens import Token

logger = logging.getLogger(__name__)


def tokenize(expression: str) -> List[Token]:
    """Split ``expression`` into tokens. Raises LexError."""
    return Tokenizer(expression).generate_tokens()


def build(tokens: List[Token], config: Optional[Dict[str, Any]] = None) -> Node:
    """
    Build an expression tree from tokens.

    Args:
        tokens: Output of ``tokenize``
        config: Optional overrides, "precedence" ("sequential" or "standard")
            and "max_depth"

    Returns:
        Root node of the tree
    """
    config = config or {}
    precedence = config.get("precedence", settings.PRECEDENCE)
    max_depth = config.get("max_depth", settings.MAX_NESTING_DEPTH)

    if precedence == settings.PRECEDENCE_SEQUENTIAL:
        return TreeBuilder(tokens, max_depth).build()
    if precedence == settings.PRECEDENCE_STANDARD:
        return Parser(tokens, max_depth).parse()
    raise ValueError(
        f"Unknown precedence {precedence!r}, expected one of {', '.join(settings.PRECEDENCE_CHOICES)}"
    )


def parse(expression: str, config: Optional[Dict[str, Any]] = None) -> Node:
    """Tokenize and build ``expression``. Raises LexError or ParseError."""
    return build(tokenize(expression), config)


def evaluate(expression: str, config: Optional[Dict[str, Any]] = None) -> float:
    """Parse and evaluate ``expression``. Raises any ExpressionError."""
    return parse(expression, config).evaluate()


def evaluate_expression(expression: str, config: Optional[Dict[str, Any]] = None) -> Optional[float]:
    """
    Evaluate an expression, swallowing expression errors.

    Args:
        expression: Infix expression such as "(3.5 + 3.2) * 2"
        config: Same overrides as ``build``

    Returns:
        The value, or None if the expression could not be tokenized,
        parsed or evaluated
    """
    if not expression:
        return None

    try:
        return evaluate(expression, config)
    except ExpressionError as e:
        logger.debug(f"Expression evaluation error: {e.msg} for expression: {expression}")
        return None
