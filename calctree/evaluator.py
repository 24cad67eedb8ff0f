from .ast_nodes import NumberNode, BinaryOpNode, UnaryFunctionNode
from .functions import BINARY_OPERATIONS, UNARY_FUNCTIONS


class Evaluator:
    """
    Post-order evaluation of an expression tree to a float.

    Walks the tree with an explicit stack: left-deep chains such as
    ``1 + 1 + ... + 1`` are as deep as they are long.
    """

    def eval(self, node):
        values = []
        pending = [(node, False)]

        while pending:
            current, children_done = pending.pop()

            if isinstance(current, NumberNode):
                values.append(current.value)

            elif isinstance(current, BinaryOpNode):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(BINARY_OPERATIONS[current.op](left, right))
                else:
                    pending.append((current, True))
                    pending.append((current.right, False))
                    pending.append((current.left, False))

            elif isinstance(current, UnaryFunctionNode):
                if children_done:
                    values.append(UNARY_FUNCTIONS[current.function](values.pop()))
                else:
                    pending.append((current, True))
                    pending.append((current.operand, False))

            else:
                raise TypeError(f"Cannot evaluate {type(current).__name__}, expected a Node")

        return values.pop()
