from enum import Enum, auto


class TokenType(Enum):
    NUMBER = auto()
    FUNCTION = auto()
    LPAREN = auto()
    RPAREN = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    POW = auto()
    FACTORIAL = auto()


SYMBOLS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MUL,
    '/': TokenType.DIV,
    '^': TokenType.POW,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
}

OPERATORS = (TokenType.PLUS, TokenType.MINUS, TokenType.MUL, TokenType.DIV, TokenType.POW)

HYPERBOLIC_FUNCTIONS = ('sinh', 'cosh', 'tanh', 'coth', 'sech', 'csch')
TRIGONOMETRIC_FUNCTIONS = ('sin', 'cos', 'tan', 'cot')
# These may take a bare one-token operand, e.g. "ln5"
LOOSE_FUNCTIONS = ('ln', 'log', 'sqrt')


class Token:
    def __init__(self, type_, value=None):
        self.type = type_
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value) == (other.type, other.value)

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"Token({self.type}, {self.value})"
