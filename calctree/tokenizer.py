from .exceptions import UnknownCharacter
from .tokens import (
    Token, TokenType, SYMBOLS, OPERATORS,
    HYPERBOLIC_FUNCTIONS, TRIGONOMETRIC_FUNCTIONS, LOOSE_FUNCTIONS,
)

# A '-' seen right after one of these starts a negative number literal
SIGN_CONTEXT = OPERATORS + (TokenType.LPAREN,)


class Tokenizer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current = text[0] if text else None
        self.tokens = []
        self.pending = ''

    def advance(self, count=1):
        self.pos += count
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def flush(self):
        """Emit the pending numeric literal, if any."""
        if not self.pending:
            return
        if self.pending == '-':
            # A sign with no digits after it is just the operator
            self.tokens.append(Token(TokenType.MINUS, '-'))
        else:
            self.tokens.append(Token(TokenType.NUMBER, self.pending))
        self.pending = ''

    def function_name(self):
        word = self.text[self.pos:self.pos+4]
        if word in HYPERBOLIC_FUNCTIONS:
            return word
        word = self.text[self.pos:self.pos+3]
        if word in TRIGONOMETRIC_FUNCTIONS:
            return word
        for name in LOOSE_FUNCTIONS:
            # Only recognised when something follows the name
            if self.text.startswith(name, self.pos) and self.pos + len(name) < len(self.text):
                return name
        return None

    def starts_negative_number(self):
        if self.pending:
            return False
        return not self.tokens or self.tokens[-1].type in SIGN_CONTEXT

    def generate_tokens(self):
        while self.current:
            name = self.function_name()
            if name:
                self.flush()
                self.tokens.append(Token(TokenType.FUNCTION, name))
                self.advance(len(name))
                continue

            if self.current.isdigit() or self.current == '.':
                self.pending += self.current
            elif self.current == '-' and self.starts_negative_number():
                self.pending += self.current
            elif self.current in SYMBOLS:
                self.flush()
                self.tokens.append(Token(SYMBOLS[self.current], self.current))
            elif self.current.isspace():
                self.flush()
            elif self.current == '!':
                self.flush()
                self.tokens.append(Token(TokenType.FACTORIAL, '!'))
            else:
                raise UnknownCharacter(self.current, self.pos)

            self.advance()

        self.flush()
        return self.tokens
