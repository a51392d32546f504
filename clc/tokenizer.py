import logging

import clc.constants as cst
from clc.extra.exceptions import LexError
from clc.extra.types import Token, TokenKind
from clc.extra.utils import log_exception

STRUCTURAL_TOKENS: dict[str, TokenKind] = {
        cst.LEFT_PARENTHESIS: TokenKind.LEFT_PARENTHESIS,
        cst.RIGHT_PARENTHESIS: TokenKind.RIGHT_PARENTHESIS,
        cst.ARGUMENT_SEPARATOR: TokenKind.ARGUMENT_SEPARATOR,
    }


class Tokenizer:
    """
    Lazy iterator over tokens of the expression.
    Every step consumes the longest run of characters of one token class. Once a malformed
    number is met, LexError is raised and the iterator is exhausted for good
    :param expression: raw mathematical expression needed to be tokenized
    """
    def __init__(self, expression: str, logger: logging.Logger | None = None):
        self.expression = expression
        self.logger = logger or logging.getLogger(__name__)
        self.pos = 0
        self.error = False

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if self.error or self.pos >= len(self.expression):
            raise StopIteration
        try:
            token = self.parse_token()
        except LexError:
            self.error = True
            raise
        self.pos += len(token)
        return token

    def _take_while(self, allowed: set[str]) -> str:
        end = self.pos
        while end < len(self.expression) and self.expression[end] in allowed:
            end += 1
        return self.expression[self.pos:end]

    def parse_number(self) -> str:
        """
        Reads digits with at most one decimal point inside
        :return: text of the number
        :raises LexError: second decimal point or a decimal point at the end of the number
        """
        end = self.pos
        has_decimals = False
        while end < len(self.expression):
            s = self.expression[end]
            if s == cst.DECIMAL_POINT:
                if has_decimals:
                    raise LexError(f"Malformed number at position {self.pos}: "
                                   f"second decimal point in '{self.expression[self.pos:end + 1]}'",
                                   exc_type="multiple_points")
                has_decimals = True
            elif s not in cst.DIGITS:
                break
            end += 1

        number = self.expression[self.pos:end]
        if number.endswith(cst.DECIMAL_POINT):
            raise LexError(f"Malformed number at position {self.pos}: '{number}' ends with a decimal point",
                           exc_type="trailing_point")
        return number

    @log_exception
    def parse_token(self) -> Token:
        """
        Reads the token starting at the current position
        :return: token
        """
        s = self.expression[self.pos]

        if s in cst.WHITESPACE:
            return Token(TokenKind.WHITESPACE, self._take_while(cst.WHITESPACE))
        elif s in cst.DIGITS:
            return Token(TokenKind.NUMBER, self.parse_number())
        elif s in cst.LETTERS:
            return Token(TokenKind.IDENTIFIER, self._take_while(cst.LETTERS))
        elif s in STRUCTURAL_TOKENS:
            return Token(STRUCTURAL_TOKENS[s], s)
        return Token(TokenKind.SYMBOL, s)  # unknown symbols are left for the converter to reject


def tokenize(expression: str) -> Tokenizer:
    return Tokenizer(expression)
