from dataclasses import dataclass
from enum import Enum
from typing import Callable


class TokenKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    SYMBOL = "symbol"
    WHITESPACE = "whitespace"
    LEFT_PARENTHESIS = "left_parenthesis"
    RIGHT_PARENTHESIS = "right_parenthesis"
    ARGUMENT_SEPARATOR = "argument_separator"


@dataclass(frozen=True)
class Token:
    """
    Class representing a lexical token
    :param kind: token class
    :param text: characters of the expression the token was built from(number literals are kept unparsed)
    """
    kind: TokenKind
    text: str

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Operator:
    """
    Class representing an operator
    :param symbol: glyph the operator is written with
    :param precedence: precedence of operator(higher binds tighter)
    :param associativity: grouping of operators with equal precedence
    :param callable_function: function called with left and right operands. None falls back to built-in arithmetic
    """
    symbol: str
    precedence: int
    associativity: Associativity
    callable_function: Callable[[float, float], float] | None = None

    @property
    def is_right(self) -> bool:
        return self.associativity is Associativity.RIGHT


@dataclass
class Function:
    """
    Class representing a native function
    :param name: name the function is called by
    :param arity: exact amount of args
    :param callable_function: function called with evaluated args in declaration order
    """
    name: str
    arity: int
    callable_function: Callable[..., float]
