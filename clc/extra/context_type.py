import logging
from dataclasses import dataclass, field
from typing import Callable

from clc.extra.types import Associativity, Function, Operator
from clc.vars import FUNCTIONS, OPERATORS

logger = logging.getLogger(__name__)


def default_functions():
    return FUNCTIONS.copy()

def default_operators():
    return OPERATORS.copy()

@dataclass
class Context:
    """
    Class representing a context. Evaluation only reads it, mutations belong between evaluations
    :param variables: map from variable name to its value
    :param operators: map from operator symbol to Operator dataclass
    :param functions: map from function name to Function dataclass
    """
    variables: dict[str, float] = field(default_factory=dict)
    operators: dict[str, Operator] = field(default_factory=dict)
    functions: dict[str, Function] = field(default_factory=dict)

    @classmethod
    def new(cls) -> "Context":
        return cls()

    @classmethod
    def default(cls) -> "Context":
        """
        Context preset with '+', '-', '*', '/', '^' operators and 'min', 'max' functions
        """
        return cls(operators=default_operators(), functions=default_functions())

    def set_variable(self, name: str, value: float) -> None:
        self.variables[name] = value

    def get_variable(self, name: str) -> float | None:
        return self.variables.get(name)

    def add_operator(self, symbol: str, precedence: int, associativity: Associativity,
                     callable_function: Callable[[float, float], float] | None = None) -> None:
        if symbol in self.operators:
            logger.warning(f"Operator '{symbol}' redefined: {self.operators[symbol]} is replaced")
        self.operators[symbol] = Operator(symbol, precedence, associativity, callable_function)

    def get_operator(self, symbol: str) -> Operator | None:
        return self.operators.get(symbol)

    def add_function(self, function: Function) -> None:
        if function.name in self.functions:
            logger.warning(f"Function '{function.name}' redefined: {self.functions[function.name]} is replaced")
        self.functions[function.name] = function

    def function_exists(self, name: str) -> bool:
        return name in self.functions

    def get_function(self, name: str) -> Function | None:
        return self.functions.get(name)
