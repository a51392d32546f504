import math
from typing import Callable

from clc.extra.types import Associativity, Function, Operator


def custom_divide(x: float, y: float) -> float:
    """
    Division with IEEE 754 results for zero divisor: signed infinity, or nan for 0/0
    :param x: dividend
    :param y: divisor
    :return: quotient
    """
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1, y)
    return x / y


def custom_pow(x: float, y: float) -> float:
    """
    Power with IEEE 754 results where math.pow raises: infinity on overflow, nan outside of domain
    :param x: base
    :param y: exponent
    :return: x raised to y
    """
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0 and float(y).is_integer() and y % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0:  # zero to a negative power
            return math.inf
        return math.nan


ARITHMETIC: dict[str, Callable[[float, float], float]] = {
        "+": lambda x, y: x + y,
        "-": lambda x, y: x - y,
        "*": lambda x, y: x * y,
        "/": custom_divide,
        "^": custom_pow,
    }

OPERATORS: dict[str, Operator] = {
        "+": Operator("+", 2, Associativity.LEFT),
        "-": Operator("-", 2, Associativity.LEFT),
        "*": Operator("*", 3, Associativity.LEFT),
        "/": Operator("/", 3, Associativity.LEFT),
        "^": Operator("^", 4, Associativity.RIGHT),
    }

FUNCTIONS: dict[str, Function] = {
        "min": Function("min", 2, min),
        "max": Function("max", 2, max),
    }
