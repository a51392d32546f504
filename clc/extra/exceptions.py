from typing import Literal


class CalculationError(Exception):
    """
    Base class of every failure raised while tokenizing, reordering or evaluating an expression
    """


class LexError(CalculationError):
    def __init__(self, message, exc_type: Literal["multiple_points", "trailing_point", "unparsable"]):
        super().__init__(message)
        self.exc_type = exc_type


class UnknownOperatorError(CalculationError):
    def __init__(self, message, symbol: str):
        super().__init__(message)
        self.symbol = symbol


class MismatchedParenthesesError(CalculationError):
    def __init__(self, message, exc_type: Literal["unopened", "unclosed"]):
        super().__init__(message)
        self.exc_type = exc_type


class MalformedArgumentListError(CalculationError):
    pass


class UndefinedReferenceError(CalculationError):
    def __init__(self, message, name: str):
        super().__init__(message)
        self.name = name


class StackUnderflowError(CalculationError):
    def __init__(self, message, exc_type: Literal["operator", "function"]):
        super().__init__(message)
        self.exc_type = exc_type


class MalformedResultError(CalculationError):
    def __init__(self, message, exc_type: Literal["empty", "excess"]):
        super().__init__(message)
        self.exc_type = exc_type
