import logging
from collections import deque
from typing import Callable, Iterable

import clc.extra.utils as utils
from clc.extra.context_type import Context
from clc.extra.exceptions import (LexError, MalformedResultError, StackUnderflowError, UndefinedReferenceError,
                                  UnknownOperatorError)
from clc.extra.types import Token, TokenKind
from clc.rpn import ConverterRPN
from clc.tokenizer import Tokenizer
from clc.vars import ARITHMETIC


@utils.init_default_ctx
class Calculator:

    """
    Class for calculating expressions against a context(variables, functions, operators)
    :param rpn: tokens already converted to RPN, calculated by calc_rpn()
    :param ctx: Context. Context.default() if omitted
    """
    def __init__(self, rpn: Iterable[Token] | None = None, *, ctx: Context | None = None):
        self.ctx: Context = ctx
        self.tokens: list[Token] = []
        self.logger = logging.getLogger(__name__)
        self.rpns: deque[Token] = deque(rpn or [])

    def calc(self, expression: str) -> float:
        """
        Calculates value of the expression. The whole expression is tokenized before the conversion starts
        :return: value of expression
        """
        self.logger.debug(f"expression: {expression}")
        self.tokens = list(Tokenizer(expression, logger=self.logger))
        self.logger.debug(f"tokens={[str(t) for t in self.tokens]}")

        self.rpns = ConverterRPN(self.ctx, logger=self.logger).rpn(self.tokens)
        return self.calc_rpn()

    def get_operator_function(self, symbol: str) -> Callable[[float, float], float]:
        operator = self.ctx.get_operator(symbol)
        if operator is not None and operator.callable_function is not None:
            return operator.callable_function
        if symbol in ARITHMETIC:
            return ARITHMETIC[symbol]
        raise UnknownOperatorError(f"Operator '{symbol}' has no arithmetic to apply", symbol=symbol)

    @utils.log_exception
    def calc_rpn(self, rpn: Iterable[Token] | None = None) -> float:
        """
        Reduces RPN-converted tokens to a single value
        :param rpn: tokens in RPN order. self.rpns if omitted
        :return: value of RPN-converted tokens
        """
        if rpn is not None:
            self.rpns = deque(rpn)
        output: list[float] = []

        def pop_operands(count: int, name: str, exc_type) -> list[float]:
            if len(output) < count:
                raise StackUnderflowError(f"'{name}' requires {count} operands but {len(output)} are available",
                                          exc_type=exc_type)
            args = output[len(output) - count:]
            del output[len(output) - count:]
            return args

        for t in self.rpns:
            if t.kind is TokenKind.NUMBER:
                try:
                    output.append(float(t.text))
                except ValueError:
                    raise LexError(f"Malformed number: '{t.text}'", exc_type="unparsable") from None

            elif t.kind is TokenKind.SYMBOL:
                func = self.get_operator_function(t.text)
                a, b = pop_operands(2, t.text, "operator")
                output.append(func(a, b))

            elif t.kind is TokenKind.IDENTIFIER:
                value = self.ctx.get_variable(t.text)
                if value is not None:
                    output.append(value)
                elif self.ctx.function_exists(t.text):
                    func = self.ctx.get_function(t.text)
                    args = pop_operands(func.arity, t.text, "function")
                    self.logger.debug(f"Calling function {t}({args})")
                    output.append(float(func.callable_function(*args)))
                else:
                    raise UndefinedReferenceError(f"Name '{t.text}' is neither a variable nor a function",
                                                  name=t.text)

        if not output:
            raise MalformedResultError("Expression has no value", exc_type="empty")
        if len(output) > 1:
            raise MalformedResultError(f"Expression left {len(output)} values instead of one: missed operation?",
                                       exc_type="excess")
        return output[0]


def evaluate_queue(queue: Iterable[Token], context: Context) -> float:
    return Calculator(queue, ctx=context).calc_rpn()


def evaluate(expression: str, context: Context) -> float:
    """
    Tokenizes, converts to RPN and calculates the expression
    :param expression: expression to calculate
    :param context: variables, operators and functions the expression may refer to
    :return: value of the expression
    """
    return Calculator(ctx=context).calc(expression)
