import logging
from collections import deque
from typing import Iterable

from clc.extra import utils
from clc.extra.context_type import Context
from clc.extra.exceptions import MalformedArgumentListError, MismatchedParenthesesError, UnknownOperatorError
from clc.extra.types import Token, TokenKind


@utils.init_default_ctx
class ConverterRPN:
    """
    Reorders tokens from infix to reverse polish notation(shunting-yard)
    :param ctx: Context consulted for operators and function names
    """
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx
        self.logger = logger or logging.getLogger(__name__)

    def is_function(self, token: Token) -> bool:
        return token.kind is TokenKind.IDENTIFIER and self.ctx.function_exists(token.text)

    def _place_operator(self, token: Token, output: deque[Token], stack_ops: list[Token]) -> None:
        cur_op = self.ctx.get_operator(token.text)
        if cur_op is None:
            raise UnknownOperatorError(f"Unknown operator: '{token.text}'", symbol=token.text)

        while stack_ops and stack_ops[-1].kind is TokenKind.SYMBOL:
            prev_op = self.ctx.get_operator(stack_ops[-1].text)
            if prev_op.precedence > cur_op.precedence or (
                    prev_op.precedence == cur_op.precedence and not cur_op.is_right):
                output.append(stack_ops.pop())
            else:
                break
        stack_ops.append(token)

    @utils.log_exception
    def rpn(self, tokens: Iterable[Token]) -> deque[Token]:
        """
        Converts tokens to RPN
        :param tokens: lexically valid tokens of the expression
        :return: queue of tokens in RPN order, function names placed right after their args
        """
        output: deque[Token] = deque()
        stack_ops: list[Token] = []  # operators, left parentheses and function names

        for t in tokens:
            if t.kind is TokenKind.WHITESPACE:
                continue

            if t.kind is TokenKind.NUMBER:
                output.append(t)
            elif t.kind is TokenKind.IDENTIFIER:
                if self.is_function(t):
                    stack_ops.append(t)
                else:
                    output.append(t)
            elif t.kind is TokenKind.SYMBOL:
                self._place_operator(t, output, stack_ops)
            elif t.kind is TokenKind.LEFT_PARENTHESIS:
                stack_ops.append(t)
            elif t.kind is TokenKind.RIGHT_PARENTHESIS:
                while True:
                    if not stack_ops:
                        raise MismatchedParenthesesError("Unbalanced parenthesis: ')' has no matching '('",
                                                         exc_type="unopened")
                    op = stack_ops.pop()
                    if op.kind is TokenKind.LEFT_PARENTHESIS:
                        break
                    output.append(op)
                if stack_ops and self.is_function(stack_ops[-1]):
                    output.append(stack_ops.pop())
            elif t.kind is TokenKind.ARGUMENT_SEPARATOR:
                while stack_ops and stack_ops[-1].kind is not TokenKind.LEFT_PARENTHESIS:
                    output.append(stack_ops.pop())
                if not stack_ops:
                    raise MalformedArgumentListError("Argument separator ',' outside of parentheses")

        for op in stack_ops[::-1]:
            if op.kind is TokenKind.LEFT_PARENTHESIS:
                raise MismatchedParenthesesError("Unbalanced parenthesis: '(' is never closed",
                                                 exc_type="unclosed")
            output.append(op)

        self.logger.debug(f"rpn={' '.join(str(t) for t in output)}")
        return output


def shunting_yard(tokens: Iterable[Token], context: Context) -> deque[Token]:
    return ConverterRPN(context).rpn(tokens)
