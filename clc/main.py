import logging
import math
from sys import stderr

import clc.constants as cst
from clc.calculator import Calculator
from clc.extra.context_type import Context
from clc.extra.exceptions import CalculationError
from clc.extra.utils import format_result

logger = logging.getLogger(__name__)


def default_context() -> Context:
    ctx = Context.default()
    ctx.set_variable("pi", math.pi)
    ctx.set_variable("e", math.e)
    return ctx


def main():
    """
    Entry point for application. Reads expressions from stdin line by line and prints their values until an empty line
    """
    ctx = default_context()
    while True:
        try:
            expression: str = input(cst.PROMPT).rstrip()
        except EOFError:
            break
        if not expression:
            break
        try:
            result = Calculator(ctx=ctx).calc(expression)
        except CalculationError as e:
            logger.error(f"Could not calculate expression {expression}: {e}")
            continue
        print(format_result(result))
        logger.info(f"{expression} = {result}")


def console_handler() -> logging.Handler:
    """
    Console handler for user facing records only, tracebacks of the calculation stages go to LOG_FILE
    """
    console = logging.StreamHandler(stderr)
    console.setLevel(cst.CONSOLE_LOG_LEVEL)
    console.addFilter(logging.Filter(__name__))
    return console


def run():
    console = console_handler()
    logging.basicConfig(
        level=cst.LOG_LEVEL,
        handlers=[
            logging.FileHandler(cst.LOG_FILE, mode="a", encoding="utf-8"),
            console,
        ],
        format=cst.FORMAT
    )
    main()


if __name__ == "__main__":
    run()
