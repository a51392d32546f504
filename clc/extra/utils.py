import inspect
import math
from functools import wraps
from types import UnionType
from typing import get_args, get_origin

import clc.constants as cst
from clc.extra.context_type import Context


def check_is_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()

def format_result(value: float) -> str:
    """
    Formats result of the expression, integral values below INTEGER_FORMAT_LIMIT are printed without fractional part
    :param value: value to format
    :return: printable value
    """
    if check_is_integer(value) and abs(value) < cst.INTEGER_FORMAT_LIMIT:
        return str(int(value))
    return str(value)


def log_exception(func):

    """Decorator to automatically log exceptions"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.logger.exception(f"Exception in {func.__name__}: {e}")
            raise

    return wrapper


def init_default_ctx(cls):
    """
    Makes every 'Context | None' argument of the class constructor fall back to Context.default()
    """
    init_original = cls.__init__
    signature = inspect.signature(init_original)

    @wraps(init_original)
    def new_init(*args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        for k, v in signature.parameters.items():

            if get_origin(v.annotation) is UnionType and Context in get_args(v.annotation):
                if bound.arguments.get(k) is None:
                    bound.arguments[k] = Context.default()
        return init_original(*bound.args, **bound.kwargs)
    cls.__init__ = new_init
    return cls
