import logging
import math

import pytest

from clc.extra.utils import format_result
from clc.main import console_handler, default_context, main


def feed(lines: list[str]):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return fake_input


def test_main_stops_on_empty_line(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", feed(["1 + 2   ", "2 * pi", "", "3"]))
    main()
    assert capsys.readouterr().out == f"3\n{2 * math.pi}\n"


def test_main_skips_failures(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", feed(["1 + $", "(1", "1 / 0", "max(2, 3)\t"]))
    main()
    assert capsys.readouterr().out == "inf\n3\n"


def test_default_context():
    ctx = default_context()
    assert ctx.get_variable("pi") == math.pi
    assert ctx.get_variable("e") == math.e
    assert ctx.function_exists("min")


@pytest.mark.parametrize("value, expected",
                         [
                             (3.0, "3"),
                             (-2.0, "-2"),
                             (0.5, "0.5"),
                             (math.inf, "inf"),
                         ])
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_large_values_keep_float_form():
    assert format_result(1e300) == "1e+300"
    assert format_result(1e16) == "1e+16"
    assert format_result(9007199254740992.0) == "9007199254740992"
    assert format_result(math.nan) == "nan"
    assert format_result(5) == "5"


def test_console_shows_only_main_records():
    console = console_handler()
    from_main = logging.LogRecord("clc.main", logging.ERROR, __file__, 1, "Could not calculate", None, None)
    from_rpn = logging.LogRecord("clc.rpn", logging.ERROR, __file__, 1, "Exception in rpn", None, None)
    assert console.filter(from_main)
    assert not console.filter(from_rpn)
