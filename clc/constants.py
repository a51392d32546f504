import logging

FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE = "clc.log"
LOG_LEVEL = logging.DEBUG
CONSOLE_LOG_LEVEL = logging.WARNING

INTEGER_FORMAT_LIMIT = 1e16

PROMPT = "Enter the expression to calculate(empty line to exit): "

WHITESPACE = set("\t\n ")
DIGITS = set("0123456789")
LETTERS = set("abcdefghijklmnopqrstuvwxyz")
DECIMAL_POINT = "."

LEFT_PARENTHESIS = "("
RIGHT_PARENTHESIS = ")"
ARGUMENT_SEPARATOR = ","
