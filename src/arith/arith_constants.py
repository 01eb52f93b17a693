"""
Shared constants for the arith grammar.

Exports:
    - EMPTY_INPUT_MESSAGE: Failure message when a primitive sees no input.
    - MISMATCH_MESSAGE: Failure template for a character/class mismatch.
    - NUMBER_TOO_LONG_MESSAGE: Failure message when a digit run cannot be converted to int.
    - TOO_DEEP_MESSAGE: Failure message when nesting exhausts the interpreter stack.
    - rule_names: Names accepted by the CLI and REPL for selecting a rule.
"""

PLUS = "+"
SUB = "-"
MULT = "*"
DIV = "/"

ASSIGN = "="
UNDERSCORE = "_"
LPAREN = "("
RPAREN = ")"

EMPTY_INPUT_MESSAGE = "Parsing failure, empty string"
MISMATCH_MESSAGE = "Parsing failure, got {found} expected {expected}"
NUMBER_TOO_LONG_MESSAGE = "Parsing failure, number too long"
TOO_DEEP_MESSAGE = "Parsing failure, input nested too deeply"

rule_names: tuple[str, ...] = (
    "number",
    "variable",
    "operator",
    "factor",
    "term",
    "assignment",
    "expr",
)

DEFAULT_SOURCE = "x=3"
DEFAULT_RULE = "assignment"
