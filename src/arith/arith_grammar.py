"""
Arithmetic grammar built on the combinator engine.

The grammar is flat and strictly left-to-right: there is no operator
precedence, and every rule is a `Parser` assembled from smaller parsers.

Primitives
----------
- `char_parser(ch)`: one specific character.
- `letter_parser()`: one alphabetic character.
- `digit_parser()`: one decimal digit.
- Named characters: `underscore_parser`, `open_bracket_parser`,
  `close_bracket_parser`, and one parser per operator character.

Rules
-----
- `variable_name_parser()`: a run of letters, digits and underscores, possibly empty.
- `number_parser()`: one or more digits.
- `operator_parser()`: one of ``+ - * /``.
- `factor()`: a number, else a variable.
- `term()`: ``factor operator factor`` folded into a single BinOp.
- `parse_assignment()`: ``name '=' expr``.
- `expr()`: a term followed by any number of ``operator factor`` pairs,
  folded left-associatively; else an assignment; else a lone factor.

Every rule factory is cached, so a rule is built once on first use and the
same Parser value is returned afterwards.

Example:
    >>> parse_assignment().start()("x=3")
    Success(Assignment('x', Number(3)), '')
"""

import logging
from functools import cache, reduce
from typing import Any, Callable

from arith.arith_ast import Assignment, BinOp, Expr, Number, Operator, Variable
from arith.arith_combinator import Failure, Parser, Result, Success, lazy
from arith.arith_constants import (
    ASSIGN,
    DIV,
    EMPTY_INPUT_MESSAGE,
    LPAREN,
    MISMATCH_MESSAGE,
    MULT,
    NUMBER_TOO_LONG_MESSAGE,
    PLUS,
    RPAREN,
    SUB,
    TOO_DEEP_MESSAGE,
    UNDERSCORE,
)

logger = logging.getLogger(__name__)


def _satisfy(predicate: Callable[[str], bool], expected: str) -> Parser[str]:
    def parse(text: str) -> Result[str]:
        if not text:
            return Failure(EMPTY_INPUT_MESSAGE)
        found = text[0]
        if predicate(found):
            return Success(found, text[1:])
        return Failure(MISMATCH_MESSAGE.format(found=found, expected=expected))

    return Parser(parse)


# PRIMITIVES


@cache
def char_parser(ch: str) -> Parser[str]:
    """Matches exactly the character `ch`.

    Raises:
        ValueError: If `ch` is not a single character.
    """
    if len(ch) != 1:
        raise ValueError(f"char_parser expects a single character, got {ch!r}")
    return _satisfy(lambda found: found == ch, ch)


@cache
def letter_parser() -> Parser[str]:
    return _satisfy(str.isalpha, "letter")


@cache
def digit_parser() -> Parser[str]:
    return _satisfy(str.isdecimal, "digit")


def underscore_parser() -> Parser[str]:
    return char_parser(UNDERSCORE)


def open_bracket_parser() -> Parser[str]:
    return char_parser(LPAREN)


def close_bracket_parser() -> Parser[str]:
    return char_parser(RPAREN)


def addition_parser() -> Parser[str]:
    return char_parser(PLUS)


def subtraction_parser() -> Parser[str]:
    return char_parser(SUB)


def multiplication_parser() -> Parser[str]:
    return char_parser(MULT)


def division_parser() -> Parser[str]:
    return char_parser(DIV)


# RULES


@cache
def variable_name_parser() -> Parser[Expr]:
    """Parses the longest run of letters, digits and underscores as a Variable.

    The run may be empty, in which case nothing is consumed and the result is
    ``Variable("")``.
    """
    name_char = letter_parser() | digit_parser() | underscore_parser()
    return name_char.repeat().map(lambda chars: Variable("".join(chars)))


@cache
def number_parser() -> Parser[Expr]:
    """Parses one or more digits as a Number.

    Fails with the digit parser's message when the input does not start with
    a digit, so the integer conversion only ever sees digits. A run longer
    than the interpreter's int conversion limit fails with
    NUMBER_TOO_LONG_MESSAGE.
    """
    digits = digit_parser() + digit_parser().repeat()

    def parse(text: str) -> Result[Expr]:
        result = digits(text)
        if isinstance(result, Failure):
            return result
        head, rest = result.value
        try:
            value = int(head + "".join(rest))
        except ValueError:
            return Failure(NUMBER_TOO_LONG_MESSAGE)
        return Success(Number(value), result.remainder)

    return Parser(parse)


@cache
def operator_parser() -> Parser[Expr]:
    symbol = (
        addition_parser()
        | subtraction_parser()
        | multiplication_parser()
        | division_parser()
    )
    return symbol.map(Operator)


@cache
def factor() -> Parser[Expr]:
    return number_parser() | variable_name_parser()


@cache
def term() -> Parser[Expr]:
    """``factor operator factor``, folded into one BinOp."""
    return (factor() + (operator_parser() + factor())).map(
        lambda v: BinOp(v[1][0], v[0], v[1][1])
    )


def _fold_chain(parsed: tuple[Expr, list[tuple[Expr, Expr]]]) -> Expr:
    head, tail = parsed
    if tail:
        logger.debug("folding %d trailing operation(s) onto %r: %r", len(tail), head, tail)
    return reduce(lambda left, pair: BinOp(pair[0], left, pair[1]), tail, head)


@cache
def expr() -> Parser[Expr]:
    """A full expression.

    Alternatives, tried in order on the same input:
        1. a term followed by zero or more ``operator factor`` pairs, folded
           left-associatively (``1+2*3`` is ``(1+2)*3``);
        2. an assignment;
        3. a single factor.

    The assignment is only reached when the first alternative fails, so
    ``x+1=2`` parses as ``x+1`` with ``=2`` left over.
    """
    chain = (term() + (operator_parser() + factor()).repeat()).map(_fold_chain)
    return chain | lazy(parse_assignment) | factor()


@cache
def parse_assignment() -> Parser[Expr]:
    """``name '=' expr``, producing an Assignment.

    Each nested assignment (``a=b=...``) recurses through `expr`, so very deep
    chains exhaust the interpreter stack. `parse` reports that as a Failure.
    """
    rule = variable_name_parser() + char_parser(ASSIGN) + lazy(expr)
    return rule.map(lambda v: Assignment(v[0][0].name, v[1]))


RULES: dict[str, Callable[[], Parser[Any]]] = {
    "number": number_parser,
    "variable": variable_name_parser,
    "operator": operator_parser,
    "factor": factor,
    "term": term,
    "assignment": parse_assignment,
    "expr": expr,
}


def get_rule(name: str) -> Parser[Any]:
    """Looks up a grammar rule by name.

    Raises:
        ValueError: If no rule has that name.
    """
    try:
        return RULES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown rule: {name!r} (expected one of {', '.join(RULES)})"
        ) from None


def parse(text: str, rule: str = "expr") -> Result[Any]:
    """Runs the named rule on `text` and returns its Result.

    Input nested deeper than the interpreter stack allows yields
    ``Failure(TOO_DEEP_MESSAGE)`` instead of raising RecursionError.

    Raises:
        ValueError: If no rule has that name.
    """
    parser = get_rule(rule)
    try:
        return parser.start()(text)
    except RecursionError:
        logger.debug("recursion limit reached parsing %d characters", len(text))
        return Failure(TOO_DEEP_MESSAGE)


__all__ = [
    "RULES",
    "addition_parser",
    "char_parser",
    "close_bracket_parser",
    "digit_parser",
    "division_parser",
    "expr",
    "factor",
    "get_rule",
    "letter_parser",
    "multiplication_parser",
    "number_parser",
    "open_bracket_parser",
    "operator_parser",
    "parse",
    "parse_assignment",
    "subtraction_parser",
    "term",
    "underscore_parser",
    "variable_name_parser",
]
