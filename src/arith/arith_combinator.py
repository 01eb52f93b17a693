"""
Parser-combinator engine for the arith grammar.

A parser is a first-class value wrapping a function from the remaining input
string to a result. Parsers are built once and composed with four operators;
none of them mutate the parsers they combine.

Classes:
    Success: A successful parse carrying the parsed value and the unconsumed remainder.
    Failure: A failed parse carrying a descriptive message.
    Parser: Wraps a parsing function and provides the composition operators.

Features:
    - sequence (``p + q``): run two parsers one after the other, pairing their values.
    - or_else (``p | q``): ordered choice; the second parser sees the original input.
    - map: transform a parsed value, leaving the remainder untouched.
    - repeat: zero-or-more repetition, stopping at end of input or the first failure.
    - lazy: defer building a parser until it runs, for mutually recursive rules.

Failures are values, never exceptions: a composite failure is the unmodified
failure of the first sub-parser that failed.

Example:
    >>> digit = Parser(lambda s: Success(s[0], s[1:]) if s[:1].isdigit() else Failure("no digit"))
    >>> digit.repeat().start()("12a")
    Success(['1', '2'], 'a')
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")


class Success(Generic[A]):
    """A successful parse.

    Attributes:
        value (A): The parsed value.
        remainder (str): The suffix of the input that was not consumed.
    """

    def __init__(self, value: A, remainder: str) -> None:
        self.value = value
        self.remainder = remainder

    def __repr__(self) -> str:
        return f"Success({self.value!r}, {self.remainder!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Success)
            and self.value == other.value
            and self.remainder == other.remainder
        )

    def __bool__(self) -> bool:
        return True


class Failure:
    """A failed parse.

    Attributes:
        message (str): What was expected and what was found, or that input ran out.
    """

    def __init__(self, message: str) -> None:
        self.message = message

    def __repr__(self) -> str:
        return f"Failure({self.message!r})"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Failure) and self.message == other.message

    def __bool__(self) -> bool:
        return False


Result = Union[Success[A], Failure]
"""Outcome of running a parser: ``Success(value, remainder)`` or ``Failure(message)``."""

ParseFunction = Callable[[str], Result[A]]


class Parser(Generic[A]):
    """A composable parsing function.

    Wraps a callable taking the remaining input and returning a Result. Parser
    values hold no mutable state, so a single instance can be shared between
    rules and reused across any number of parses.

    Args:
        func (Callable[[str], Result[A]]): The parsing function.

    Raises:
        TypeError: If ``func`` is not callable.
    """

    def __init__(self, func: ParseFunction[A]) -> None:
        if not callable(func):
            raise TypeError(f"Parser expects a callable, got {type(func).__name__}")
        self._func = func

    def start(self) -> ParseFunction[A]:
        """Returns the underlying parsing function."""
        return self._func

    def __call__(self, text: str) -> Result[A]:
        return self._func(text)

    def sequence(self, that: Parser[B]) -> Parser[tuple[A, B]]:
        """Runs ``self`` then ``that`` on what remains, pairing both values.

        If ``self`` fails, its failure is returned and ``that`` is never run.
        If ``that`` fails, its failure is returned.
        """

        def parse(text: str) -> Result[tuple[A, B]]:
            first = self._func(text)
            if isinstance(first, Failure):
                return first
            second = that(first.remainder)
            if isinstance(second, Failure):
                return second
            return Success((first.value, second.value), second.remainder)

        return Parser(parse)

    def or_else(self, that: Parser[B]) -> Parser[A | B]:
        """Ordered choice: tries ``self``, and on failure ``that``, both on the original input.

        The first alternative that succeeds wins. When both fail, the failure
        of ``that`` is returned and the failure of ``self`` is discarded.
        """

        def parse(text: str) -> Result[A | B]:
            result = self._func(text)
            if isinstance(result, Success):
                return result
            return that(text)

        return Parser(parse)

    def map(self, func: Callable[[A], B]) -> Parser[B]:
        """Applies ``func`` to the parsed value. Remainder and failures pass through unchanged."""

        def parse(text: str) -> Result[B]:
            result = self._func(text)
            if isinstance(result, Failure):
                return result
            return Success(func(result.value), result.remainder)

        return Parser(parse)

    def repeat(self) -> Parser[list[A]]:
        """Zero-or-more repetition.

        Empty input always yields ``Success([], "")``. Otherwise the parser is
        applied until the input is exhausted or an attempt fails; the values
        matched so far are returned with the remainder at that point, so
        repetition itself never fails.

        Every success of the repeated parser must consume at least one
        character. A parser that can match the empty string loops forever.
        """

        def parse(text: str) -> Result[list[A]]:
            values: list[A] = []
            remaining = text
            while remaining:
                result = self._func(remaining)
                if isinstance(result, Failure):
                    break
                values.append(result.value)
                remaining = result.remainder
            return Success(values, remaining)

        return Parser(parse)

    def __add__(self, that: Parser[B]) -> Parser[tuple[A, B]]:
        return self.sequence(that)

    def __or__(self, that: Parser[B]) -> Parser[A | B]:
        return self.or_else(that)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", type(self._func).__name__)
        return f"Parser({name})"


def sequence(p: Parser[A], q: Parser[B]) -> Parser[tuple[A, B]]:
    return p.sequence(q)


def or_else(p: Parser[A], q: Parser[B]) -> Parser[A | B]:
    return p.or_else(q)


def map_parser(p: Parser[A], func: Callable[[A], B]) -> Parser[B]:
    return p.map(func)


def repeat(p: Parser[A]) -> Parser[list[A]]:
    return p.repeat()


def lazy(factory: Callable[[], Parser[A]]) -> Parser[A]:
    """Defers calling ``factory`` until the returned parser runs.

    Lets a rule refer to another rule that refers back to it without
    recursing while the rules are being built.
    """

    def parse(text: str) -> Result[A]:
        return factory()(text)

    return Parser(parse)


__all__ = [
    "Failure",
    "Parser",
    "Result",
    "Success",
    "lazy",
    "map_parser",
    "or_else",
    "repeat",
    "sequence",
]
