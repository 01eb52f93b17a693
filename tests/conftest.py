from typing import Callable

import pytest

from arith.arith_combinator import Failure, Parser, Result, Success


def _one_of(chars: str, label: str) -> Parser[str]:
    def parse(text: str) -> Result[str]:
        if not text:
            return Failure("empty")
        if text[0] in chars:
            return Success(text[0], text[1:])
        return Failure(f"expected {label}, got {text[0]}")

    return Parser(parse)


@pytest.fixture  # type: ignore[misc]
def digit() -> Parser[str]:
    """Engine-level digit parser, independent of the grammar module."""
    return _one_of("0123456789", "digit")


@pytest.fixture  # type: ignore[misc]
def letter() -> Parser[str]:
    return _one_of("abcdefghijklmnopqrstuvwxyz", "letter")


@pytest.fixture  # type: ignore[misc]
def scripted_input(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Feeds the given lines to `input()`, raising EOFError once they run out."""

    def feed(*lines: str) -> None:
        pending = iter(lines)

        def fake_input(_: str = "") -> str:
            try:
                return next(pending)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return feed
