import re
from typing import Callable

import pytest

from parsex import (
    Delay, Parser, alternative, keep_first, keep_last, literal, memoize,
    pattern, sequence
)


@pytest.mark.parametrize(
    "combinator", [sequence, alternative, keep_first, keep_last]
)
def test_empty(combinator: Callable[..., Parser]) -> None:
    with pytest.raises(ValueError):
        combinator()


def test_delay_undefined() -> None:
    with pytest.raises(RuntimeError):
        Delay()("a")
    with pytest.raises(RuntimeError):
        sequence(literal("a"), Delay())("a")


def test_delay_redefined() -> None:
    parser = Delay()
    parser.define(literal("a"))
    with pytest.raises(RuntimeError):
        parser.define(literal("b"))


def test_pattern_flags() -> None:
    with pytest.raises(ValueError):
        pattern(re.compile("a"), re.IGNORECASE)


def test_memoize_maxsize() -> None:
    with pytest.raises(ValueError):
        memoize(literal("a"), maxsize=0)


@pytest.mark.parametrize("operand", ["a", 1, None])
def test_operator_operand(operand: object) -> None:
    parser = literal("a")
    with pytest.raises(TypeError):
        parser + operand  # type: ignore
    with pytest.raises(TypeError):
        parser | operand  # type: ignore
    with pytest.raises(TypeError):
        parser << operand  # type: ignore
    with pytest.raises(TypeError):
        parser >> operand  # type: ignore
