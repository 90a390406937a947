from typing import List, Tuple

import pytest

from parsex.core.padding import pad, strip

DATA: List[Tuple[str, str, str]] = [
    ("foo", "foo", "foo"),
    ("foo", "  foo", "  foo"),
    ("bar", "   foo", "   bar"),
    ("foobar", " foo", " foobar"),
    ("foo", "\t\n foo", "\t\n foo"),
    ("", "   foo", ""),
    ("x", "   ", "   x"),
]


@pytest.mark.parametrize("token, stream, padded", DATA)
def test_pad(token: str, stream: str, padded: str) -> None:
    assert pad(token, stream) == padded


@pytest.mark.parametrize("token, stream", [
    ("foo", "  foo"), ("ab", " abc"), ("x", "y")
])
def test_pad_is_rjust_for_spaces(token: str, stream: str) -> None:
    width = len(token) + len(stream) - len(strip(stream))
    assert pad(token, stream) == token.rjust(width)


def test_strip() -> None:
    assert strip(" \t\nfoo bar ") == "foo bar "
