from typing import List, Tuple

import pytest

from parsex import Failure, Parser, Success, literal

from .parsers import lists

DATA_POSITIVE: List[Tuple[str, str, str]] = [
    ("1", "1", "2"),
    ("[]", "[]", "[]"),
    ("[ ]", "[ ]", "[ ]"),
    ("[1]", "[1]", "[2]"),
    ("[1,2]", "[1,2]", "[2,4]"),
    ("[1, [2, 3], 4]", "[1, [2, 3], 4]", "[2, [4, 6], 8]"),
    (" [ [ ] , [[7]] ]", " [ [ ] , [[7]] ]", " [ [ ] , [[14]] ]"),
]


@pytest.mark.parametrize("data, value, doubled", DATA_POSITIVE)
def test_positive(data: str, value: str, doubled: str) -> None:
    assert lists.parser(data) == Success(value, "")
    assert lists.doubled(data) == Success(doubled, "")


def test_remaining() -> None:
    assert lists.parser("[1, 2] tail") == Success("[1, 2]", " tail")
    assert lists.parser("[1, 2]]") == Success("[1, 2]", "]")


DATA_NEGATIVE = [
    ("", Failure("[", "")),
    ("x", Failure("[", "x")),
    ("[1,", Failure("]", ",")),
    ("[1 2]", Failure("]", " 2]")),
]


@pytest.mark.parametrize("data, result", DATA_NEGATIVE)
def test_negative(data: str, result: Failure) -> None:
    assert lists.parser(data) == result


def test_memoized_matches_plain() -> None:
    def plain(p: Parser) -> Parser:
        return p

    parser = lists.make(memoize=plain)
    for data, _, _ in DATA_POSITIVE:
        assert parser(data) == lists.make()(data)
    for data, _ in DATA_NEGATIVE:
        assert parser(data) == lists.make()(data)


def test_parse_list() -> None:
    parser = literal("let") >> lists.parser
    assert parser.parse("let [1, 2]").unwrap() == "[1, 2]"
