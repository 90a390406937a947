import re
from typing import Pattern, Union

from .padding import pad, strip
from .parser import ParseFn
from .result import Failure, Result, Success


def literal(s: str) -> ParseFn:
    ls = len(s)

    def literal(stream: str) -> Result:
        stripped = strip(stream)
        if stripped.startswith(s):
            return Success(pad(s, stream), stripped[ls:])
        return Failure(s, stream)

    return literal


def _pattern(pat: Pattern[str]) -> ParseFn:
    search = pat.search
    expected = pat.pattern

    def pattern(stream: str) -> Result:
        stripped = strip(stream)
        r = search(stripped)
        if r is None:
            return Failure(expected, stream)
        start, end = r.span()
        return Success(
            pad(r.group(0), stream), stripped[:start] + stripped[end:]
        )

    return pattern


def pattern(pat: Union[str, Pattern[str]], flags: int = 0) -> ParseFn:
    if isinstance(pat, str):
        return _pattern(re.compile(pat, flags))
    if flags:
        raise ValueError("Cannot pass flags with a compiled pattern")
    return _pattern(pat)
