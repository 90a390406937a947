from typing import Callable, List, Sequence

from .padding import pad, strip
from .parser import ParseFn
from .result import Failure, Result, Success


def _check(parse_fns: Sequence[ParseFn]) -> List[ParseFn]:
    if not parse_fns:
        raise ValueError("Expected at least one parser")
    return list(parse_fns)


def sequence(parse_fns: Sequence[ParseFn]) -> ParseFn:
    fns = _check(parse_fns)

    def sequence(stream: str) -> Result:
        values: List[str] = []
        for fn in fns:
            r = fn(stream)
            if type(r) is Failure:
                return r
            values.append(r.value)
            stream = r.remaining
        return Success("".join(values), stream)

    return sequence


def alternative(parse_fns: Sequence[ParseFn]) -> ParseFn:
    first, *rest = _check(parse_fns)

    def alternative(stream: str) -> Result:
        r = first(stream)
        for fn in rest:
            if type(r) is Success:
                return r
            r = fn(stream)
        return r

    return alternative


def fmap(parse_fn: ParseFn, fn: Callable[[str], str]) -> ParseFn:
    def fmap(stream: str) -> Result:
        return parse_fn(stream).fmap(lambda v: pad(fn(strip(v)), stream))

    return fmap


def replace(parse_fn: ParseFn, value: object) -> ParseFn:
    s = str(value)
    return fmap(parse_fn, lambda _: s)


def _strip(parse_fn: ParseFn) -> ParseFn:
    def stripped(stream: str) -> Result:
        return parse_fn(stream).fmap(strip)

    return stripped


def _keep_first(fns: List[ParseFn]) -> List[ParseFn]:
    first, *rest = fns
    return [_strip(first)] + [replace(fn, "") for fn in rest]


def keep_first(parse_fns: Sequence[ParseFn]) -> ParseFn:
    return sequence(_keep_first(_check(parse_fns)))


def keep_last(parse_fns: Sequence[ParseFn]) -> ParseFn:
    fns = _check(parse_fns)
    return sequence(_keep_first(fns[::-1])[::-1])
