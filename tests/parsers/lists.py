from typing import Callable

from parsex import Delay, MemoParser, Parser, literal, pattern

number = pattern(r"^\d+")


def make(
        number: Parser = number,
        memoize: Callable[[Parser], Parser] = MemoParser) -> Parser:
    value = Delay()
    item = memoize(value)
    items = Delay()
    items.define(item + literal(",") + items | item)
    value.define(
        number |
        literal("[") + literal("]") |
        literal("[") + items + literal("]")
    )
    return value


parser = make()
doubled = make(number.fmap(lambda n: str(int(n) * 2)))
