from dataclasses import dataclass
from typing import Callable, Union

from typing_extensions import final


@final
@dataclass(frozen=True)
class Success:
    __slots__ = "value", "remaining"

    value: str
    remaining: str

    def fmap(self, fn: Callable[[str], str]) -> "Success":
        return Success(fn(self.value), self.remaining)


@final
@dataclass(frozen=True)
class Failure:
    __slots__ = "expected", "remaining"

    expected: str
    remaining: str

    def fmap(self, fn: object) -> "Failure":
        return self


Result = Union[Success, Failure]
