from abc import abstractmethod
from typing import Callable

from .result import Result

ParseFn = Callable[[str], Result]


class ParseObj:
    @abstractmethod
    def parse_fn(self, stream: str) -> Result:
        ...

    def to_fn(self) -> ParseFn:
        return self.parse_fn
