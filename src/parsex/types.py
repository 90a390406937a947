"""
Core parser API.
"""

from typing import Callable

from .core.result import Result, Success

_CONTEXT = 20


class ParseError(Exception):
    """
    Exception that is raised if a parser was unable to parse the input.

    :param expected: Literal or pattern source that failed to match
    :param remaining: Input at the point of failure
    """

    def __init__(self, expected: str, remaining: str):
        super().__init__(expected, remaining)
        self.expected = expected
        self.remaining = remaining

    def __str__(self) -> str:
        at = self.remaining
        if len(at) > _CONTEXT:
            at = at[:_CONTEXT] + "..."
        return "expected {!r} at {!r}".format(self.expected, at)


class ParseResult:
    """
    Result of the parsing.

    :param result: :class:`Success` or :class:`Failure` returned by a parser
    """

    __slots__ = "result",

    def __init__(self, result: Result):
        self.result = result

    def __repr__(self) -> str:
        return "ParseResult({!r})".format(self.result)

    @property
    def remaining(self) -> str:
        """
        Unconsumed input, or the input at the point of failure.
        """

        return self.result.remaining

    def fmap(self, fn: Callable[[str], str]) -> "ParseResult":
        """
        Transforms the parsed value by applying ``fn`` to it. Failed results
        are returned unchanged.

        :param fn: Function to apply to value
        """

        return ParseResult(self.result.fmap(fn))

    def unwrap(self) -> str:
        """
        Returns parsed value if there is one. Otherwise throws
        :exc:`ParseError`.

        :raise: :exc:`ParseError`
        """

        if type(self.result) is Success:
            return self.result.value
        raise ParseError(self.result.expected, self.result.remaining)
