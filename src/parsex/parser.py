"""
Parser combinators.
"""

import logging
from typing import Callable, Optional

from .core import combinators, memo
from .core.memo import CacheInfo, MemoCache
from .core.parser import ParseFn, ParseObj
from .core.result import Result
from .types import ParseResult

log = logging.getLogger("parsex")


class Parser(ParseObj):
    def __call__(self, stream: str) -> Result:
        """
        Applies the parser to ``stream`` and returns :class:`Success` or
        :class:`Failure`.

        >>> from parsex import literal

        >>> literal("foo")("foo bar")
        Success(value='foo', remaining=' bar')
        >>> literal("foo")("bar")
        Failure(expected='foo', remaining='bar')

        :param stream: Input to parse
        """

        return self.parse_fn(stream)

    def parse(self, stream: str) -> ParseResult:
        """
        Parses input.

        >>> from parsex import literal

        >>> literal("foo").parse("  foo").unwrap()
        '  foo'
        >>> literal("foo").parse("bar").unwrap()
        Traceback (most recent call last):
          ...
        parsex.types.ParseError: expected 'foo' at 'bar'

        :param stream: Input to parse
        """

        return ParseResult(self.parse_fn(stream))

    def fmap(self, fn: Callable[[str], str]) -> "Parser":
        """
        Transforms the result of the parser by applying ``fn`` to it. ``fn``
        receives the matched text without leading whitespace, and the
        whitespace is put back in front of the value it returns.

        >>> from parsex import literal

        >>> literal("foo").fmap(str.upper)("  foo")
        Success(value='  FOO', remaining='')

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def replace(self, value: object) -> "Parser":
        """
        Replaces the result of the parser with ``str(value)``.

        >>> from parsex import literal

        >>> literal("1776").replace(2015)("1776")
        Success(value='2015', remaining='')

        :param value: Replacement value
        """

        return replace(self, value)

    def memoize(self, maxsize: Optional[int] = None) -> "MemoParser":
        """
        Alias for :func:`memoize`.

        :param maxsize: Maximal number of cached inputs, unbounded if ``None``
        """

        return memoize(self, maxsize)

    def __add__(self, other: ParseObj) -> "Parser":
        """
        Applies two parsers sequentially and concatenates their results.

        >>> from parsex import literal

        >>> (literal("foo") + literal("bar"))("foo bar")
        Success(value='foo bar', remaining='')
        >>> (literal("foo") + literal("bar"))("foo baz")
        Failure(expected='bar', remaining=' baz')

        :param other: Second parser
        """

        if not isinstance(other, ParseObj):
            return NotImplemented
        return sequence(self, other)

    def __or__(self, other: ParseObj) -> "Parser":
        """
        Applies the first parser and returns its result unless it fails. In
        this case the second parser is applied to the same input and its
        result is returned.

        >>> from parsex import literal

        >>> parser = literal("foo") | literal("bar")

        >>> parser("bar")
        Success(value='bar', remaining='')
        >>> parser("quux")
        Failure(expected='bar', remaining='quux')

        :param other: Second parser
        """

        if not isinstance(other, ParseObj):
            return NotImplemented
        return alternative(self, other)

    def __lshift__(self, other: ParseObj) -> "Parser":
        """
        Applies two parsers sequentially and returns the result of the first
        parser.

        >>> from parsex import literal

        >>> (literal("a") << literal("b"))("a b c")
        Success(value='a', remaining=' c')

        :param other: Second parser
        """

        if not isinstance(other, ParseObj):
            return NotImplemented
        return keep_first(self, other)

    def __rshift__(self, other: ParseObj) -> "Parser":
        """
        Applies two parsers sequentially and returns the result of the second
        parser.

        >>> from parsex import literal

        >>> (literal("a") >> literal("b"))("a b c")
        Success(value='b', remaining=' c')

        :param other: Second parser
        """

        if not isinstance(other, ParseObj):
            return NotImplemented
        return keep_last(self, other)


class FnParser(Parser):
    def __init__(self, fn: ParseFn):
        self._fn = fn

    def to_fn(self) -> ParseFn:
        return self._fn

    def parse_fn(self, stream: str) -> Result:
        return self._fn(stream)


class MemoParser(Parser):
    """
    A subclass of :class:`Parser` that caches results of the wrapped parser by
    input. The cache is private to the instance and safe to share between
    threads.

    >>> from parsex import literal, memoize

    >>> parser = memoize(literal("a"))
    >>> parser("a")
    Success(value='a', remaining='')
    >>> parser("a")
    Success(value='a', remaining='')
    >>> parser.cache_info()
    CacheInfo(hits=1, misses=1, maxsize=None, currsize=1)

    :param parser: Parser to wrap
    :param maxsize: Maximal number of cached inputs, unbounded if ``None``
    """

    def __init__(self, parser: ParseObj, maxsize: Optional[int] = None):
        self._cache = MemoCache(maxsize)
        self._fn = memo.memoize(parser.to_fn(), self._cache)

    def to_fn(self) -> ParseFn:
        return self._fn

    def parse_fn(self, stream: str) -> Result:
        return self._fn(stream)

    def cache_info(self) -> CacheInfo:
        """
        Returns hits and misses counters, and the size of the cache.
        """

        return self._cache.info()

    def cache_clear(self) -> None:
        """
        Drops all cached results and resets counters.
        """

        self._cache.clear()


class Delay(Parser):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from parsex import Delay, literal

    >>> parens = Delay()
    >>> parens.define(literal("()") | literal("(") + parens + literal(")"))

    >>> parens("(())")
    Success(value='(())', remaining='')
    """

    def __init__(self) -> None:
        def _fn(stream: str) -> Result:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn = _fn

    def define(self, parser: ParseObj) -> None:
        """
        Define the parser.

        >>> from parsex import Delay, literal

        >>> parser = Delay()
        >>> parser("a")
        Traceback (most recent call last):
          ...
        RuntimeError: Delayed parser was not defined

        >>> parser.define(literal("a"))
        >>> parser("a")
        Success(value='a', remaining='')

        :param parser: Parser definition
        """

        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = parser.to_fn()
        log.debug("defined delayed parser %r", self)

    def parse_fn(self, stream: str) -> Result:
        return self._fn(stream)

    def to_fn(self) -> ParseFn:
        if self._defined:
            return self._fn
        return super().to_fn()


def fmap(parser: ParseObj, fn: Callable[[str], str]) -> Parser:
    """
    :meth:`Parser.fmap` as a function.

    :param parser: Parser
    :param fn: Function to produce value from the result of ``parser``
    """

    return FnParser(combinators.fmap(parser.to_fn(), fn))


and_then = fmap


def replace(parser: ParseObj, value: object) -> Parser:
    """
    :meth:`Parser.replace` as a function.

    :param parser: Parser
    :param value: Replacement value
    """

    return FnParser(combinators.replace(parser.to_fn(), value))


def sequence(*parsers: ParseObj) -> Parser:
    """
    Applies ``parsers`` one after another, each to the input left by the
    previous one, and concatenates their results. Returns the first failure.

    >>> from parsex import literal, sequence

    >>> sequence(literal("foo"), literal("bar"))("foobar")
    Success(value='foobar', remaining='')
    >>> sequence(literal("foo"), literal("bar"))("foobaz")
    Failure(expected='bar', remaining='baz')

    :param parsers: Parsers to apply
    :raise: :exc:`ValueError` if no parsers were given
    """

    return FnParser(combinators.sequence([p.to_fn() for p in parsers]))


def alternative(*parsers: ParseObj) -> Parser:
    """
    Applies ``parsers`` in order to the same input and returns the first
    success. If all of them fail, returns the failure of the last one.

    More specific parsers should go first, otherwise they may be masked by
    more general ones.

    >>> from parsex import alternative, literal

    >>> alternative(literal("foo"), literal("bar"))("bar")
    Success(value='bar', remaining='')
    >>> alternative(literal("foo"), literal("bar"))("quux")
    Failure(expected='bar', remaining='quux')

    :param parsers: Parsers to try
    :raise: :exc:`ValueError` if no parsers were given
    """

    return FnParser(combinators.alternative([p.to_fn() for p in parsers]))


def keep_first(*parsers: ParseObj) -> Parser:
    """
    Applies ``parsers`` sequentially and returns the result of the first
    parser, without leading whitespace. All parsers must succeed.

    >>> from parsex import keep_first, literal

    >>> keep_first(literal("a"), literal("b"), literal("c"))(" a b c")
    Success(value='a', remaining='')

    :param parsers: Parsers to apply
    :raise: :exc:`ValueError` if no parsers were given
    """

    return FnParser(combinators.keep_first([p.to_fn() for p in parsers]))


def keep_last(*parsers: ParseObj) -> Parser:
    """
    Applies ``parsers`` sequentially and returns the result of the last
    parser, without leading whitespace. All parsers must succeed.

    >>> from parsex import keep_last, literal

    >>> keep_last(literal("a"), literal("b"), literal("c"))(" a b c")
    Success(value='c', remaining='')

    :param parsers: Parsers to apply
    :raise: :exc:`ValueError` if no parsers were given
    """

    return FnParser(combinators.keep_last([p.to_fn() for p in parsers]))


def memoize(parser: ParseObj, maxsize: Optional[int] = None) -> MemoParser:
    """
    Wraps ``parser`` so that repeated application to the same input returns
    the cached result instead of running ``parser`` again.

    :param parser: Parser to wrap
    :param maxsize: Maximal number of cached inputs, unbounded if ``None``
    """

    return MemoParser(parser, maxsize)
