"""
Parsers that match strings directly, skipping leading whitespace.
"""

from typing import Pattern, Union

from .core import scannerless
from .parser import FnParser, Parser

__all__ = ("literal", "pattern")


def literal(s: str) -> Parser:
    """
    Parses the string ``s``, after any leading whitespace, and returns it
    together with that whitespace.

    >>> from parsex.scannerless import literal

    >>> parser = literal("we shall meet")

    >>> parser("we shall meet again")
    Success(value='we shall meet', remaining=' again')
    >>> parser("  we shall meet")
    Success(value='  we shall meet', remaining='')
    >>> parser("we shall not")
    Failure(expected='we shall meet', remaining='we shall not')

    :param s: String to parse
    """

    return FnParser(scannerless.literal(s))


def pattern(pat: Union[str, Pattern[str]], flags: int = 0) -> Parser:
    """
    Searches the input, after any leading whitespace, for ``pat`` and returns
    the matched text. The first match is removed from the input.

    The match is not anchored: ``pat`` should start with ``^`` unless it is
    meant to skip over unmatched text.

    >>> from parsex.scannerless import pattern

    >>> parser = pattern(r"^\\d+")

    >>> parser(" 42 apples")
    Success(value=' 42', remaining=' apples')
    >>> parser("apples")
    Failure(expected='^\\\\d+', remaining='apples')
    >>> pattern(r"\\d+")("ab12cd")
    Success(value='12', remaining='abcd')

    :param pat: Regular expression
    :param flags: Flags for :func:`re.compile`, only for string patterns
    """

    return FnParser(scannerless.pattern(pat, flags))
