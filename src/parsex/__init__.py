"""
Public API.
"""

from . import scannerless
from .core.memo import CacheInfo
from .core.result import Failure, Result, Success
from .parser import (
    Delay, FnParser, MemoParser, Parser, alternative, and_then, fmap,
    keep_first, keep_last, memoize, replace, sequence
)
from .scannerless import literal, pattern
from .types import ParseError, ParseResult

__all__ = (
    "scannerless",
    "CacheInfo",
    "Failure", "Result", "Success",
    "ParseError", "ParseResult",
    "literal", "pattern",

    "Delay", "FnParser", "MemoParser", "Parser", "alternative", "and_then",
    "fmap", "keep_first", "keep_last", "memoize", "replace", "sequence"
)

__version__ = "0.1.0"
