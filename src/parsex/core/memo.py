import logging
from threading import Lock
from typing import Dict, NamedTuple, Optional

from .parser import ParseFn
from .result import Result

log = logging.getLogger("parsex")


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    maxsize: Optional[int]
    currsize: int


class MemoCache:
    __slots__ = "maxsize", "_data", "_lock", "_hits", "_misses"

    def __init__(self, maxsize: Optional[int] = None):
        if maxsize is not None and maxsize < 1:
            raise ValueError("Expected positive maxsize")
        self.maxsize = maxsize
        self._data: Dict[str, Result] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def get(self, stream: str) -> Optional[Result]:
        with self._lock:
            r = self._data.get(stream)
            if r is None:
                self._misses += 1
            else:
                self._hits += 1
            return r

    def put(self, stream: str, result: Result) -> Result:
        with self._lock:
            stored = self._data.setdefault(stream, result)
            if self.maxsize is not None and len(self._data) > self.maxsize:
                evicted = next(iter(self._data))
                del self._data[evicted]
                log.debug("memo evicted %r", evicted)
            return stored

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(
                self._hits, self._misses, self.maxsize, len(self._data)
            )

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0


def memoize(parse_fn: ParseFn, cache: MemoCache) -> ParseFn:
    get = cache.get
    put = cache.put

    def memoize(stream: str) -> Result:
        r = get(stream)
        if r is not None:
            log.debug("memo hit %r", stream)
            return r
        log.debug("memo miss %r", stream)
        return put(stream, parse_fn(stream))

    return memoize
