import pyperf

from tests.parsers.lists import make

DATA = "[" + ", ".join("[{0}, [{0}, {0}]]".format(n) for n in range(200)) + "]"


def plain(parser):
    return parser


runner = pyperf.Runner()
runner.bench_func("lists_memo", lambda: make()(DATA))
runner.bench_func("lists_plain", lambda: make(memoize=plain)(DATA))
