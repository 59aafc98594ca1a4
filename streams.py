"""
Lazy, chainable streams over in-memory collections.

A Stream holds a source iterable and a list of pending ("op_name", arg)
stages. Non-terminal operations return a new Stream with one more stage and
never touch the source. Terminal operations build the generator chain, drain
it once and return a concrete value.
"""

import functools
import itertools
import logging
import operator
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

import collectors
from collectors import Collector, SummaryStatistics
from errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_MISSING = object()


def _check_non_negative(name: str, n: int) -> int:
    if isinstance(n, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {n!r}")
    try:
        n = operator.index(n)
    except TypeError:
        raise InvalidArgumentError(f"{name} must be an integer, got {n!r}") from None
    if n < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {n}")
    return n


class Stream:
    """
    A chainable, lazy sequence. Transformations are stored and applied
    only when a terminal operation iterates the pipeline.
    """
    def __init__(self, source: Iterable[Any], ops: Optional[List[tuple]] = None):
        self._source = source
        self._ops = ops or []          # sequence of ("op_name", callable/arg)

    # --------- construction ----------
    @classmethod
    def of(cls, *values) -> "Stream":
        return cls(values)

    @classmethod
    def range(cls, start: int, stop: int) -> "Stream":
        """Integers from start (inclusive) to stop (exclusive)"""
        return cls(range(start, stop))

    # --------- chainable operators (lazy) ----------
    def map(self, fn: Callable[[Any], Any]) -> "Stream":
        return self._with_op(("map", fn))

    def filter(self, pred: Callable[[Any], bool]) -> "Stream":
        return self._with_op(("filter", pred))

    def flat_map(self, fn: Callable[[Any], Iterable[Any]]) -> "Stream":
        return self._with_op(("flat_map", fn))

    def peek(self, action: Callable[[Any], None]) -> "Stream":
        """Call action on every element as it flows past"""
        return self._with_op(("peek", action))

    def distinct(self) -> "Stream":
        return self._with_op(("distinct", None))

    def sorted(self, comparator: Optional[Callable[[Any, Any], int]] = None,
               key: Optional[Callable[[Any], Any]] = None, reverse: bool = False) -> "Stream":
        """
        Stable sort by natural order, by key, or by a two-argument comparator
        returning a negative, zero or positive number.
        """
        if comparator is not None and key is not None:
            raise InvalidArgumentError("Pass either comparator or key, not both")
        if comparator is not None:
            key = functools.cmp_to_key(comparator)
        return self._with_op(("sorted", (key, reverse)))

    def skip(self, n: int) -> "Stream":
        return self._with_op(("skip", _check_non_negative("skip", n)))

    def limit(self, n: int) -> "Stream":
        return self._with_op(("limit", _check_non_negative("limit", n)))

    def slice(self, start: int, end: int) -> "Stream":
        """Elements with index in [start, end)"""
        start = _check_non_negative("slice start", start)
        end = _check_non_negative("slice end", end)
        if end < start:
            raise InvalidArgumentError(f"slice end ({end}) must be >= start ({start})")
        return self.skip(start).limit(end - start)

    # --------- forcing evaluation ----------
    def to_list(self) -> List[Any]:
        return list(self._evaluate("to_list"))

    def for_each(self, action: Callable[[Any], None]) -> None:
        for item in self._evaluate("for_each"):
            action(item)

    def find_first(self, default=None):
        """Return the first element, or default if empty"""
        for item in self._evaluate("find_first"):
            return item
        return default

    def any_match(self, pred: Callable[[Any], bool]) -> bool:
        return any(pred(x) for x in self._evaluate("any_match"))

    def all_match(self, pred: Callable[[Any], bool]) -> bool:
        return all(pred(x) for x in self._evaluate("all_match"))

    def none_match(self, pred: Callable[[Any], bool]) -> bool:
        return not any(pred(x) for x in self._evaluate("none_match"))

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, fn: Callable[[Any, Any], Any], identity=_MISSING):
        """
        Fold items left to right with fn. Without identity, an empty stream
        reduces to None.
        """
        items = self._evaluate("reduce")
        if identity is _MISSING:
            try:
                identity = next(items)
            except StopIteration:
                return None
        return functools.reduce(fn, items, identity)

    def sum(self):
        return self.collect(collectors.summing())

    def count(self) -> int:
        return self.collect(collectors.counting())

    def average(self) -> float:
        return self.collect(collectors.averaging())

    def summary_statistics(self) -> SummaryStatistics:
        return self.collect(collectors.summarizing())

    def min(self, key: Optional[Callable[[Any], Any]] = None, default=None):
        return min(self._evaluate("min"), key=key, default=default)

    def max(self, key: Optional[Callable[[Any], Any]] = None, default=None):
        return max(self._evaluate("max"), key=key, default=default)

    def group_by(self, key_fn: Callable[[Any], Any]) -> Dict[Any, List[Any]]:
        """Group elements by the result of key_fn"""
        return self.collect(collectors.grouping_by(key_fn))

    def to_map(self, key_fn: Callable[[Any], Any], value_fn: Callable[[Any], Any],
               merge_fn: Optional[Callable[[Any, Any], Any]] = None) -> Dict[Any, Any]:
        return self.collect(collectors.to_map(key_fn, value_fn, merge_fn))

    def join(self, separator: str = "", prefix: str = "", suffix: str = "") -> str:
        return self.collect(collectors.joining(separator, prefix, suffix))

    def collect(self, collector: Collector):
        return collector.collect_from(self._evaluate("collect"))

    # --------- iterator protocol ----------
    def __iter__(self) -> Iterator[Any]:
        it = iter(self._source)
        for op, arg in self._ops:
            if op == "map":
                it = map(arg, it)
            elif op == "filter":
                it = filter(arg, it)
            elif op == "flat_map":
                it = itertools.chain.from_iterable(map(arg, it))
            elif op == "peek":
                def _peek(gen, action=arg):
                    for x in gen:
                        action(x)
                        yield x
                it = _peek(it)
            elif op == "distinct":
                def _distinct(gen):
                    seen, unhashable = set(), []
                    for x in gen:
                        try:
                            if x in seen:
                                continue
                            seen.add(x)
                        except TypeError:
                            if x in unhashable:
                                continue
                            unhashable.append(x)
                        yield x
                it = _distinct(it)
            elif op == "sorted":
                def _sorted(gen, key=arg[0], reverse=arg[1]):
                    # barrier: drains upstream on first pull
                    yield from sorted(gen, key=key, reverse=reverse)
                it = _sorted(it)
            elif op == "skip":
                it = itertools.islice(it, arg, None)
            elif op == "limit":
                it = itertools.islice(it, arg)
            else:
                raise ValueError(f"Unknown op: {op}")
        return it

    def __repr__(self):
        return f"Stream(ops={[op for op, _ in self._ops]})"

    # --------- helpers ----------
    def _with_op(self, op_tuple) -> "Stream":
        return Stream(self._source, self._ops + [op_tuple])

    def _evaluate(self, terminal: str) -> Iterator[Any]:
        logger.debug(f"{terminal}: evaluating {len(self._ops)} pending op(s)")
        return iter(self)


def stream(collection: Iterable[Any]) -> Stream:
    """Wrap a collection in a Stream"""
    return Stream(collection)
