"""
Collectors: reusable mutable-accumulation folds for Stream.collect().

A collector is the four-function tuple (supplier, accumulator, combiner,
finisher). The supplier makes a fresh container, the accumulator folds one
element into it, the combiner merges two containers and returns the result,
and the finisher turns the container into the value handed back to the
caller. Streams evaluate sequentially, so the combiner is only called when
two partial results are merged explicitly, but every collector here ships a
working one.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from errors import DuplicateKeyError

logger = logging.getLogger(__name__)


def _identity(container):
    return container


class Collector:
    """A {supplier, accumulator, combiner, finisher} fold."""

    def __init__(
        self,
        supplier: Callable[[], Any],
        accumulator: Callable[[Any, Any], None],
        combiner: Callable[[Any, Any], Any],
        finisher: Optional[Callable[[Any], Any]] = None,
    ):
        self.supplier = supplier
        self.accumulator = accumulator
        self.combiner = combiner
        self.finisher = finisher or _identity

    @classmethod
    def of(cls, supplier, accumulator, combiner, finisher=None) -> "Collector":
        return cls(supplier, accumulator, combiner, finisher)

    def collect_from(self, items: Iterable[Any]) -> Any:
        """Fold every item into a fresh container and finish it"""
        container = self.supplier()
        for item in items:
            self.accumulator(container, item)
        return self.finisher(container)

    def __repr__(self):
        return (
            f"Collector(supplier={self.supplier!r}, accumulator={self.accumulator!r}, "
            f"combiner={self.combiner!r}, finisher={self.finisher!r})"
        )


class SummaryStatistics:
    """Count, sum, min, max and average of numeric values, gathered in one pass."""

    def __init__(self):
        self.count = 0
        self.sum = 0
        self.min = None
        self.max = None

    def accept(self, value) -> None:
        self.count += 1
        self.sum += value
        if self.min is None or value < self.min:
            self.min = value
        if self.max is None or value > self.max:
            self.max = value

    def combine(self, other: "SummaryStatistics") -> "SummaryStatistics":
        if other.count:
            self.count += other.count
            self.sum += other.sum
            self.min = other.min if self.min is None else min(self.min, other.min)
            self.max = other.max if self.max is None else max(self.max, other.max)
        return self

    @property
    def average(self) -> float:
        return self.sum / self.count if self.count else 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "sum": self.sum,
            "min": self.min,
            "max": self.max,
            "average": self.average,
        }

    def __eq__(self, other):
        if not isinstance(other, SummaryStatistics):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return (
            f"{type(self).__name__}{{count={self.count}, sum={self.sum}, "
            f"min={self.min}, average={self.average:f}, max={self.max}}}"
        )


class StringJoiner:
    """
    Builds "prefix + a + sep + b + ... + suffix" incrementally.

    An empty joiner renders as prefix + suffix unless an explicit empty
    value was set.
    """

    def __init__(self, separator: str = "", prefix: str = "", suffix: str = ""):
        self.separator = separator
        self.prefix = prefix
        self.suffix = suffix
        self._parts: List[str] = []
        self._empty_value: Optional[str] = None

    def set_empty_value(self, value: str) -> "StringJoiner":
        self._empty_value = value
        return self

    def add(self, part) -> "StringJoiner":
        self._parts.append(str(part))
        return self

    def merge(self, other: "StringJoiner") -> "StringJoiner":
        """Append other's content (without its prefix/suffix) as a single part"""
        if other._parts:
            self._parts.append(other.separator.join(other._parts))
        return self

    def __len__(self):
        return len(str(self))

    def __str__(self):
        if not self._parts and self._empty_value is not None:
            return self._empty_value
        return f"{self.prefix}{self.separator.join(self._parts)}{self.suffix}"

    def __repr__(self):
        return f"StringJoiner({str(self)!r})"


# --------- stock collectors ----------

def to_list() -> Collector:
    def combine(left, right):
        left.extend(right)
        return left

    return Collector(list, list.append, combine)


def counting() -> Collector:
    def accumulate(box, _item):
        box[0] += 1

    return Collector(
        lambda: [0],
        accumulate,
        lambda a, b: [a[0] + b[0]],
        lambda box: box[0],
    )


def summing(fn: Callable[[Any], Any] = _identity) -> Collector:
    def accumulate(box, item):
        box[0] += fn(item)

    return Collector(
        lambda: [0],
        accumulate,
        lambda a, b: [a[0] + b[0]],
        lambda box: box[0],
    )


def averaging(fn: Callable[[Any], Any] = _identity) -> Collector:
    """Arithmetic mean as a float; 0.0 when nothing was collected."""
    def accumulate(box, item):
        box[0] += 1
        box[1] += fn(item)

    def finish(box):
        count, total = box
        return total / count if count else 0.0

    return Collector(
        lambda: [0, 0],
        accumulate,
        lambda a, b: [a[0] + b[0], a[1] + b[1]],
        finish,
    )


def summarizing(fn: Callable[[Any], Any] = _identity) -> Collector:
    return Collector(
        SummaryStatistics,
        lambda stats, item: stats.accept(fn(item)),
        SummaryStatistics.combine,
    )


def joining(separator: str = "", prefix: str = "", suffix: str = "") -> Collector:
    return Collector(
        lambda: StringJoiner(separator, prefix, suffix),
        StringJoiner.add,
        StringJoiner.merge,
        str,
    )


def mapping(fn: Callable[[Any], Any], downstream: Collector) -> Collector:
    """Apply fn to each element before handing it to downstream"""
    return Collector(
        downstream.supplier,
        lambda container, item: downstream.accumulator(container, fn(item)),
        downstream.combiner,
        downstream.finisher,
    )


def grouping_by(key_fn: Callable[[Any], Any], downstream: Optional[Collector] = None) -> Collector:
    """
    Group elements by key_fn(element).

    Keys keep first-seen order; each group is folded by downstream
    (a list of members in source order by default).
    """
    downstream = downstream or to_list()

    def accumulate(groups, item):
        key = key_fn(item)
        if key not in groups:
            groups[key] = downstream.supplier()
        downstream.accumulator(groups[key], item)

    def combine(left, right):
        for key, container in right.items():
            if key in left:
                left[key] = downstream.combiner(left[key], container)
            else:
                left[key] = container
        return left

    def finish(groups):
        return {key: downstream.finisher(container) for key, container in groups.items()}

    return Collector(dict, accumulate, combine, finish)


def to_map(
    key_fn: Callable[[Any], Any],
    value_fn: Callable[[Any], Any],
    merge_fn: Optional[Callable[[Any, Any], Any]] = None,
) -> Collector:
    """
    Build a dict of key_fn(element) -> value_fn(element).

    On a key collision the stored value becomes merge_fn(existing, new);
    without merge_fn the collision raises DuplicateKeyError.
    """
    def put(target, key, value):
        if key in target:
            if merge_fn is None:
                raise DuplicateKeyError(key, target[key], value)
            logger.debug(f"Merging values for duplicate key {key!r}")
            target[key] = merge_fn(target[key], value)
        else:
            target[key] = value

    def accumulate(target, item):
        put(target, key_fn(item), value_fn(item))

    def combine(left, right):
        for key, value in right.items():
            put(left, key, value)
        return left

    return Collector(dict, accumulate, combine)
