import functools
import numbers
from typing import Any, Callable, Iterator, Optional

from lazyrange.exceptions import EmptyReductionError, InvalidStep
from lazyrange.settings import get_global_settings
from lazyrange.utils import adapt_callback, as_int, ceil_div, clamp_index, integral_value
from lazyrange.warnings import LargeMaterialization, range_warn

_MISSING = object()


def _compute_length(start: int, stop: int, step: int) -> int:
    # empty when stop is already behind start in the direction of travel
    if (step > 0 and stop < start) or (step < 0 and start < stop):
        return 0
    return ceil_div(abs(start - stop), abs(step))


class Range:
    """
    An immutable arithmetic progression, evaluated lazily.

    ``Range(stop)``, ``Range(start, stop)`` and ``Range(start, stop, step)``
    mirror the builtin ``range``. Length, indexing, slicing, reversal,
    equality and hashing are all computed from the three integers in
    constant time; only the bulk operations that return a list walk the
    values.
    """

    __slots__ = ("_start", "_stop", "_step", "_length")

    def __init__(self, *args):
        match len(args):
            case 1:
                start, stop, step = 0, args[0], 1
            case 2:
                start, stop, step = args[0], args[1], 1
            case 3:
                start, stop, step = args
            case n:
                raise TypeError(f"Range expected 1 to 3 arguments, got {n}")

        step = as_int(step, "step")
        if step == 0:
            raise InvalidStep()

        self._start = as_int(start, "start")
        self._stop = as_int(stop, "stop")
        self._step = step
        self._length = _compute_length(self._start, self._stop, step)

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def step(self) -> int:
        return self._step

    @property
    def length(self) -> int:
        return self._length

    def __len__(self):
        return self._length

    def __str__(self):
        return f"range({self._start}, {self._stop}, {self._step})"

    def __repr__(self):
        return f"Range({self._start}, {self._stop}, {self._step})"

    # value at a resolved, in-bounds, non-negative index
    def _value(self, index: int) -> int:
        return self._start + self._step * index

    def at(self, index: int) -> Optional[int]:
        """
        Return the value at ``index``, or None when it is out of bounds.

        Negative indices count from the end, ``-1`` being the last value.
        """
        index = as_int(index, "index")
        if index < -self._length or index >= self._length:
            return None
        if index < 0:
            index += self._length
        return self._value(index)

    def __getitem__(self, key):
        if isinstance(key, slice):
            lo, hi, stride = key.indices(self._length)
            return Range(self._value(lo), self._value(hi), self._step * stride)

        index = integral_value(key)
        if index is None and not isinstance(key, numbers.Number):
            msg = f"range indices must be numbers or slices, not {type(key).__name__!r}"
            raise TypeError(msg)
        if index is not None and 0 <= index < self._length:
            return self._value(index)
        return None

    def slice(self, start: Optional[int] = None, stop: Optional[int] = None) -> "Range":
        """
        Return the values between two indices as a new range, without
        walking them.

        Arguments
        ---------
        start : int, optional
            First index to keep. Defaults to 0.
        stop : int, optional
            Index to stop before. Defaults to the length of this range.

        Negative bounds count from the end. Bounds outside the range are
        clamped, and a start at or past the stop gives an empty range.
        """
        lo = clamp_index(start, self._length, 0)
        hi = clamp_index(stop, self._length, self._length)
        hi = max(lo, hi)
        return Range(self._value(lo), self._value(hi), self._step)

    def to_reversed(self) -> "Range":
        """
        Return a range producing the same values in the opposite order.
        """
        if self._length == 0:
            return Range(self._start, self._start, -self._step)
        last = self._value(self._length - 1)
        return Range(last, self._start - self._step, -self._step)

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        if self._length == 0 or other._length == 0:
            return self._length == other._length
        return (
            self.at(0) == other.at(0)
            and self.at(-1) == other.at(-1)
            and self._step == other._step
        )

    def __hash__(self):
        if self._length == 0:
            return hash((None, None, None))
        return hash((self.at(0), self.at(-1), self._step))

    def __iter__(self) -> "RangeIterator":
        return RangeIterator(self)

    def __reversed__(self) -> "RangeIterator":
        return RangeIterator(self.to_reversed())

    # O(1) lookups

    def _locate(self, value: Any) -> Optional[int]:
        # index of `value`, or None if the range never produces it. anything
        # comparing equal to a produced int matches, as it would in a list
        value = integral_value(value)
        if value is None:
            return None

        quotient, remainder = divmod(value - self._start, self._step)
        if remainder != 0 or not 0 <= quotient < self._length:
            return None
        return quotient

    def __contains__(self, value):
        return self._locate(value) is not None

    def includes(self, value: Any, from_index: int = 0) -> bool:
        return self.index_of(value, from_index) != -1

    def index_of(self, value: Any, from_index: int = 0) -> int:
        """
        Return the first index of ``value`` at or after ``from_index``, or -1.
        """
        lo = clamp_index(from_index, self._length, 0)
        index = self._locate(value)
        if index is None or index < lo:
            return -1
        return index

    def last_index_of(self, value: Any, from_index: Optional[int] = None) -> int:
        """
        Return the last index of ``value`` at or before ``from_index``, or -1.
        """
        if from_index is None:
            hi = self._length - 1
        else:
            from_index = as_int(from_index, "from_index")
            if from_index >= 0:
                hi = min(from_index, self._length - 1)
            else:
                hi = self._length + from_index
        index = self._locate(value)
        if index is None or index > hi:
            return -1
        return index

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        lo = clamp_index(start, self._length, 0)
        hi = clamp_index(stop, self._length, self._length)
        index = self._locate(value)
        if index is None or not lo <= index < hi:
            raise ValueError(f"{value!r} is not in range")
        return index

    def count(self, value: Any) -> int:
        # a value occurs at most once
        return int(value in self)

    # iteration helpers

    def entries(self) -> Iterator[tuple[int, int]]:
        return enumerate(self)

    def keys(self) -> Iterator[int]:
        return iter(range(self._length))

    def values(self) -> Iterator[int]:
        return iter(self)

    # callback-driven operations. callbacks are called as
    # fn(value, index, range), reducers as fn(accumulator, value, index, range)

    def _check_materialize(self, operation: str) -> None:
        limit = get_global_settings().get_materialize_limit()
        if limit and self._length > limit:
            # range_warn <- _check_materialize <- public method <- user code
            range_warn(LargeMaterialization(operation, self._length, limit), self, stacklevel=3)

    def for_each(self, fn: Callable) -> None:
        fn = adapt_callback(fn, 1)
        for i, value in enumerate(self):
            fn(value, i, self)

    def every(self, fn: Callable) -> bool:
        fn = adapt_callback(fn, 1)
        return all(fn(value, i, self) for i, value in enumerate(self))

    def some(self, fn: Callable) -> bool:
        fn = adapt_callback(fn, 1)
        return any(fn(value, i, self) for i, value in enumerate(self))

    def map(self, fn: Callable) -> list:
        fn = adapt_callback(fn, 1)
        self._check_materialize("map")
        return [fn(value, i, self) for i, value in enumerate(self)]

    def filter(self, fn: Callable) -> list[int]:
        fn = adapt_callback(fn, 1)
        self._check_materialize("filter")
        return [value for i, value in enumerate(self) if fn(value, i, self)]

    def flat_map(self, fn: Callable) -> list:
        """
        Map each value and flatten the results one level.

        Only lists, tuples and ranges are flattened; any other result,
        strings included, is kept as a single item.
        """
        fn = adapt_callback(fn, 1)
        self._check_materialize("flat_map")
        ret: list = []
        for i, value in enumerate(self):
            item = fn(value, i, self)
            if isinstance(item, (list, tuple, Range)):
                ret.extend(item)
            else:
                ret.append(item)
        return ret

    def find(self, fn: Callable) -> Optional[int]:
        index = self.find_index(fn)
        return None if index == -1 else self._value(index)

    def find_last(self, fn: Callable) -> Optional[int]:
        index = self.find_last_index(fn)
        return None if index == -1 else self._value(index)

    def find_index(self, fn: Callable) -> int:
        fn = adapt_callback(fn, 1)
        for i, value in enumerate(self):
            if fn(value, i, self):
                return i
        return -1

    def find_last_index(self, fn: Callable) -> int:
        fn = adapt_callback(fn, 1)
        for i in reversed(range(self._length)):
            if fn(self._value(i), i, self):
                return i
        return -1

    def reduce(self, fn: Callable, initial: Any = _MISSING) -> Any:
        """
        Fold the values from first to last.

        Without ``initial`` the first value seeds the accumulator, and an
        empty range raises EmptyReductionError.
        """
        return self._fold(fn, initial, range(self._length))

    def reduce_right(self, fn: Callable, initial: Any = _MISSING) -> Any:
        """
        Fold the values from last to first. See ``reduce``.
        """
        return self._fold(fn, initial, reversed(range(self._length)))

    def _fold(self, fn, initial, indices):
        fn = adapt_callback(fn, 2)
        indices = iter(indices)
        if initial is _MISSING:
            first = next(indices, None)
            if first is None:
                raise EmptyReductionError()
            acc = self._value(first)
        else:
            acc = initial

        for i in indices:
            acc = fn(acc, self._value(i), i, self)
        return acc

    def join(self, separator: Optional[str] = None) -> str:
        if separator is None:
            separator = get_global_settings().get_join_separator()
        self._check_materialize("join")
        return separator.join(str(value) for value in self)

    def to_sorted(
        self,
        compare: Optional[Callable[[int, int], Any]] = None,
        *,
        key: Optional[Callable] = None,
        reverse: bool = False,
    ) -> list:
        """
        Return the values as a sorted list.

        ``compare`` is a two-argument comparator returning a negative, zero
        or positive number. ``key`` and ``reverse`` behave as in ``sorted``.
        """
        if compare is not None and key is not None:
            raise TypeError("to_sorted() accepts a comparator or a key, not both")
        self._check_materialize("to_sorted")

        if compare is None and key is None:
            # values are distinct and already ordered by the sign of step
            ascending = self if self._step > 0 else reversed(self)
            ret = list(ascending)
            if reverse:
                ret.reverse()
            return ret

        if compare is not None:
            key = functools.cmp_to_key(compare)
        return sorted(self, key=key, reverse=reverse)

    def to_spliced(
        self, start: Optional[int] = None, delete_count: Optional[int] = None, *items: Any
    ) -> list:
        """
        Return the values as a list with ``delete_count`` values removed at
        ``start`` and ``items`` inserted in their place.

        ``start`` is resolved like a slice bound. Omitting ``delete_count``
        removes everything from ``start`` on; omitting both removes nothing.
        """
        self._check_materialize("to_spliced")
        lo = clamp_index(start, self._length, 0)
        if start is None and delete_count is None:
            skip = 0
        elif delete_count is None:
            skip = self._length - lo
        else:
            delete_count = as_int(delete_count, "delete_count")
            skip = min(max(delete_count, 0), self._length - lo)
        return [*self.slice(None, lo), *items, *self.slice(lo + skip)]


class RangeIterator:
    """
    Cursor over a Range. Each call to ``iter(range)`` creates a new one.
    """

    __slots__ = ("_range", "_index")

    def __init__(self, range_: Range):
        self._range = range_
        self._index = 0

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self._index >= self._range.length:
            raise StopIteration
        value = self._range._value(self._index)
        self._index += 1
        return value

    def __length_hint__(self) -> int:
        return self._range.length - self._index
