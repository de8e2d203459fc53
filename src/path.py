# Pendraw
# Copyright 2025 - Ricardo Quesada

import functools
import typing
from typing import Self

from clone_utils import clone_all
from errors import PathError
from properties import PointLike, copy_point
from segment import Segment, SegmentType


_MISSING = object()

Predicate = typing.Callable[[Segment, int, list[Segment]], typing.Any]


class Path:
    """
    An ordered, owned sequence of Segments plus the cursor state.

    `start` is where the path begins, `end` is the current cursor (where the
    next segment will originate) and `closed` tells whether the path should be
    rendered as a closed contour.

    The segment list is never exposed. `segments` returns an independent deep
    copy on every read, while `at()`, indexing, iteration and the callbacks
    hand out the stored Segment objects: mutating one of those is reflected in
    the path.
    """

    def __init__(self, start: PointLike):
        self.start = copy_point(start)
        self.end = copy_point(start)
        self.closed = False
        self._segments: list[Segment] = []

    @classmethod
    def from_segments(cls, *segments: Segment, closed: bool = False) -> Self:
        """Creates a new Path from deep copies of the given segments."""
        if not segments:
            raise PathError("Cannot create a path without segments.")
        path = cls(segments[0].start)
        path._segments = clone_all(segments)
        path.end = copy_point(segments[-1].end)
        path.closed = closed
        return path

    #
    # Cursor operations
    #
    def move_to(self, point: PointLike) -> Self:
        """Moves the cursor to `point` without drawing, starting a new sub-path."""
        self._append(Segment(SegmentType.LINE, self.end, point, drawn=False))
        return self

    def line_to(self, point: PointLike) -> Self:
        """Draws a line from the cursor to `point`."""
        self._append(Segment(SegmentType.LINE, self.end, point, drawn=True))
        return self

    def quadratic_to(self, point: PointLike, cp: PointLike) -> Self:
        """Draws a quadratic curve from the cursor to `point`."""
        self._append(Segment(SegmentType.QUADRATIC, self.end, point, cp))
        return self

    def bezier_to(self, point: PointLike, cp1: PointLike, cp2: PointLike) -> Self:
        """Draws a bezier curve from the cursor to `point`."""
        self._append(Segment(SegmentType.BEZIER, self.end, point, cp1, cp2))
        return self

    def close(self) -> Self:
        self.closed = True
        return self

    def open(self) -> Self:
        self.closed = False
        return self

    def _append(self, segment: Segment) -> None:
        self._segments.append(segment)
        self.end = segment.end.copy()

    #
    # Mutating operations
    #
    def clear(self) -> Self:
        self._segments = []
        self.end = self.start.copy()
        return self

    def clone(self) -> Self:
        """Returns a deep copy of the path. The copy shares no state with this one."""
        path = type(self)(self.start)
        path.end = self.end.copy()
        path.closed = self.closed
        path._segments = clone_all(self._segments)
        return path

    def push(self, *segments: Segment) -> int:
        """Appends segments to the end of the path and returns the new length."""
        if segments:
            self._segments.extend(segments)
            self.end = segments[-1].end.copy()
        return len(self._segments)

    def pop(self) -> Segment | None:
        """
        Removes the last segment and returns it. The cursor goes back to where
        the removed segment started. Returns None if the path is empty.
        """
        if not self._segments:
            return None
        popped = self._segments.pop()
        self.end = popped.start.copy()
        return popped

    def shift(self) -> Segment | None:
        """Removes the first segment and returns it, or None if the path is empty.

        `start` is left untouched.
        """
        if not self._segments:
            return None
        return self._segments.pop(0)

    def unshift(self, *segments: Segment) -> int:
        """Inserts segments at the beginning of the path and returns the new length."""
        self._segments[0:0] = segments
        return len(self._segments)

    def splice(self, start: int, delete_count: int | None = None, *items: Segment) -> list[Segment]:
        """
        Removes segments from the path and, if given, inserts new segments in
        their place.

        Args:
            start: The zero-based index where to start removing segments. A
                negative index counts back from the end.
            delete_count: The number of segments to remove. If omitted, every
                segment from `start` to the end is removed.
            items: Segments to insert in place of the deleted ones.

        Returns:
            The removed segments.
        """
        length = len(self._segments)
        if start < 0:
            start = max(length + start, 0)
        else:
            start = min(start, length)
        if delete_count is None:
            delete_count = length - start
        delete_count = max(0, min(delete_count, length - start))

        removed = self._segments[start : start + delete_count]
        self._segments[start : start + delete_count] = items
        return removed

    def reverse(self) -> Self:
        """
        Reverses the path in place: the segment order, the direction of every
        segment and the path's own start and end.
        """
        self.start, self.end = self.end.copy(), self.start.copy()
        self._segments.reverse()
        for segment in self._segments:
            segment.reverse()
        return self

    def sort(
        self,
        compare: typing.Callable[[Segment, Segment], int] | None = None,
        *,
        key: typing.Callable[[Segment], typing.Any] | None = None,
    ) -> Self:
        """
        Sorts the segments in place. Segment geometry is not modified.

        Args:
            compare: Returns a negative value if the first segment goes first,
                zero if both are equal and a positive value otherwise.
            key: Alternative to `compare`. If neither is given the segments are
                sorted by their description.
        """
        self._segments.sort(key=_sort_key(compare, key))
        return self

    #
    # Non-mutating operations
    #
    def concat(self, *items: "Path | Segment | typing.Iterable[Segment]") -> "Path":
        """
        Returns a new path with the segments of this path followed by the
        segments of each item. Items can be paths, segments or iterables of
        segments. Every segment is copied.
        """
        segments = list(self._segments)
        for item in items:
            if isinstance(item, Path):
                segments.extend(item._segments)
            elif isinstance(item, Segment):
                segments.append(item)
            else:
                segments.extend(item)

        path = type(self)(self.start)
        path.closed = self.closed
        path.push(*clone_all(segments))
        return path

    def slice(self, start: int | None = None, end: int | None = None) -> list[Segment]:
        """Returns a shallow copy of a portion of the path. Negative indices count from the end."""
        return self._segments[start:end]

    def to_reversed(self) -> "Path":
        return self.clone().reverse()

    def to_sorted(
        self,
        compare: typing.Callable[[Segment, Segment], int] | None = None,
        *,
        key: typing.Callable[[Segment], typing.Any] | None = None,
    ) -> "Path":
        return self.clone().sort(compare, key=key)

    def to_spliced(self, start: int, delete_count: int | None = None, *items: Segment) -> "Path":
        path = self.clone()
        path.splice(start, delete_count, *items)
        return path

    def with_segment(self, index: int, segment: Segment) -> "Path":
        """
        Returns a copy of the path with the segment at `index` replaced.
        A negative index counts back from the end.

        Raises:
            IndexError: if `index` is out of range.
        """
        length = len(self._segments)
        if not -length <= index < length:
            raise IndexError(f"Segment index {index} out of range for path of length {length}")
        path = self.clone()
        path._segments[index] = segment
        return path

    #
    # Queries
    #
    @property
    def segments(self) -> list[Segment]:
        """A deep copy of the segments. Changes to it never affect the path."""
        return clone_all(self._segments)

    def at(self, index: int) -> Segment | None:
        """Returns the segment at `index`, or None. A negative index counts back from the end."""
        try:
            return self._segments[index]
        except IndexError:
            return None

    def index_of(self, segment: Segment, from_index: int = 0) -> int:
        """Returns the index of the first occurrence of `segment` (by identity), or -1."""
        length = len(self._segments)
        if from_index < 0:
            from_index = max(length + from_index, 0)
        for i in range(from_index, length):
            if self._segments[i] is segment:
                return i
        return -1

    def last_index_of(self, segment: Segment, from_index: int | None = None) -> int:
        """Returns the index of the last occurrence of `segment` (by identity), or -1."""
        length = len(self._segments)
        if from_index is None:
            from_index = length - 1
        elif from_index < 0:
            from_index = length + from_index
        for i in range(min(from_index, length - 1), -1, -1):
            if self._segments[i] is segment:
                return i
        return -1

    def includes(self, segment: Segment, from_index: int = 0) -> bool:
        return self.index_of(segment, from_index) != -1

    def find(self, predicate: Predicate) -> Segment | None:
        index = self.find_index(predicate)
        return None if index == -1 else self._segments[index]

    def find_index(self, predicate: Predicate) -> int:
        snapshot = list(self._segments)
        for i, segment in enumerate(snapshot):
            if predicate(segment, i, snapshot):
                return i
        return -1

    def find_last(self, predicate: Predicate) -> Segment | None:
        index = self.find_last_index(predicate)
        return None if index == -1 else self._segments[index]

    def find_last_index(self, predicate: Predicate) -> int:
        snapshot = list(self._segments)
        for i in range(len(snapshot) - 1, -1, -1):
            if predicate(snapshot[i], i, snapshot):
                return i
        return -1

    def filter(self, predicate: Predicate) -> list[Segment]:
        snapshot = list(self._segments)
        return [s for i, s in enumerate(snapshot) if predicate(s, i, snapshot)]

    def map(self, callback: Predicate) -> list:
        snapshot = list(self._segments)
        return [callback(s, i, snapshot) for i, s in enumerate(snapshot)]

    def every(self, predicate: Predicate) -> bool:
        snapshot = list(self._segments)
        return all(predicate(s, i, snapshot) for i, s in enumerate(snapshot))

    def some(self, predicate: Predicate) -> bool:
        snapshot = list(self._segments)
        return any(predicate(s, i, snapshot) for i, s in enumerate(snapshot))

    def for_each(self, callback: Predicate) -> Self:
        snapshot = list(self._segments)
        for i, segment in enumerate(snapshot):
            callback(segment, i, snapshot)
        return self

    def reduce(self, callback: typing.Callable, initial=_MISSING):
        """
        Reduces the segments to a single value. `callback` receives
        (accumulator, segment, index, segments).

        Raises:
            TypeError: if the path is empty and no initial value is given.
        """
        snapshot = list(self._segments)
        indices = range(len(snapshot))
        if initial is _MISSING:
            if not snapshot:
                raise TypeError("reduce() of empty path with no initial value")
            acc = snapshot[0]
            indices = range(1, len(snapshot))
        else:
            acc = initial
        for i in indices:
            acc = callback(acc, snapshot[i], i, snapshot)
        return acc

    def entries(self) -> typing.Iterator[tuple[int, Segment]]:
        return enumerate(list(self._segments))

    def keys(self) -> typing.Iterator[int]:
        return iter(range(len(self._segments)))

    def values(self) -> typing.Iterator[Segment]:
        return iter(list(self._segments))

    #
    # Python protocols
    #
    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> typing.Iterator[Segment]:
        return self.values()

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    def __contains__(self, segment) -> bool:
        return self.includes(segment)

    def __repr__(self):
        return (
            f"Path(start={self.start!r}, end={self.end!r}, closed={self.closed!r}, "
            f"segments={len(self._segments)})"
        )

    def __str__(self):
        count = len(self._segments)
        lines = [f"Path with {count} segment{'' if count == 1 else 's'}:"]
        lines.extend(f"{i + 1}. {segment}" for i, segment in enumerate(self._segments))
        return "\n".join(lines)


def _sort_key(compare, key):
    if compare is not None and key is not None:
        raise ValueError("Pass either compare or key, not both")
    if compare is not None:
        return functools.cmp_to_key(compare)
    if key is not None:
        return key
    return str
