# Pendraw
# Copyright 2025 - Ricardo Quesada

from enum import StrEnum
from typing import Self

from errors import PathError
from properties import Point, PointLike, copy_point


class SegmentType(StrEnum):
    LINE = "line"
    QUADRATIC = "quadratic"
    BEZIER = "bezier"


def _fmt(point: Point | None) -> str:
    if point is None:
        return "(missing)"
    return f"({point.x}, {point.y})"


def _point_to_dict(point: Point) -> dict:
    return {"x": point.x, "y": point.y}


def _point_from_dict(d) -> Point | None:
    if d is None:
        return None
    if isinstance(d, dict):
        return Point(d["x"], d["y"])
    return copy_point(d)


class Segment:
    """
    A single step of a Path: a straight line, a quadratic curve or a cubic
    (bezier) curve.

    A line with `drawn` set to False is a pen lift: it moves the cursor to
    `end` without drawing, and is how several sub-paths live in one Path.

    Construction is permissive. A quadratic segment without `cp1`, or a
    bezier without `cp1`/`cp2`, can be built; it fails when it gets
    translated into draw instructions.
    """

    __hash__ = None

    def __init__(
        self,
        type: SegmentType | str,
        start: PointLike,
        end: PointLike,
        cp1: PointLike | None = None,
        cp2: PointLike | None = None,
        drawn: bool = True,
    ):
        self.type = type
        self.start = copy_point(start)
        self.end = copy_point(end)
        self.cp1 = None if cp1 is None else copy_point(cp1)
        self.cp2 = None if cp2 is None else copy_point(cp2)
        self.drawn = drawn

    @classmethod
    def from_dict(cls, d: dict) -> Self:
        """Creates a Segment from a descriptor like the one returned by to_dict().

        Only the "type" tag is validated.
        """
        typ = d.get("type")
        if typ == SegmentType.LINE:
            return cls(
                SegmentType.LINE,
                _point_from_dict(d["start"]),
                _point_from_dict(d["end"]),
                drawn=d.get("drawn", True),
            )
        if typ == SegmentType.QUADRATIC:
            return cls(
                SegmentType.QUADRATIC,
                _point_from_dict(d["start"]),
                _point_from_dict(d["end"]),
                _point_from_dict(d.get("cp1")),
            )
        if typ == SegmentType.BEZIER:
            return cls(
                SegmentType.BEZIER,
                _point_from_dict(d["start"]),
                _point_from_dict(d["end"]),
                _point_from_dict(d.get("cp1")),
                _point_from_dict(d.get("cp2")),
            )
        raise PathError("Invalid segment type.", d)

    def to_dict(self) -> dict:
        """Returns a dictionary that represents the Segment"""
        d = {
            "type": str(self.type),
            "start": _point_to_dict(self.start),
            "end": _point_to_dict(self.end),
        }
        if self.cp1 is not None:
            d["cp1"] = _point_to_dict(self.cp1)
        if self.cp2 is not None:
            d["cp2"] = _point_to_dict(self.cp2)
        d["drawn"] = self.drawn
        return d

    def copy(self) -> Self:
        return type(self)(self.type, self.start, self.end, self.cp1, self.cp2, self.drawn)

    def reverse(self) -> Self:
        """Reverses the segment in place, so it traces the same geometry backwards."""
        self.start, self.end = self.end.copy(), self.start.copy()
        if self.type == SegmentType.BEZIER:
            self.cp1, self.cp2 = self.cp2, self.cp1
        return self

    def reversed(self) -> Self:
        """Returns a reversed copy of the segment."""
        return self.copy().reverse()

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (
            self.type == other.type
            and self.start == other.start
            and self.end == other.end
            and self.cp1 == other.cp1
            and self.cp2 == other.cp2
            and self.drawn == other.drawn
        )

    def __repr__(self):
        return (
            f"Segment(type={self.type!r}, start={self.start!r}, end={self.end!r}, "
            f"cp1={self.cp1!r}, cp2={self.cp2!r}, drawn={self.drawn!r})"
        )

    def __str__(self):
        match self.type:
            case SegmentType.LINE:
                if self.drawn:
                    return f"Line from {_fmt(self.start)} to {_fmt(self.end)}"
                return f"Starting new sub-path at {_fmt(self.end)}"
            case SegmentType.QUADRATIC:
                return (
                    f"Quadratic curve from {_fmt(self.start)} to {_fmt(self.end)} "
                    f"with control point {_fmt(self.cp1)}"
                )
            case SegmentType.BEZIER:
                return (
                    f"Bezier curve from {_fmt(self.start)} to {_fmt(self.end)} "
                    f"with control points {_fmt(self.cp1)} and {_fmt(self.cp2)}"
                )
            case _:
                return "Unknown segment"
