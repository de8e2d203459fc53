# Pendraw
# Copyright 2025 - Ricardo Quesada

"""Value types shared by the path model and the drawing surface."""

from dataclasses import dataclass, field
from enum import StrEnum


@dataclass
class Point:
    """A mutable point in 2D space.

    Points are copied whenever they cross into or out of a Path or a Segment,
    so mutating a Point you own never changes somebody else's state.
    """

    x: float
    y: float

    def copy(self) -> "Point":
        return Point(self.x, self.y)


PointLike = Point | tuple[float, float]


def copy_point(point: PointLike) -> Point:
    """Returns a new Point with the coordinates of `point`.

    Accepts a Point or an (x, y) tuple.
    """
    if isinstance(point, tuple):
        x, y = point
        return Point(x, y)
    return Point(point.x, point.y)


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass
class Dimensions:
    width: float
    height: float


@dataclass(frozen=True)
class BySize:
    """Draw an image with an explicit size in pixels."""

    width: float
    height: float


@dataclass(frozen=True)
class ByScale:
    """Draw an image scaled by a factor. `y` defaults to `x`."""

    x: float
    y: float | None = None

    @property
    def y_factor(self) -> float:
        return self.x if self.y is None else self.y


ImageSize = BySize | ByScale


class LineCap(StrEnum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(StrEnum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


@dataclass(frozen=True)
class Dash:
    # Lengths in pixels: dash, gap, dash, gap...
    pattern: tuple[float, ...] = ()
    offset: float = 0.0


@dataclass(frozen=True)
class LineStyle:
    width: float = 1.0
    cap: LineCap = LineCap.BUTT
    join: LineJoin = LineJoin.MITER
    dash: Dash = field(default_factory=Dash)


class TextAlign(StrEnum):
    START = "start"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class TextBaseline(StrEnum):
    ALPHABETIC = "alphabetic"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class TextStyle:
    # CSS-like font: "[bold] [italic] <size>px <family>"
    font: str
    align: TextAlign = TextAlign.START
    baseline: TextBaseline = TextBaseline.ALPHABETIC
    color: object = None
    letter_spacing: float = 0.0
    word_spacing: float = 0.0


@dataclass(frozen=True)
class Shadow:
    color: object = "transparent"
    blur: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0


@dataclass(frozen=True)
class ColorStop:
    offset: float
    color: object


class DrawingType(StrEnum):
    FILLED = "filled"
    OUTLINE = "outline"


class Repetition(StrEnum):
    REPEAT = "repeat"
    REPEAT_X = "repeat-x"
    REPEAT_Y = "repeat-y"
    NO_REPEAT = "no-repeat"


DEFAULT_LINE_STYLE = LineStyle(width=1.0, cap=LineCap.BUTT, join=LineJoin.MITER, dash=Dash())

DEFAULT_SHADOW = Shadow(color="transparent", blur=0.0, offset_x=0.0, offset_y=0.0)
