# Pendraw
# Copyright 2025 - Ricardo Quesada

"""Turns a Path into the primitive draw calls of a drawing target."""

import logging
import typing
from dataclasses import dataclass
from enum import StrEnum

from PySide6.QtGui import QPainterPath

from errors import PathError
from path import Path
from properties import Point
from segment import SegmentType

logger = logging.getLogger(__name__)


class DrawOp(StrEnum):
    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    QUAD_TO = "quad_to"
    CUBIC_TO = "cubic_to"
    CLOSE = "close"


Coord = tuple[float, float]


@dataclass(frozen=True)
class DrawInstruction:
    """
    One primitive draw call.

    `to` is the destination of the call (None for CLOSE) and `controls` the
    curve control points, in drawing order.
    """

    op: DrawOp
    to: Coord | None = None
    controls: tuple[Coord, ...] = ()

    def __str__(self):
        if self.op == DrawOp.CLOSE:
            return "close()"
        to = f"{self.to[0]}, {self.to[1]}"
        if not self.controls:
            return f"{self.op}({to})"
        via = ", ".join(f"{x}, {y}" for x, y in self.controls)
        return f"{self.op}({to} via {via})"


class DrawTarget(typing.Protocol):
    """Anything that speaks the QPainterPath drawing vocabulary."""

    def moveTo(self, x: float, y: float) -> None: ...

    def lineTo(self, x: float, y: float) -> None: ...

    def quadTo(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def cubicTo(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def closeSubpath(self) -> None: ...


def _coord(point: Point) -> Coord:
    return (float(point.x), float(point.y))


def translate_path(path: Path) -> list[DrawInstruction]:
    """
    Translates a path into an ordered list of draw instructions.

    Translation starts with a move to the path's start, emits one instruction
    per segment and ends with CLOSE when the path is closed. The path is not
    modified.

    Raises:
        PathError: on the first curve missing a control point, or segment of
            unknown type. The error carries the segment and its index.
    """
    instructions = [DrawInstruction(DrawOp.MOVE_TO, _coord(path.start))]

    for segment in path:
        match segment.type:
            case SegmentType.LINE:
                op = DrawOp.LINE_TO if segment.drawn else DrawOp.MOVE_TO
                instructions.append(DrawInstruction(op, _coord(segment.end)))
            case SegmentType.QUADRATIC:
                if segment.cp1 is None:
                    raise PathError("Missing control point in quadratic segment.", segment, path)
                instructions.append(
                    DrawInstruction(DrawOp.QUAD_TO, _coord(segment.end), (_coord(segment.cp1),))
                )
            case SegmentType.BEZIER:
                if segment.cp1 is None or segment.cp2 is None:
                    raise PathError("Missing control points in bezier segment.", segment, path)
                instructions.append(
                    DrawInstruction(
                        DrawOp.CUBIC_TO,
                        _coord(segment.end),
                        (_coord(segment.cp1), _coord(segment.cp2)),
                    )
                )
            case _:
                raise PathError("Unknown segment type.", segment, path)

    if path.closed:
        instructions.append(DrawInstruction(DrawOp.CLOSE))

    logger.debug(f"Translated path with {len(path)} segments into {len(instructions)} calls")
    return instructions


def replay(instructions: typing.Iterable[DrawInstruction], target: DrawTarget) -> DrawTarget:
    """Replays the instructions, in order, on `target`. Returns `target`."""
    for instruction in instructions:
        match instruction.op:
            case DrawOp.MOVE_TO:
                target.moveTo(*instruction.to)
            case DrawOp.LINE_TO:
                target.lineTo(*instruction.to)
            case DrawOp.QUAD_TO:
                (cp,) = instruction.controls
                target.quadTo(*cp, *instruction.to)
            case DrawOp.CUBIC_TO:
                cp1, cp2 = instruction.controls
                target.cubicTo(*cp1, *cp2, *instruction.to)
            case DrawOp.CLOSE:
                target.closeSubpath()
    return target


def to_qpainter_path(path: Path) -> QPainterPath:
    """
    Returns a QPainterPath that draws `path`.

    The whole path is translated before the QPainterPath is built, so a
    malformed path raises PathError without producing a partial result.
    """
    instructions = translate_path(path)
    return replay(instructions, QPainterPath())
