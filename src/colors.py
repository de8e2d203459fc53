# Pendraw
# Copyright 2025 - Ricardo Quesada

import math

from coloraide import Color
from PySide6.QtGui import QBrush, QColor, QGradient

from errors import DrawingError


# A color is a CSS color string, a QColor, a gradient or a ready made brush.
ColorValue = str | QColor | QGradient | QBrush


def _channel(value: float) -> float:
    # "none" components come back as NaN
    return 0.0 if math.isnan(value) else value


def to_qcolor(value: str | QColor) -> QColor:
    """
    Converts a color into a QColor.

    Args:
        value: A QColor, or any CSS color understood by coloraide: names,
            "#rrggbb[aa]", "rgb()", "hsl()", "transparent"...

    Returns:
        A new QColor.

    Raises:
        DrawingError: if the string is not a valid color.
    """
    if isinstance(value, QColor):
        return QColor(value)
    try:
        color = Color(value).convert("srgb").clip()
    except ValueError as e:
        raise DrawingError(f"Invalid color: {value!r}") from e
    r, g, b = (_channel(c) for c in color[:-1])
    alpha = color[-1]
    alpha = 1.0 if math.isnan(alpha) else alpha
    return QColor.fromRgbF(r, g, b, alpha)


def to_brush(value: ColorValue) -> QBrush:
    """Converts a color, a gradient or a brush into a QBrush."""
    if isinstance(value, QBrush):
        return QBrush(value)
    if isinstance(value, QGradient):
        return QBrush(value)
    return QBrush(to_qcolor(value))
