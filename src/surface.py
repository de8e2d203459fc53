# Pendraw
# Copyright 2025 - Ricardo Quesada

"""A drawing surface: convenience drawing calls over a QImage."""

import logging
import math
import re
from dataclasses import dataclass

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QBrush,
    QConicalGradient,
    QFont,
    QFontMetricsF,
    QImage,
    QLinearGradient,
    QPainter,
    QPainterPath,
    QPen,
    QRadialGradient,
    QTransform,
)

from colors import ColorValue, to_brush, to_qcolor
from errors import DrawingError
from path import Path
from path_translator import to_qpainter_path
from preferences import get_global_preferences
from properties import (
    DEFAULT_LINE_STYLE,
    DEFAULT_SHADOW,
    ByScale,
    BySize,
    ColorStop,
    Dimensions,
    DrawingType,
    ImageSize,
    LineCap,
    LineJoin,
    LineStyle,
    PointLike,
    Rect,
    Repetition,
    Shadow,
    TextAlign,
    TextBaseline,
    TextStyle,
    copy_point,
)

logger = logging.getLogger(__name__)

_CAPS = {
    LineCap.BUTT: Qt.PenCapStyle.FlatCap,
    LineCap.ROUND: Qt.PenCapStyle.RoundCap,
    LineCap.SQUARE: Qt.PenCapStyle.SquareCap,
}

_JOINS = {
    LineJoin.MITER: Qt.PenJoinStyle.MiterJoin,
    LineJoin.ROUND: Qt.PenJoinStyle.RoundJoin,
    LineJoin.BEVEL: Qt.PenJoinStyle.BevelJoin,
}

_FONT_RE = re.compile(
    r"^\s*(?P<modifiers>(?:(?:bold|italic|normal|[1-9]00)\s+)*)"
    r"(?P<size>\d+(?:\.\d+)?)px\s+(?P<family>.+?)\s*$"
)


@dataclass
class SurfaceOptions:
    """Options used to create a Surface. None means "use the preferences"."""

    width: int | None = None
    height: int | None = None
    pixel_art: bool | None = None
    background_color: str | None = None


@dataclass(frozen=True)
class TextMetrics:
    width: float
    ascent: float
    descent: float


def _qpoint(point: PointLike) -> QPointF:
    p = copy_point(point)
    return QPointF(p.x, p.y)


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def font_from_css(font: str) -> QFont:
    """
    Creates a QFont from a CSS-like font string, e.g. "bold 20px Arial".

    Raises:
        DrawingError: if the string cannot be parsed.
    """
    m = _FONT_RE.match(font)
    if m is None:
        raise DrawingError(f"Invalid font: {font!r}")

    qfont = QFont(m.group("family").strip("\"'"))
    qfont.setPixelSize(max(1, round(float(m.group("size")))))
    for modifier in m.group("modifiers").split():
        if modifier == "bold":
            qfont.setBold(True)
        elif modifier == "italic":
            qfont.setItalic(True)
        elif modifier.isdigit():
            qfont.setWeight(QFont.Weight(int(modifier)))
    return qfont


class Surface:
    """
    Draws on a QImage.

    The surface owns a QPainter for its whole life. Call end(), or use the
    surface as a context manager, before saving or reading back the image.
    Paths are translated with to_qpainter_path(), so a malformed Path raises
    PathError before anything is painted.
    """

    def __init__(self, image: QImage | None = None, options: SurfaceOptions | None = None):
        """
        Initializes the Surface.

        Args:
            image: The image to draw on. If None, a new image is created
                using the width and height from `options`.
            options: Surface options.

        Raises:
            DrawingError: if there is nothing to draw on, or the painter
                cannot be started on the image.
        """
        self._options = options if options is not None else SurfaceOptions()
        prefs = get_global_preferences()
        self._font_family = prefs.get_default_font_family()

        self._image = self._init_image(image, prefs.get_background_color_name())

        self._painter = QPainter()
        if not self._painter.begin(self._image):
            raise DrawingError("Could not begin painting on the surface")

        pixel_art = self._options.pixel_art
        if pixel_art is None:
            pixel_art = prefs.get_pixel_art()
        self._pixel_art = pixel_art
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing, not pixel_art)
        self._painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, not pixel_art)
        self._painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, not pixel_art)

        self._line_style = DEFAULT_LINE_STYLE
        self._text_style: TextStyle | None = None
        self._shadow = DEFAULT_SHADOW
        self._style_stack: list[tuple[LineStyle, TextStyle | None, Shadow]] = []

        logger.debug(
            f"Surface created: {self._image.width()}x{self._image.height()}, pixel art: {pixel_art}"
        )

    def _init_image(self, image: QImage | None, default_background: str) -> QImage:
        if image is None:
            width, height = self._options.width, self._options.height
            if not width or not height:
                raise DrawingError("Surface requires an image or a width and height")
            image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
            if image.isNull():
                raise DrawingError(f"Could not create a {width}x{height} image")
            background = self._options.background_color or default_background
            image.fill(to_qcolor(background))
            return image

        if not isinstance(image, QImage):
            raise DrawingError(f"Surface target is not a QImage: {type(image).__name__}")
        if image.isNull():
            raise DrawingError("Surface target image is null")
        if self._options.width or self._options.height:
            logger.warning("Surface created from an image: width and height options are ignored")
        return image

    #
    # Lifecycle
    #
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.end()
        return False

    def end(self) -> None:
        """Finishes painting. The surface cannot be drawn on afterwards."""
        if self._painter.isActive():
            self._painter.end()

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def painter(self) -> QPainter:
        return self._painter

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    @property
    def pixel_art(self) -> bool:
        return self._pixel_art

    def _active_painter(self) -> QPainter:
        if not self._painter.isActive():
            raise DrawingError("Surface has already been ended")
        return self._painter

    #
    # State
    #
    def clear(self) -> None:
        self.clear_rect((0, 0), Dimensions(self.width, self.height))

    def clear_rect(self, position: PointLike, size: Dimensions) -> None:
        painter = self._active_painter()
        p = copy_point(position)
        painter.save()
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        painter.fillRect(QRectF(p.x, p.y, size.width, size.height), Qt.GlobalColor.transparent)
        painter.restore()

    def save(self) -> None:
        self._active_painter().save()
        self._style_stack.append((self._line_style, self._text_style, self._shadow))

    def restore(self) -> None:
        self._active_painter().restore()
        if self._style_stack:
            self._line_style, self._text_style, self._shadow = self._style_stack.pop()

    def set_line_style(self, line_style: LineStyle = DEFAULT_LINE_STYLE) -> None:
        self._line_style = line_style

    def set_text_style(self, text_style: TextStyle) -> None:
        self._text_style = text_style

    @property
    def line_style(self) -> LineStyle:
        return self._line_style

    @property
    def text_style(self) -> TextStyle | None:
        return self._text_style

    def set_shadow(self, shadow: Shadow = DEFAULT_SHADOW) -> None:
        """
        Sets the shadow painted under every fill and stroke.

        The shadow is a copy of the shape, offset and painted in the shadow
        color. Blur is not supported: blurred shadows are painted sharp.
        """
        if shadow.blur > 0:
            logger.warning(f"Shadow blur {shadow.blur} not supported, painting a sharp shadow")
        self._shadow = shadow

    def reset_shadow(self) -> None:
        self._shadow = DEFAULT_SHADOW

    @property
    def shadow(self) -> Shadow:
        return self._shadow

    def _shadow_brush(self) -> QBrush | None:
        color = to_qcolor(self._shadow.color)
        if color.alpha() == 0:
            return None
        return QBrush(color)

    def _shadow_path(self, qpath: QPainterPath) -> QPainterPath:
        return qpath.translated(self._shadow.offset_x, self._shadow.offset_y)

    def _pen(self, stroke_style: ColorValue) -> QPen:
        style = self._line_style
        pen = QPen(
            to_brush(stroke_style),
            style.width,
            Qt.PenStyle.SolidLine,
            _CAPS[style.cap],
            _JOINS[style.join],
        )
        if style.dash.pattern and style.width > 0:
            # Qt measures dashes in pen widths
            pattern = [length / style.width for length in style.dash.pattern]
            if len(pattern) % 2:
                pattern *= 2
            pen.setDashPattern(pattern)
            pen.setDashOffset(style.dash.offset / style.width)
        return pen

    def _fill(self, qpath: QPainterPath, fill_style: ColorValue) -> None:
        painter = self._active_painter()
        shadow = self._shadow_brush()
        if shadow is not None:
            painter.fillPath(self._shadow_path(qpath), shadow)
        painter.fillPath(qpath, to_brush(fill_style))

    def _stroke(self, qpath: QPainterPath, stroke_style: ColorValue, line_style: LineStyle):
        self.set_line_style(line_style)
        painter = self._active_painter()
        shadow = self._shadow_brush()
        if shadow is not None:
            painter.strokePath(self._shadow_path(qpath), self._pen(shadow))
        painter.strokePath(qpath, self._pen(stroke_style))

    #
    # Gradients and patterns
    #
    def linear_gradient(
        self, start: PointLike, end: PointLike, color_stops: list[ColorStop]
    ) -> QLinearGradient:
        gradient = QLinearGradient(_qpoint(start), _qpoint(end))
        for stop in color_stops:
            gradient.setColorAt(stop.offset, to_qcolor(stop.color))
        return gradient

    def radial_gradient(
        self,
        start: PointLike,
        start_radius: float,
        end: PointLike,
        end_radius: float,
        color_stops: list[ColorStop],
    ) -> QRadialGradient:
        gradient = QRadialGradient(_qpoint(end), end_radius, _qpoint(start), start_radius)
        for stop in color_stops:
            gradient.setColorAt(stop.offset, to_qcolor(stop.color))
        return gradient

    def conic_gradient(
        self, start_angle: float, center: PointLike, color_stops: list[ColorStop]
    ) -> QConicalGradient:
        """
        Creates a conic gradient. Angles are in radians and, like every other
        angle on the surface, go clockwise.
        """
        gradient = QConicalGradient(_qpoint(center), -math.degrees(start_angle))
        for stop in color_stops:
            # Qt sweeps counter-clockwise
            gradient.setColorAt(1.0 - stop.offset, to_qcolor(stop.color))
        return gradient

    def pattern(self, image: QImage, repetition: Repetition = Repetition.REPEAT) -> QBrush:
        if repetition != Repetition.REPEAT:
            logger.warning(f"Pattern repetition '{repetition}' not supported, using 'repeat'")
        return QBrush(image)

    #
    # Rectangles
    #
    def fill_rect(self, rect: Rect, fill_style: ColorValue) -> None:
        qpath = QPainterPath()
        qpath.addRect(_qrect(rect))
        self._fill(qpath, fill_style)

    def stroke_rect(
        self, rect: Rect, stroke_style: ColorValue, line_style: LineStyle = DEFAULT_LINE_STYLE
    ) -> None:
        qpath = QPainterPath()
        qpath.addRect(_qrect(rect))
        self._stroke(qpath, stroke_style, line_style)

    def rect(
        self,
        rect: Rect,
        style: ColorValue,
        drawing_type: DrawingType = DrawingType.FILLED,
        line_style: LineStyle | None = None,
    ) -> None:
        if drawing_type == DrawingType.FILLED:
            self.fill_rect(rect, style)
        elif drawing_type == DrawingType.OUTLINE:
            self.stroke_rect(rect, style, line_style or DEFAULT_LINE_STYLE)

    #
    # Linear paths (polylines)
    #
    @staticmethod
    def _linear_qpath(points: list[PointLike], close_path: bool) -> QPainterPath:
        qpath = QPainterPath()
        qpath.moveTo(_qpoint(points[0]))
        for point in points[1:]:
            qpath.lineTo(_qpoint(point))
        if close_path:
            qpath.closeSubpath()
        return qpath

    def stroke_linear_path(
        self,
        points: list[PointLike],
        stroke_style: ColorValue,
        line_style: LineStyle = DEFAULT_LINE_STYLE,
        close_path: bool = False,
    ) -> None:
        if not points:
            return
        self._stroke(self._linear_qpath(points, close_path), stroke_style, line_style)

    def fill_linear_path(
        self, points: list[PointLike], fill_style: ColorValue, close_path: bool = False
    ) -> None:
        if not points:
            return
        self._fill(self._linear_qpath(points, close_path), fill_style)

    def linear_path(
        self,
        points: list[PointLike],
        style: ColorValue,
        close_path: bool = False,
        drawing_type: DrawingType = DrawingType.FILLED,
        line_style: LineStyle | None = None,
    ) -> None:
        if drawing_type == DrawingType.FILLED:
            self.fill_linear_path(points, style, close_path)
        elif drawing_type == DrawingType.OUTLINE:
            self.stroke_linear_path(points, style, line_style or DEFAULT_LINE_STYLE, close_path)

    def polygon(
        self,
        points: list[PointLike],
        style: ColorValue,
        drawing_type: DrawingType = DrawingType.FILLED,
        line_style: LineStyle | None = None,
    ) -> None:
        self.linear_path(points, style, True, drawing_type, line_style)

    #
    # Paths
    #
    def create_path(self, start: PointLike) -> Path:
        return Path(start)

    def fill_path(self, path: Path, fill_style: ColorValue) -> None:
        self._fill(to_qpainter_path(path), fill_style)

    def stroke_path(
        self, path: Path, stroke_style: ColorValue, line_style: LineStyle = DEFAULT_LINE_STYLE
    ) -> None:
        self._stroke(to_qpainter_path(path), stroke_style, line_style)

    def path(
        self,
        path: Path,
        style: ColorValue,
        drawing_type: DrawingType = DrawingType.OUTLINE,
        line_style: LineStyle | None = None,
    ) -> None:
        if drawing_type == DrawingType.FILLED:
            self.fill_path(path, style)
        elif drawing_type == DrawingType.OUTLINE:
            self.stroke_path(path, style, line_style or DEFAULT_LINE_STYLE)

    #
    # Circles
    #
    @staticmethod
    def _circle_qpath(center: PointLike, radius: float) -> QPainterPath:
        qpath = QPainterPath()
        qpath.addEllipse(_qpoint(center), radius, radius)
        return qpath

    def fill_circle(self, center: PointLike, radius: float, fill_style: ColorValue) -> None:
        self._fill(self._circle_qpath(center, radius), fill_style)

    def stroke_circle(
        self,
        center: PointLike,
        radius: float,
        stroke_style: ColorValue,
        line_style: LineStyle = DEFAULT_LINE_STYLE,
    ) -> None:
        self._stroke(self._circle_qpath(center, radius), stroke_style, line_style)

    def circle(
        self,
        center: PointLike,
        radius: float,
        style: ColorValue,
        drawing_type: DrawingType = DrawingType.FILLED,
        line_style: LineStyle | None = None,
    ) -> None:
        if drawing_type == DrawingType.FILLED:
            self.fill_circle(center, radius, style)
        elif drawing_type == DrawingType.OUTLINE:
            self.stroke_circle(center, radius, style, line_style or DEFAULT_LINE_STYLE)

    #
    # Widgets
    #
    def progress_bar(
        self,
        rect: Rect,
        progress: float,
        show_text: bool = False,
        background_color: ColorValue = "lightgray",
        progress_color: ColorValue = "green",
        text_color: ColorValue = "white",
        border_color: ColorValue | None = None,
        border_width: float = 1,
    ) -> None:
        """Draws a horizontal progress bar. `progress` is clamped to [0, 1]."""
        progress = max(0.0, min(1.0, progress))
        self.fill_rect(rect, background_color)
        self.fill_rect(Rect(rect.x, rect.y, progress * rect.width, rect.height), progress_color)

        if border_color is not None:
            self.stroke_rect(rect, border_color, LineStyle(width=border_width))

        if show_text:
            text = f"{round(progress * 100)}%"
            # Limit font size to 20px for readability
            font_size = min(rect.height * 0.8, 20)
            font = self._label_font(font_size)
            metrics = self.measure_text(text, TextStyle(font=font))
            text_x = rect.x + (rect.width - metrics.width) / 2
            # Approximate vertical centering
            text_y = rect.y + (rect.height + font_size * 0.7) / 2
            self.fill_text(text, (text_x, text_y), TextStyle(font=font, color=text_color))

    def circular_progress_bar(
        self,
        center: PointLike,
        radius: float,
        progress: float,
        show_text: bool = False,
        thickness: float = 10,
        background_color: ColorValue = "lightgray",
        progress_color: ColorValue = "green",
        text_color: ColorValue = "black",
        max_font_size: float = 36,
        line_cap: LineCap = LineCap.ROUND,
        start_angle: float = -math.pi / 2,
    ) -> None:
        """
        Draws a circular progress bar. Angles are in radians, clockwise, and
        the default start is 12 o'clock.
        """
        progress = max(0.0, min(1.0, progress))
        c = copy_point(center)
        self.stroke_circle(c, radius, background_color, LineStyle(width=thickness))

        if progress > 0:
            bounds = QRectF(c.x - radius, c.y - radius, radius * 2, radius * 2)
            qt_start = -math.degrees(start_angle)
            qt_sweep = -math.degrees(progress * math.pi * 2)
            arc = QPainterPath()
            arc.arcMoveTo(bounds, qt_start)
            arc.arcTo(bounds, qt_start, qt_sweep)
            self._stroke(arc, progress_color, LineStyle(width=thickness, cap=line_cap))

        if show_text:
            text = f"{round(progress * 100)}%"
            font_size = min(radius * 0.8, max_font_size)
            font = self._label_font(font_size)
            metrics = self.measure_text(text, TextStyle(font=font))
            text_x = c.x - metrics.width / 2
            # Approximate vertical centering
            text_y = c.y + font_size * 0.35
            self.fill_text(text, (text_x, text_y), TextStyle(font=font, color=text_color))

    def _label_font(self, font_size: float) -> str:
        # Fixed point, at least 1px: font_from_css() rejects exponents and negative sizes
        return f"{max(font_size, 1):.2f}px {self._font_family}"

    #
    # Images
    #
    def draw_image(self, image: QImage, position: PointLike, size: ImageSize | None = None) -> None:
        """
        Draws an image with its top-left corner at `position`.

        Args:
            image: The image to draw.
            position: Where to draw it.
            size: BySize to draw it with an explicit size, ByScale to scale it,
                or None to draw it at its natural size.
        """
        painter = self._active_painter()
        p = copy_point(position)
        match size:
            case None:
                painter.drawImage(QPointF(p.x, p.y), image)
            case BySize(width=width, height=height):
                painter.drawImage(QRectF(p.x, p.y, width, height), image)
            case ByScale():
                width = image.width() * size.x
                height = image.height() * size.y_factor
                painter.drawImage(QRectF(p.x, p.y, width, height), image)
            case _:
                raise DrawingError(f"Invalid image size: {size!r}")

    #
    # Text
    #
    def _text_qpath(
        self, text: str, position: PointLike, style: TextStyle, max_width: float | None
    ) -> QPainterPath:
        self.set_text_style(style)
        font = font_from_css(style.font)
        if style.letter_spacing:
            font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, style.letter_spacing)
        if style.word_spacing:
            font.setWordSpacing(style.word_spacing)
        metrics = QFontMetricsF(font)
        width = metrics.horizontalAdvance(text)

        match style.align:
            case TextAlign.END | TextAlign.RIGHT:
                dx = -width
            case TextAlign.CENTER:
                dx = -width / 2
            case _:
                dx = 0.0

        match style.baseline:
            case TextBaseline.TOP:
                dy = metrics.ascent()
            case TextBaseline.MIDDLE:
                dy = (metrics.ascent() - metrics.descent()) / 2
            case TextBaseline.BOTTOM:
                dy = -metrics.descent()
            case _:
                dy = 0.0

        scale_x = 1.0
        if max_width is not None and 0 < max_width < width:
            scale_x = max_width / width

        qpath = QPainterPath()
        qpath.addText(QPointF(0, 0), font, text)

        p = copy_point(position)
        transform = QTransform()
        transform.translate(p.x, p.y)
        transform.scale(scale_x, 1.0)
        transform.translate(dx, dy)
        return transform.map(qpath)

    def fill_text(
        self, text: str, position: PointLike, style: TextStyle, max_width: float | None = None
    ) -> None:
        qpath = self._text_qpath(text, position, style, max_width)
        self._fill(qpath, style.color if style.color is not None else "black")

    def stroke_text(
        self,
        text: str,
        position: PointLike,
        style: TextStyle,
        line_style: LineStyle = DEFAULT_LINE_STYLE,
        max_width: float | None = None,
    ) -> None:
        qpath = self._text_qpath(text, position, style, max_width)
        self._stroke(qpath, style.color if style.color is not None else "black", line_style)

    def measure_text(self, text: str, style: TextStyle) -> TextMetrics:
        self.set_text_style(style)
        font = font_from_css(style.font)
        if style.letter_spacing:
            font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, style.letter_spacing)
        metrics = QFontMetricsF(font)
        return TextMetrics(
            width=metrics.horizontalAdvance(text),
            ascent=metrics.ascent(),
            descent=metrics.descent(),
        )
