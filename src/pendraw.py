#!/usr/bin/env python3
# Pendraw
# Copyright 2025 Ricardo Quesada

import argparse
import logging
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QGuiApplication

from errors import DrawingError, PathError
from path import Path
from properties import ColorStop, Dash, DrawingType, LineCap, LineStyle, Rect, TextStyle
from surface import Surface, SurfaceOptions

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 300


def build_sample_path(width: int, height: int) -> Path:
    """A closed shape that uses every kind of segment, plus a second sub-path."""
    w, h = width, height
    return (
        Path((w * 0.1, h * 0.5))
        .line_to((w * 0.25, h * 0.15))
        .quadratic_to((w * 0.45, h * 0.15), (w * 0.35, h * 0.0))
        .bezier_to((w * 0.45, h * 0.6), (w * 0.6, h * 0.2), (w * 0.55, h * 0.5))
        .line_to((w * 0.1, h * 0.5))
        .move_to((w * 0.2, h * 0.4))
        .line_to((w * 0.3, h * 0.3))
        .close()
    )


def render_sample(surface: Surface) -> None:
    w, h = surface.width, surface.height

    gradient = surface.linear_gradient(
        (0, 0), (w, h), [ColorStop(0.0, "#1e3a5f"), ColorStop(1.0, "#4a90c2")]
    )
    surface.fill_rect(Rect(0, 0, w, h), gradient)

    path = build_sample_path(w, h)
    logger.debug(f"Sample path:\n{path}")
    surface.fill_path(path, "rgb(255 200 0 / 0.8)")
    surface.stroke_path(path, "white", LineStyle(width=2, dash=Dash(pattern=(6, 3))))

    surface.circle((w * 0.8, h * 0.3), h * 0.12, "hsl(340 80% 60%)")
    surface.circle(
        (w * 0.8, h * 0.3), h * 0.12, "white", DrawingType.OUTLINE, LineStyle(width=3)
    )
    surface.polygon(
        [(w * 0.65, h * 0.95), (w * 0.75, h * 0.7), (w * 0.85, h * 0.95)],
        "rebeccapurple",
    )

    surface.progress_bar(
        Rect(w * 0.1, h * 0.75, w * 0.45, h * 0.1), 0.65, show_text=True, border_color="white"
    )
    surface.circular_progress_bar(
        (w * 0.8, h * 0.3), h * 0.18, 0.4, thickness=6, line_cap=LineCap.ROUND
    )
    surface.fill_text(
        "Pendraw", (w * 0.1, h * 0.68), TextStyle(font="bold 18px Arial", color="white")
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Renders a sample Pendraw scene to a PNG file")
    parser.add_argument("output", help="Path to the output PNG image.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Image height in pixels")
    parser.add_argument(
        "--pixel-art",
        action="store_true",
        default=None,
        help="Disable antialiasing. Defaults to the saved preference",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main():
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",  # Customize the date format
    )

    # Fonts need a QGuiApplication
    app = QGuiApplication(sys.argv)  # noqa: F841
    QCoreApplication.setApplicationName("Pendraw")
    QCoreApplication.setOrganizationName("Retro Moe")
    QCoreApplication.setOrganizationDomain("retro.moe")

    options = SurfaceOptions(width=args.width, height=args.height, pixel_art=args.pixel_art)
    try:
        with Surface(options=options) as surface:
            render_sample(surface)
    except (PathError, DrawingError) as e:
        logger.error(f"Failed to render: {e}")
        sys.exit(1)

    if not surface.image.save(args.output, "PNG"):
        logger.error(f"Failed to save {args.output}")
        sys.exit(1)
    logger.info(f"Saved {args.output}")


if __name__ == "__main__":
    main()
