# Pendraw
# Copyright 2025 - Ricardo Quesada

import logging
import os.path

from PySide6.QtGui import QImage

from errors import DrawingError

logger = logging.getLogger(__name__)


def load_image(filename: str) -> QImage:
    """
    Loads an image from disk.

    Args:
        filename: Path to the image. Any format supported by Qt's image plugins.

    Returns:
        The loaded QImage.

    Raises:
        DrawingError: if the file does not exist or cannot be decoded.
    """
    if not os.path.exists(filename):
        logger.error(f"Image not found: {filename}")
        raise DrawingError(f'Image "{filename}" not found')

    image = QImage(filename)
    if image.isNull():
        logger.error(f"Failed to decode image: {filename}")
        raise DrawingError(f'Could not load image "{filename}"')

    logger.info(f"Loaded image {filename} ({image.width()}x{image.height()})")
    return image


def load_images(filenames: list[str]) -> list[QImage]:
    """Loads every image in order. Fails on the first image that cannot be loaded."""
    return [load_image(filename) for filename in filenames]
