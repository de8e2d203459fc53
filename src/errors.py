# Pendraw
# Copyright 2025 - Ricardo Quesada

import json


def _describe_segment(segment) -> str:
    if hasattr(segment, "to_dict"):
        segment = segment.to_dict()
    return json.dumps(segment, separators=(",", ":"), default=str)


class PathError(Exception):
    """
    Raised when a path or one of its segments is malformed.

    The message is enriched with a JSON description of the offending segment
    and, when the path is known, with the segment's index within it.
    """

    def __init__(self, message: str | None = None, segment=None, path=None):
        self.segment = segment
        self.path = path
        self.index = None

        if segment is not None:
            message = "" if not message else f"{message}: "
            if path is not None:
                self.index = path.index_of(segment)
                message += (
                    f"Invalid path segment at index {self.index}: {_describe_segment(segment)}"
                )
            else:
                message += f"Invalid path segment: {_describe_segment(segment)}"

        self.message = message or ""
        super().__init__(self.message)


class DrawingError(Exception):
    """Raised when the drawing surface cannot be set up or used."""

    def __init__(self, message: str | None = None):
        self.message = message or ""
        super().__init__(self.message)
