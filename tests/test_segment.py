import json
import os
import sys
import unittest

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from errors import PathError
from properties import Point
from segment import Segment, SegmentType


class TestSegment(unittest.TestCase):
    def test_initialization_copies_points(self):
        start = Point(0, 0)
        end = Point(10, 10)
        cp = Point(5, 0)
        segment = Segment(SegmentType.QUADRATIC, start, end, cp)

        start.x = 100
        end.x = 100
        cp.x = 100
        self.assertEqual(segment.start, Point(0, 0))
        self.assertEqual(segment.end, Point(10, 10))
        self.assertEqual(segment.cp1, Point(5, 0))
        self.assertIsNone(segment.cp2)
        self.assertTrue(segment.drawn)

    def test_initialization_from_tuples(self):
        segment = Segment(SegmentType.LINE, (0, 0), (1, 2), drawn=False)
        self.assertEqual(segment.end, Point(1, 2))
        self.assertFalse(segment.drawn)

    def test_from_dict(self):
        line = Segment.from_dict(
            {"type": "line", "start": {"x": 0, "y": 0}, "end": {"x": 1, "y": 1}, "drawn": False}
        )
        self.assertEqual(line.type, SegmentType.LINE)
        self.assertFalse(line.drawn)

        bezier = Segment.from_dict(
            {
                "type": "bezier",
                "start": {"x": 0, "y": 0},
                "end": {"x": 1, "y": 1},
                "cp1": {"x": 2, "y": 2},
                "cp2": {"x": 3, "y": 3},
            }
        )
        self.assertEqual(bezier.cp1, Point(2, 2))
        self.assertEqual(bezier.cp2, Point(3, 3))

    def test_from_dict_is_permissive_with_control_points(self):
        quad = Segment.from_dict({"type": "quadratic", "start": (0, 0), "end": (1, 1)})
        self.assertEqual(quad.type, SegmentType.QUADRATIC)
        self.assertIsNone(quad.cp1)

    def test_from_dict_invalid_type(self):
        with self.assertRaises(PathError) as cm:
            Segment.from_dict({"type": "arc", "start": (0, 0), "end": (1, 1)})
        self.assertTrue(str(cm.exception).startswith("Invalid segment type.: Invalid path segment"))

    def test_to_dict(self):
        segment = Segment(SegmentType.LINE, (0, 0), (10, 10))
        self.assertEqual(
            json.dumps(segment.to_dict(), separators=(",", ":")),
            '{"type":"line","start":{"x":0,"y":0},"end":{"x":10,"y":10},"drawn":true}',
        )
        bezier = Segment(SegmentType.BEZIER, (0, 0), (1, 1), (2, 2), (3, 3))
        self.assertEqual(
            list(bezier.to_dict().keys()), ["type", "start", "end", "cp1", "cp2", "drawn"]
        )

        restored = Segment.from_dict(bezier.to_dict())
        self.assertEqual(restored, bezier)

    def test_str(self):
        self.assertEqual(
            str(Segment(SegmentType.LINE, (0, 0), (10, 10))), "Line from (0, 0) to (10, 10)"
        )
        self.assertEqual(
            str(Segment(SegmentType.LINE, (0, 0), (10, 10), drawn=False)),
            "Starting new sub-path at (10, 10)",
        )
        self.assertEqual(
            str(Segment(SegmentType.QUADRATIC, (0, 0), (10, 10), (5, 0))),
            "Quadratic curve from (0, 0) to (10, 10) with control point (5, 0)",
        )
        self.assertEqual(
            str(Segment(SegmentType.BEZIER, (0, 0), (10, 10), (5, 0), (0, 5))),
            "Bezier curve from (0, 0) to (10, 10) with control points (5, 0) and (0, 5)",
        )
        self.assertEqual(str(Segment("arc", (0, 0), (10, 10))), "Unknown segment")
        # Missing control points do not break the description
        self.assertIn("(missing)", str(Segment(SegmentType.QUADRATIC, (0, 0), (1, 1))))

    def test_reverse(self):
        segment = Segment(SegmentType.BEZIER, (0, 0), (10, 10), (5, 0), (10, 5))
        result = segment.reverse()
        self.assertIs(result, segment)
        self.assertEqual(segment.start, Point(10, 10))
        self.assertEqual(segment.end, Point(0, 0))
        self.assertEqual(segment.cp1, Point(10, 5))
        self.assertEqual(segment.cp2, Point(5, 0))

    def test_reverse_quadratic_keeps_control_point(self):
        segment = Segment(SegmentType.QUADRATIC, (0, 0), (10, 10), (5, 0))
        segment.reverse()
        self.assertEqual(segment.cp1, Point(5, 0))

    def test_reversed_does_not_mutate(self):
        segment = Segment(SegmentType.LINE, (0, 0), (10, 10))
        rev = segment.reversed()
        self.assertEqual(segment.start, Point(0, 0))
        self.assertEqual(rev.start, Point(10, 10))
        self.assertEqual(rev.reversed(), segment)

    def test_copy(self):
        segment = Segment(SegmentType.QUADRATIC, (0, 0), (10, 10), (5, 0))
        c = segment.copy()
        self.assertEqual(c, segment)
        self.assertIsNot(c.start, segment.start)
        self.assertIsNot(c.cp1, segment.cp1)
        c.cp1.x = 99
        self.assertEqual(segment.cp1.x, 5)

    def test_equality(self):
        a = Segment(SegmentType.LINE, (0, 0), (10, 10))
        b = Segment(SegmentType.LINE, (0, 0), (10, 10))
        c = Segment(SegmentType.LINE, (0, 0), (10, 10), drawn=False)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertNotEqual(a, "line")

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Segment(SegmentType.LINE, (0, 0), (1, 1)))


if __name__ == "__main__":
    unittest.main()
