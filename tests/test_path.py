import os
import sys
import unittest

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from errors import PathError
from path import Path
from properties import Point
from segment import Segment, SegmentType


def create_sample_path() -> Path:
    return (
        Path(Point(0, 0))
        .line_to(Point(10, 10))
        .quadratic_to(Point(20, 20), Point(30, 30))
        .bezier_to(Point(40, 40), Point(50, 50), Point(60, 60))
    )


class TestPath(unittest.TestCase):
    def test_initialization(self):
        start = Point(1, 2)
        path = Path(start)
        self.assertEqual(path.start, start)
        self.assertEqual(path.end, start)
        self.assertIsNot(path.start, start)
        self.assertIsNot(path.start, path.end)
        self.assertFalse(path.closed)
        self.assertEqual(len(path), 0)

    def test_builders_return_path(self):
        path = Path((0, 0))
        self.assertIs(path.move_to((1, 1)), path)
        self.assertIs(path.line_to((2, 2)), path)
        self.assertIs(path.quadratic_to((3, 3), (4, 4)), path)
        self.assertIs(path.bezier_to((5, 5), (6, 6), (7, 7)), path)
        self.assertEqual(len(path), 4)

    def test_move_to_lifts_the_pen(self):
        path = Path((0, 0)).move_to((5, 5))
        segment = path.at(0)
        self.assertEqual(segment.type, SegmentType.LINE)
        self.assertFalse(segment.drawn)
        self.assertEqual(segment.start, Point(0, 0))
        self.assertEqual(segment.end, Point(5, 5))

    def test_sample_path(self):
        path = create_sample_path()
        self.assertEqual(len(path), 3)

        line = path.at(0)
        self.assertEqual(line.type, SegmentType.LINE)
        self.assertTrue(line.drawn)
        self.assertEqual(line.start, Point(0, 0))
        self.assertEqual(line.end, Point(10, 10))

        quad = path.at(1)
        self.assertEqual(quad.type, SegmentType.QUADRATIC)
        self.assertEqual(quad.start, Point(10, 10))
        self.assertEqual(quad.end, Point(20, 20))
        self.assertEqual(quad.cp1, Point(30, 30))

        bezier = path.at(2)
        self.assertEqual(bezier.type, SegmentType.BEZIER)
        self.assertEqual(bezier.start, Point(20, 20))
        self.assertEqual(bezier.end, Point(40, 40))
        self.assertEqual(bezier.cp1, Point(50, 50))
        self.assertEqual(bezier.cp2, Point(60, 60))

        for segment in path:
            self.assertIsInstance(segment, Segment)

    def test_points_are_copied_in(self):
        point = Point(10, 10)
        cp1 = Point(20, 20)
        cp2 = Point(30, 30)
        path = Path(Point(0, 0))
        path.line_to(point).quadratic_to(point, cp1).bezier_to(point, cp1, cp2).move_to(point)

        point.x = 999
        cp1.x = 999
        cp2.x = 999
        for segment in path:
            self.assertEqual(segment.end.x, 10)
        self.assertEqual(path.at(1).cp1.x, 20)
        self.assertEqual(path.at(2).cp2.x, 30)
        self.assertEqual(path.end.x, 10)

    def test_same_point_object_is_caller_owned(self):
        original = Point(0, 0)
        path = Path(original)
        alias = original
        path.line_to(alias)
        alias.x = 20
        # The caller's objects are the same object...
        self.assertEqual(original.x, 20)
        # ...but the path kept its own copies.
        self.assertEqual(path.start.x, 0)
        self.assertEqual(path.at(0).end.x, 0)

    def test_cursor_coherence(self):
        path = Path((0, 0))
        self.assertEqual(path.end, path.start)
        path.line_to((1, 1))
        self.assertEqual(path.end, path.at(-1).end)
        path.move_to((2, 2))
        self.assertEqual(path.end, path.at(-1).end)
        path.quadratic_to((3, 3), (4, 4))
        self.assertEqual(path.end, path.at(-1).end)
        path.bezier_to((5, 5), (6, 6), (7, 7))
        self.assertEqual(path.end, path.at(-1).end)
        self.assertIsNot(path.end, path.at(-1).end)

        path.push(Segment(SegmentType.LINE, (5, 5), (8, 8)))
        self.assertEqual(path.end, Point(8, 8))

        path.pop()
        self.assertEqual(path.end, Point(5, 5))
        self.assertEqual(path.end, path.at(-1).end)

        while len(path):
            path.pop()
        self.assertEqual(path.end, path.start)

    def test_push_does_not_alias_end(self):
        path = Path((0, 0))
        for i in range(5):
            path.push(Segment(SegmentType.LINE, (i * 10, i * 10), ((i + 1) * 10, (i + 1) * 10)))
        path.end.x = 100
        self.assertEqual(path.end.x, 100)
        self.assertNotEqual(path.at(len(path) - 1).end.x, path.end.x)

    def test_close_and_open(self):
        path = create_sample_path()
        self.assertIs(path.close(), path)
        self.assertTrue(path.closed)
        self.assertIs(path.open(), path)
        self.assertFalse(path.closed)
        self.assertEqual(len(path), 3)

    def test_segments_are_copied_on_read(self):
        path = Path((0, 0))
        path.line_to((10, 10))
        path.bezier_to((20, 20), (30, 30), (40, 40))
        segments = path.segments
        self.assertEqual(len(segments), 2)
        self.assertEqual(segments[0], path.at(0))
        self.assertEqual(segments, path.segments)

        segments[0].start.x = 200
        self.assertNotEqual(path.at(0).start.x, segments[0].start.x)

        # Changing the returned list never changes the path
        segments.clear()
        self.assertEqual(len(path), 2)

        # Two reads of the whole sequence are independent of each other
        first = path.segments
        second = path.segments
        first[1].cp1.x = 999
        self.assertEqual(second[1].cp1.x, 30)

    def test_at_shares_segments(self):
        path = Path((0, 0))
        path.line_to((10, 10))
        segments = path.segments
        segments[0].start.x = 200

        path.at(0).start.x = 100
        self.assertEqual(path.at(0).start.x, 100)
        self.assertIs(path.at(0), path.at(0))
        self.assertEqual(segments[0].start.x, 200)

    def test_reverse(self):
        path = create_sample_path()
        self.assertEqual(path.at(0).start.x, 0)
        self.assertEqual(path.at(1).start.x, 10)
        self.assertEqual(path.at(2).start.x, 20)

        path2 = path.clone()
        self.assertIs(path.reverse(), path)

        self.assertEqual(path2.at(0).start.x, path.at(2).end.x)
        self.assertEqual(path2.at(1).start.x, path.at(1).end.x)
        self.assertEqual(path2.at(2).start.x, path.at(0).end.x)

        self.assertEqual(len(path), 3)
        self.assertEqual(path.at(0).start.x, 40)
        self.assertEqual(path.at(1).start.x, 20)
        self.assertEqual(path.at(2).start.x, 10)

        self.assertEqual(path.start, Point(40, 40))
        self.assertEqual(path.end, Point(0, 0))

    def test_reverse_involution(self):
        path = create_sample_path()
        twice = path.clone().reverse().reverse()
        self.assertEqual(twice.segments, path.segments)
        self.assertEqual(twice.start, path.start)
        self.assertEqual(twice.end, path.end)

    def test_to_reversed(self):
        path = create_sample_path()
        before = path.segments
        start, end = path.start.copy(), path.end.copy()

        reversed_path = path.to_reversed()

        # The receiver is untouched
        self.assertEqual(len(path), 3)
        self.assertEqual(path.start, start)
        self.assertEqual(path.end, end)
        self.assertEqual(path.segments, before)
        self.assertNotEqual(reversed_path.segments, path.segments)

        self.assertEqual(reversed_path.at(0).start.x, 40)
        self.assertEqual(reversed_path.at(1).start.x, 20)
        self.assertEqual(reversed_path.at(2).start.x, 10)

        for index, segment in path.entries():
            mirrored = reversed_path.at(len(path) - index - 1)
            self.assertEqual(mirrored.start, segment.end)
            self.assertEqual(mirrored.end, segment.start)
            self.assertEqual(mirrored.type, segment.type)

    def test_clone(self):
        path = create_sample_path().close()
        clone = path.clone()
        self.assertIsNot(clone, path)
        self.assertEqual(clone.segments, path.segments)
        self.assertEqual(clone.start, path.start)
        self.assertEqual(clone.end, path.end)
        self.assertTrue(clone.closed)

        clone.at(0).end.x = 500
        clone.start.x = 500
        clone.line_to((1, 1))
        self.assertEqual(path.at(0).end.x, 10)
        self.assertEqual(path.start.x, 0)
        self.assertEqual(len(path), 3)

    def test_clone_empty(self):
        path = Path((3, 4))
        clone = path.clone()
        self.assertEqual(len(clone), 0)
        self.assertEqual(clone.start, Point(3, 4))
        self.assertEqual(clone.end, Point(3, 4))

    def test_from_segments(self):
        a = Segment(SegmentType.LINE, (0, 0), (1, 1))
        b = Segment(SegmentType.LINE, (1, 1), (2, 3))
        path = Path.from_segments(a, b, closed=True)
        self.assertEqual(len(path), 2)
        self.assertEqual(path.start, Point(0, 0))
        self.assertEqual(path.end, Point(2, 3))
        self.assertTrue(path.closed)
        # Deep copies, not aliases
        self.assertIsNot(path.at(0), a)
        a.end.x = 100
        self.assertEqual(path.at(0).end.x, 1)

    def test_from_segments_requires_segments(self):
        with self.assertRaises(PathError):
            Path.from_segments()

    def test_clear(self):
        path = create_sample_path()
        self.assertIs(path.clear(), path)
        self.assertEqual(len(path), 0)
        self.assertEqual(path.end, path.start)
        self.assertIsNot(path.end, path.start)

    def test_str(self):
        path = Path((0, 0)).line_to((10, 10)).move_to((20, 20))
        self.assertEqual(
            str(path),
            "Path with 2 segments:\n"
            "1. Line from (0, 0) to (10, 10)\n"
            "2. Starting new sub-path at (20, 20)",
        )
        self.assertEqual(str(Path((0, 0)).line_to((1, 1))).splitlines()[0], "Path with 1 segment:")
        self.assertEqual(str(Path((0, 0))), "Path with 0 segments:")


if __name__ == "__main__":
    unittest.main()
