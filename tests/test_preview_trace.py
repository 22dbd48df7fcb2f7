from __future__ import annotations

import unittest

from preview_raster.trace import trace_line


def _ring(radius: int) -> list[tuple[int, int]]:
    pts = []
    for x in range(-radius, radius + 1):
        pts.append((x, -radius))
        pts.append((x, radius))
    for y in range(-radius + 1, radius):
        pts.append((-radius, y))
        pts.append((radius, y))
    return pts


class TraceLineTests(unittest.TestCase):
    def test_degenerate_segment_yields_single_pixel(self) -> None:
        self.assertEqual(list(trace_line(3, -2, 3, -2)), [(3, -2)])

    def test_horizontal_and_vertical_runs(self) -> None:
        self.assertEqual(list(trace_line(0, 0, 3, 0)), [(0, 0), (1, 0), (2, 0), (3, 0)])
        self.assertEqual(list(trace_line(0, 2, 0, -1)), [(0, 2), (0, 1), (0, 0), (0, -1)])

    def test_diagonal_steps_both_axes_together(self) -> None:
        self.assertEqual(list(trace_line(0, 0, 3, 3)), [(0, 0), (1, 1), (2, 2), (3, 3)])
        self.assertEqual(list(trace_line(2, 0, 0, 2)), [(2, 0), (1, 1), (0, 2)])

    def test_shallow_line_matches_error_accumulator_stepping(self) -> None:
        self.assertEqual(
            list(trace_line(0, 0, 5, 2)),
            [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)],
        )

    def test_all_octants_are_connected_and_complete(self) -> None:
        cx, cy = 4, -3
        for ex, ey in _ring(7):
            x1, y1 = cx + ex, cy + ey
            with self.subTest(end=(x1, y1)):
                pts = list(trace_line(cx, cy, x1, y1))
                self.assertEqual(pts[0], (cx, cy))
                self.assertEqual(pts[-1], (x1, y1))
                self.assertEqual(len(pts), max(abs(ex), abs(ey)) + 1)
                self.assertEqual(len(set(pts)), len(pts))
                for (ax, ay), (bx, by) in zip(pts, pts[1:]):
                    self.assertLessEqual(abs(bx - ax), 1)
                    self.assertLessEqual(abs(by - ay), 1)
                    self.assertNotEqual((ax, ay), (bx, by))
                if abs(ex) >= abs(ey):
                    steps = [b[0] - a[0] for a, b in zip(pts, pts[1:])]
                else:
                    steps = [b[1] - a[1] for a, b in zip(pts, pts[1:])]
                self.assertTrue(all(s == steps[0] for s in steps))
                self.assertNotEqual(steps[0], 0)

    def test_far_off_canvas_coordinates_are_still_traced(self) -> None:
        pts = list(trace_line(-1000, 5, -990, 5))
        self.assertEqual(len(pts), 11)
        self.assertEqual(pts[-1], (-990, 5))


if __name__ == "__main__":
    unittest.main()
