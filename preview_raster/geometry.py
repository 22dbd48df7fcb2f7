from __future__ import annotations

from typing import Iterable

from preview_raster.types import Segment


def segments_from_polyline(points: Iterable[tuple[int, int]], closed: bool = False) -> list[Segment]:
    pts = list(points)
    if len(pts) < 2:
        return []
    segments = [Segment(x0, y0, x1, y1) for (x0, y0), (x1, y1) in zip(pts, pts[1:])]
    if closed:
        x0, y0 = pts[-1]
        x1, y1 = pts[0]
        segments.append(Segment(x0, y0, x1, y1))
    return segments
