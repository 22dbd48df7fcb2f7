from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class Segment:
    x0: int
    y0: int
    x1: int
    y1: int


@dataclass(frozen=True)
class SegmentGroup:
    """Segments sharing one straight RGBA color and one visibility flag."""

    segments: Sequence[Segment]
    color: RGBA
    visible: bool = True
    name: str | None = None
