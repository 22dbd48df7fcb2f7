from __future__ import annotations

from preview_raster.color import PremultipliedColor
from preview_raster.trace import trace_line
from preview_raster.types import Segment


def blend_over(buf: bytearray, width: int, height: int, x: int, y: int, color: PremultipliedColor) -> None:
    if x < 0 or x >= width or y < 0 or y >= height:
        return
    i = (y * width + x) * 4
    a = color.a
    if a >= 255:
        buf[i] = color.b
        buf[i + 1] = color.g
        buf[i + 2] = color.r
        buf[i + 3] = 255
        return
    inv = 255 - a
    buf[i] = color.b + buf[i] * inv // 255
    buf[i + 1] = color.g + buf[i + 1] * inv // 255
    buf[i + 2] = color.r + buf[i + 2] * inv // 255
    buf[i + 3] = a + buf[i + 3] * inv // 255


def draw_segment(buf: bytearray, width: int, height: int, segment: Segment, color: PremultipliedColor) -> None:
    for x, y in trace_line(segment.x0, segment.y0, segment.x1, segment.y1):
        blend_over(buf, width, height, x, y, color)
