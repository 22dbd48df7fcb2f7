from __future__ import annotations

import logging
from typing import Iterable

from preview_raster.color import clamp_rgba, premultiply
from preview_raster.composite import draw_segment
from preview_raster.frame import PreviewFrame
from preview_raster.types import SegmentGroup

LOGGER = logging.getLogger(__name__)


def rasterize(view_w: int, view_h: int, groups: Iterable[SegmentGroup]) -> bytes:
    """Composite segment groups into premultiplied BGRA bytes, later groups on top.

    Returns ``view_w * view_h * 4`` bytes, or ``b""`` when either dimension is
    not positive.
    """
    if view_w <= 0 or view_h <= 0:
        return b""
    buf = bytearray(view_w * view_h * 4)

    for index, group in enumerate(groups):
        if not group.visible or not group.segments:
            LOGGER.debug(
                "skipping group %s: visible=%s segments=%d",
                _label(group, index),
                group.visible,
                len(group.segments),
            )
            continue
        if clamp_rgba(group.color) != tuple(group.color):
            LOGGER.debug("group %s color clamped from %r", _label(group, index), group.color)
        color = premultiply(group.color)
        for segment in group.segments:
            draw_segment(buf, view_w, view_h, segment, color)

    return bytes(buf)


def render_frame(view_w: int, view_h: int, groups: Iterable[SegmentGroup]) -> PreviewFrame:
    data = rasterize(view_w, view_h, groups)
    if not data:
        return PreviewFrame(width=0, height=0, data=b"")
    return PreviewFrame(width=view_w, height=view_h, data=data)


def _label(group: SegmentGroup, index: int) -> str:
    return group.name if group.name else f"#{index}"
