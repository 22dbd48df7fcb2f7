from preview_raster.color import PremultipliedColor, clamp_channel, clamp_rgba, premultiply
from preview_raster.composite import blend_over, draw_segment
from preview_raster.errors import SceneError
from preview_raster.frame import PreviewFrame
from preview_raster.geometry import segments_from_polyline
from preview_raster.renderer import rasterize, render_frame
from preview_raster.scene import Scene, group_from_mapping, load_scene, scene_from_mapping
from preview_raster.trace import trace_line
from preview_raster.types import RGBA, Segment, SegmentGroup

__all__ = [
    "PremultipliedColor",
    "PreviewFrame",
    "RGBA",
    "Scene",
    "SceneError",
    "Segment",
    "SegmentGroup",
    "blend_over",
    "clamp_channel",
    "clamp_rgba",
    "draw_segment",
    "group_from_mapping",
    "load_scene",
    "premultiply",
    "rasterize",
    "render_frame",
    "scene_from_mapping",
    "segments_from_polyline",
    "trace_line",
]
