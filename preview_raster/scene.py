from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import tomllib
from typing import Any, Mapping

from preview_raster.errors import SceneError
from preview_raster.geometry import segments_from_polyline
from preview_raster.types import RGBA, Segment, SegmentGroup


@dataclass(frozen=True)
class Scene:
    width: int
    height: int
    groups: list[SegmentGroup]


def load_scene(path: str | Path) -> Scene:
    scene_path = Path(path)
    if not scene_path.exists():
        raise FileNotFoundError(f"scene file not found: {scene_path}")
    with scene_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise SceneError(f"invalid scene TOML in {scene_path}: {exc}") from exc
    return scene_from_mapping(raw)


def scene_from_mapping(raw: Mapping[str, Any]) -> Scene:
    if not isinstance(raw, Mapping):
        raise SceneError("scene must be an object")
    try:
        width = _coerce_int(raw["width"], "width")
        height = _coerce_int(raw["height"], "height")
    except KeyError as exc:
        raise SceneError(f"scene missing required field: {exc.args[0]}") from exc
    groups_raw = raw.get("groups", [])
    if not isinstance(groups_raw, list):
        raise SceneError("groups must be a list")
    groups = [group_from_mapping(item, index) for index, item in enumerate(groups_raw)]
    return Scene(width=width, height=height, groups=groups)


def group_from_mapping(raw: Mapping[str, Any], index: int = 0) -> SegmentGroup:
    label = f"groups[{index}]"
    if not isinstance(raw, Mapping):
        raise SceneError(f"{label} must be an object")
    if "color" not in raw:
        raise SceneError(f"{label} missing required field: color")
    color = _coerce_color(raw["color"], f"{label}.color")
    visible = raw.get("visible", True)
    if not isinstance(visible, bool):
        raise SceneError(f"{label}.visible must be a boolean")
    name = raw.get("name")
    if name is not None and not isinstance(name, str):
        raise SceneError(f"{label}.name must be a string")

    segments: list[Segment] = []
    segments_raw = raw.get("segments", [])
    if not isinstance(segments_raw, list):
        raise SceneError(f"{label}.segments must be a list")
    for i, item in enumerate(segments_raw):
        coords = _coerce_int_list(item, 4, f"{label}.segments[{i}]")
        segments.append(Segment(*coords))

    closed = raw.get("closed", False)
    if not isinstance(closed, bool):
        raise SceneError(f"{label}.closed must be a boolean")
    polylines_raw = raw.get("polylines", [])
    if not isinstance(polylines_raw, list):
        raise SceneError(f"{label}.polylines must be a list")
    for i, line in enumerate(polylines_raw):
        if not isinstance(line, list):
            raise SceneError(f"{label}.polylines[{i}] must be a list of points")
        points = [
            tuple(_coerce_int_list(pt, 2, f"{label}.polylines[{i}][{j}]")) for j, pt in enumerate(line)
        ]
        segments.extend(segments_from_polyline(points, closed=closed))

    return SegmentGroup(segments=tuple(segments), color=color, visible=visible, name=name)


def _coerce_color(value: Any, label: str) -> RGBA:
    r, g, b, a = _coerce_int_list(value, 4, label)
    return (r, g, b, a)


def _coerce_int_list(value: Any, length: int, label: str) -> list[int]:
    if not isinstance(value, (list, tuple)) or len(value) != length:
        raise SceneError(f"{label} must be a list of {length} integers")
    return [_coerce_int(v, label) for v in value]


def _coerce_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SceneError(f"{label} must be an integer, got {value!r}")
    return value
