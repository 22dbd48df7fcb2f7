from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path

from preview_raster import load_scene, render_frame


DEFAULT_LOG_LEVEL = "WARNING"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="preview-raster")
    parser.add_argument(
        "--log-level",
        default=os.getenv("PREVIEW_RASTER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="Logging level. Default: $PREVIEW_RASTER_LOG_LEVEL or WARNING.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Rasterize a scene file (TOML) into a PNG or raw BGRA buffer.")
    render.add_argument("scene", type=Path)
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--width", type=int, default=None, help="Override the scene canvas width.")
    render.add_argument("--height", type=int, default=None, help="Override the scene canvas height.")
    render.add_argument(
        "--format",
        choices=["png", "raw"],
        default="png",
        help="png writes straight RGBA; raw writes the premultiplied BGRA bytes verbatim.",
    )

    info = sub.add_parser("info", help="Print a JSON summary of a scene file.")
    info.add_argument("scene", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(level=str(args.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        scene = load_scene(args.scene)
        width = args.width if args.width is not None else scene.width
        height = args.height if args.height is not None else scene.height
        frame = render_frame(width, height, scene.groups)
        if args.format == "raw":
            args.out.write_bytes(frame.data)
        else:
            if frame.is_empty:
                raise RuntimeError(f"cannot write PNG for empty canvas {width}x{height}; use --format raw")
            frame.save_png(args.out)
        print(f"render complete: size={width}x{height} bytes={len(frame.data)} out={args.out}")
        return

    if args.command == "info":
        scene = load_scene(args.scene)
        summary = {
            "width": scene.width,
            "height": scene.height,
            "groups": len(scene.groups),
            "visible_groups": sum(1 for g in scene.groups if g.visible and g.segments),
            "segments": sum(len(g.segments) for g in scene.groups),
        }
        print(json.dumps(summary, indent=2, sort_keys=True))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()
