from __future__ import annotations

from dataclasses import dataclass

from preview_raster.types import RGBA


@dataclass(frozen=True)
class PremultipliedColor:
    r: int
    g: int
    b: int
    a: int


def clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


def clamp_rgba(color: RGBA) -> RGBA:
    r, g, b, a = color
    return (clamp_channel(r), clamp_channel(g), clamp_channel(b), clamp_channel(a))


def premultiply(color: RGBA) -> PremultipliedColor:
    """Clamp a straight RGBA color and scale its channels by alpha.

    Uses the bias-rounded ``(c * a + 127) // 255`` approximation so previews
    stay byte-identical with earlier renders.
    """
    r, g, b, a = clamp_rgba(color)
    return PremultipliedColor(
        r=(r * a + 127) // 255,
        g=(g * a + 127) // 255,
        b=(b * a + 127) // 255,
        a=a,
    )
