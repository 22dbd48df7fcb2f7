from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class PreviewFrame:
    """Premultiplied BGRA pixels plus the dimensions needed to interpret them."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != self.width * self.height * 4:
            raise ValueError(
                f"frame data has {len(self.data)} bytes, expected {self.width * self.height * 4}"
            )

    @property
    def is_empty(self) -> bool:
        return not self.data

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise IndexError(f"pixel out of range: ({x}, {y})")
        i = (y * self.width + x) * 4
        b, g, r, a = self.data[i : i + 4]
        return (b, g, r, a)

    def to_bgra_array(self) -> np.ndarray:
        """No-copy (H, W, 4) view of the raw premultiplied bytes."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)

    def to_rgba_array(self) -> np.ndarray:
        """Straight (un-premultiplied) RGBA copy, shape (H, W, 4)."""
        bgra = self.to_bgra_array().astype(np.uint32)
        alpha = bgra[:, :, 3:4]
        safe = np.maximum(alpha, 1)
        rgb = np.where(alpha > 0, (bgra[:, :, 2::-1] * 255 + safe // 2) // safe, 0)
        out = np.empty((self.height, self.width, 4), dtype=np.uint8)
        out[:, :, :3] = np.clip(rgb, 0, 255).astype(np.uint8)
        out[:, :, 3] = bgra[:, :, 3].astype(np.uint8)
        return out

    def to_rgba_tensor(self) -> torch.Tensor:
        """Straight RGBA255 tensor, shape (H, W, 4), for matrix-style display paths."""
        import torch

        return torch.from_numpy(self.to_rgba_array())

    def to_image(self) -> Image.Image:
        if self.is_empty:
            raise ValueError("cannot convert an empty frame to an image")
        return Image.fromarray(self.to_rgba_array())

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        self.to_image().save(out, format="PNG")
        return out
