from __future__ import annotations


class SceneError(ValueError):
    pass
