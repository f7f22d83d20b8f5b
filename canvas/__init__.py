"""
canvas package

Scene model, off-screen drawing surface, render pipeline and surface view.
"""

from canvas.scene import Scene
from canvas.surface import DrawingSurface
from canvas.render import render_scene
from canvas.view import SurfaceView

__all__ = [
    "Scene",
    "DrawingSurface",
    "render_scene",
    "SurfaceView",
]
