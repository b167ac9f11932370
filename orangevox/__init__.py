"""Voxel world logic: blocks, chunks, world streaming, physics, culling, cameras, lighting and editor layout."""

__version__ = "0.1.0"

__all__ = [
    "block",
    "light",
    "camera",
    "day_night",
    "geometry",
    "frustum",
    "chunk",
    "quads",
    "world",
    "physics",
    "panel",
    "editor_layout",
]