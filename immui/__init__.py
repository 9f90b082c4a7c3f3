"""Immediate mode UI building blocks: geometry, layout cursor, styles, text editing, painting and meshes."""

__version__ = "0.1.0"

__all__ = [
    "clipboard",
    "commands",
    "cursor",
    "editor",
    "geometry",
    "mesh",
    "painter",
    "resources",
    "style",
    "windowing",
]