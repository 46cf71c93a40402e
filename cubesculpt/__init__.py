"""Polygon model editing: a sculptable cube, triangulation and an orthographic vertex editor."""

__version__ = "0.1.0"
__all__ = ["model", "cube", "editor"]