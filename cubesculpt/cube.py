"""Fixed textured cube made of 36 triangle vertices."""

from __future__ import annotations

from typing import List

from cubesculpt.model import Vertex

_P = 0.5


def generate_textured_cube(u0: float, u1: float, v0: float, v1: float) -> List[Vertex]:
    """Return the 36 vertices of a unit cube, two triangles per face.

    Every face maps the full texture rectangle (u0..u1, v0..v1).
    """
    p = _P
    faces = [
        # Front (+Z)
        (
            (0.0, 0.0, 1.0),
            [(-p, -p, p), (p, -p, p), (p, p, p), (p, p, p), (-p, p, p), (-p, -p, p)],
            [(u0, v1), (u1, v1), (u1, v0), (u1, v0), (u0, v0), (u0, v1)],
        ),
        # Back (-Z)
        (
            (0.0, 0.0, -1.0),
            [(-p, -p, -p), (-p, p, -p), (p, p, -p), (p, p, -p), (p, -p, -p), (-p, -p, -p)],
            [(u0, v1), (u0, v0), (u1, v0), (u1, v0), (u1, v1), (u0, v1)],
        ),
        # Right (+X)
        (
            (1.0, 0.0, 0.0),
            [(p, -p, -p), (p, p, -p), (p, p, p), (p, p, p), (p, -p, p), (p, -p, -p)],
            [(u0, v1), (u0, v0), (u1, v0), (u1, v0), (u1, v1), (u0, v1)],
        ),
        # Left (-X)
        (
            (-1.0, 0.0, 0.0),
            [(-p, -p, -p), (-p, -p, p), (-p, p, p), (-p, p, p), (-p, p, -p), (-p, -p, -p)],
            [(u0, v1), (u1, v1), (u1, v0), (u1, v0), (u0, v0), (u0, v1)],
        ),
        # Top (+Y)
        (
            (0.0, 1.0, 0.0),
            [(-p, p, -p), (-p, p, p), (p, p, p), (p, p, p), (p, p, -p), (-p, p, -p)],
            [(u0, v1), (u1, v1), (u1, v0), (u1, v0), (u0, v0), (u0, v1)],
        ),
        # Bottom (-Y)
        (
            (0.0, -1.0, 0.0),
            [(-p, -p, -p), (p, -p, -p), (p, -p, p), (p, -p, p), (-p, -p, p), (-p, -p, -p)],
            [(u0, v1), (u1, v1), (u1, v0), (u1, v0), (u0, v0), (u0, v1)],
        ),
    ]

    return [
        Vertex(pos=list(corner), uv=list(uv), nm=list(normal))
        for normal, corners, uvs in faces
        for corner, uv in zip(corners, uvs)
    ]