"""Editable polygon mesh with a fan-triangulated vertex buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar

_T = TypeVar("_T")

Normal = Tuple[float, float, float]

_NORMAL_EPSILON = 1e-6


@dataclass(eq=False)
class Vertex:
    """A mesh vertex: position, texture coordinate and normal.

    Vertices compare by identity, so faces and triangles can refer back to
    the exact vertex object they came from.
    """

    pos: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    uv: List[float] = field(default_factory=lambda: [0.0, 0.0])
    nm: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])

    def copy(self) -> "Vertex":
        """Return an independent copy of this vertex."""
        return Vertex(list(self.pos), list(self.uv), list(self.nm))


@dataclass(eq=False)
class FaceVertex:
    """A corner of a face: the shared vertex plus the face's own UV."""

    v: Vertex
    uv: List[float] = field(default_factory=lambda: [0.0, 0.0])


Face = List[FaceVertex]


def compute_normal(v0: Vertex, v1: Vertex, v2: Vertex) -> Normal:
    """Return the unit normal of triangle (v0, v1, v2), or zeros if degenerate."""
    u = [b - a for a, b in zip(v0.pos, v1.pos)]
    w = [c - a for a, c in zip(v0.pos, v2.pos)]
    n = (
        u[1] * w[2] - u[2] * w[1],
        u[2] * w[0] - u[0] * w[2],
        u[0] * w[1] - u[1] * w[0],
    )
    length = math.sqrt(sum(c * c for c in n))
    if length > _NORMAL_EPSILON:
        return (n[0] / length, n[1] / length, n[2] / length)
    return (0.0, 0.0, 0.0)


def _triples(items: Sequence[_T]) -> Iterator[Tuple[_T, _T, _T]]:
    it = iter(items)
    return zip(it, it, it)


def _edges(face: Face) -> Iterator[Tuple[int, FaceVertex, FaceVertex]]:
    """Yield (index, corner, next corner) for every edge of a face, wrapping."""
    size = len(face)
    for i, fv in enumerate(face):
        yield i, fv, face[(i + 1) % size]


def _is_edge(fv1: FaceVertex, fv2: FaceVertex, a: Vertex, b: Vertex) -> bool:
    return (fv1.v is a and fv2.v is b) or (fv1.v is b and fv2.v is a)


class Model:
    """A polygonal model, starting as a unit cube centred on the origin.

    ``vertices`` is the master vertex list, ``faces`` are polygons that refer
    to those vertices, and ``tris`` is the flat triangle list built from the
    faces, with ``tri_sources`` recording which master vertex each triangle
    vertex came from.
    """

    def __init__(self) -> None:
        self.vertices: List[Vertex] = []
        self.faces: List[Face] = []
        self.tris: List[Vertex] = []
        self.tri_sources: List[Vertex] = []
        self.init_cube()
        self.generate_tris()

    @property
    def tri_count(self) -> int:
        """Number of triangle vertices (always a multiple of three)."""
        return len(self.tris)

    def clear_tris(self) -> None:
        """Drop the triangle list and its source tracking."""
        self.tris = []
        self.tri_sources = []

    def init_cube(self) -> None:
        """Reset the model to a unit cube centred at the origin."""
        corners = [
            (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
            (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
        ]
        self.vertices = [Vertex(pos=list(p)) for p in corners]

        uvs = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        quads = [
            (0, 1, 2, 3), (4, 5, 6, 7),
            (0, 1, 5, 4), (2, 3, 7, 6),
            (0, 3, 7, 4), (1, 2, 6, 5),
        ]
        self.faces = [
            [FaceVertex(self.vertices[idx], list(uv)) for idx, uv in zip(quad, uvs)]
            for quad in quads
        ]

    def add_midpoint(self, a: Vertex, b: Vertex) -> Optional[Vertex]:
        """Split the edge a-b in every face that has it.

        Returns the new midpoint vertex, or None if no face has that edge.
        """
        samples = [
            [(fv1.uv[j] + fv2.uv[j]) * 0.5 for j in range(2)]
            for face in self.faces
            for _, fv1, fv2 in _edges(face)
            if _is_edge(fv1, fv2, a, b)
        ]
        if not samples:
            return None

        mid_uv = [sum(s[j] for s in samples) / len(samples) for j in range(2)]
        mid = Vertex(
            pos=[(pa + pb) * 0.5 for pa, pb in zip(a.pos, b.pos)],
            uv=mid_uv,
        )
        self.vertices.append(mid)

        for face in self.faces:
            for i, fv1, fv2 in _edges(face):
                if _is_edge(fv1, fv2, a, b):
                    corner = FaceVertex(
                        mid, [(fv1.uv[j] + fv2.uv[j]) * 0.5 for j in range(2)]
                    )
                    face.insert((i + 1) % len(face), corner)
                    break

        return mid

    def generate_tris(self) -> None:
        """Fan-triangulate every face into ``tris`` with flat normals."""
        self.clear_tris()
        tris: List[Vertex] = []
        sources: List[Vertex] = []

        for face in self.faces:
            if len(face) < 3:
                continue
            fv0 = face[0]
            for fv1, fv2 in zip(face[1:], face[2:]):
                normal = compute_normal(fv0.v, fv1.v, fv2.v)
                for fv in (fv0, fv1, fv2):
                    out = fv.v.copy()
                    out.nm = list(normal)
                    out.uv = list(fv.uv)
                    tris.append(out)
                    sources.append(fv.v)

        self.tris = tris
        self.tri_sources = sources

    def update_vertex(self, v: Vertex, x: float, y: float, z: float) -> None:
        """Move a vertex and refresh every triangle that uses it."""
        v.pos[:] = [x, y, z]

        for outs, srcs in zip(_triples(self.tris), _triples(self.tri_sources)):
            if not any(src is v for src in srcs):
                continue
            normal = compute_normal(*srcs)
            for out, src in zip(outs, srcs):
                out.pos = list(src.pos)
                out.nm = list(normal)
                out.uv = list(src.uv)