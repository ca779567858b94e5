"""
Triangle mesh assembled from a primitive generator.

``Mesh.from_generator`` walks the shared vertex / indexed polygon pair and is
what an indexed draw call wants. ``Mesh.from_polygons`` consumes the
generator's own iterator instead and duplicates every vertex per triangle.
``to_arrays`` and ``interleaved`` hand the data over as numpy buffers laid
out for upload (position, normal, uv).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .generators import Generator, IndexedPolygon, SharedVertex
from .polygon import Polygon, triangulate
from .vertex import Vec2, Vec3, Vertex

logger = logging.getLogger(__name__)

Tri = Tuple[int, int, int]

# floats per interleaved vertex: pos(3) normal(3) uv(2)
VERTEX_STRIDE = 8


@dataclass
class Mesh:
    vertices: List[Vec3] = field(default_factory=list)
    faces: List[Tri] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)  # aligned 1:1 with vertices
    uvs: List[Vec2] = field(default_factory=list)      # aligned 1:1 with vertices
    name: str = "mesh"

    # ---- construction ----
    @classmethod
    def from_generator(cls, gen: Generator, name: str = "mesh") -> "Mesh":
        """Build an indexed mesh from anything that is both ``SharedVertex``
        and ``IndexedPolygon``. Quads are split into two triangles."""
        if not isinstance(gen, SharedVertex) or not isinstance(gen, IndexedPolygon):
            raise TypeError(f"{type(gen).__name__} does not provide shared vertices and indexed polygons")
        mesh = cls(name=name)
        for v in gen.shared_vertex_iter():
            mesh._append(v)
        mesh.faces = [(t.x, t.y, t.z) for t in triangulate(gen.indexed_polygon_iter())]
        logger.debug("built indexed mesh %r: %d vertices, %d triangles",
                     name, mesh.vertex_count, mesh.triangle_count)
        return mesh

    @classmethod
    def from_polygons(cls, polygons: Iterable[Polygon[Vertex]], name: str = "mesh") -> "Mesh":
        """Build an unindexed mesh: three fresh vertices per triangle."""
        mesh = cls(name=name)
        for tri in triangulate(polygons):
            base = mesh.vertex_count
            for v in tri:
                mesh._append(v)
            mesh.faces.append((base, base + 1, base + 2))
        logger.debug("built unindexed mesh %r: %d vertices, %d triangles",
                     name, mesh.vertex_count, mesh.triangle_count)
        return mesh

    def _append(self, v: Vertex) -> None:
        self.vertices.append(v.pos)
        self.normals.append(v.normal)
        self.uvs.append(v.uv)

    # ---- analysis ----
    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.faces)

    def vertex(self, idx: int) -> Vertex:
        return Vertex(self.vertices[idx], self.normals[idx], self.uvs[idx])

    def bounds(self) -> Tuple[Vec3, Vec3]:
        if not self.vertices:
            raise ValueError(f"mesh {self.name!r} has no vertices")
        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    # ---- buffers ----
    def to_arrays(self) -> Dict[str, np.ndarray]:
        """Separate attribute arrays plus a ``(m, 3)`` uint32 index array."""
        return {
            "positions": np.asarray(self.vertices, dtype=np.float32).reshape(-1, 3),
            "normals": np.asarray(self.normals, dtype=np.float32).reshape(-1, 3),
            "uvs": np.asarray(self.uvs, dtype=np.float32).reshape(-1, 2),
            "indices": np.asarray(self.faces, dtype=np.uint32).reshape(-1, 3),
        }

    def interleaved(self) -> np.ndarray:
        """``(n, 8)`` float32 vertex buffer: [pos(3), normal(3), uv(2)]."""
        arrays = self.to_arrays()
        out = np.zeros((self.vertex_count, VERTEX_STRIDE), dtype=np.float32)
        out[:, 0:3] = arrays["positions"]
        out[:, 3:6] = arrays["normals"]
        out[:, 6:8] = arrays["uvs"]
        return out
