"""
Cylinder primitive with radius 1 and height 2, centered at (0, 0, 0) and
pointing up the z axis.

Shared vertex layout for ``sub_u`` columns and ``sub_h`` height segments::

    0                              south pole
    1 .. sub_u                     bottom cap ring   (h == -1)
    next (sub_h + 1) * sub_u       side wall rings   (h == 0 .. sub_h)
    next sub_u                     top cap ring      (h == sub_h + 1)
    last                           north pole

The cap rings repeat the positions of the outermost side rings; they are kept
apart because the cap needs an axial normal and a uv on its disc.

Polygon layout: ``sub_u`` bottom triangles, ``sub_h * sub_u`` side quads,
then ``sub_u`` top triangles. Column ``sub_u - 1`` closes the seam by wrapping
back to column 0.

Atlas: the side wall fills the lower half, the top cap disc sits in the upper
left quarter and the bottom cap disc in the upper right quarter.
"""
from __future__ import annotations

import math
import operator

from .generators import Generator, check_index
from .polygon import Polygon, Quad, Triangle
from .texture_coord import UV_GAP, UVCircle, UVRect
from .vertex import Vertex

UV_SIDE = UVRect((0.0, 0.0), (1.0, 0.5)).inset(UV_GAP)
UV_RADIUS = 0.25 - UV_GAP
UV_TOP_CENTER = (0.25, 0.75)
UV_BOTTOM_CENTER = (0.75, 0.75)

# Side wall v coordinate follows the ring height (h / sub_h).
SIDE_UV_HEIGHT = "height"
# Side wall v coordinate repeats the column fraction (u / sub_u), matching
# meshes produced by older releases of this generator.
SIDE_UV_RADIAL = "radial"
SIDE_UV_MODES = (SIDE_UV_HEIGHT, SIDE_UV_RADIAL)


class Cylinder(Generator):
    """Radially subdivided, capped cylinder.

    ``u`` is the number of points around the circumference (> 1) and ``h``
    the number of segments along the height (> 0). ``side_uv`` picks how the
    side wall's v coordinate is derived, see ``SIDE_UV_MODES``.

    Iterating yields ``Triangle[Vertex]`` for the caps and ``Quad[Vertex]``
    for the side wall. The iterator is single pass.
    """

    def __init__(self, u: int, h: int = 1, *, side_uv: str = SIDE_UV_HEIGHT) -> None:
        # non-integral sizes raise TypeError here rather than being truncated
        u = operator.index(u)
        h = operator.index(h)
        if u <= 1:
            raise ValueError(f"u must be > 1 (got {u})")
        if h <= 0:
            raise ValueError(f"h must be > 0 (got {h})")
        if side_uv not in SIDE_UV_MODES:
            raise ValueError(f"side_uv must be one of {SIDE_UV_MODES} (got {side_uv!r})")
        self._idx = 0
        self._sub_u = u
        self._sub_h = h
        self._side_uv = side_uv

    @classmethod
    def subdivide(cls, u: int, h: int, *, side_uv: str = SIDE_UV_HEIGHT) -> "Cylinder":
        return cls(u, h, side_uv=side_uv)

    @property
    def sub_u(self) -> int:
        return self._sub_u

    @property
    def sub_h(self) -> int:
        return self._sub_h

    @property
    def side_uv(self) -> str:
        return self._side_uv

    def _vert(self, u: int, h: int) -> Vertex:
        u_per = u / self._sub_u
        a = u_per * math.pi * 2.0
        n = (math.cos(a), math.sin(a), 0.0)
        if h < 0:
            # bottom cap ring
            hc = 0
            normal = (0.0, 0.0, -1.0)
            uv = UVCircle(UV_BOTTOM_CENTER, UV_RADIUS).coord(a)
        elif h > self._sub_h:
            # top cap ring
            hc = self._sub_h
            normal = (0.0, 0.0, 1.0)
            uv = UVCircle(UV_TOP_CENTER, UV_RADIUS).coord(a)
        else:
            hc = h
            normal = n
            if self._side_uv == SIDE_UV_RADIAL:
                h_per = u_per
            else:
                h_per = h / self._sub_h
            uv = UV_SIDE.coord((u_per, h_per))
        z = (hc / self._sub_h) * 2.0 - 1.0
        return Vertex((n[0], n[1], z), normal, uv)

    # ---- iteration ----
    def __iter__(self) -> "Cylinder":
        return self

    def __next__(self) -> Polygon[Vertex]:
        if self._idx >= self.indexed_polygon_count():
            raise StopIteration
        idx = self._idx
        self._idx += 1
        return self.indexed_polygon(idx).map_vertex(self.shared_vertex)

    def __length_hint__(self) -> int:
        return self.indexed_polygon_count() - self._idx

    # ---- shared vertices ----
    def shared_vertex(self, idx: int) -> Vertex:
        count = self.shared_vertex_count()
        check_index(idx, count, "vertex")
        if idx == 0:
            return Vertex((0.0, 0.0, -1.0), (0.0, 0.0, -1.0), UV_BOTTOM_CENTER)
        if idx == count - 1:
            return Vertex((0.0, 0.0, 1.0), (0.0, 0.0, 1.0), UV_TOP_CENTER)
        # skip the south pole
        idx -= 1
        return self._vert(idx % self._sub_u, idx // self._sub_u - 1)

    def shared_vertex_count(self) -> int:
        return (3 + self._sub_h) * self._sub_u + 2

    # ---- indexed polygons ----
    def indexed_polygon(self, idx: int) -> Polygon[int]:
        check_index(idx, self.indexed_polygon_count(), "polygon")
        u = idx % self._sub_u
        u1 = (u + 1) % self._sub_u
        h = idx // self._sub_u - 1
        base = 1 + idx - u
        if h < 0:
            return Triangle(base + u, 0, base + u1)
        if h == self._sub_h:
            # the top cap uses the ring after the last side ring, which
            # carries the cap normals
            base += self._sub_u
            end = self.shared_vertex_count() - 1
            return Triangle(base + u, base + u1, end)
        return Quad(base + u, base + u1, base + u1 + self._sub_u, base + u + self._sub_u)

    def indexed_polygon_count(self) -> int:
        return (2 + self._sub_h) * self._sub_u

    def __repr__(self) -> str:
        return f"Cylinder(u={self._sub_u}, h={self._sub_h}, side_uv={self._side_uv!r})"
