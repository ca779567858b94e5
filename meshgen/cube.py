"""
Cube primitive: a 2x2x2 box centered at the origin.

Every face owns its four corners (24 shared vertices in total) because a
corner needs a different normal and uv on each of the three faces touching
it. Faces are laid out in the atlas as an unfolded cross over a 4x3 grid::

             x-----x
             |16 19|
             |  4  | +z
             |17 18|
     <-x-----x-----x-----x-----x->
     15|0   3|4   7|8  11|12 15|0
       |  0  |  1  |  2  |  3  |
     15|1   2|5   6|9  10|13 14|1
     <-x-----x-----x-----x-----x->
          +x |20 23|
             |  5  |
             |21 22|
             x-----x

Within a cell slot 0 is the top-left corner, 1 bottom-left, 2 bottom-right
and 3 top-right.
"""
from __future__ import annotations

import operator
from typing import Tuple

from .generators import Generator, check_index
from .polygon import Quad
from .texture_coord import UVRect
from .vertex import Vec2, Vec3, Vertex

FACE_COUNT = 6
VERTEX_COUNT = 4 * FACE_COUNT

# Corner position of every vertex slot, four per face, counter-clockwise
# seen from outside.
_CORNERS: Tuple[Vec3, ...] = (
    # 0: +X
    (1.0, -1.0, 1.0), (1.0, -1.0, -1.0), (1.0, 1.0, -1.0), (1.0, 1.0, 1.0),
    # 1: +Y
    (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0),
    # 2: -X
    (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0),
    # 3: -Y
    (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0), (1.0, -1.0, 1.0),
    # 4: +Z
    (1.0, -1.0, 1.0), (1.0, 1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0),
    # 5: -Z
    (1.0, 1.0, -1.0), (1.0, -1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, 1.0, -1.0),
)

_NORMALS: Tuple[Vec3, ...] = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
)

CELL_WIDTH = 1.0 / 4.0
CELL_HEIGHT = 1.0 / 3.0

# (column, row) of each face in the atlas grid, row 0 at v == 0.
_CELLS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 1), (2, 1), (3, 1), (1, 2), (1, 0))

# Local cell coordinate of slot ``idx % 4``.
_SLOT_UV: Tuple[Vec2, ...] = ((0.0, 1.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0))


def face_cell(face: int) -> UVRect:
    """Atlas cell of ``face`` before the uv gap is taken off."""
    col, row = _CELLS[check_index(face, FACE_COUNT, "face")]
    return UVRect((col * CELL_WIDTH, row * CELL_HEIGHT), (CELL_WIDTH, CELL_HEIGHT))


class Cube(Generator):
    """A perfect cube, centered at (0, 0, 0) with each face 1 away from the origin.

    Iterating yields the six faces as ``Quad[Vertex]``. The iterator is single
    pass; build a new ``Cube`` to walk the faces again.
    """

    def __init__(self) -> None:
        self._range = iter(range(FACE_COUNT))

    def _vert(self, idx: int) -> Vec3:
        return _CORNERS[check_index(idx, VERTEX_COUNT, "vertex")]

    def _uv(self, idx: int) -> Vec2:
        rect = face_cell(idx // 4).inset()
        return rect.coord(_SLOT_UV[idx % 4])

    def _face_indexed(self, face: int) -> Tuple[Vec3, Quad[int]]:
        check_index(face, FACE_COUNT, "face")
        return _NORMALS[face], self.indexed_polygon(face)

    def _face(self, face: int) -> Quad[Vertex]:
        normal, quad = self._face_indexed(face)
        return quad.map_vertex(lambda i: Vertex(self._vert(i), normal, self._uv(i)))

    # ---- iteration ----
    def __iter__(self) -> "Cube":
        return self

    def __next__(self) -> Quad[Vertex]:
        return self._face(next(self._range))

    def __length_hint__(self) -> int:
        return operator.length_hint(self._range)

    # ---- shared vertices ----
    def shared_vertex(self, idx: int) -> Vertex:
        check_index(idx, VERTEX_COUNT, "vertex")
        return Vertex(self._vert(idx), _NORMALS[idx // 4], self._uv(idx))

    def shared_vertex_count(self) -> int:
        return VERTEX_COUNT

    # ---- indexed polygons ----
    def indexed_polygon(self, idx: int) -> Quad[int]:
        check_index(idx, FACE_COUNT, "face")
        base = idx * 4
        return Quad(base, base + 1, base + 2, base + 3)

    def indexed_polygon_count(self) -> int:
        return FACE_COUNT
