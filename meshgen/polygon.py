"""
Polygon containers shared by every generator.

A polygon is either a ``Triangle`` or a ``Quad``. Both are generic over their
payload: a generator hands out polygons of ``int`` (indices into its shared
vertex list) or polygons of ``Vertex`` (fully resolved). Elements are listed
counter-clockwise when seen from outside the solid, so the right-hand rule on
the first three elements gives the outward facing direction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Tuple, TypeVar, Union

from .vertex import Vec3, Vertex, v_cross, v_norm, v_sub

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Triangle(Generic[T]):
    x: T
    y: T
    z: T

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z))

    def __len__(self) -> int:
        return 3

    def map_vertex(self, fn: Callable[[T], U]) -> "Triangle[U]":
        return Triangle(fn(self.x), fn(self.y), fn(self.z))

    def triangulate(self) -> Tuple["Triangle[T]"]:
        return (self,)


@dataclass(frozen=True)
class Quad(Generic[T]):
    x: T
    y: T
    z: T
    w: T

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z, self.w))

    def __len__(self) -> int:
        return 4

    def map_vertex(self, fn: Callable[[T], U]) -> "Quad[U]":
        return Quad(fn(self.x), fn(self.y), fn(self.z), fn(self.w))

    def triangulate(self) -> Tuple["Triangle[T]", "Triangle[T]"]:
        """Split along the x-z diagonal; both halves keep the quad's winding."""
        return (Triangle(self.x, self.y, self.z), Triangle(self.x, self.z, self.w))


Polygon = Union[Triangle[T], Quad[T]]


# ------------------
# Stream adaptors
# ------------------

def triangulate(polygons: Iterable[Polygon]) -> Iterator[Triangle]:
    for poly in polygons:
        yield from poly.triangulate()


def vertices(polygons: Iterable[Polygon]) -> Iterator:
    for poly in polygons:
        yield from poly


def polygon_normal(poly: Polygon) -> Vec3:
    """Unit normal implied by the winding of a polygon of ``Vertex``."""
    a, b, c = list(poly)[:3]
    if not isinstance(a, Vertex):
        raise TypeError(f"polygon_normal needs resolved vertices, got {type(a).__name__}")
    return v_norm(v_cross(v_sub(b.pos, a.pos), v_sub(c.pos, a.pos)))
