"""Capabilities every primitive generator implements."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from .polygon import Polygon
from .vertex import Vertex


class SharedVertex(ABC):
    """A generator that can hand out its deduplicated vertex list by index."""

    @abstractmethod
    def shared_vertex(self, idx: int) -> Vertex:
        """Return the vertex stored at ``idx``.

        ``idx`` must lie in ``[0, shared_vertex_count())``; anything else
        raises ``IndexError``.
        """

    @abstractmethod
    def shared_vertex_count(self) -> int:
        """Number of distinct vertices."""

    def shared_vertex_iter(self) -> Iterator[Vertex]:
        for idx in range(self.shared_vertex_count()):
            yield self.shared_vertex(idx)


class IndexedPolygon(ABC):
    """A generator that can hand out polygons of shared vertex indices."""

    @abstractmethod
    def indexed_polygon(self, idx: int) -> Polygon[int]:
        """Return polygon ``idx`` as indices into the shared vertex list."""

    @abstractmethod
    def indexed_polygon_count(self) -> int:
        """Number of polygons."""

    def indexed_polygon_iter(self) -> Iterator[Polygon[int]]:
        for idx in range(self.indexed_polygon_count()):
            yield self.indexed_polygon(idx)


def check_index(idx: int, count: int, what: str) -> int:
    if not 0 <= idx < count:
        raise IndexError(f"{what} index {idx} is out of range 0..{count}")
    return idx


class Generator(SharedVertex, IndexedPolygon):
    """Both capabilities at once; what ``Mesh.from_generator`` consumes."""
