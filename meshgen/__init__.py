"""
meshgen: parametric primitive generators (cube, cylinder) that emit their
surface either as fully resolved polygons or as a shared vertex list plus an
index list, for indexed rendering.

    >>> from meshgen import Cube, Cylinder, Mesh
    >>> faces = list(Cube())                  # six Quad[Vertex]
    >>> mesh = Mesh.from_generator(Cylinder.subdivide(16, 2))
    >>> buffer = mesh.interleaved()           # (n, 8) float32
"""
from .cube import Cube
from .cylinder import SIDE_UV_HEIGHT, SIDE_UV_RADIAL, Cylinder
from .generators import Generator, IndexedPolygon, SharedVertex
from .mesh import Mesh
from .polygon import Polygon, Quad, Triangle, polygon_normal, triangulate, vertices
from .texture_coord import UV_GAP, UVCircle, UVRect
from .vertex import Vertex

__all__ = [
    "Cube",
    "Cylinder",
    "SIDE_UV_HEIGHT",
    "SIDE_UV_RADIAL",
    "Generator",
    "IndexedPolygon",
    "SharedVertex",
    "Mesh",
    "Polygon",
    "Quad",
    "Triangle",
    "polygon_normal",
    "triangulate",
    "vertices",
    "UV_GAP",
    "UVCircle",
    "UVRect",
    "Vertex",
]
