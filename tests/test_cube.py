# tests/test_cube.py
# Cube generator: corner table, normals, atlas cells, indexed vs iterated output

from itertools import combinations

import pytest

from meshgen import UV_GAP, Cube, Quad, polygon_normal, triangulate
from meshgen.cube import CELL_HEIGHT, CELL_WIDTH, face_cell


def test_counts() -> None:
    cube = Cube()
    assert cube.shared_vertex_count() == 24
    assert cube.indexed_polygon_count() == 6


def test_face_corners_are_unit_and_distinct() -> None:
    cube = Cube()
    for face in range(6):
        quad = cube.indexed_polygon(face)
        positions = [cube.shared_vertex(i).pos for i in quad]
        assert len(set(positions)) == 4
        for pos in positions:
            assert all(abs(c) == 1.0 for c in pos)


def test_indexed_polygon_is_consecutive_slots() -> None:
    cube = Cube()
    assert cube.indexed_polygon(0) == Quad(0, 1, 2, 3)
    assert cube.indexed_polygon(5) == Quad(20, 21, 22, 23)


def test_iteration_matches_indexed_resolution() -> None:
    indexed = Cube()
    faces = list(Cube())
    assert len(faces) == 6
    for idx, face in enumerate(faces):
        assert isinstance(face, Quad)
        expected = indexed.indexed_polygon(idx).map_vertex(indexed.shared_vertex)
        assert face == expected


def test_iteration_is_single_pass() -> None:
    cube = Cube()
    assert cube.__length_hint__() == 6
    next(cube)
    assert cube.__length_hint__() == 5
    rest = list(cube)
    assert len(rest) == 5
    assert list(cube) == []
    with pytest.raises(StopIteration):
        next(cube)


def test_normals_follow_face_table() -> None:
    expected = [(1, 0, 0), (0, 1, 0), (-1, 0, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]
    for face, normal in zip(Cube(), expected):
        for v in face:
            assert v.normal == normal
            # the face lies on the plane its normal points at
            axis = [abs(c) for c in normal].index(1)
            assert v.pos[axis] == normal[axis]


def test_winding_is_counter_clockwise_from_outside() -> None:
    for face in Cube():
        assert polygon_normal(face) == pytest.approx(face.x.normal)


def test_uv_cells_tile_the_grid_without_overlap() -> None:
    cube = Cube()
    rects = []
    for face in range(6):
        uvs = [cube.shared_vertex(face * 4 + k).uv for k in range(4)]
        us = [uv[0] for uv in uvs]
        vs = [uv[1] for uv in uvs]
        lo = (min(us) - UV_GAP, min(vs) - UV_GAP)
        hi = (max(us) + UV_GAP, max(vs) + UV_GAP)
        assert hi[0] - lo[0] == pytest.approx(CELL_WIDTH)
        assert hi[1] - lo[1] == pytest.approx(CELL_HEIGHT)
        # on the 4x3 grid
        assert lo[0] / CELL_WIDTH == pytest.approx(round(lo[0] / CELL_WIDTH))
        assert lo[1] / CELL_HEIGHT == pytest.approx(round(lo[1] / CELL_HEIGHT))
        cell = face_cell(face)
        assert lo == pytest.approx(cell.offset)
        rects.append((lo, hi))

    for (alo, ahi), (blo, bhi) in combinations(rects, 2):
        overlap_u = min(ahi[0], bhi[0]) - max(alo[0], blo[0])
        overlap_v = min(ahi[1], bhi[1]) - max(alo[1], blo[1])
        assert overlap_u <= 1e-9 or overlap_v <= 1e-9


def test_slot_order_matches_layout() -> None:
    cube = Cube()
    # slot 0 top-left, 1 bottom-left, 2 bottom-right, 3 top-right
    tl, bl, br, tr = (cube.shared_vertex(k).uv for k in range(4))
    assert tl[0] == pytest.approx(bl[0])
    assert tl[1] > bl[1]
    assert br[0] > bl[0]
    assert br[1] == pytest.approx(bl[1])
    assert tr == pytest.approx((br[0], tl[1]))


def test_cross_layout_neighbours_share_edges() -> None:
    cube = Cube()
    pos = lambda i: cube.shared_vertex(i).pos
    # bottom edge of +Z sits on top edge of +Y
    assert (pos(17), pos(18)) == (pos(4), pos(7))
    # top edge of -Z sits on bottom edge of +Y
    assert (pos(20), pos(23)) == (pos(5), pos(6))
    # middle row wraps around: right edge of face 3 is left edge of face 0
    assert (pos(15), pos(14)) == (pos(0), pos(1))


def test_triangulated_cube() -> None:
    faces = list(Cube())
    tris = list(triangulate(faces))
    assert len(tris) == 12
    positions = [v.pos for face in faces for v in face]
    assert len(positions) == 24
    unique = set(positions)
    assert len(unique) == 8
    for corner in unique:
        assert positions.count(corner) == 3


@pytest.mark.parametrize("idx", [-1, 24, 100])
def test_shared_vertex_out_of_range(idx: int) -> None:
    with pytest.raises(IndexError):
        Cube().shared_vertex(idx)


@pytest.mark.parametrize("idx", [-1, 6])
def test_indexed_polygon_out_of_range(idx: int) -> None:
    with pytest.raises(IndexError):
        Cube().indexed_polygon(idx)


def test_shared_vertex_matches_face_corner() -> None:
    cube = Cube()
    faces = list(Cube())
    for idx in range(cube.shared_vertex_count()):
        assert cube.shared_vertex(idx) == list(faces[idx // 4])[idx % 4]
