import math

import pytest

from cubesculpt.model import FaceVertex, Model, Vertex, compute_normal


def _length(vec):
    return math.sqrt(sum(c * c for c in vec))


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def test_cube_has_eight_vertices_and_six_quads():
    model = Model()
    assert len(model.vertices) == 8
    assert len(model.faces) == 6
    assert all(len(face) == 4 for face in model.faces)


def test_cube_vertices_are_at_half_unit_corners():
    model = Model()
    positions = {tuple(v.pos) for v in model.vertices}
    assert len(positions) == 8
    assert all(abs(c) == 0.5 for pos in positions for c in pos)


def test_faces_refer_to_master_vertices():
    model = Model()
    for face in model.faces:
        for fv in face:
            assert any(fv.v is v for v in model.vertices)


def test_face_uvs_follow_square_layout():
    model = Model()
    for face in model.faces:
        assert [fv.uv for fv in face] == [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]


def test_generate_tris_count_for_cube():
    model = Model()
    assert model.tri_count == 36
    assert len(model.tri_sources) == model.tri_count


def test_generate_tris_is_repeatable():
    model = Model()
    first = [tuple(v.pos) for v in model.tris]
    model.generate_tris()
    assert [tuple(v.pos) for v in model.tris] == first


def test_tri_vertices_copy_source_positions():
    model = Model()
    for out, src in zip(model.tris, model.tri_sources):
        assert out.pos == src.pos
        assert out is not src


def test_tri_normals_are_unit_and_shared_per_triangle():
    model = Model()
    for i in range(0, model.tri_count, 3):
        n0, n1, n2 = (model.tris[i + j].nm for j in range(3))
        assert n0 == n1 == n2
        assert _length(n0) == pytest.approx(1.0)


def test_tri_normals_are_axis_aligned_for_cube():
    model = Model()
    for v in model.tris:
        assert sorted(abs(c) for c in v.nm) == pytest.approx([0.0, 0.0, 1.0])


def test_compute_normal_is_perpendicular_to_edges():
    a = Vertex(pos=[0.2, -1.0, 3.0])
    b = Vertex(pos=[1.5, 0.5, 2.0])
    c = Vertex(pos=[-0.7, 2.0, 0.25])
    n = compute_normal(a, b, c)
    e1 = [q - p for p, q in zip(a.pos, b.pos)]
    e2 = [q - p for p, q in zip(a.pos, c.pos)]
    assert _length(n) == pytest.approx(1.0)
    assert _dot(n, e1) == pytest.approx(0.0, abs=1e-9)
    assert _dot(n, e2) == pytest.approx(0.0, abs=1e-9)


def test_compute_normal_swapping_winding_flips_sign():
    a = Vertex(pos=[0.0, 0.0, 0.0])
    b = Vertex(pos=[1.0, 0.0, 0.0])
    c = Vertex(pos=[0.0, 1.0, 0.0])
    forward = compute_normal(a, b, c)
    backward = compute_normal(a, c, b)
    assert forward == pytest.approx((0.0, 0.0, 1.0))
    assert backward == pytest.approx(tuple(-x for x in forward))


def test_compute_normal_degenerate_is_zero():
    a = Vertex(pos=[1.0, 1.0, 1.0])
    b = Vertex(pos=[2.0, 2.0, 2.0])
    c = Vertex(pos=[3.0, 3.0, 3.0])
    assert compute_normal(a, b, c) == (0.0, 0.0, 0.0)


def test_clear_tris_empties_triangle_data():
    model = Model()
    model.clear_tris()
    assert model.tri_count == 0
    assert model.tri_sources == []


def test_add_midpoint_on_shared_edge_splits_both_faces():
    model = Model()
    a, b = model.vertices[0], model.vertices[1]
    mid = model.add_midpoint(a, b)
    assert mid is model.vertices[-1]
    assert len(model.vertices) == 9
    sizes = sorted(len(face) for face in model.faces)
    assert sizes == [4, 4, 4, 4, 5, 5]
    for pos, pa, pb in zip(mid.pos, a.pos, b.pos):
        assert min(pa, pb) <= pos <= max(pa, pb)


def test_add_midpoint_inserted_between_endpoints():
    model = Model()
    a, b = model.vertices[0], model.vertices[1]
    mid = model.add_midpoint(a, b)
    front = model.faces[0]
    assert [fv.v for fv in front[:3]] == [a, mid, b]
    assert front[1].uv == pytest.approx([0.5, 0.0])
    assert mid.uv == pytest.approx([0.5, 0.0])


def test_add_midpoint_without_edge_returns_none():
    model = Model()
    result = model.add_midpoint(model.vertices[0], model.vertices[6])
    assert result is None
    assert len(model.vertices) == 8
    assert all(len(face) == 4 for face in model.faces)


def test_add_midpoint_then_generate_tris_adds_triangles():
    model = Model()
    model.add_midpoint(model.vertices[0], model.vertices[1])
    model.generate_tris()
    assert model.tri_count == 36 + 2 * 3


def test_generate_tris_skips_faces_with_fewer_than_three_corners():
    model = Model()
    v = model.vertices[0]
    model.faces = [[FaceVertex(v), FaceVertex(model.vertices[1])]]
    model.generate_tris()
    assert model.tri_count == 0


def test_update_vertex_moves_vertex_and_dependent_tris():
    model = Model()
    target = model.vertices[6]
    model.update_vertex(target, 0.9, 0.8, 0.7)
    assert target.pos == [0.9, 0.8, 0.7]
    touched = [out for out, src in zip(model.tris, model.tri_sources) if src is target]
    assert touched
    assert all(out.pos == [0.9, 0.8, 0.7] for out in touched)


def test_update_vertex_leaves_unrelated_tris_alone():
    model = Model()
    target = model.vertices[6]
    before = [list(v.pos) for v in model.tris]
    model.update_vertex(target, 0.9, 0.8, 0.7)
    for i in range(0, model.tri_count, 3):
        srcs = model.tri_sources[i:i + 3]
        if any(s is target for s in srcs):
            continue
        for j in range(3):
            assert model.tris[i + j].pos == before[i + j]


def test_update_vertex_recomputes_normals():
    model = Model()
    target = model.vertices[6]
    model.update_vertex(target, 0.9, 0.8, 0.7)
    for i in range(0, model.tri_count, 3):
        srcs = model.tri_sources[i:i + 3]
        if any(s is target for s in srcs):
            expected = compute_normal(*srcs)
            for j in range(3):
                assert model.tris[i + j].nm == pytest.approx(list(expected))


def test_vertex_copy_is_independent():
    v = Vertex(pos=[1.0, 2.0, 3.0], uv=[0.1, 0.2], nm=[0.0, 1.0, 0.0])
    c = v.copy()
    c.pos[0] = 9.0
    assert v.pos == [1.0, 2.0, 3.0]
    assert c.uv == v.uv and c.nm == v.nm