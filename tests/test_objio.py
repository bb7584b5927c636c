import pytest

from tailorsim.mesh import Index, MeshData
from tailorsim.objio import (
    HEADER,
    get_basename,
    hsv_to_rgb,
    map_value,
    save_body_as_obj,
    save_garment_as_obj,
    save_mesh_as_obj,
    save_mesh_data_as_obj,
    save_mesh_data_as_obj_with_uv_normal,
)

POSITIONS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 1.0, 0.5)]
INDICES = [0, 1, 2, 1, 3, 2]


def _lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def _parse_vertices(lines, prefix="v"):
    return [tuple(float(x) for x in line.split()[1:]) for line in lines
            if line.split()[0] == prefix]


def _parse_faces(lines):
    return [line.split()[1:] for line in lines if line.startswith("f ")]


def test_mesh_layout_and_round_trip(tmp_path):
    out = tmp_path / "mesh.obj"
    save_mesh_as_obj(out, POSITIONS, INDICES)
    lines = _lines(out)
    assert lines[0] == HEADER
    assert lines[1] == "o garment"
    assert "s 1" in lines
    assert lines[2] == "v 0.000000 0.000000 0.000000"
    assert _parse_vertices(lines) == pytest.approx(POSITIONS)
    faces = [[int(c) - 1 for c in f] for f in _parse_faces(lines)]
    assert [i for f in faces for i in f] == INDICES


def test_mesh_faces_are_one_based(tmp_path):
    out = tmp_path / "mesh.obj"
    save_mesh_as_obj(out, POSITIONS, [0, 1, 2])
    assert _parse_faces(_lines(out)) == [["1", "2", "3"]]


def test_body_uses_smplx_object(tmp_path):
    out = tmp_path / "body.obj"
    save_body_as_obj(out, POSITIONS, [(0, 1, 2), (1, 3, 2)])
    lines = _lines(out)
    assert lines[1] == "o smplx"
    assert _parse_vertices(lines) == pytest.approx(POSITIONS)
    assert len(_parse_faces(lines)) == 2


def test_garment_without_colors_matches_mesh(tmp_path):
    a = tmp_path / "a.obj"
    b = tmp_path / "b.obj"
    save_garment_as_obj(a, POSITIONS, INDICES)
    save_mesh_as_obj(b, POSITIONS, INDICES)
    assert a.read_text() == b.read_text()


def test_garment_with_colors(tmp_path):
    colors = [(0.5, 0.25, 1.0)] * len(POSITIONS)
    out = tmp_path / "c.obj"
    save_garment_as_obj(out, POSITIONS, INDICES, colors)
    vertices = _parse_vertices(_lines(out))
    assert all(len(v) == 6 for v in vertices)
    assert [v[:3] for v in vertices] == pytest.approx(POSITIONS)
    assert [v[3:] for v in vertices] == pytest.approx(colors)


def test_garment_with_too_few_colors(tmp_path):
    with pytest.raises(ValueError):
        save_garment_as_obj(tmp_path / "x.obj", POSITIONS, INDICES, [(1.0, 0.0, 0.0)])


def _mesh_data():
    return MeshData(
        positions=POSITIONS[:3],
        uvs=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
        normals=[(0.0, 0.0, 1.0)] * 3,
        indices=[[Index(0, 0, 0), Index(1, 1, 1), Index(2, 2, 2)]],
    )


def test_mesh_data_positions_only(tmp_path):
    out = tmp_path / "d.obj"
    save_mesh_data_as_obj(out, _mesh_data())
    lines = _lines(out)
    assert _parse_vertices(lines) == pytest.approx(POSITIONS[:3])
    assert not any(line.startswith(("vt", "vn")) for line in lines)
    assert _parse_faces(lines) == [["1", "2", "3"]]


def test_mesh_data_with_uv_normal(tmp_path):
    out = tmp_path / "e.obj"
    data = _mesh_data()
    save_mesh_data_as_obj_with_uv_normal(out, data)
    lines = _lines(out)
    assert _parse_vertices(lines, "vt") == pytest.approx([uv[:2] for uv in data.uvs])
    assert _parse_vertices(lines, "vn") == pytest.approx(data.normals)
    assert _parse_faces(lines) == [["1/1/1", "2/2/2", "3/3/3"]]


def test_map_value_ends_and_clamping():
    assert map_value(2.0, 10.0, 20.0, 2.0, 4.0) == pytest.approx(10.0)
    assert map_value(4.0, 10.0, 20.0, 2.0, 4.0) == pytest.approx(20.0)
    assert map_value(-100.0, 10.0, 20.0, 2.0, 4.0) == pytest.approx(10.0)
    assert map_value(100.0, 10.0, 20.0, 2.0, 4.0) == pytest.approx(20.0)


def test_map_value_is_monotonic():
    values = [map_value(x / 10, 0.0, 1.0, 0.0, 1.0) for x in range(11)]
    assert values == sorted(values)


def test_map_value_empty_range():
    with pytest.raises(ZeroDivisionError):
        map_value(1.0, 0.0, 1.0, 3.0, 3.0)


def test_hsv_pure_red():
    assert hsv_to_rgb((0.0, 1.0, 1.0)) == pytest.approx((1.0, 0.0, 0.0))


def test_hsv_full_hue_wraps_to_zero():
    assert hsv_to_rgb((1.0, 1.0, 1.0)) == pytest.approx(hsv_to_rgb((0.0, 1.0, 1.0)))


def test_hsv_grey_and_black():
    for hue in (0.1, 0.4, 0.7, 0.95):
        assert hsv_to_rgb((hue, 0.0, 0.6)) == pytest.approx((0.6, 0.6, 0.6))
        assert hsv_to_rgb((hue, 1.0, 0.0)) == pytest.approx((0.0, 0.0, 0.0))


def test_hsv_components_bounded_by_value():
    for step in range(20):
        rgb = hsv_to_rgb((step / 20, 0.8, 0.9))
        assert max(rgb) == pytest.approx(0.9)
        assert min(rgb) >= 0.0


def test_get_basename():
    assert get_basename("shirt.tar.gz") == "shirt"
    assert get_basename("noext") == "noext"
    assert get_basename(".hidden") == ""