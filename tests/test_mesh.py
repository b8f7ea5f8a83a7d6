import pytest

from softraster.geometry import Vertex
from softraster.mesh import Mesh
from softraster.texture import Texture
from softraster.vectors import Vec2, Vec3


def test_add_buffers_return_indices():
    mesh = Mesh()
    assert mesh.add_coordinate(1.0, 2.0) == 0
    assert mesh.add_coordinate(3.0, 4.0, 5.0) == 1
    assert mesh.coordinates == [Vec3(1.0, 2.0, 0.0), Vec3(3.0, 4.0, 5.0)]
    assert mesh.add_normal(0.0, 1.0) == 0
    assert mesh.add_texel(0.5, 0.25) == 0
    assert mesh.texels == [Vec2(0.5, 0.25)]


def test_add_triangle_keeps_vertices_and_texture():
    mesh = Mesh()
    texture = Texture.from_bytes(1, 1, 3, bytes([0, 0, 0]))
    mesh.add_triangle(Vertex(0), Vertex(1), Vertex(2), texture)
    assert len(mesh.triangles) == 1
    assert [v.coordinate_index for v in mesh.triangles[0]] == [0, 1, 2]
    assert mesh.triangles[0].texture is texture


def test_cube_buffer_sizes():
    cube = Mesh.create_cube()
    assert len(cube.coordinates) == 8
    assert len(cube.texels) == 4
    assert len(cube.normals) == 6
    assert len(cube.triangles) == 12


def test_cube_corners_lie_on_unit_sphere():
    for corner in Mesh.create_cube().coordinates:
        assert corner.magnitude() == pytest.approx(1.0)


def test_cube_first_triangle_matches_front_face():
    first = Mesh.create_cube().triangles[0]
    assert [(v.coordinate_index, v.normal_index, v.texel_index) for v in first] == [
        (1, 2, 2),
        (3, 2, 0),
        (0, 2, 3),
    ]


def test_cube_faces_share_one_normal_and_texture():
    texture = Texture.from_bytes(1, 1, 3, bytes([9, 9, 9]))
    cube = Mesh.create_cube(texture)
    for triangle in cube.triangles:
        assert len({v.normal_index for v in triangle}) == 1
        assert triangle.texture is texture


def test_cube_vertices_lie_on_the_side_of_their_normal():
    cube = Mesh.create_cube()
    for triangle in cube.triangles:
        for vertex in triangle:
            normal = cube.normals[vertex.normal_index]
            assert cube.coordinates[vertex.coordinate_index].dot(normal) > 0


@pytest.mark.parametrize("sectors,stacks", [(3, 4), (12, 24)])
def test_sphere_counts(sectors, stacks):
    sphere = Mesh.create_sphere(sectors, stacks)
    assert len(sphere.coordinates) == (sectors - 1) * stacks + 2
    assert len(sphere.normals) == len(sphere.coordinates)
    assert len(sphere.triangles) == 2 * (sectors - 1) * stacks
    assert len(sphere.texels) == 1


def test_sphere_points_are_unit_and_indices_valid():
    sphere = Mesh.create_sphere(6, 8)
    for point in sphere.coordinates:
        assert point.magnitude() == pytest.approx(1.0)
    for triangle in sphere.triangles:
        for vertex in triangle:
            assert 0 <= vertex.coordinate_index < len(sphere.coordinates)
            assert vertex.normal_index == vertex.coordinate_index


def test_sphere_poles_are_last():
    sphere = Mesh.create_sphere(4, 5)
    assert sphere.coordinates[-2] == Vec3(0.0, 1.0, 0.0)
    assert sphere.coordinates[-1] == Vec3(0.0, -1.0, 0.0)


OBJ_SQUARE = """\
# a square
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0.5
vn 0 0 1
f 1/1/1 2/1/1 3/1/1 4/1/1
"""


def test_from_text_fans_polygons():
    mesh = Mesh.from_text(OBJ_SQUARE)
    assert len(mesh.coordinates) == 4
    assert [[v.coordinate_index for v in t] for t in mesh.triangles] == [[0, 1, 2], [0, 2, 3]]


def test_from_text_appends_default_texel_and_normal():
    mesh = Mesh.from_text(OBJ_SQUARE)
    assert mesh.texels == [Vec2(0.5, 0.0), Vec2(0.0, 0.0)]
    assert mesh.normals == [Vec3(0.0, 0.0, 1.0), Vec3(1.0, 0.0, 0.0)]


def test_from_text_divides_by_w():
    mesh = Mesh.from_text("v 2 4 6 2\nv 1 2 3 1\n")
    assert mesh.coordinates == [Vec3(1.0, 2.0, 3.0), Vec3(1.0, 2.0, 3.0)]


def test_from_text_rejects_short_face():
    with pytest.raises(ValueError):
        Mesh.from_text("v 0 0 0\nf 1 1\n")


def test_parse_vertex_forms():
    mesh = Mesh.from_text("v 0 0 0\nv 1 1 1\nvt 0 0\nvn 0 1 0\n")
    only = mesh.parse_vertex("2")
    assert (only.coordinate_index, only.texel_index, only.normal_index) == (1, 0, 0)
    no_texel = mesh.parse_vertex("2//1")
    assert (no_texel.coordinate_index, no_texel.texel_index, no_texel.normal_index) == (1, 0, 0)
    full = mesh.parse_vertex("1/2/2")
    assert (full.coordinate_index, full.texel_index, full.normal_index) == (0, 1, 1)


def test_parse_vertex_negative_indices_count_from_end():
    mesh = Mesh()
    for i in range(3):
        mesh.add_coordinate(float(i), 0.0)
    assert mesh.parse_vertex("-1").coordinate_index == 2
    assert mesh.parse_vertex("-3").coordinate_index == 0


def test_parse_vertex_rejects_garbage():
    with pytest.raises(ValueError):
        Mesh().parse_vertex("x/1/1")


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "square.obj"
    path.write_text(OBJ_SQUARE, encoding="utf-8")
    from_file = Mesh.from_file(path)
    from_text = Mesh.from_text(OBJ_SQUARE)
    assert from_file.coordinates == from_text.coordinates
    assert len(from_file.triangles) == len(from_text.triangles)


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Mesh.from_file(tmp_path / "missing.obj")