import pytest

from csvtoply.model.vertex import Vertex, VertexTable


def _vertex(index: int) -> Vertex:
    return Vertex(index=index, position=(float(index), 0.0, 0.0))


def test_sorted_vertices_ascending_by_index():
    table = VertexTable()
    for index in (5, 1, 9, 3):
        table.add_vertex(_vertex(index))
    assert [v.index for v in table.sorted_vertices()] == [1, 3, 5, 9]


def test_sorted_vertices_empty():
    assert VertexTable().sorted_vertices() == []


def test_add_vertex_rejects_duplicate_index():
    table = VertexTable()
    table.add_vertex(_vertex(1))
    with pytest.raises(ValueError):
        table.add_vertex(_vertex(1))
    assert 1 in table
    assert len(table) == 1


def test_faces_group_corners_in_input_order():
    table = VertexTable(corners=[2, 0, 1, 1, 0, 3])
    assert list(table.faces()) == [(2, 0, 1), (1, 0, 3)]
    assert table.face_count == 2
    assert table.leftover_corners == 0


@pytest.mark.parametrize("corners, faces, leftover", [
    ([0], 0, 1),
    ([0, 1, 2, 3], 1, 1),
    ([0, 1, 2, 3, 4], 1, 2),
])
def test_trailing_partial_face_is_dropped(corners, faces, leftover):
    table = VertexTable(corners=corners)
    assert table.face_count == faces
    assert len(list(table.faces())) == faces
    assert table.leftover_corners == leftover


def test_sorted_vertices_handles_32_bit_extremes():
    table = VertexTable()
    for index in (2147483647, -2147483648, 0, -1):
        table.add_vertex(_vertex(index))
    assert [v.index for v in table.sorted_vertices()] == [-2147483648, -1, 0, 2147483647]
