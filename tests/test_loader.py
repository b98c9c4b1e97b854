import asyncio
import json

import pytest

from soft_wireframe_engine import (FetchFailure, MalformedMeshData, Vec3,
                                   create_meshes_from_json, load_meshes,
                                   parse_mesh_document, vertex_stride)
from soft_wireframe_engine.mesh import Face


def _doc(**record):
    base = {"name": "m", "vertices": [0.0] * 6, "indices": [0, 0, 0],
            "uvCount": 0, "position": [0, 0, 0]}
    base.update(record)
    return {"meshes": [base]}


@pytest.mark.parametrize("uv_count,stride", [(0, 6), (1, 8), (2, 10)])
def test_vertex_stride(uv_count, stride):
    assert vertex_stride(uv_count) == stride


@pytest.mark.parametrize("uv_count", [-1, 3, 7, True, "0", 1.5, [1], {"a": 1}, None])
def test_vertex_stride_rejects_other_values(uv_count):
    with pytest.raises(MalformedMeshData):
        vertex_stride(uv_count)


@pytest.mark.parametrize("uv_count", [0, 1, 2])
def test_triangle_for_each_stride(make_triangle_doc, uv_count):
    mesh, = create_meshes_from_json(make_triangle_doc(uv_count))
    assert len(mesh.vertices) == 3
    assert mesh.vertices[2] == Vec3(0, 1, 0)
    assert mesh.faces == [Face(0, 1, 2)]


def test_reads_x_y_z_of_each_window():
    doc = _doc(vertices=[1, 2, 3, 9, 9, 9, 4, 5, 6, 9, 9, 9],
               indices=[0, 1, 1])
    mesh, = create_meshes_from_json(doc)
    assert mesh.vertices == [Vec3(1, 2, 3), Vec3(4, 5, 6)]


def test_vertex_count_is_exact_division():
    doc = _doc(vertices=[0.0] * 24, uvCount=1, indices=[0, 1, 2])
    mesh, = create_meshes_from_json(doc)
    assert len(mesh.vertices) == 3


def test_vertex_array_remainder_fails():
    with pytest.raises(MalformedMeshData) as info:
        create_meshes_from_json(_doc(vertices=[0.0] * 13))
    assert info.value.mesh_index == 0


def test_faces_preserve_index_order():
    doc = _doc(vertices=[0.0] * 24, indices=[2, 0, 1, 3, 3, 1])
    mesh, = create_meshes_from_json(doc)
    assert mesh.faces == [Face(2, 0, 1), Face(3, 3, 1)]


def test_index_array_remainder_fails():
    with pytest.raises(MalformedMeshData):
        create_meshes_from_json(_doc(indices=[0, 0, 0, 0]))


@pytest.mark.parametrize("indices", [[0, 0, 1], [0, -1, 0], [0, 0.5, 0], [0, None, 0]])
def test_bad_face_index_fails(indices):
    # one vertex only, so index 1 is out of range
    with pytest.raises(MalformedMeshData):
        create_meshes_from_json(_doc(indices=indices))


@pytest.mark.parametrize("uv_count", [[1], {"a": 1}])
def test_container_uv_count_fails(uv_count):
    with pytest.raises(MalformedMeshData) as info:
        create_meshes_from_json(_doc(uvCount=uv_count))
    assert info.value.mesh_index == 0


def test_error_names_offending_mesh():
    good = _doc()["meshes"][0]
    bad = dict(good, uvCount=5)
    with pytest.raises(MalformedMeshData) as info:
        create_meshes_from_json({"meshes": [good, bad]})
    assert info.value.mesh_index == 1
    assert "mesh #1" in str(info.value)


@pytest.mark.parametrize("missing", ["vertices", "indices"])
def test_missing_arrays_fail(missing):
    doc = _doc()
    del doc["meshes"][0][missing]
    with pytest.raises(MalformedMeshData):
        create_meshes_from_json(doc)


@pytest.mark.parametrize("document", [[], {"other": 1}, {"meshes": 3}, None])
def test_document_without_mesh_list_fails(document):
    with pytest.raises(MalformedMeshData) as info:
        create_meshes_from_json(document)
    assert info.value.mesh_index is None


def test_alternate_key_spellings():
    doc = {"meshes": [{"name": "alt", "positions": [0.0] * 16, "uvs": 1,
                       "indices": [0, 1, 0], "position": [1, 2, 3]}]}
    mesh, = create_meshes_from_json(doc)
    assert len(mesh.vertices) == 2
    assert mesh.position == Vec3(1, 2, 3)


def test_missing_uv_count_means_stride_six():
    doc = _doc()
    del doc["meshes"][0]["uvCount"]
    mesh, = create_meshes_from_json(doc)
    assert len(mesh.vertices) == 1


def test_position_and_rotation():
    mesh, = create_meshes_from_json(_doc(position=[1.5, -2, 3]))
    assert mesh.position == Vec3(1.5, -2, 3)
    assert mesh.rotation == Vec3(0, 0, 0)


def test_missing_position_is_origin():
    doc = _doc()
    del doc["meshes"][0]["position"]
    mesh, = create_meshes_from_json(doc)
    assert mesh.position == Vec3(0, 0, 0)


@pytest.mark.parametrize("position", [[1, 2], [1, 2, 3, 4], "abc", [1, "2", 3]])
def test_bad_position_fails(position):
    with pytest.raises(MalformedMeshData):
        create_meshes_from_json(_doc(position=position))


def test_meshes_keep_source_order():
    records = [_doc(name=n)["meshes"][0] for n in ("a", "b", "c")]
    meshes = create_meshes_from_json({"meshes": records})
    assert [m.name for m in meshes] == ["a", "b", "c"]


def test_parse_invalid_json():
    with pytest.raises(MalformedMeshData):
        parse_mesh_document("{not json")


def test_parse_mesh_document(triangle_doc):
    meshes = parse_mesh_document(json.dumps(triangle_doc))
    assert meshes[0].name == "Triangle"


class TestLoadMeshes:
    def test_uses_fetcher(self, triangle_doc):
        seen = []

        async def fetcher(source):
            seen.append(source)
            return json.dumps(triangle_doc)

        meshes = asyncio.run(load_meshes("scene.babylon", fetcher=fetcher))
        assert seen == ["scene.babylon"]
        assert len(meshes) == 1

    def test_fetch_failure_propagates(self):
        async def fetcher(source):
            raise FetchFailure(source, "Not Found", status=404)

        with pytest.raises(FetchFailure) as info:
            asyncio.run(load_meshes("http://host/x.babylon", fetcher=fetcher))
        assert info.value.status == 404

    def test_timeout_becomes_fetch_failure(self):
        async def fetcher(source):
            await asyncio.sleep(10)
            return "{}"

        with pytest.raises(FetchFailure) as info:
            asyncio.run(load_meshes("slow", fetcher=fetcher, timeout=0.01))
        assert "timed out" in str(info.value)

    def test_malformed_document(self):
        async def fetcher(source):
            return json.dumps({"meshes": [{"vertices": [0] * 5, "indices": []}]})

        with pytest.raises(MalformedMeshData):
            asyncio.run(load_meshes("bad", fetcher=fetcher))

    def test_reads_local_file(self, tmp_path, triangle_doc):
        path = tmp_path / "tri.babylon"
        path.write_text(json.dumps(triangle_doc), encoding="utf-8")
        meshes = asyncio.run(load_meshes(str(path)))
        assert meshes[0].faces == [Face(0, 1, 2)]

    def test_missing_file_is_fetch_failure(self, tmp_path):
        with pytest.raises(FetchFailure) as info:
            asyncio.run(load_meshes(str(tmp_path / "nope.babylon")))
        assert info.value.status is None
