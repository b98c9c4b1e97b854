#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/loader.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Builds meshes from a Babylon-style JSON document, and fetches one.

Document layout::

    {"meshes": [{"name": "Suzanne",
                 "vertices": [x, y, z, nx, ny, nz, (u, v)*, ...],
                 "indices": [a, b, c, ...],
                 "uvCount": 0,
                 "position": [x, y, z]}, ...]}

Some exporters write ``positions`` instead of ``vertices`` and ``uvs``
instead of ``uvCount``; both spellings are accepted.
"""

import asyncio
import json
import logging
import numbers
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Mapping, Optional

from .errors import FetchFailure, MalformedMeshData
from .math_utils import Vec3
from .mesh import Face, Mesh

logger = logging.getLogger(__name__)

# uvCount -> floats per vertex: position (3) + normal (3) + 2 per UV channel
VERTEX_STRIDES = {0: 6, 1: 8, 2: 10}

Fetcher = Callable[[str], Awaitable[str]]


def vertex_stride(uv_count, mesh_index: Optional[int] = None) -> int:
    """Return the number of floats per vertex for ``uv_count`` UV channels."""
    # bool is an int subclass; True must not pass as 1
    if not _is_index(uv_count) or uv_count not in VERTEX_STRIDES:
        raise MalformedMeshData(
            f"uvCount must be 0, 1 or 2, got {uv_count!r}", mesh_index)
    return VERTEX_STRIDES[uv_count]


def _first_present(record: Mapping, *keys):
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return None


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_index(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def create_mesh(record: Mapping, mesh_index: int) -> Mesh:
    """Build one Mesh from a single entry of the document's ``meshes`` list."""
    if not isinstance(record, Mapping):
        raise MalformedMeshData("mesh record is not an object", mesh_index)

    vertices_array = _first_present(record, 'vertices', 'positions')
    indices_array = record.get('indices')
    if vertices_array is None:
        raise MalformedMeshData("missing vertex array", mesh_index)
    if indices_array is None:
        raise MalformedMeshData("missing index array", mesh_index)
    if not isinstance(vertices_array, (list, tuple)):
        raise MalformedMeshData("vertex array is not a list", mesh_index)
    if not isinstance(indices_array, (list, tuple)):
        raise MalformedMeshData("index array is not a list", mesh_index)

    uv_count = _first_present(record, 'uvCount', 'uvs')
    stride = vertex_stride(0 if uv_count is None else uv_count, mesh_index)

    if len(vertices_array) % stride:
        raise MalformedMeshData(
            f"vertex array length {len(vertices_array)} is not a multiple "
            f"of stride {stride}", mesh_index)
    if len(indices_array) % 3:
        raise MalformedMeshData(
            f"index array length {len(indices_array)} is not a multiple of 3",
            mesh_index)

    vertices_count = len(vertices_array) // stride
    faces_count = len(indices_array) // 3
    name = record.get('name')
    if name is None:
        name = f"mesh{mesh_index}"
    mesh = Mesh(str(name), vertices_count, faces_count)

    for index in range(vertices_count):
        base = index * stride
        x, y, z = vertices_array[base:base + 3]
        if not (_is_number(x) and _is_number(y) and _is_number(z)):
            raise MalformedMeshData(
                f"vertex {index} has non-numeric coordinates", mesh_index)
        mesh.vertices[index] = Vec3(x, y, z)

    for index in range(faces_count):
        a, b, c = indices_array[index * 3:index * 3 + 3]
        for value in (a, b, c):
            if not _is_index(value):
                raise MalformedMeshData(
                    f"face {index} has non-integer index {value!r}", mesh_index)
            if value < 0 or value >= vertices_count:
                raise MalformedMeshData(
                    f"face {index} index {value} out of range for "
                    f"{vertices_count} vertices", mesh_index)
        mesh.faces[index] = Face(a, b, c)

    position = record.get('position')
    if position is not None:
        if (not isinstance(position, (list, tuple)) or len(position) != 3
                or not all(_is_number(p) for p in position)):
            raise MalformedMeshData(
                f"position must be three numbers, got {position!r}", mesh_index)
        mesh.position = Vec3.from_sequence(position)

    logger.debug("mesh #%d %r: stride %d, %d vertices, %d faces",
                 mesh_index, mesh.name, stride, vertices_count, faces_count)
    return mesh


def create_meshes_from_json(document: Any) -> List[Mesh]:
    """Build every mesh of a parsed document, in document order.

    Any malformed record aborts the whole load with MalformedMeshData.
    """
    if not isinstance(document, Mapping):
        raise MalformedMeshData("document is not a JSON object")
    records = document.get('meshes')
    if not isinstance(records, (list, tuple)):
        raise MalformedMeshData("document has no 'meshes' list")
    return [create_mesh(record, i) for i, record in enumerate(records)]


def parse_mesh_document(text: str) -> List[Mesh]:
    """Parse JSON text and build its meshes."""
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise MalformedMeshData(f"invalid JSON: {exc}") from exc
    return create_meshes_from_json(document)


def _is_url(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


def _read_source(source: str) -> str:
    if _is_url(source):
        try:
            with urllib.request.urlopen(source) as response:
                status = getattr(response, 'status', 200)
                if status != 200:
                    raise FetchFailure(source, response.reason or "unexpected status",
                                       status=status)
                charset = response.headers.get_content_charset() or 'utf-8'
                return response.read().decode(charset)
        except urllib.error.HTTPError as exc:
            raise FetchFailure(source, str(exc.reason), status=exc.code) from exc
        except urllib.error.URLError as exc:
            raise FetchFailure(source, str(exc.reason)) from exc
        except OSError as exc:
            raise FetchFailure(source, str(exc)) from exc
    try:
        return Path(source).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise FetchFailure(source, str(exc)) from exc


async def fetch_text(source: str) -> str:
    """Fetch a document from an http(s) URL or a local path.

    The blocking read runs in the loop's default executor.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _read_source, source)


async def load_meshes(source: str, fetcher: Fetcher = fetch_text,
                      timeout: Optional[float] = None) -> List[Mesh]:
    """Fetch ``source`` and build its meshes.

    Raises FetchFailure when the fetch fails or exceeds ``timeout``
    seconds, and MalformedMeshData when the document is bad.  The
    coroutine can be cancelled like any other task.
    """
    logger.info("loading meshes from %s", source)
    try:
        if timeout is None:
            text = await fetcher(source)
        else:
            text = await asyncio.wait_for(fetcher(source), timeout)
    except asyncio.TimeoutError as exc:
        raise FetchFailure(source, f"timed out after {timeout}s") from exc

    meshes = parse_mesh_document(text)
    logger.info("loaded %d mesh(es) from %s", len(meshes), source)
    return meshes
