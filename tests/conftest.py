import logging

import pytest

from soft_wireframe_engine import Camera, Mesh, Scene, Vec3
from soft_wireframe_engine.log import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging() detaches the package logger from root; undo that per test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


def triangle_document(uv_count=0, position=(0, 0, 0)):
    stride = {0: 6, 1: 8, 2: 10}[uv_count]
    corners = [(-1.0, -1.0, 0.0), (1.0, -1.0, 0.0), (0.0, 1.0, 0.0)]
    vertices = []
    for corner in corners:
        vertices.extend(corner)
        vertices.extend([0.5] * (stride - 3))
    return {
        "meshes": [{
            "name": "Triangle",
            "vertices": vertices,
            "indices": [0, 1, 2],
            "uvCount": uv_count,
            "position": list(position),
        }]
    }


@pytest.fixture
def make_triangle_doc():
    return triangle_document


@pytest.fixture
def triangle_doc():
    return triangle_document()


@pytest.fixture
def front_camera():
    return Camera(Vec3(0, 0, 10), Vec3(0, 0, 0))


@pytest.fixture
def cube_scene(front_camera):
    return Scene(front_camera, [Mesh.cube()])
