#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import enum
import logging
import math
from typing import Iterable, Optional, Tuple

import numpy as np

from .camera import Camera
from .config import RenderConfig
from .errors import FrameStateError, SurfaceUnavailable
from .framebuffer import FrameBuffer
from .math_utils import Mat4, Vec3
from .mesh import Mesh
from .rasterizer import LineRasterizer, get_rasterizer
from .surface import PixelSurface

logger = logging.getLogger(__name__)


class FrameState(enum.Enum):
    IDLE = "idle"
    CLEARED = "cleared"
    RENDERED = "rendered"
    PRESENTED = "presented"
    DISPOSED = "disposed"


_DRAWABLE = (FrameState.CLEARED, FrameState.RENDERED)


class Renderer:
    """
    Wireframe renderer bound to one pixel surface.

    Per frame: ``clear()`` -> ``render(camera, meshes)`` -> ``present()``.
    The renderer owns the back buffer it gets from the surface; nothing is
    visible on the surface until ``present()``.

    Pipeline per mesh (row vectors, left to right):
      world     = rotation_yaw_pitch_roll(rot.y, rot.x, rot.z) @ translation(pos)
      transform = world @ view @ projection
    then each face's three vertices are projected and its three edges drawn.
    """

    def __init__(self, surface: PixelSurface, config: Optional[RenderConfig] = None,
                 rasterizer: Optional[LineRasterizer] = None):
        if surface is None:
            raise SurfaceUnavailable("no pixel surface given")
        self.surface = surface
        self.config = config if config is not None else RenderConfig()
        self.rasterizer = (rasterizer if rasterizer is not None
                           else get_rasterizer(self.config.rasterizer))
        self.wire_rgba = np.array(self.config.wire_color.to_rgba8(), dtype=np.uint8)
        self.state = FrameState.IDLE
        self.backbuffer = self._acquire_buffer()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False

    @property
    def width(self) -> int:
        return self.backbuffer.width

    @property
    def height(self) -> int:
        return self.backbuffer.height

    def _acquire_buffer(self) -> FrameBuffer:
        try:
            data = self.surface.get_mutable_buffer()
        except Exception as exc:
            raise SurfaceUnavailable(f"surface did not provide a buffer: {exc}") from exc
        expected = (self.surface.height, self.surface.width, 4)
        if (not isinstance(data, np.ndarray) or data.dtype != np.uint8
                or data.shape != expected):
            shape = getattr(data, 'shape', None)
            raise SurfaceUnavailable(
                f"surface buffer must be uint8 {expected}, got {shape}")
        return FrameBuffer(data)

    def _require(self, *states: FrameState):
        if self.state not in states:
            raise FrameStateError(
                f"operation not allowed in state {self.state.value!r}")

    # ── Frame lifecycle ─────────────────────────────────────────────────

    def clear(self):
        """Start a frame: black back buffer, ready for drawing."""
        if self.state is FrameState.DISPOSED:
            raise FrameStateError("renderer has been disposed")
        self.surface.clear_to_black()
        self.backbuffer = self._acquire_buffer()
        self.state = FrameState.CLEARED

    def present(self):
        """Flush the back buffer to the surface."""
        if self.state is FrameState.DISPOSED:
            raise FrameStateError("renderer has been disposed")
        if self.state not in _DRAWABLE:
            logger.warning("present() in state %r without clear(); "
                           "showing previous buffer contents", self.state.value)
        self.surface.present(self.backbuffer.data)
        self.state = FrameState.PRESENTED

    def resize(self, width: int, height: int):
        """
        Resize the surface and reacquire its buffer; the next frame starts
        with clear().  ``width`` and ``height`` are in the surface's units,
        so a TerminalSurface takes columns and rows.
        """
        if self.state is FrameState.DISPOSED:
            raise FrameStateError("renderer has been disposed")
        self.surface.resize(width, height)
        self.backbuffer = self._acquire_buffer()
        self.state = FrameState.IDLE

    def dispose(self):
        if self.state is FrameState.DISPOSED:
            return
        self.surface.close()
        self.state = FrameState.DISPOSED

    # ── Drawing primitives ──────────────────────────────────────────────

    def put_pixel(self, x: int, y: int, rgba=None):
        """Write one unclipped pixel into the back buffer."""
        self._require(*_DRAWABLE)
        self.backbuffer.put_pixel(x, y, self.wire_rgba if rgba is None else rgba)

    def draw_point(self, x: int, y: int):
        """Plot a wireframe pixel; points outside the buffer are dropped."""
        self._require(*_DRAWABLE)
        self._plot(x, y)

    def _plot(self, x: int, y: int):
        if 0 <= x < self.backbuffer.width and 0 <= y < self.backbuffer.height:
            self.backbuffer.data[y, x] = self.wire_rgba

    def draw_line(self, p0: Tuple[int, int], p1: Tuple[int, int]):
        self._require(*_DRAWABLE)
        self.rasterizer.draw_line(self._plot, p0, p1,
                                  bounds=(self.backbuffer.width, self.backbuffer.height))

    # ── Transforms ──────────────────────────────────────────────────────

    def view_matrix(self, camera: Camera) -> Mat4:
        return Mat4.look_at_lh(camera.position, camera.target, Vec3.up())

    def projection_matrix(self) -> Mat4:
        cfg = self.config
        return Mat4.perspective_fov_lh(cfg.fov, self.width / self.height,
                                       cfg.znear, cfg.zfar)

    @staticmethod
    def world_matrix(mesh: Mesh) -> Mat4:
        rot, pos = mesh.rotation, mesh.position
        return (Mat4.rotation_yaw_pitch_roll(rot.y, rot.x, rot.z)
                @ Mat4.translation(pos.x, pos.y, pos.z))

    def project(self, coord: Vec3, transform: Mat4) -> Optional[Tuple[int, int]]:
        """
        Map a model-space point to integer pixel coordinates.

        Coordinates are truncated toward zero.  Returns None when the point
        has no finite image (homogeneous w of zero).
        """
        try:
            point = transform.transform_coordinates(coord)
        except ZeroDivisionError:
            return None
        sx = point.x * self.width + self.width / 2.0
        sy = -point.y * self.height + self.height / 2.0
        if not (math.isfinite(sx) and math.isfinite(sy)):
            return None
        return math.trunc(sx), math.trunc(sy)

    # ── Orchestration ───────────────────────────────────────────────────

    def render(self, camera: Camera, meshes: Iterable[Mesh]):
        """Draw every face of every mesh as three edges. Mutates nothing."""
        self._require(*_DRAWABLE)
        view_proj = self.view_matrix(camera) @ self.projection_matrix()

        for mesh in meshes:
            transform = self.world_matrix(mesh) @ view_proj
            # one projection per vertex; faces share them
            pixels = [self.project(v, transform) for v in mesh.vertices]
            skipped = 0
            for face in mesh.faces:
                pa, pb, pc = pixels[face.a], pixels[face.b], pixels[face.c]
                if pa is None or pb is None or pc is None:
                    skipped += 1
                    continue
                self.draw_line(pa, pb)
                self.draw_line(pb, pc)
                self.draw_line(pc, pa)
            if skipped:
                logger.debug("mesh %r: skipped %d face(s) with unprojectable vertices",
                             mesh.name, skipped)

        self.state = FrameState.RENDERED
