#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/framebuffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import numpy as np


class FrameBuffer:
    """
    RGBA8 back buffer: a ``(height, width, 4)`` uint8 numpy grid.

    Channel ``k`` of pixel ``(x, y)`` sits at flat offset
    ``(x + y * width) * 4 + k`` of ``data.reshape(-1)``.
    """
    __slots__ = ('width', 'height', 'data')

    def __init__(self, data: np.ndarray):
        self.data = data
        self.height, self.width = data.shape[:2]

    @classmethod
    def blank(cls, width: int, height: int) -> 'FrameBuffer':
        return cls(np.zeros((height, width, 4), dtype=np.uint8))

    def clear(self):
        self.data.fill(0)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, rgba):
        """Write one pixel. No clipping: out-of-range coordinates raise IndexError."""
        if not self.in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        self.data[y, x] = rgba

    def get_pixel(self, x: int, y: int):
        return tuple(int(c) for c in self.data[y, x])

    def flat(self) -> np.ndarray:
        return self.data.reshape(-1)

    def lit_pixels(self):
        """Set of (x, y) whose alpha is non-zero."""
        ys, xs = np.nonzero(self.data[:, :, 3])
        return set(zip(xs.tolist(), ys.tolist()))
