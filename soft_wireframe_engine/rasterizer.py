#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Line rasterization strategies.

A strategy turns a 2D segment into calls of ``plot(x, y)``.  ``plot`` is
the renderer's clipping point primitive, so strategies never check bounds
for correctness; ``bounds`` only lets them skip segments that cannot
produce a visible pixel.
"""

import abc
import math
from typing import Callable, Optional, Tuple

Point2 = Tuple[int, int]
Plot = Callable[[int, int], None]
Bounds = Tuple[int, int]


def _outside_one_edge(x0, y0, x1, y1, bounds: Optional[Bounds],
                      low: float = 0) -> bool:
    """True when both endpoints lie beyond the same viewport edge.

    ``low`` is the largest coordinate still left of the viewport: 0 for
    integer points, -1 for float points that get truncated toward zero.
    """
    if bounds is None:
        return False
    w, h = bounds
    if low == 0:
        return ((x0 < 0 and x1 < 0) or (y0 < 0 and y1 < 0) or
                (x0 >= w and x1 >= w) or (y0 >= h and y1 >= h))
    return ((x0 <= low and x1 <= low) or (y0 <= low and y1 <= low) or
            (x0 >= w and x1 >= w) or (y0 >= h and y1 >= h))


def _steps_to_enter(start: int, step: int, size: int) -> int:
    """Steps a coordinate moving by ``step`` needs to reach ``[0, size)``."""
    if step > 0 and start < 0:
        return -start
    if step < 0 and start >= size:
        return start - size + 1
    return 0


class LineRasterizer(abc.ABC):
    name = None

    @abc.abstractmethod
    def draw_line(self, plot: Plot, p0: Point2, p1: Point2,
                  bounds: Optional[Bounds] = None):
        """Plot the pixels of the segment p0-p1."""


class BresenhamRasterizer(LineRasterizer):
    """
    Integer Bresenham stepping.

    Plots exactly ``max(dx, dy) + 1`` points.  The walk always starts at
    the smaller endpoint, since the error-term tie breaks depend on the
    stepping direction; swapping p0 and p1 gives the same pixel set.

    With ``bounds`` the walk is restricted to the steps inside the
    viewport.  The major axis advances on every step and the minor axis
    after step ``k`` has moved ``_minor_steps(k)`` times, so the walk can
    start directly at the first visible step with the error term it would
    have had there.  Far off-screen endpoints cost nothing.
    """
    name = "bresenham"

    def draw_line(self, plot, p0, p1, bounds=None):
        x0, y0 = int(p0[0]), int(p0[1])
        x1, y1 = int(p1[0]), int(p1[1])
        if (x1, y1) < (x0, y0):
            x0, y0, x1, y1 = x1, y1, x0, y0
        if _outside_one_edge(x0, y0, x1, y1, bounds):
            return

        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy

        if bounds is not None:
            w, h = bounds
            if dx >= dy:
                major, minor = dx, dy
                skip_major = _steps_to_enter(x0, sx if dx else 0, w)
                need_minor = _steps_to_enter(y0, sy if dy else 0, h)
            else:
                major, minor = dy, dx
                skip_major = _steps_to_enter(y0, sy, h)
                need_minor = _steps_to_enter(x0, sx if dx else 0, w)
            k = max(skip_major, self._first_step_with(need_minor, major, minor))
            if k > major:
                return
            if k:
                j = self._minor_steps(k, major, minor)
                if dx >= dy:
                    x0 += sx * k
                    y0 += sy * j
                    err = dx - dy - k * dy + j * dx
                else:
                    x0 += sx * j
                    y0 += sy * k
                    err = dx - dy - j * dy + k * dx

        while True:
            # both coordinates are monotonic: once outside, always outside
            if bounds is not None and not (0 <= x0 < bounds[0] and 0 <= y0 < bounds[1]):
                return
            plot(x0, y0)

            if x0 == x1 and y0 == y1:
                return
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    @staticmethod
    def _minor_steps(k, major, minor):
        """Minor-axis moves after ``k`` steps: least j >= 0 with 2*j*major + major >= 2*k*minor."""
        if major == 0:
            return 0
        return max(0, -((major - 2 * k * minor) // (2 * major)))

    @staticmethod
    def _first_step_with(moves, major, minor):
        """Least step ``k`` after which the minor axis has moved ``moves`` times."""
        if moves == 0:
            return 0
        if minor == 0:
            return major + 1
        return (2 * moves * major - major) // (2 * minor) + 1


class MidpointRasterizer(LineRasterizer):
    """
    Recursive midpoint subdivision.

    Plots the midpoint of the segment, then recurses on both halves until
    a half is shorter than 2 pixels.  Endpoints are not plotted, so the
    result is close to, but not the same as, Bresenham's.
    """
    name = "midpoint"

    def draw_line(self, plot, p0, p1, bounds=None):
        self._subdivide(plot, float(p0[0]), float(p0[1]),
                        float(p1[0]), float(p1[1]), bounds)

    def _subdivide(self, plot, x0, y0, x1, y1, bounds):
        if math.hypot(x1 - x0, y1 - y0) < 2:
            return
        if _outside_one_edge(x0, y0, x1, y1, bounds, low=-1):
            return
        mx = x0 + (x1 - x0) * 0.5
        my = y0 + (y1 - y0) * 0.5
        plot(math.trunc(mx), math.trunc(my))
        self._subdivide(plot, x0, y0, mx, my, bounds)
        self._subdivide(plot, mx, my, x1, y1, bounds)


RASTERIZERS = {
    BresenhamRasterizer.name: BresenhamRasterizer,
    MidpointRasterizer.name: MidpointRasterizer,
}


def get_rasterizer(name: str) -> LineRasterizer:
    """Instantiate the strategy registered under ``name``."""
    try:
        return RASTERIZERS[name]()
    except KeyError:
        raise ValueError(
            f"unknown rasterizer {name!r}, expected one of {sorted(RASTERIZERS)}"
        ) from None
