#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Pixel surfaces the renderer draws into.

A surface owns a fixed-size RGBA8 grid.  Per frame the renderer calls
``clear_to_black()``, writes into ``get_mutable_buffer()`` and hands the
grid back through ``present()``; only then does it become visible.
"""

import abc
import curses
import logging
from pathlib import Path

import numpy as np

from .canvas import CELL_H, CELL_W, pack_cells, render_cell_ascii, render_cell_braille
from .color import rgb_to_nearest_ansi8, rgb_to_nearest_xterm
from .config import RenderConfig

logger = logging.getLogger(__name__)


class PixelSurface(abc.ABC):
    """Host surface interface consumed by the Renderer."""

    width: int
    height: int

    @abc.abstractmethod
    def clear_to_black(self):
        """Reset the back buffer to transparent black."""

    @abc.abstractmethod
    def get_mutable_buffer(self) -> np.ndarray:
        """Return the ``(height, width, 4)`` uint8 back buffer."""

    @abc.abstractmethod
    def present(self, buffer: np.ndarray):
        """Make ``buffer`` the visible frame."""

    @abc.abstractmethod
    def resize(self, width: int, height: int):
        """
        Reallocate the back buffer for a new size.

        The units are the surface's own: pixels for MemorySurface,
        character cells for TerminalSurface.  Afterwards ``width`` and
        ``height`` hold the new pixel size.
        """

    def close(self):
        pass


class MemorySurface(PixelSurface):
    """
    Headless surface backed by numpy arrays.

    ``front`` holds a copy of the last presented frame and
    ``present_count`` counts presents.
    """

    def __init__(self, width: int, height: int):
        self.present_count = 0
        self.resize(width, height)

    def clear_to_black(self):
        self.back.fill(0)

    def get_mutable_buffer(self) -> np.ndarray:
        return self.back

    def present(self, buffer: np.ndarray):
        np.copyto(self.front, buffer)
        self.present_count += 1

    def resize(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.back = np.zeros((height, width, 4), dtype=np.uint8)
        self.front = np.zeros_like(self.back)

    def save_ppm(self, path):
        """Write the presented frame as a binary PPM (alpha dropped)."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode('ascii')
        Path(path).write_bytes(header + self.front[:, :, :3].tobytes())


class TerminalSurface(PixelSurface):
    """
    curses surface: every character cell shows a 2x4 block of pixels.

    Row 0 of the screen is left free for a status line, so the pixel
    grid is ``(cols - 1) * 2`` by ``(rows - 1) * 4``.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self._pairs = {}
        self._color_mode = self._init_colors() if config.use_color else None
        rows, cols = stdscr.getmaxyx()
        self._allocate(cols, rows)

    def _allocate(self, cols: int, rows: int):
        self.cols = max(1, cols - 1)
        self.rows = max(1, rows - 1)
        self.width = self.cols * CELL_W
        self.height = self.rows * CELL_H
        self.back = np.zeros((self.height, self.width, 4), dtype=np.uint8)

    def _init_colors(self):
        try:
            if not curses.has_colors():
                return None
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            return 'xterm' if curses.COLORS >= 256 else 'ansi8'
        except curses.error as exc:
            logger.warning("terminal colours unavailable: %s", exc)
            return None

    def _pair_for(self, rgb) -> int:
        """Colour pair for the nearest terminal colour, allocated on demand."""
        if self._color_mode is None:
            return 0
        r, g, b = (int(c) for c in rgb)
        if self._color_mode == 'xterm':
            fg = rgb_to_nearest_xterm(r, g, b)
        else:
            fg = rgb_to_nearest_ansi8(r, g, b)
        pair = self._pairs.get(fg)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return 0
            try:
                curses.init_pair(pair, fg, -1)
            except curses.error:
                return 0
            self._pairs[fg] = pair
        return pair

    def clear_to_black(self):
        self.back.fill(0)

    def get_mutable_buffer(self) -> np.ndarray:
        return self.back

    def resize(self, cols: int, rows: int):
        """Reallocate for a terminal of ``cols`` columns and ``rows`` rows."""
        self._allocate(cols, rows)

    def present(self, buffer: np.ndarray):
        masks, colors = pack_cells(buffer)
        render_cell = render_cell_braille if self.config.use_braille else render_cell_ascii

        self.stdscr.erase()
        for cy, cx in zip(*np.nonzero(masks)):
            char = render_cell(int(masks[cy, cx]))
            pair = self._pair_for(colors[cy, cx])
            attr = curses.color_pair(pair) if pair else curses.A_NORMAL
            try:
                self.stdscr.addstr(int(cy) + 1, int(cx), char, attr)
            except curses.error:
                # writing the bottom-right cell moves the cursor off screen
                pass
