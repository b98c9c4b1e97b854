#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Packing of an RGBA pixel grid into 2x4 terminal character cells."""

import numpy as np

CELL_W = 2
CELL_H = 4

# Braille dot mapping for 2x4 grid
#  1 4
#  2 5
#  3 6
#  7 8
# 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

_ASCII_RAMP = " .:-=+*#%@"


def pack_cells(rgba: np.ndarray):
    """
    Fold a ``(H, W, 4)`` pixel grid into 2x4 cells.

    Returns ``(masks, colors)``: ``masks`` is an ``(H/4, W/2)`` uint8 grid
    where bit ``(y & 3) + (x & 1) * 4`` is set for each lit pixel (alpha
    non-zero), and ``colors`` an ``(H/4, W/2, 3)`` grid holding the RGB of
    the brightest lit pixel of each cell.  Partial cells at the edges are
    padded with unlit pixels.
    """
    h, w = rgba.shape[:2]
    rows = -(-h // CELL_H)
    cols = -(-w // CELL_W)
    padded = np.zeros((rows * CELL_H, cols * CELL_W, 4), dtype=np.uint8)
    padded[:h, :w] = rgba

    # (rows, 4, cols, 2) -> (rows, cols, 2, 4) -> bit = dy + dx * 4
    blocks = padded.reshape(rows, CELL_H, cols, CELL_W, 4).transpose(0, 2, 3, 1, 4)
    blocks = blocks.reshape(rows, cols, CELL_W * CELL_H, 4)

    lit = blocks[..., 3] > 0
    weights = (1 << np.arange(CELL_W * CELL_H)).astype(np.uint16)
    masks = (lit * weights).sum(axis=2).astype(np.uint8)

    brightness = blocks[..., :3].astype(np.int32).sum(axis=3)
    brightness[~lit] = -1
    brightest = brightness.argmax(axis=2)
    colors = np.take_along_axis(
        blocks[..., :3], brightest[..., None, None], axis=2)[:, :, 0, :]
    return masks, colors


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    return _ASCII_RAMP[density] if density < len(_ASCII_RAMP) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
