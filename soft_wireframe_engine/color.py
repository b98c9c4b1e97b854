#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple, Optional, Tuple


class Color4(NamedTuple):
    """RGBA colour with float channels in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        """Scale every channel by 255 and clamp to a byte."""
        return tuple(max(0, min(255, int(c * 255))) for c in self)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, a: int = 255) -> 'Color4':
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


WIREFRAME_YELLOW = Color4(1.0, 1.0, 0.0, 1.0)


def parse_hex_color(text) -> Optional[Tuple[int, int, int]]:
    """``'#RRGGBB'`` or ``'RRGGBB'`` to an (r, g, b) byte triple; None if unparsable."""
    if text is None:
        return None
    digits = str(text).strip().lstrip('#')
    if len(digits) != 6:
        return None
    try:
        return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


# xterm-256: indices 16-231 are a 6x6x6 cube, 232-255 a 24-step grey ramp
XTERM_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
XTERM_GREY_BASE = 232

# approximate RGB of the eight basic ANSI colours, by index
ANSI8_RGB = (
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
)


def _distance2(a, b) -> int:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def rgb_to_nearest_xterm(r: int, g: int, b: int) -> int:
    """Closest xterm-256 palette index, from either the colour cube or the grey ramp."""
    levels = [min(range(6), key=lambda i: abs(v - XTERM_CUBE_LEVELS[i])) for v in (r, g, b)]
    cube_rgb = tuple(XTERM_CUBE_LEVELS[i] for i in levels)
    cube_index = 16 + 36 * levels[0] + 6 * levels[1] + levels[2]

    step = max(0, min(23, ((r + g + b) // 3 - 3) // 10))
    grey = 8 + 10 * step
    if _distance2((r, g, b), (grey, grey, grey)) < _distance2((r, g, b), cube_rgb):
        return XTERM_GREY_BASE + step
    return cube_index


def rgb_to_nearest_ansi8(r: int, g: int, b: int) -> int:
    """Closest of the eight basic ANSI colours, for terminals without 256 colours."""
    return min(range(len(ANSI8_RGB)), key=lambda i: _distance2((r, g, b), ANSI8_RGB[i]))
