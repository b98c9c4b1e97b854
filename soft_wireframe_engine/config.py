#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass, field

from .color import Color4, WIREFRAME_YELLOW


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and the terminal surface."""
    fov: float = 0.78
    znear: float = 0.01
    zfar: float = 1.0
    rasterizer: str = "bresenham"
    wire_color: Color4 = field(default=WIREFRAME_YELLOW)
    # Per-frame rotation added to every mesh's x and y by the demo animation
    spin_step: float = 0.01
    use_color: bool = True
    use_braille: bool = True

    def __post_init__(self):
        if self.fov <= 0:
            raise ValueError(f"fov must be positive, got {self.fov}")
        if self.znear == self.zfar:
            raise ValueError("znear and zfar must differ")

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
        settings.update(overrides)
        return cls(**settings)
