#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/loop.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import time
from typing import Callable, Optional

from .renderer import Renderer
from .scene import Scene

logger = logging.getLogger(__name__)

Animation = Callable[[Scene], None]


def spin_animation(step: float) -> Animation:
    """Animation that turns every mesh by ``step`` radians about x and y per frame."""
    def animate(scene: Scene):
        scene.spin(step, step)
    return animate


class FrameLoop:
    """
    Drives frames: animate -> clear -> render -> present.

    Each tick runs to completion before the next starts; pacing is left to
    whoever calls ``tick``/``run``.
    """

    def __init__(self, renderer: Renderer, scene: Scene,
                 animate: Optional[Animation] = None):
        self.renderer = renderer
        self.scene = scene
        self.animate = animate
        self.frame_count = 0
        self.last_frame_ms = 0.0

    def tick(self):
        start = time.perf_counter()
        if self.animate is not None:
            self.animate(self.scene)
        self.renderer.clear()
        self.renderer.render(self.scene.camera, self.scene.meshes)
        self.renderer.present()
        self.frame_count += 1
        self.last_frame_ms = (time.perf_counter() - start) * 1000

    def run(self, frames: Optional[int] = None,
            should_continue: Optional[Callable[[], bool]] = None):
        """Tick until ``frames`` frames are done or ``should_continue`` says stop."""
        done = 0
        while frames is None or done < frames:
            if should_continue is not None and not should_continue():
                break
            self.tick()
            done += 1
        logger.debug("frame loop stopped after %d frame(s)", done)
        return done
