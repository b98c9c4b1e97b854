#
# PROJECT: soft-wireframe-engine
# MODULE: soft_wireframe_engine/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3


class Camera:
    """
    Camera state: where the eye is and what it looks at.

    The up vector is always ``Vec3.up()``.  The embedding application may
    move ``position`` and ``target`` between frames; the renderer only
    reads them.
    """
    __slots__ = ('position', 'target')

    def __init__(self, position: Vec3 = None, target: Vec3 = None):
        self.position = position if position is not None else Vec3.zero()
        self.target = target if target is not None else Vec3.zero()

    def __repr__(self):
        return f"Camera(position={self.position!r}, target={self.target!r})"

    def zoom(self, delta: float):
        """Move the eye along the view direction; positive moves away from the target."""
        offset = self.position - self.target
        distance = offset.length()
        if distance == 0:
            return
        new_distance = max(0.5, distance + delta)
        self.position = self.target + offset * (new_distance / distance)

    def pan(self, dx: float, dy: float):
        """Shift eye and target together."""
        shift = Vec3(dx, dy, 0.0)
        self.position = self.position + shift
        self.target = self.target + shift
